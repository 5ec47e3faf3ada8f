"""Tests for strict field equality and partial-pattern matching."""

from dataclasses import dataclass
from datetime import date
from decimal import Decimal

import pytest

from recordkit.records.matching import field_equals, matches_pattern, project, strict_equals


@dataclass(frozen=True)
class Point:
    x: int


class TestStrictEquals:

    @pytest.mark.parametrize(
        "left, right",
        [
            (1, 1),
            ("a", "a"),
            (None, None),
            (b"x", b"x"),
            (Decimal("1.5"), Decimal("1.5")),
            (date(2024, 1, 1), date(2024, 1, 1)),
        ],
    )
    def test_equal_values(self, left, right):
        assert strict_equals(left, right)

    @pytest.mark.parametrize(
        "left, right",
        [
            (1, True),
            (0, False),
            (1, 1.0),
            (1, "1"),
            (None, 0),
        ],
    )
    def test_no_coercion(self, left, right):
        assert not strict_equals(left, right)

    def test_mutable_containers_compare_by_identity(self):
        tags = ["x"]
        assert strict_equals(tags, tags)
        assert not strict_equals(tags, ["x"])
        assert not strict_equals({"a": 1}, {"a": 1})

    def test_tuples_compare_by_identity(self):
        pair = tuple([1, 2])
        assert strict_equals(pair, pair)
        assert not strict_equals(pair, tuple([1, 2]))
        assert not strict_equals(frozenset({1}), frozenset({1}))

    def test_objects_compare_by_identity(self):
        point = Point(1)
        assert strict_equals(point, point)
        assert not strict_equals(point, Point(1))


def test_field_equals_requires_key():
    assert field_equals({"id": None}, "id", None)
    assert not field_equals({}, "id", None)


def test_matches_pattern_all_fields_equal():
    record = {"id": 2, "name": "bob", "team": "web"}
    assert matches_pattern(record, {"id": 2})
    assert matches_pattern(record, {"id": 2, "team": "web"})


def test_matches_pattern_rejects_any_difference():
    record = {"id": 2, "name": "bob"}
    assert not matches_pattern(record, {"id": 2, "name": "ada"})
    assert not matches_pattern(record, {"id": 3})


def test_matches_pattern_rejects_missing_field():
    assert not matches_pattern({"id": 2}, {"id": 2, "team": "web"})


def test_empty_pattern_matches():
    assert matches_pattern({"id": 1}, {})


def test_project_keeps_listed_keys_only():
    record = {"a": 1, "b": 2, "c": 3}
    assert project(record, ["a", "c", "z"]) == {"a": 1, "c": 3}
    assert record == {"a": 1, "b": 2, "c": 3}


def test_matching_helpers_exported_from_records():
    from recordkit import records

    assert records.field_equals is field_equals
    assert records.strict_equals is strict_equals
