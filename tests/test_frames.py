"""Tests for polars DataFrame conversion."""

import polars as pl
import pytest

from recordkit.df.frames import from_frame, to_frame
from recordkit.records.collection import RecordCollection


def test_to_frame_all_fields():
    df = to_frame([{"id": 1, "name": "ada"}, {"id": 2, "name": "bob"}])
    assert df.columns == ["id", "name"]
    assert df.to_dicts() == [{"id": 1, "name": "ada"}, {"id": 2, "name": "bob"}]


def test_to_frame_missing_fields_become_null(people):
    df = to_frame(people)
    assert df.height == 4
    assert df["team"].to_list() == ["core", "web", "core", None]


def test_to_frame_projection(people):
    df = to_frame(RecordCollection(people), columns=["name", "id"])
    assert df.columns == ["name", "id"]
    assert df["id"].to_list() == [1, 2, 2, 3]


def test_to_frame_projection_of_absent_column():
    df = to_frame([{"id": 1}], columns=["id", "score"])
    assert df.columns == ["id", "score"]
    assert df["score"].to_list() == [None]


def test_to_frame_empty():
    assert to_frame([]).is_empty()
    assert to_frame([], columns=["id"]).columns == ["id"]


def test_from_frame():
    rows = from_frame(pl.DataFrame({"id": [1, 2], "name": ["ada", "bob"]}))
    assert isinstance(rows, RecordCollection)
    assert rows.find_by("name", "bob") == {"id": 2, "name": "bob"}
    assert rows.remove_where({"id": 1}) == {"id": 1, "name": "ada"}
    assert len(rows) == 1


def test_to_frame_rejects_string_columns():
    with pytest.raises(TypeError, match="not a string"):
        to_frame([{"id": 1}], columns="id")


def test_to_frame_rejects_empty_columns():
    with pytest.raises(ValueError, match="at least one"):
        to_frame([{"a": 1}, {"a": 2}], columns=[])
