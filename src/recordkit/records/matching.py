"""
Record matching primitives - no external dependencies.

Equality here is strict: values of different types never compare equal
(so ``1`` does not match ``True`` or ``1.0``). Only scalar values (numbers,
strings, bytes, dates and the like) compare by value; composite values such
as lists, tuples, dicts or dataclass instances only ever match themselves.
"""

__all__ = [
    "strict_equals",
    "field_equals",
    "matches_pattern",
    "project",
]

import datetime
import uuid
from collections.abc import Iterable, Mapping
from decimal import Decimal
from fractions import Fraction
from typing import Any

# Exact types compared with ==; anything else is compared by identity
_VALUE_TYPES = frozenset(
    {
        str,
        bytes,
        int,
        float,
        complex,
        bool,
        type(None),
        Decimal,
        Fraction,
        datetime.date,
        datetime.datetime,
        datetime.time,
        datetime.timedelta,
        uuid.UUID,
    }
)


def strict_equals(left: Any, right: Any) -> bool:
    """
    Compare two field values without coercion.

    Args:
        left: First value
        right: Second value

    Returns:
        True if both are the same object, or are scalars of the same exact
        type that compare equal

    Example:
        >>> strict_equals(1, 1)
        True
        >>> strict_equals(1, True)
        False
        >>> strict_equals([1], [1])
        False
        >>> strict_equals((1, 2), (1, 2))
        False
    """
    if left is right:
        return True
    if type(left) is not type(right):
        return False
    if type(left) not in _VALUE_TYPES:
        return False
    return bool(left == right)


def field_equals(record: Mapping[str, Any], key: str, value: Any) -> bool:
    """Check that ``record`` has ``key`` and its value strictly equals ``value``."""
    return key in record and strict_equals(record[key], value)


def matches_pattern(record: Mapping[str, Any], pattern: Mapping[str, Any]) -> bool:
    """
    Check a record against a partial pattern.

    A record matches when every field listed in the pattern is present on
    the record with a strictly equal value. An empty pattern matches
    anything.

    Example:
        >>> matches_pattern({"id": 2, "name": "b"}, {"id": 2})
        True
        >>> matches_pattern({"id": 2}, {"id": 2, "name": "b"})
        False
    """
    for key, value in pattern.items():
        if not field_equals(record, key, value):
            return False
    return True


def project(record: Mapping[str, Any], keys: Iterable[str]) -> dict[str, Any]:
    """Build a new dict with only the listed keys that exist on ``record``."""
    return {key: record[key] for key in keys if key in record}
