"""
Sequence and record helpers as free functions - no external dependencies
beyond loguru.

These operate on any sequence passed in (lists, tuples, record
collections). Nothing is attached to built-in types; import the functions
where they are needed.

Absence is never an error: lookups return ``None`` (or ``-1`` for index
lookups) and out-of-range positions are ignored.
"""

__all__ = [
    "populated_list",
    "last",
    "replace_at",
    "remove_at",
    "remove_where",
    "find_by",
    "find_index_by",
    "find_where",
    "find_index_where",
    "extract_map",
]

import operator
from collections.abc import Callable, Mapping, Sequence
from typing import Any, Optional, TypeVar, Union

from loguru import logger

from recordkit.records.matching import field_equals, matches_pattern, project

T = TypeVar("T")
R = TypeVar("R", bound=Mapping[str, Any])


def populated_list(count: int, element: Union[T, Callable[[int], T]]) -> list[T]:
    """
    Build a list of ``count`` elements.

    Args:
        count: Number of elements, a non-negative integer
        element: A value placed in every slot, or a callable taking the
                 zero-based index and returning the value for that slot

    Returns:
        New list of length ``count``

    Raises:
        TypeError: If count is not an integer
        ValueError: If count is negative

    Note:
        A plain value is not copied: every slot refers to the same object.
        Any callable (including a class) is treated as a factory.

    Example:
        >>> populated_list(3, lambda i: i * i)
        [0, 1, 4]
        >>> populated_list(2, "x")
        ['x', 'x']
    """
    if isinstance(count, bool):
        raise TypeError(f"count must be an integer, got {count!r}")
    try:
        count = operator.index(count)
    except TypeError:
        raise TypeError(f"count must be an integer, got {count!r}") from None
    if count < 0:
        raise ValueError(f"count must be non-negative, got {count}")

    if callable(element):
        logger.debug(f"Populating {count} elements from factory {element!r}")
        return [element(index) for index in range(count)]
    logger.debug(f"Populating {count} elements with a shared value")
    return [element] * count


def last(items: Sequence[T]) -> Optional[T]:
    """Return the last element, or None for an empty sequence."""
    return items[-1] if items else None


def _in_bounds(items: Sequence[Any], index: int) -> bool:
    return 0 <= index < len(items)


def replace_at(items: list[T], index: int, value: T) -> Optional[T]:
    """
    Replace the element at ``index`` in place.

    Returns:
        The previous element, or None if ``index`` is out of range (in
        which case nothing changes). Negative indices are out of range.
    """
    if not _in_bounds(items, index):
        return None
    previous = items[index]
    items[index] = value
    return previous


def remove_at(items: list[T], index: int) -> Optional[T]:
    """
    Remove the element at ``index`` in place, shifting later ones left.

    Returns:
        The removed element, or None if ``index`` is out of range.
    """
    if not _in_bounds(items, index):
        return None
    return items.pop(index)


def remove_where(items: list[R], pattern: Mapping[str, Any]) -> Optional[R]:
    """Remove and return the first record matching ``pattern``, or None."""
    index = find_index_where(items, pattern)
    if index == -1:
        logger.debug(f"No record matched {pattern!r}, nothing removed")
        return None
    logger.debug(f"Removing record at index {index} matching {pattern!r}")
    return remove_at(items, index)


def find_by(records: Sequence[R], key: str, value: Any) -> Optional[R]:
    """
    Find the first record whose ``key`` field strictly equals ``value``.

    Useful for building single-key finders:

        >>> users = [{"id": 1, "name": "ada"}, {"id": 2, "name": "bob"}]
        >>> find_user = lambda user_id: find_by(users, "id", user_id)
        >>> find_user(2)
        {'id': 2, 'name': 'bob'}
    """
    index = find_index_by(records, key, value)
    return records[index] if index != -1 else None


def find_index_by(records: Sequence[R], key: str, value: Any) -> int:
    """Like :func:`find_by` but return the index, or -1 if not found."""
    for index, record in enumerate(records):
        if field_equals(record, key, value):
            return index
    return -1


def find_where(records: Sequence[R], pattern: Mapping[str, Any]) -> Optional[R]:
    """Find the first record whose fields match every field of ``pattern``."""
    index = find_index_where(records, pattern)
    return records[index] if index != -1 else None


def find_index_where(records: Sequence[R], pattern: Mapping[str, Any]) -> int:
    """Like :func:`find_where` but return the index, or -1 if not found."""
    for index, record in enumerate(records):
        if matches_pattern(record, pattern):
            return index
    return -1


def extract_map(records: Sequence[Mapping[str, Any]], *keys: str) -> list[dict[str, Any]]:
    """
    Project every record onto the listed keys.

    Keys missing from a record are left out of that record's projection.
    The source records are not modified.

    Example:
        >>> extract_map([{"a": 1, "b": 2, "c": 3}], "a", "b")
        [{'a': 1, 'b': 2}]
    """
    return [project(record, keys) for record in records]
