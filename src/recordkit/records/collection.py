"""Record collections: utility sequences whose elements are field mappings."""

__all__ = [
    "RecordView",
    "RecordCollection",
]

from collections.abc import Mapping
from typing import Any, Optional, TypeVar

from loguru import logger

from recordkit.records import functions
from recordkit.records.sequence import MutableUtilitySequence, UtilitySequence

R = TypeVar("R", bound=Mapping[str, Any])


class RecordView(UtilitySequence[R]):
    """
    Read-only sequence of records with key and pattern lookups.

    Field values are compared strictly (see
    :func:`recordkit.records.matching.strict_equals`). When several records
    match, the one with the lowest index wins.

    Example:
        >>> users = RecordView([{"id": 1, "name": "ada"}, {"id": 2, "name": "bob"}])
        >>> users.find_by("id", 2)
        {'id': 2, 'name': 'bob'}
        >>> users.find_index_where({"name": "eve"})
        -1
    """

    __slots__ = ()

    def find_by(self, key: str, value: Any) -> Optional[R]:
        """Return the first record whose ``key`` equals ``value``, or None."""
        return functions.find_by(self._items, key, value)

    def find_index_by(self, key: str, value: Any) -> int:
        """Return the index of the first record whose ``key`` equals ``value``, or -1."""
        return functions.find_index_by(self._items, key, value)

    def find_where(self, pattern: Mapping[str, Any]) -> Optional[R]:
        """
        Return the first record matching every field of ``pattern``, or None.

        An empty pattern matches the first record.
        """
        return functions.find_where(self._items, pattern)

    def find_index_where(self, pattern: Mapping[str, Any]) -> int:
        """Return the index of the first record matching ``pattern``, or -1."""
        return functions.find_index_where(self._items, pattern)

    def extract_map(self, *keys: str):
        """
        Project every record onto ``keys``.

        Args:
            *keys: Field names to keep

        Returns:
            New collection of the same type holding new dicts, in the same
            order; fields a record lacks are omitted from its projection

        Example:
            >>> RecordView([{"a": 1, "b": 2, "c": 3}]).extract_map("a", "b")
            RecordView([{'a': 1, 'b': 2}])
        """
        return type(self)(functions.extract_map(self._items, *keys))


class RecordCollection(MutableUtilitySequence[R], RecordView[R]):
    """
    Mutable sequence of records.

    Example:
        >>> rows = RecordCollection([{"id": 1}, {"id": 2}, {"id": 3}])
        >>> rows.remove_where({"id": 2})
        {'id': 2}
        >>> rows
        RecordCollection([{'id': 1}, {'id': 3}])
    """

    __slots__ = ()

    def remove_where(self, pattern: Mapping[str, Any]) -> Optional[R]:
        """Remove and return the first record matching ``pattern``, or None."""
        removed = functions.remove_where(self._items, pattern)
        if removed is not None:
            logger.debug(f"{type(self).__name__} now holds {len(self)} records")
        return removed
