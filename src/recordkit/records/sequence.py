"""
Utility sequences for any element type.

``UtilitySequence`` is a read-only wrapper around a list; ``MutableUtilitySequence``
adds in-place mutation. Both own their backing list: constructing one from an
iterable copies it.
"""

__all__ = [
    "UtilitySequence",
    "MutableUtilitySequence",
]

from collections.abc import Callable, Iterable, Iterator, MutableSequence, Sequence
from typing import Any, Generic, Optional, TypeVar, Union

from recordkit.records import functions

T = TypeVar("T")


class UtilitySequence(Sequence[T], Generic[T]):
    """
    Read-only ordered sequence with a few conveniences.

    Example:
        >>> seq = UtilitySequence.populate(3, lambda i: i * 10)
        >>> seq.last
        20
        >>> list(seq)
        [0, 10, 20]
    """

    __slots__ = ("_items",)

    def __init__(self, items: Iterable[T] = ()):
        self._items: list[T] = list(items)

    @classmethod
    def populate(cls, count: int, element: Union[T, Callable[[int], T]]) -> "UtilitySequence[T]":
        """
        Create a sequence of ``count`` elements.

        Args:
            count: Number of elements, a non-negative integer
            element: A value shared by every slot, or a callable mapping the
                     index to that slot's value (called once per index, in
                     ascending order)

        Returns:
            New instance of ``cls``

        Raises:
            TypeError: If count is not an integer
            ValueError: If count is negative
        """
        return cls(functions.populated_list(count, element))

    @property
    def last(self) -> Optional[T]:
        """The last element, or None when empty."""
        return functions.last(self._items)

    def __getitem__(self, index):
        if isinstance(index, slice):
            return type(self)(self._items[index])
        return self._items[index]

    def __len__(self) -> int:
        return len(self._items)

    def __iter__(self) -> Iterator[T]:
        return iter(self._items)

    def __contains__(self, value: Any) -> bool:
        return value in self._items

    def __eq__(self, other):
        if isinstance(other, UtilitySequence):
            return self._items == other._items
        if isinstance(other, list):
            return self._items == other
        return NotImplemented

    __hash__ = None  # type: ignore[assignment]

    def __repr__(self):
        return f"{type(self).__name__}({self._items!r})"


class MutableUtilitySequence(UtilitySequence[T], MutableSequence[T]):
    """
    Mutable sequence adding positional replace/remove and a settable ``last``.

    Out-of-range positions are ignored rather than raised: ``replace_at`` and
    ``remove_at`` return None and leave the sequence untouched. Negative
    positions count as out of range.

    Example:
        >>> seq = MutableUtilitySequence(["a", "b", "c"])
        >>> seq.replace_at(1, "x")
        'b'
        >>> seq.remove_at(0)
        'a'
        >>> seq.remove_at(9) is None
        True
        >>> list(seq)
        ['x', 'c']
    """

    __slots__ = ()

    @property
    def last(self) -> Optional[T]:
        """
        The last element, or None when empty.

        Assigning replaces the last element, but only when the sequence is
        non-empty and the value is not None. Otherwise the assignment is
        silently ignored; it never grows or shrinks the sequence.
        """
        return functions.last(self._items)

    @last.setter
    def last(self, value: Optional[T]) -> None:
        if self._items and value is not None:
            self._items[-1] = value

    def __setitem__(self, index, value):
        self._items[index] = value

    def __delitem__(self, index):
        del self._items[index]

    def insert(self, index: int, value: T) -> None:
        self._items.insert(index, value)

    def replace_at(self, index: int, value: T) -> Optional[T]:
        """Replace one element; return the old one, or None if out of range."""
        return functions.replace_at(self._items, index, value)

    def remove_at(self, index: int) -> Optional[T]:
        """Remove one element; return it, or None if out of range."""
        return functions.remove_at(self._items, index)
