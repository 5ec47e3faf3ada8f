"""
Number ordinals - no external dependencies.

Pure functions for English ordinal suffixes ("1st", "22nd", "113th").
"""

__all__ = [
    "Ordinal",
    "number_ordinal",
    "with_ordinal",
]

from typing import Literal

from recordkit.numeric.range import NumericRange

Ordinal = Literal["st", "nd", "rd", "th"]

# Last two digits in this range always take "th"
_TEENS = NumericRange(10, 20)

_SUFFIXES: dict[int, Ordinal] = {1: "st", 2: "nd", 3: "rd"}


def number_ordinal(value: int) -> Ordinal:
    """
    Return the ordinal suffix for an integer.

    Args:
        value: The number whose ordinal suffix is wanted; negative numbers
               take the suffix of their absolute value

    Returns:
        One of "st", "nd", "rd" or "th"

    Example:
        >>> number_ordinal(1)
        'st'
        >>> number_ordinal(12)
        'th'
        >>> number_ordinal(102)
        'nd'
    """
    value = abs(value)
    if _TEENS.contains(value % 100, inclusive=True):
        return "th"
    return _SUFFIXES.get(value % 10, "th")


def with_ordinal(value: int) -> str:
    """
    Format a number followed by its ordinal suffix.

    Example:
        >>> with_ordinal(23)
        '23rd'
    """
    return f"{value}{number_ordinal(value)}"
