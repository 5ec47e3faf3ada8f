"""Numeric range checks - no external dependencies."""

__all__ = [
    "NumericRange",
    "is_between",
    "in_range",
]

from dataclasses import dataclass


def is_between(
    value: float,
    lower_bound: float,
    upper_bound: float,
    inclusive: bool = False,
) -> bool:
    """
    Check if a number lies between two bounds.

    Args:
        value: The value to check
        lower_bound: Lower bound of the range
        upper_bound: Upper bound of the range
        inclusive: Whether the bounds themselves are in range, i.e. 2, 3, 4
                   and 5 are in the inclusive range 2-5 whereas only 3 and 4
                   are in the exclusive one

    Returns:
        True if in range, False otherwise

    Example:
        >>> is_between(5, 2, 5)
        False
        >>> is_between(5, 2, 5, inclusive=True)
        True
    """
    if inclusive:
        return lower_bound <= value <= upper_bound
    return lower_bound < value < upper_bound


@dataclass(frozen=True)
class NumericRange:
    """Lower and upper bound pair."""
    lower_bound: float
    upper_bound: float

    def contains(self, value: float, inclusive: bool = False) -> bool:
        """Check if value is within this range."""
        return is_between(value, self.lower_bound, self.upper_bound, inclusive)


def in_range(value: float, numeric_range: NumericRange, inclusive: bool = False) -> bool:
    """Check if a number is within a :class:`NumericRange`."""
    return numeric_range.contains(value, inclusive)
