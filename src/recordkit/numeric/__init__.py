"""
Numeric utilities subpackage - no external dependencies.
"""

from recordkit.numeric.range import (
    NumericRange,
    is_between,
    in_range,
)

__all__ = [
    "NumericRange",
    "is_between",
    "in_range",
]
