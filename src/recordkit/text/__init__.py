"""
Text utilities subpackage - no external dependencies.
"""

from recordkit.text.ordinal import (
    Ordinal,
    number_ordinal,
    with_ordinal,
)

__all__ = [
    "Ordinal",
    "number_ordinal",
    "with_ordinal",
]
