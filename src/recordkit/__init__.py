"""
recordkit - Small, reusable utilities for in-memory record lists.

This package is organized into focused subpackages:

- records/  Sequences and record collections (requires loguru)
            - sequence: UtilitySequence, MutableUtilitySequence
            - collection: RecordView, RecordCollection
            - functions: populated_list, find_by, find_where, extract_map, ...
            - matching: strict_equals, matches_pattern, project

- numeric/  Numeric helpers (no dependencies)
            - range: NumericRange, is_between, in_range

- text/     Text formatting (no dependencies)
            - ordinal: number_ordinal, with_ordinal

- df/       DataFrame interop (requires polars)
            - frames: to_frame, from_frame

Logging goes through loguru and is disabled for this package by default.
Call ``logger.enable("recordkit")`` to see it.

Usage:
    from recordkit import RecordCollection, with_ordinal
    from recordkit.records import find_by, extract_map
    from recordkit.df import to_frame
"""

__version__ = "0.1.0"

from loguru import logger

# Convenience imports from records
from recordkit.records import (
    UtilitySequence,
    MutableUtilitySequence,
    RecordView,
    RecordCollection,
    populated_list,
    extract_map,
)

# Convenience imports from numeric and text (no dependencies)
from recordkit.numeric import (
    NumericRange,
    is_between,
    in_range,
)

from recordkit.text import (
    number_ordinal,
    with_ordinal,
)

logger.disable("recordkit")

__all__ = [
    "__version__",
    # records
    "UtilitySequence",
    "MutableUtilitySequence",
    "RecordView",
    "RecordCollection",
    "populated_list",
    "extract_map",
    # numeric.range
    "NumericRange",
    "is_between",
    "in_range",
    # text.ordinal
    "number_ordinal",
    "with_ordinal",
]
