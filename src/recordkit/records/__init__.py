"""
Record utilities subpackage - requires loguru only.

Ordered sequences with positional mutation, and record collections with
key lookups, partial-pattern lookups and projections.
"""

from recordkit.records.sequence import (
    UtilitySequence,
    MutableUtilitySequence,
)

from recordkit.records.collection import (
    RecordView,
    RecordCollection,
)

from recordkit.records.functions import (
    populated_list,
    last,
    replace_at,
    remove_at,
    remove_where,
    find_by,
    find_index_by,
    find_where,
    find_index_where,
    extract_map,
)

from recordkit.records.matching import (
    strict_equals,
    field_equals,
    matches_pattern,
    project,
)

__all__ = [
    # sequence
    "UtilitySequence",
    "MutableUtilitySequence",
    # collection
    "RecordView",
    "RecordCollection",
    # functions
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
    # matching
    "strict_equals",
    "field_equals",
    "matches_pattern",
    "project",
]
