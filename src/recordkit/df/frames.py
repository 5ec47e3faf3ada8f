"""
DataFrame conversion for record collections - requires polars.

Pure functions moving records in and out of polars DataFrames.
"""

__all__ = [
    "to_frame",
    "from_frame",
]

from collections.abc import Mapping, Sequence
from typing import Any, Optional

import polars as pl

from recordkit.records.collection import RecordCollection
from recordkit.records.functions import extract_map


def to_frame(
    records: Sequence[Mapping[str, Any]],
    columns: Optional[Sequence[str]] = None,
) -> pl.DataFrame:
    """
    Build a DataFrame with one row per record.

    Args:
        records: Records to convert
        columns: Optional field names to keep (projection as in
                 ``extract_map``); all fields are kept when omitted

    Returns:
        DataFrame; fields missing from a record become nulls

    Raises:
        TypeError: If columns is a single string rather than a sequence
        ValueError: If columns is empty

    Example:
        >>> to_frame([{"id": 1, "name": "ada"}, {"id": 2}], columns=["id"])
        shape: (2, 1)
        ┌─────┐
        │ id  │
        │ --- │
        │ i64 │
        ╞═════╡
        │ 1   │
        │ 2   │
        └─────┘
    """
    if isinstance(columns, str):
        raise TypeError(f"columns must be a sequence of names, not a string: {columns!r}")
    if columns is not None and not columns:
        raise ValueError("columns must name at least one field")

    rows = extract_map(records, *columns) if columns is not None else [dict(r) for r in records]

    if not rows:
        return pl.DataFrame(schema=list(columns) if columns is not None else None)

    df = pl.from_dicts(rows, infer_schema_length=None)
    if columns is not None:
        # Projected columns absent from every record still get a column
        missing = [c for c in columns if c not in df.columns]
        if missing:
            df = df.with_columns([pl.lit(None).alias(c) for c in missing])
        df = df.select(list(dict.fromkeys(columns)))
    return df


def from_frame(df: pl.DataFrame) -> RecordCollection[dict[str, Any]]:
    """
    Convert DataFrame rows into a record collection of dicts.

    Example:
        >>> from_frame(pl.DataFrame({"id": [1, 2]})).find_by("id", 2)
        {'id': 2}
    """
    return RecordCollection(df.to_dicts())
