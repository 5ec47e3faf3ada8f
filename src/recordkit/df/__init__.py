"""
DataFrame utilities subpackage - requires polars.
"""

from recordkit.df.frames import (
    to_frame,
    from_frame,
)

__all__ = [
    "to_frame",
    "from_frame",
]
