"""
segtree - Array-backed segment trees over a caller-supplied associative operation.
"""
from .base import Segtree
from .bounds import (
    UNBOUNDED,
    Bound,
    BoundKind,
    RangeBounds,
    bounds_to_inclusive,
    excluded,
    included,
)
from .data_structures import MaxSegtree, MinSegtree, StaticSegtree, SumSegtree
from .errors import (
    IndexOutOfBounds,
    InvalidRange,
    RangeOutOfBounds,
    SegtreeAccessError,
    SegtreeError,
    SegtreeRangeError,
)

__all__ = [
    "Segtree",
    "StaticSegtree",
    "SumSegtree",
    "MinSegtree",
    "MaxSegtree",
    "Bound",
    "BoundKind",
    "RangeBounds",
    "UNBOUNDED",
    "included",
    "excluded",
    "bounds_to_inclusive",
    "SegtreeError",
    "SegtreeAccessError",
    "SegtreeRangeError",
    "IndexOutOfBounds",
    "InvalidRange",
    "RangeOutOfBounds",
]
