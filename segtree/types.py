from typing import Callable, Tuple, TypeVar, Union


#: Element type stored in a segment tree.
T = TypeVar("T")

MergeFn = Callable[[T, T], T]

#: Canonical closed interval (left, right), both ends included.
InclusiveRange = Tuple[int, int]

RangeSpec = Union[
    # RangeBounds, closed (l, r) pair, slice, range or a single index
    "RangeBounds",
    InclusiveRange,
    slice,
    range,
    int,
]
