"""
bounds.py - Conversion of flexible range specifications into closed intervals.
"""
from collections import namedtuple
from enum import Enum
from numbers import Integral

from .types import InclusiveRange, RangeSpec


class BoundKind(Enum):
    INCLUDED = "included"
    EXCLUDED = "excluded"
    UNBOUNDED = "unbounded"


#: Named tuple to model one end of a range.
Bound = namedtuple("Bound", ("kind", "value"))

#: Named tuple to model a range as a pair of bounds.
RangeBounds = namedtuple("RangeBounds", ("start", "end"))

UNBOUNDED = Bound(BoundKind.UNBOUNDED, None)


def included(value: int) -> Bound:
    return Bound(BoundKind.INCLUDED, value)


def excluded(value: int) -> Bound:
    return Bound(BoundKind.EXCLUDED, value)


def is_index(value: object) -> bool:
    return isinstance(value, Integral) and not isinstance(value, bool)


def _half_open(start, stop) -> RangeBounds:
    return RangeBounds(
        UNBOUNDED if start is None else included(start),
        UNBOUNDED if stop is None else excluded(stop),
    )


def to_range_bounds(spec: RangeSpec) -> RangeBounds:
    """Lift any accepted range form into a pair of bounds.

    Args:
        spec (RangeSpec): a `RangeBounds`, a `slice` or `range` (half-open, step 1),
            a closed `(left, right)` tuple or a single index.

    Raises:
        TypeError: if the spec is not one of the accepted forms.
        ValueError: if a slice or range has a step other than 1.

    Returns:
        RangeBounds: the start and end bounds of the range.
    """
    if isinstance(spec, RangeBounds):
        return spec
    if isinstance(spec, slice):
        if spec.step not in (None, 1):
            raise ValueError(f"Stepped slices are not ranges: {spec}")
        return _half_open(spec.start, spec.stop)
    if isinstance(spec, range):
        if spec.step != 1:
            raise ValueError(f"Stepped ranges are not supported: {spec}")
        return _half_open(spec.start, spec.stop)
    if isinstance(spec, tuple) and len(spec) == 2:
        return RangeBounds(
            UNBOUNDED if spec[0] is None else included(spec[0]),
            UNBOUNDED if spec[1] is None else included(spec[1]),
        )
    if is_index(spec):
        return RangeBounds(included(spec), included(spec))
    raise TypeError(f"Unsupported range specification: {spec!r}")


def bounds_to_inclusive(spec: RangeSpec, lower: int, upper: int) -> InclusiveRange:
    """Convert a range specification into a canonical closed interval.

    Args:
        spec (RangeSpec): the range specification, see `to_range_bounds`.
        lower (int): the value an unbounded start maps to.
        upper (int): the value an unbounded end maps to.

    Returns:
        InclusiveRange: the (left, right) pair, both ends included. No
            validation against `lower` / `upper` is done here.
    """
    start, end = to_range_bounds(spec)
    for bound in (start, end):
        if bound.kind is not BoundKind.UNBOUNDED and not is_index(bound.value):
            raise TypeError(f"Range bounds must be integers, got {bound.value!r}")

    if start.kind is BoundKind.UNBOUNDED:
        left = lower
    elif start.kind is BoundKind.EXCLUDED:
        left = start.value + 1
    else:
        left = start.value

    if end.kind is BoundKind.UNBOUNDED:
        right = upper
    elif end.kind is BoundKind.EXCLUDED:
        right = end.value - 1
    else:
        right = end.value

    return int(left), int(right)
