"""
base.py - The operation contract every segment tree variant exposes.
"""
from abc import ABC, abstractmethod
from typing import Generic, Iterable, Iterator

from .bounds import bounds_to_inclusive
from .types import InclusiveRange, MergeFn, RangeSpec, T

#: Marks an `end` argument that was not passed. An explicit `None` is an unbounded end.
NO_END = object()


class Segtree(ABC, Generic[T]):
    """A range-aggregation structure over a fixed-length sequence.

    Checked entry points (`get`, `set`, `query`) validate their arguments and
    raise a `SegtreeError` without touching the structure. The `*_unchecked`
    entry points skip validation: calling them with an index or range outside
    `[0, len)` is a caller error and the result is unspecified.
    """

    @classmethod
    @abstractmethod
    def from_slice(
        cls, data: Iterable[T], merge_fn: MergeFn, neutral_elem: T
    ) -> "Segtree[T]":
        """Build the structure from a sequence.

        Args:
            data (Iterable[T]): the elements, read exactly once.
            merge_fn (MergeFn): an associative, side-effect-free binary operation.
            neutral_elem (T): the identity element for `merge_fn`.

        Returns:
            Segtree[T]: the built structure.
        """

    @abstractmethod
    def __len__(self) -> int:
        """Number of elements represented."""

    def is_empty(self) -> bool:
        return len(self) == 0

    @abstractmethod
    def get(self, index: int) -> T:
        """Access the element at `index`.

        Raises:
            IndexOutOfBounds: if `index` is not in `[0, len)`.
        """

    @abstractmethod
    def get_unchecked(self, index: int) -> T:
        """Access the element at `index`. The caller guarantees `0 <= index < len`."""

    @abstractmethod
    def set(self, index: int, value: T) -> None:
        """Overwrite the element at `index`.

        Raises:
            IndexOutOfBounds: if `index` is not in `[0, len)`.
        """

    @abstractmethod
    def set_unchecked(self, index: int, value: T) -> None:
        """Overwrite the element at `index`. The caller guarantees `0 <= index < len`."""

    @abstractmethod
    def query(self, bounds: RangeSpec, end: int = NO_END) -> T:
        """Merge the elements of a range, left to right.

        Raises:
            InvalidRange: if the range is empty (left end past right end).
            RangeOutOfBounds: if the range reaches outside `[0, len)`.
        """

    @abstractmethod
    def query_unchecked(self, bounds: RangeSpec, end: int = NO_END) -> T:
        """Merge the elements of a range. The caller guarantees `0 <= l <= r < len`."""

    def _to_inclusive(self, bounds: RangeSpec, end: int = NO_END) -> InclusiveRange:
        if end is not NO_END:
            bounds = (bounds, end)
        return bounds_to_inclusive(bounds, 0, len(self) - 1)

    def __getitem__(self, index: int) -> T:
        return self.get(index)

    def __setitem__(self, index: int, value: T):
        self.set(index, value)

    def __iter__(self) -> Iterator[T]:
        for index in range(len(self)):
            yield self.get_unchecked(index)
