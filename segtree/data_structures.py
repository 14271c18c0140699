"""
data_structures.py - The array-backed segment tree and its preset variants.
"""
import copy
import operator
from typing import Iterable, List

from .base import NO_END, Segtree
from .bounds import is_index
from .errors import IndexOutOfBounds, InvalidRange, RangeOutOfBounds
from .types import MergeFn, RangeSpec, T


class StaticSegtree(Segtree[T]):
    """Implementation of a constant-size Segment Tree data structure.

    The tree is stored bottom-up in a flat list of `2 * len` slots: node `i`
    has children `2i` and `2i + 1`, leaves live at `[len, 2 * len)` and slot 0
    is an unused sentinel.
    """

    def __init__(self, data: Iterable[T], merge_fn: MergeFn, neutral_elem: T) -> None:
        """Implementation of a constant-size Segment Tree data structure.

        Args:
            data (Iterable[T]): the elements to represent. Read exactly once, each
                element is shallow-copied into its leaf.
            merge_fn (MergeFn): the associative operation to answer range queries for.
            neutral_elem (T): the identity element for said operation.
        """
        data = list(data)
        self.data_len = len(data)
        self.merge_fn = merge_fn
        self.neutral_elem = neutral_elem
        self.tree = self._build(data)

    def _build(self, data: List[T]) -> List[T]:
        n = self.data_len
        if n == 0:
            return []

        tree = [self.neutral_elem] * (2 * n)
        tree[n:] = [copy.copy(item) for item in data]
        for i in range(n - 1, 0, -1):
            tree[i] = self.merge_fn(tree[2 * i], tree[2 * i + 1])
        return tree

    @classmethod
    def from_slice(
        cls, data: Iterable[T], merge_fn: MergeFn, neutral_elem: T
    ) -> "StaticSegtree[T]":
        return cls(data, merge_fn, neutral_elem)

    def __len__(self) -> int:
        return self.data_len

    def _check_index(self, index: int):
        if not is_index(index):
            raise TypeError(f"Indices must be integers, got {index!r}")
        if not 0 <= index < self.data_len:
            raise IndexOutOfBounds(index, self.data_len)

    def get_unchecked(self, index: int) -> T:
        return self.tree[index + self.data_len]

    def get(self, index: int) -> T:
        self._check_index(index)
        return self.get_unchecked(index)

    def set_unchecked(self, index: int, value: T) -> None:
        pos = index + self.data_len
        self.tree[pos] = value
        pos >>= 1  # Navigate to parent node
        while pos != 0:  # Update all the way to the root node
            self.tree[pos] = self.merge_fn(self.tree[2 * pos], self.tree[2 * pos + 1])
            pos >>= 1

    def set(self, index: int, value: T) -> None:
        self._check_index(index)
        self.set_unchecked(index, value)

    def _query(self, left: int, right: int) -> T:
        """Iteratively merge the closed range [left, right] from the leaves up.

        `resl` collects nodes to the left of the shrinking window and only grows
        on its right side, `resr` collects nodes to the right of it and only
        grows on its left side, so the merge order matches the element order.

        Args:
            left (int): the index at the start of the range.
            right (int): the index at the end of the range (included).

        Returns:
            T: the result of the operation over the range.
        """
        resl = self.neutral_elem
        resr = self.neutral_elem
        left += self.data_len
        right += self.data_len

        while left < right:
            if left & 1:  # Right child, its parent spans past the range
                resl = self.merge_fn(resl, self.tree[left])
                left += 1
            if not right & 1:  # Left child
                resr = self.merge_fn(self.tree[right], resr)
                right -= 1
            left >>= 1
            right >>= 1

        if left == right and left > 0:
            resl = self.merge_fn(resl, self.tree[left])
        return self.merge_fn(resl, resr)

    def query_unchecked(self, bounds: RangeSpec, end: int = NO_END) -> T:
        return self._query(*self._to_inclusive(bounds, end))

    def query(self, bounds: RangeSpec, end: int = NO_END) -> T:
        """Return the result of the operation over a range.

        Args:
            bounds (RangeSpec): the range. A slice or range is half-open, a tuple
                is closed, a single index selects one element.
            end (int, optional): if given, `bounds` is the first index and `end`
                the last one (included), `None` leaving it unbounded.

        Raises:
            InvalidRange: if the left end of the range is past its right end.
            RangeOutOfBounds: if the range reaches outside the tree.

        Returns:
            T: the elements of the range merged left to right.
        """
        left, right = self._to_inclusive(bounds, end)
        if left > right:
            raise InvalidRange(left, right)
        if left < 0 or right >= self.data_len:
            raise RangeOutOfBounds(left, right, self.data_len)
        if left == right:
            return copy.copy(self.get_unchecked(left))
        return self._query(left, right)

    def values(self, end: int = None) -> List[T]:
        """Get the bottom-level leaf values of the segment tree.

        Args:
            end (int, optional): the number of leading values to include. Defaults to all.

        Returns:
            List[T]: the saved values.
        """
        if end is None:
            end = self.data_len
        return self.tree[self.data_len : self.data_len + end]

    def copy(self) -> "StaticSegtree[T]":
        clone = copy.copy(self)
        clone.tree = list(self.tree)
        return clone

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, StaticSegtree):
            return NotImplemented
        return (
            self.data_len == other.data_len
            and self.merge_fn == other.merge_fn
            and self.neutral_elem == other.neutral_elem
            and self.tree == other.tree
        )

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}({self.values()!r}, len={self.data_len})"


class SumSegtree(StaticSegtree):
    """A Segment Tree that allows for efficient sum queries."""

    def __init__(
        self,
        data: Iterable[T] = (),
        merge_fn: MergeFn = operator.add,
        neutral_elem: T = 0,
    ):
        super().__init__(data, merge_fn, neutral_elem)

    @classmethod
    def from_slice(
        cls,
        data: Iterable[T],
        merge_fn: MergeFn = operator.add,
        neutral_elem: T = 0,
    ) -> "SumSegtree":
        return cls(data, merge_fn, neutral_elem)

    def sum(self, bounds: RangeSpec = None, end: int = NO_END) -> T:
        """Return the sum of the elements in the range.

        Args:
            bounds (RangeSpec, optional): the range to sum. Defaults to the whole tree.
            end (int, optional): the last index, when `bounds` is the first one.

        Returns:
            T: the sum in the given range.
        """
        return self.query(slice(None) if bounds is None and end is NO_END else bounds, end)


class MinSegtree(StaticSegtree):
    """A Segment Tree that allows for efficient min queries."""

    def __init__(
        self,
        data: Iterable[T] = (),
        merge_fn: MergeFn = min,
        neutral_elem: T = float("inf"),
    ):
        super().__init__(data, merge_fn, neutral_elem)

    @classmethod
    def from_slice(
        cls,
        data: Iterable[T],
        merge_fn: MergeFn = min,
        neutral_elem: T = float("inf"),
    ) -> "MinSegtree":
        return cls(data, merge_fn, neutral_elem)

    def min(self, bounds: RangeSpec = None, end: int = NO_END) -> T:
        """Return the minimum of all the elements in the range."""
        return self.query(slice(None) if bounds is None and end is NO_END else bounds, end)


class MaxSegtree(StaticSegtree):
    """A Segment Tree that allows for efficient max queries."""

    def __init__(
        self,
        data: Iterable[T] = (),
        merge_fn: MergeFn = max,
        neutral_elem: T = float("-inf"),
    ):
        super().__init__(data, merge_fn, neutral_elem)

    @classmethod
    def from_slice(
        cls,
        data: Iterable[T],
        merge_fn: MergeFn = max,
        neutral_elem: T = float("-inf"),
    ) -> "MaxSegtree":
        return cls(data, merge_fn, neutral_elem)

    def max(self, bounds: RangeSpec = None, end: int = NO_END) -> T:
        return self.query(slice(None) if bounds is None and end is NO_END else bounds, end)
