"""
errors.py - Failure kinds reported by the checked segment tree API.
"""
from enum import Enum


class SegtreeAccessError(Enum):
    """Failure kinds of single-element operations."""

    INDEX_OUT_OF_BOUNDS = "index out of bounds"


class SegtreeRangeError(Enum):
    """Failure kinds of range queries."""

    RANGE_OUT_OF_BOUNDS = "range out of bounds"
    INVALID_RANGE = "invalid range"


class SegtreeError(Exception):
    """Base class of every error raised by a segment tree."""

    #: The enumeration member describing the failure.
    kind = None


class IndexOutOfBounds(SegtreeError, IndexError):
    """`get` / `set` addressed outside `[0, len)`."""

    kind = SegtreeAccessError.INDEX_OUT_OF_BOUNDS

    def __init__(self, index: int, length: int):
        self.index = index
        self.length = length
        super().__init__(f"index {index} out of bounds for length {length}")


class RangeOutOfBounds(SegtreeError, IndexError):
    """Range query reaching outside `[0, len)`."""

    kind = SegtreeRangeError.RANGE_OUT_OF_BOUNDS

    def __init__(self, left: int, right: int, length: int):
        self.left = left
        self.right = right
        self.length = length
        super().__init__(
            f"range [{left}, {right}] out of bounds for length {length}"
        )


class InvalidRange(SegtreeError, ValueError):
    """Range query whose left end lies past its right end."""

    kind = SegtreeRangeError.INVALID_RANGE

    def __init__(self, left: int, right: int):
        self.left = left
        self.right = right
        super().__init__(f"invalid range [{left}, {right}]")
