"""
stress.py - Randomized cross-check of the segment tree against a linear fold.

Concatenation is used as the merge operation since it is associative but not
commutative, so any ordering mistake in a query shows up as a mismatch.
"""
from collections import namedtuple
from functools import reduce
from typing import List, Sequence, Tuple

import numpy as np
from tqdm import tqdm

from .data_structures import StaticSegtree
from .types import MergeFn, T

#: Named tuple to model the outcome of a stress run.
StressReport = namedtuple("StressReport", ("sets", "queries", "mismatches"))

#: Named tuple to model a query whose answer disagreed with the reference.
Mismatch = namedtuple("Mismatch", ("op", "left", "right", "expected", "actual"))


def concat(a: list, b: list) -> list:
    return a + b


def linear_fold(
    data: Sequence[T], merge_fn: MergeFn, neutral_elem: T, left: int, right: int
) -> T:
    """Merge `data[left..=right]` one element at a time, left to right."""
    return reduce(merge_fn, data[left : right + 1], neutral_elem)


def _random_list(rng: np.random.Generator, max_inner: int, value_range) -> List[int]:
    low, high = value_range
    length = rng.integers(0, max_inner)
    return rng.integers(low, high, size=length).tolist()


def run_stress(
    size: int = 1024,
    ops: int = None,
    max_inner: int = 16,
    value_range: Tuple[int, int] = (-512, 512),
    set_prob: float = 0.5,
    seed: int = 0,
    progress: bool = False,
) -> StressReport:
    """Run random point updates and range queries against a reference list.

    Args:
        size (int, optional): the number of elements in the tree. Defaults to 1024.
        ops (int, optional): how many random operations to perform. Defaults to `size`.
        max_inner (int, optional): exclusive upper bound on the length of each element. Defaults to 16.
        value_range (Tuple[int, int], optional): the [low, high) range of the integers
            inside each element. Defaults to (-512, 512).
        set_prob (float, optional): number in [0,1] on the probability of an operation being
            a point update rather than a query. Defaults to 0.5.
        seed (int, optional): seed for the random generator. Defaults to 0.
        progress (bool, optional): show a progress bar. Defaults to False.

    Returns:
        StressReport: the number of updates and queries performed, and every mismatch found.
    """
    if ops is None:
        ops = size
    assert size > 0, "Invalid size value."
    assert ops >= 0, "Invalid ops value."
    assert max_inner > 0, "Invalid max_inner value."
    assert value_range[0] < value_range[1], "Invalid value range."
    assert 0 <= set_prob <= 1, "Invalid set probability value."

    rng = np.random.default_rng(seed)
    data = [_random_list(rng, max_inner, value_range) for _ in range(size)]
    segtree = StaticSegtree.from_slice(data, concat, [])

    mismatches = []
    expected = linear_fold(data, concat, [], 0, size - 1)
    actual = segtree.query(0, size - 1)
    if expected != actual:
        mismatches.append(Mismatch("query", 0, size - 1, expected, actual))

    sets = queries = 0
    for _ in tqdm(range(ops), desc=f"Stress run of size {size}", disable=not progress):
        if rng.random() < set_prob:
            sets += 1
            index = int(rng.integers(0, size))
            value = _random_list(rng, max_inner, value_range)
            data[index] = value
            segtree.set(index, list(value))

            if segtree.get(index) != data[index]:
                mismatches.append(
                    Mismatch("set", index, index, data[index], segtree.get(index))
                )
        else:
            queries += 1
            left = int(rng.integers(0, size))
            right = int(rng.integers(left, size))
            expected = linear_fold(data, concat, [], left, right)
            actual = segtree.query(left, right)
            if expected != actual:
                mismatches.append(Mismatch("query", left, right, expected, actual))

    return StressReport(sets, queries, mismatches)
