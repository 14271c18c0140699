import operator

import pytest

from .stress import concat, linear_fold, run_stress


def test_linear_fold():
    data = [[1], [2], [3]]
    assert linear_fold(data, concat, [], 0, 2) == [1, 2, 3]
    assert linear_fold(data, concat, [], 1, 1) == [2]
    assert linear_fold([1, 2, 3, 4], operator.add, 0, 1, 3) == 9


@pytest.mark.parametrize("seed", [0, 1, 2, 3])
def test_random_ops(seed):
    report = run_stress(size=64, ops=500, seed=seed)
    assert report.mismatches == []
    assert report.sets + report.queries == 500
    assert report.sets > 0 and report.queries > 0


@pytest.mark.parametrize("size", [1, 2, 3, 31, 100])
def test_odd_sizes(size):
    report = run_stress(size=size, ops=200, seed=size)
    assert report.mismatches == []


def test_default_run():
    report = run_stress()
    assert report.mismatches == []
    assert report.sets + report.queries == 1024


def test_reproducible():
    assert run_stress(size=32, ops=100, seed=7) == run_stress(size=32, ops=100, seed=7)


def test_only_updates():
    report = run_stress(size=16, ops=50, set_prob=1.0)
    assert report.queries == 0
    assert report.sets == 50


def test_invalid_params():
    with pytest.raises(AssertionError):
        run_stress(size=0)
    with pytest.raises(AssertionError):
        run_stress(size=8, set_prob=1.5)
