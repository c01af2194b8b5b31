from __future__ import annotations

import pytest

from lazyseq import ConstructionError, Seq, iterate, range as seq_range


@pytest.mark.parametrize(
    ("args", "expected"),
    [
        ((1, 5), [1, 2, 3, 4]),
        ((4, 0), []),
        ((4, 0, -1), [4, 3, 2, 1]),
        ((0, 10, 3), [0, 3, 6, 9]),
        ((10, 0, -3), [10, 7, 4, 1]),
        ((0, 5, -1), []),
        ((3, 3), []),
        ((3, 3, -1), []),
    ],
)
def test_range(args, expected):
    assert seq_range(*args).to_list() == expected


def test_range_zero_step_fails_at_construction():
    with pytest.raises(ConstructionError):
        Seq.range(0, 10, 0)


@pytest.mark.parametrize(
    "args",
    [("a", 5), (0, None), (0, 5, 1.5), (True, 5), (0.0, 3)],
)
def test_range_rejects_non_integer_bounds(args):
    with pytest.raises(ConstructionError):
        seq_range(*args)


def test_range_is_restartable():
    seq = Seq.range(0, 3)
    assert seq.to_list() == seq.to_list() == [0, 1, 2]


def test_iterate_fibonacci():
    fib = iterate([0, 1], lambda a, b: a + b)
    assert fib.take(10).to_list() == [0, 1, 1, 2, 3, 5, 8, 13, 21, 34]


def test_iterate_sliding_window_of_three():
    windows = []

    def step(a, b, c):
        windows.append((a, b, c))
        return a + b + c

    assert Seq.iterate([1, 1, 1], step).take(6).to_list() == [1, 1, 1, 3, 5, 9]
    assert windows == [(1, 1, 1), (1, 1, 3), (1, 3, 5)]


def test_iterate_single_seed():
    assert iterate([1], lambda n: n * 2).take(5).to_list() == [1, 2, 4, 8, 16]


def test_iterate_is_restartable():
    powers = iterate([1], lambda n: n * 3).take(4)
    assert powers.to_list() == [1, 3, 9, 27]
    assert powers.to_list() == [1, 3, 9, 27]


def test_iterate_copies_seeds():
    seeds = [0, 1]
    fib = iterate(seeds, lambda a, b: a + b)
    seeds.append(99)
    assert fib.take(4).to_list() == [0, 1, 1, 2]
