from __future__ import annotations

import pytest

from lazyseq import ConstructionError, Seq, empty, of


def test_sort_natural_order():
    assert of(2, 4, 3, 1).sort().to_list() == [1, 2, 3, 4]
    assert of("b", "c", "a").sort(reverse=True).to_list() == ["c", "b", "a"]


def test_sort_with_comparator():
    by_length_desc = lambda a, b: len(b) - len(a)  # noqa: E731
    words = of("aa", "b", "cccc", "ddd")
    assert words.sort_with(by_length_desc).to_list() == ["cccc", "ddd", "aa", "b"]


def test_sort_by_key_is_stable():
    rows = of(("x", 2), ("y", 1), ("z", 2), ("w", 1))
    assert rows.sort_by(lambda row: row[1]).to_list() == [("y", 1), ("w", 1), ("x", 2), ("z", 2)]


def test_sort_with_rejects_non_callable():
    with pytest.raises(ConstructionError):
        of(1).sort_with(None)  # type: ignore[arg-type]


def test_sort_materializes_on_traversal_only(make_probe):
    probe = make_probe(items=[3, 1, 2])
    ordered = probe.seq().sort()
    assert probe.acquired == 0

    with ordered.cursor() as cursor:
        assert next(cursor) == 1
        assert probe.pulls == 3
        assert probe.released == 1

    assert ordered.to_list() == [1, 2, 3]
    assert probe.acquired == 2


def test_min_max():
    seq = of(3, 1, 4, 1, 5, 9, 2, 6)
    assert seq.min() == 1
    assert seq.max() == 9


def test_min_max_default_on_empty():
    assert empty().min() is None
    assert empty().max(default=-1) == -1
    assert Seq.range(4, 0).min(default="none") == "none"


def test_min_max_with_comparator():
    by_length = lambda a, b: len(a) - len(b)  # noqa: E731
    words = of("ccc", "a", "bb", "dddd")
    assert words.min(by_length) == "a"
    assert words.max(by_length) == "dddd"


def test_ties_keep_first_occurrence():
    by_key = lambda a, b: a[0] - b[0]  # noqa: E731
    rows = of((1, "first"), (0, "low"), (1, "second"), (0, "low-again"))
    assert rows.max(by_key) == (1, "first")
    assert rows.min(by_key) == (0, "low")


def test_ties_keep_first_occurrence_natural_order():
    first, second = 1.0, 1
    assert of(first, second).max() is first
    assert of(first, second).min() is first
