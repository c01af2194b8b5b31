from __future__ import annotations

import pytest

from lazyseq import ConstructionError, Seq, of


def test_take():
    assert Seq.range(1, 100).take(4).to_list() == [1, 2, 3, 4]
    assert of(1, 2).take(10).to_list() == [1, 2]


def test_take_from_infinite():
    assert Seq.repeat(1).take(5).to_list() == [1, 1, 1, 1, 1]


def test_take_never_over_pulls(make_probe):
    probe = make_probe()  # infinite
    assert probe.seq().take(3).to_list() == [0, 1, 2]
    assert probe.pulls == 3
    assert probe.released == 1


def test_take_releases_parent_before_last_item(make_probe):
    probe = make_probe()
    with probe.seq().take(2).cursor() as cursor:
        assert next(cursor) == 0
        assert probe.released == 0
        assert next(cursor) == 1
        assert probe.released == 1
        assert not cursor.has_next()
    assert probe.pulls == 2


def test_take_zero_opens_and_releases_once(make_probe):
    probe = make_probe()
    assert probe.seq().take(0).to_list() == []
    assert probe.acquired == 1
    assert probe.released == 1
    assert probe.pulls == 0


@pytest.mark.parametrize("n", [-1, 1.5, "3", True])
def test_invalid_counts(n):
    with pytest.raises(ConstructionError):
        of(1).take(n)
    with pytest.raises(ConstructionError):
        of(1).skip(n)


def test_take_while():
    assert Seq.range(0, 10).take_while(lambda n: n < 5).to_list() == [0, 1, 2, 3, 4]
    assert of(1, 2, 4, 8, 16, 32).take_while(lambda n: n < 10).to_list() == [1, 2, 4, 8]


def test_take_while_stops_at_first_failure(make_probe):
    probe = make_probe()
    assert probe.seq().take_while(lambda n: n < 3).to_list() == [0, 1, 2]
    assert probe.pulls == 4
    assert probe.released == 1


def test_take_while_with_index():
    assert of("a", "b", "c").take_while(lambda item, index: index < 2).to_list() == ["a", "b"]


def test_skip():
    assert Seq.range(1, 6).skip(3).to_list() == [4, 5]
    assert of(1, 2).skip(5).to_list() == []
    assert of(1, 2).skip(0).to_list() == [1, 2]


def test_skip_while():
    assert Seq.range(0, 10).skip_while(lambda n: n < 5).to_list() == [5, 6, 7, 8, 9]
    assert of(1, 2, 4, 8, 16, 32).skip_while(lambda n: n < 10).to_list() == [16, 32]


def test_skip_while_keeps_later_matches():
    assert of(1, 5, 1, 1).skip_while(lambda n: n < 3).to_list() == [5, 1, 1]


def test_skip_while_index_only_during_discard():
    calls = []

    def small(item, index):
        calls.append((item, index))
        return item < 3

    assert of(1, 2, 3, 1, 2).skip_while(small).to_list() == [3, 1, 2]
    assert calls == [(1, 0), (2, 1), (3, 2)]


def test_skip_while_all_discarded():
    assert of(1, 2).skip_while(lambda n: True).to_list() == []
