from __future__ import annotations

import pytest

from lazyseq import Seq, of


def test_filter():
    assert Seq.range(1, 10).filter(lambda n: n % 2 == 0).to_list() == [2, 4, 6, 8]


def test_filter_index_counts_every_parent_item():
    seen = []

    def keep_odd_positions(item, index):
        seen.append(index)
        return index % 2 == 1

    assert of("a", "b", "c", "d").filter(keep_odd_positions).to_list() == ["b", "d"]
    assert seen == [0, 1, 2, 3]


def test_index_restarts_per_traversal():
    seq = of("a", "b").map(lambda item, index: f"{index}:{item}")
    assert seq.to_list() == ["0:a", "1:b"]
    assert seq.to_list() == ["0:a", "1:b"]


def test_reject():
    assert of(1, 2, 3, 4, 5, 6, 7).reject(lambda n: n % 3 == 0).to_list() == [1, 2, 4, 5, 7]
    assert of(1, 2, 3).reject(lambda n, i: i == 0).to_list() == [2, 3]


def test_reject_nulls():
    assert of(1, None, 2, None, None, 3).reject_nulls().to_list() == [1, 2, 3]
    assert of(0, "", None, False).reject_nulls().to_list() == [0, "", False]


def test_map():
    assert Seq.range(1, 4).map(lambda n: n * 2).to_list() == [2, 4, 6]
    assert of("a", "b").map(lambda item, index: (index, item)).to_list() == [(0, "a"), (1, "b")]


def test_builtin_callables():
    assert of("a", "b").map(str.upper).to_list() == ["A", "B"]
    assert of(0, 1, "", "x").filter(bool).to_list() == [1, "x"]
    assert of(1, 2).map(lambda: "const").to_list() == ["const", "const"]
    assert of(" a ", "b  ").map(str.strip).to_list() == ["a", "b"]
    assert of(1, 2).reduce(max, 0) == 2


def test_defaulted_index_parameter_receives_index():
    assert of("a", "b").map(lambda item, index=-1: (index, item)).to_list() == [(0, "a"), (1, "b")]

    def keep_odd_positions(item, index=0):
        return index % 2 == 1

    assert of("a", "b", "c", "d").filter(keep_odd_positions).to_list() == ["b", "d"]
    assert of(1, 2, 3).reduce(lambda acc, item, index=0: acc + item * index, 0) == 8


def test_peek_observes_without_altering():
    observed = []
    seq = of(1, 2, 3).peek(lambda item, index: observed.append((index, item)))
    assert seq.to_list() == [1, 2, 3]
    assert observed == [(0, 1), (1, 2), (2, 3)]


def test_peek_only_sees_pulled_items():
    observed = []
    assert Seq.range(0, 100).peek(observed.append).take(2).to_list() == [0, 1]
    assert observed == [0, 1]


def test_peek_runs_before_item_is_delivered():
    events = []
    seq = of("a", "b").peek(lambda item: events.append(f"peek {item}"))
    with seq.cursor() as cursor:
        for item in cursor:
            events.append(f"got {item}")
    assert events == ["peek a", "got a", "peek b", "got b"]


def test_chain_is_lazy(make_probe):
    probe = make_probe(items=range(10))
    chain = probe.seq().map(lambda n: n + 1).filter(lambda n: n % 2 == 0).peek(lambda n: None)
    assert probe.acquired == 0
    assert probe.pulls == 0

    assert chain.to_list() == [2, 4, 6, 8, 10]
    assert probe.acquired == 1
    assert probe.pulls == 10
    assert probe.released == 1


def test_one_pull_per_output(make_probe):
    probe = make_probe(items=range(10))
    with probe.seq().map(lambda n: n * 2).cursor() as cursor:
        assert next(cursor) == 0
        assert next(cursor) == 2
        assert probe.pulls == 2


def test_mapper_error_propagates_verbatim():
    def explode(n):
        if n == 2:
            raise KeyError("bad row")
        return n

    delivered = []
    with pytest.raises(KeyError, match="bad row"):
        for item in of(1, 2, 3).map(explode):
            delivered.append(item)
    assert delivered == [1]
