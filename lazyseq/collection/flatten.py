"""Flatten combinators

Depth-1 flattening of sequence-like items, fully lazy: the next parent item
is not fetched before the current sub-sequence is exhausted."""

from __future__ import annotations

import typing
from collections.abc import Iterator

from .._helpers import as_seq
from .._types import IndexedMapper
from ..core.seq import Seq


def flatten(seq: Seq[typing.Any]) -> Seq[typing.Any]:
    """
    Yield the sub-items of every item, in order.

    Items are interpreted with as_seq: a Seq or iterable is expanded,
    a scalar (including str / bytes) counts as a one-element sequence.
    """

    def produce() -> Iterator[typing.Any]:
        with seq.cursor() as cursor:
            for item in cursor:
                with as_seq(item).cursor() as sub:
                    yield from sub

    return Seq(produce)


def flat_map[T](seq: Seq[T], fn: IndexedMapper[T, typing.Any]) -> Seq[typing.Any]:
    """map(fn) then flatten()."""
    from ..transform.map import map as map_

    return flatten(map_(seq, fn))


__all__ = ("flat_map", "flatten")
