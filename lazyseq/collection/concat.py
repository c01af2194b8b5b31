"""Concat combinators

Strictly ordered concatenation: a source is not touched (its producer is
not even created) before every earlier source is exhausted."""

from __future__ import annotations

import typing
from collections.abc import Iterable, Iterator

from .._helpers import as_seq
from ..core.seq import Seq


def concat_many(sources: Seq[typing.Any] | Iterable[typing.Any]) -> Seq[typing.Any]:
    """
    All items of the first source, then of the next one, and so on.

    `sources` may itself be a Seq; it is traversed lazily alongside.
    """
    outer = as_seq(sources)

    def produce() -> Iterator[typing.Any]:
        with outer.cursor() as cursor:
            for source in cursor:
                with as_seq(source).cursor() as sub:
                    yield from sub

    return Seq(produce)


def concat(first: typing.Any, second: typing.Any) -> Seq[typing.Any]:
    return concat_many((first, second))


# Convenience wrappers

def prepend[T](seq: Seq[T], item: T) -> Seq[T]:
    """A single item in front of seq."""
    from ..lift.up import of

    return concat(of(item), seq)


def prepend_many[T](seq: Seq[T], items: Seq[T] | Iterable[T]) -> Seq[T]:
    return concat(items, seq)


def append[T](seq: Seq[T], item: T) -> Seq[T]:
    """A single item after the end of seq."""
    from ..lift.up import of

    return concat(seq, of(item))


def append_many[T](seq: Seq[T], items: Seq[T] | Iterable[T]) -> Seq[T]:
    return concat(seq, items)


__all__ = (
    "append",
    "append_many",
    "concat",
    "concat_many",
    "prepend",
    "prepend_many",
)
