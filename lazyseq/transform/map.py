"""Map combinator"""

from __future__ import annotations

from collections.abc import Iterator

from .._helpers import adapt
from .._types import IndexedMapper
from ..core.seq import Seq


def map[T, R](seq: Seq[T], fn: IndexedMapper[T, R]) -> Seq[R]:
    """Transform each item with fn(item, index). Same order, same count."""
    transform = adapt(fn, arity=2, minimum=1)

    def produce() -> Iterator[R]:
        with seq.cursor() as cursor:
            for index, item in enumerate(cursor):
                yield transform(item, index)

    return Seq(produce)


__all__ = ("map",)
