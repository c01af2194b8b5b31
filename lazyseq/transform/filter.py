"""Filter combinators

filter / reject / reject_nulls: one parent pull per attempted output, no buffering."""

from __future__ import annotations

from collections.abc import Iterator

from .._helpers import adapt, is_null
from .._types import IndexedPredicate
from ..core.seq import Seq


def filter[T](seq: Seq[T], predicate: IndexedPredicate[T]) -> Seq[T]:
    """
    Keep items where predicate(item, index) is true.

    index is zero-based per traversal and counts every parent item,
    kept or not.
    """
    test = adapt(predicate, arity=2, minimum=1)

    def produce() -> Iterator[T]:
        with seq.cursor() as cursor:
            for index, item in enumerate(cursor):
                if test(item, index):
                    yield item

    return Seq(produce)


def reject[T](seq: Seq[T], predicate: IndexedPredicate[T]) -> Seq[T]:
    """Drop items where predicate(item, index) is true."""
    test = adapt(predicate, arity=2, minimum=1)

    def keep(item: T, index: int) -> bool:
        return not test(item, index)

    return filter(seq, keep)


def reject_nulls[T](seq: Seq[T | None]) -> Seq[T]:
    """Drop None items."""

    def keep(item: T | None, index: int) -> bool:
        return not is_null(item)

    return filter(seq, keep)  # type: ignore[return-value]


__all__ = ("filter", "reject", "reject_nulls")
