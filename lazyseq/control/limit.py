"""Slicing operators

take / take_while / skip / skip_while. None of them buffers; take and
take_while close the parent traversal as soon as they are done with it."""

from __future__ import annotations

from collections.abc import Iterator

from .._errors import ConstructionError
from .._helpers import adapt
from .._types import IndexedPredicate
from ..core.seq import Seq


def _check_count(name: str, n: int) -> None:
    if isinstance(n, bool) or not isinstance(n, int):
        raise ConstructionError(f"{name}(): n must be an int, got {type(n).__name__}")
    if n < 0:
        raise ConstructionError(f"{name}(): n must be >= 0, got {n}")


def take[T](seq: Seq[T], n: int) -> Seq[T]:
    """
    At most the first n items.

    Never pulls item n + 1 from the parent: the parent traversal is closed
    before the n-th item is handed out.
    """
    _check_count("take", n)

    def produce() -> Iterator[T]:
        with seq.cursor() as cursor:
            if n == 0:
                return
            for delivered, item in enumerate(cursor, start=1):
                if delivered == n:
                    cursor.close()
                    yield item
                    return
                yield item

    return Seq(produce)


def take_while[T](seq: Seq[T], predicate: IndexedPredicate[T]) -> Seq[T]:
    """Items while predicate(item, index) holds. The first failing item is dropped."""
    test = adapt(predicate, arity=2, minimum=1)

    def produce() -> Iterator[T]:
        with seq.cursor() as cursor:
            for index, item in enumerate(cursor):
                if not test(item, index):
                    return
                yield item

    return Seq(produce)


def skip[T](seq: Seq[T], n: int) -> Seq[T]:
    """Everything after the first n items."""
    _check_count("skip", n)

    def produce() -> Iterator[T]:
        with seq.cursor() as cursor:
            for index, item in enumerate(cursor):
                if index >= n:
                    yield item

    return Seq(produce)


def skip_while[T](seq: Seq[T], predicate: IndexedPredicate[T]) -> Seq[T]:
    """
    Drop the leading run satisfying predicate, then yield the rest,
    including the first item that failed it.

    The index only advances while dropping; the predicate is not called
    again once the first item got through.
    """
    test = adapt(predicate, arity=2, minimum=1)

    def produce() -> Iterator[T]:
        with seq.cursor() as cursor:
            for index, item in enumerate(cursor):
                if not test(item, index):
                    yield item
                    break
            yield from cursor

    return Seq(produce)


__all__ = ("skip", "skip_while", "take", "take_while")
