"""Sort combinators

The parent is materialized when the sorted sequence is traversed (not when
it is built), then the sorted items are handed out one at a time. The input
must be finite. All variants are stable."""

from __future__ import annotations

import functools
import typing
from collections.abc import Iterator

from .._errors import ConstructionError
from .._types import Comparator, Selector
from ..core.seq import Seq


def _sorted[T](seq: Seq[T], **options: typing.Any) -> Seq[T]:
    def produce() -> Iterator[T]:
        with seq.cursor() as cursor:
            items = sorted(cursor, **options)
        yield from items

    return Seq(produce)


def sort[T](seq: Seq[T], *, reverse: bool = False) -> Seq[T]:
    """Natural order (items must support <)."""
    return _sorted(seq, reverse=reverse)


def sort_with[T](seq: Seq[T], comparator: Comparator[T]) -> Seq[T]:
    """
    Order by a two-argument comparator: negative if a < b, zero if equal,
    positive if a > b.

    Example:
        by_length_desc = lambda a, b: len(b) - len(a)
        words.sort_with(by_length_desc)
    """
    if not callable(comparator):
        raise ConstructionError("sort_with(): comparator must be callable")
    return _sorted(seq, key=functools.cmp_to_key(comparator))


def sort_by[T](seq: Seq[T], key: Selector[T, typing.Any], *, reverse: bool = False) -> Seq[T]:
    """Order by key(item)."""
    if not callable(key):
        raise ConstructionError("sort_by(): key must be callable")
    return _sorted(seq, key=key, reverse=reverse)


__all__ = ("sort", "sort_by", "sort_with")
