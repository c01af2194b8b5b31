"""Extremum selection

min / max in a single pass. On ties the item already held wins, so the
first occurrence of the extremum is returned."""

from __future__ import annotations

from .._types import Comparator
from ..core.seq import Seq


def _select[T](
    seq: Seq[T],
    dominates: Comparator[T],
    default: T | None,
) -> T | None:
    with seq.cursor() as cursor:
        if not cursor.has_next():
            return default
        best = next(cursor)
        for item in cursor:
            if dominates(item, best) > 0:
                best = item
    return best


def min[T](
    seq: Seq[T],
    comparator: Comparator[T] | None = None,
    default: T | None = None,
) -> T | None:
    """
    Smallest item, or `default` when the sequence is empty.

    With a comparator, an item replaces the current minimum only when
    comparator(current, item) > 0.
    """
    if comparator is None:
        return _select(seq, lambda item, best: 1 if item < best else 0, default)  # type: ignore[operator]
    return _select(seq, lambda item, best: comparator(best, item), default)


def max[T](
    seq: Seq[T],
    comparator: Comparator[T] | None = None,
    default: T | None = None,
) -> T | None:
    """
    Largest item, or `default` when the sequence is empty.

    With a comparator, an item replaces the current maximum only when
    comparator(item, current) > 0.
    """
    if comparator is None:
        return _select(seq, lambda item, best: 1 if item > best else 0, default)  # type: ignore[operator]
    return _select(seq, comparator, default)


__all__ = ("max", "min")
