"""
Fold combinators
================

Terminal consumers: drive a traversal to the end and return a concrete value.
The cursor is always closed before returning or re-raising.
"""

from __future__ import annotations

from .._helpers import adapt
from .._types import Action, Reducer
from ..core.seq import Seq


def reduce[A, T](seq: Seq[T], fn: Reducer[A, T], initial: A) -> A:
    """
    Left fold: acc = fn(acc, item, index).

    Returns `initial` itself, untouched, when the sequence is empty.
    """
    step = adapt(fn, arity=3, minimum=2)
    acc = initial
    with seq.cursor() as cursor:
        for index, item in enumerate(cursor):
            acc = step(acc, item, index)
    return acc


def count(seq: Seq[object]) -> int:
    total = 0
    with seq.cursor() as cursor:
        for _ in cursor:
            total += 1
    return total


def each[T](seq: Seq[T], fn: Action[T]) -> int:
    """Call fn(item, index) for every item. Returns the number of items processed."""
    action = adapt(fn, arity=2, minimum=1)
    processed = 0
    with seq.cursor() as cursor:
        for item in cursor:
            action(item, processed)
            processed += 1
    return processed


def to_list[T](seq: Seq[T]) -> list[T]:
    with seq.cursor() as cursor:
        return list(cursor)


def force[T](seq: Seq[T]) -> Seq[T]:
    """Traverse now and return a sequence over the materialized items."""
    from ..lift.up import from_iterable

    return from_iterable(to_list(seq))


__all__ = ("count", "each", "force", "reduce", "to_list")
