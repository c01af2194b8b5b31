"""
Zip combinators
===============

Lockstep combination of several sequences. Shortest wins: the traversal
stops the moment any input is exhausted.
"""

from __future__ import annotations

import typing
from collections.abc import Callable, Iterable, Iterator
from contextlib import ExitStack

from .._helpers import as_seq
from ..core.seq import Seq


def zip_many(
    sources: Seq[typing.Any] | Iterable[typing.Any],
    combiner: Callable[..., typing.Any] | None = None,
) -> Seq[typing.Any]:
    """
    Pull one item from every source per step.

    Yields a tuple of the items, or combiner(*items) when given.
    Inputs are pulled in order, so when the second input runs out the
    first one has already been pulled for that step.
    """
    outer = as_seq(sources)

    def produce() -> Iterator[typing.Any]:
        with ExitStack() as stack:
            cursors = [
                stack.enter_context(as_seq(source).cursor())
                for source in stack.enter_context(outer.cursor())
            ]
            if not cursors:
                return
            while True:
                items = []
                for cursor in cursors:
                    if not cursor.has_next():
                        return
                    items.append(next(cursor))
                if combiner is None:
                    yield tuple(items)
                else:
                    yield combiner(*items)

    return Seq(produce)


def zip(
    first: typing.Any,
    second: typing.Any,
    combiner: Callable[..., typing.Any] | None = None,
) -> Seq[typing.Any]:
    """Pairs (a, b), or combiner(a, b). Shortest wins."""
    return zip_many((first, second), combiner)


__all__ = ("zip", "zip_many")
