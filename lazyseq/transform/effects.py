"""Side effects combinators

Effects execute for observation only (logging, metrics, debugging)
and don't change the yielded items."""

from __future__ import annotations

from collections.abc import Iterator

from .._helpers import adapt
from .._types import Action
from ..core.seq import Seq


def peek[T](seq: Seq[T], action: Action[T]) -> Seq[T]:
    """
    Call action(item, index) right before each item is yielded.

    Example:
        rows.peek(lambda row, i: logger.debug("row %d: %r", i, row))

    NOTE: The action runs when the item is pulled, so it only sees items
          the consumer actually asks for (rows.peek(...).take(2) observes 2).
    """
    observe = adapt(action, arity=2, minimum=1)

    def produce() -> Iterator[T]:
        with seq.cursor() as cursor:
            for index, item in enumerate(cursor):
                observe(item, index)
                yield item

    return Seq(produce)


__all__ = ("peek",)
