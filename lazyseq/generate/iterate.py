"""Recurrence sequences"""

from __future__ import annotations

from collections import deque
from collections.abc import Callable, Iterable, Iterator

from ..core.seq import Seq


def iterate[T](seeds: Iterable[T], fn: Callable[..., T]) -> Seq[T]:
    """
    Infinite recurrence over a sliding window of the last N values,
    N being the number of seeds.

    Yields the seeds, then fn(*window) forever; each new value is appended
    to the window and the oldest one dropped. Bound it downstream (take,
    take_while).

    Example:
        iterate([0, 1], lambda a, b: a + b).take(10)
        # 0, 1, 1, 2, 3, 5, 8, 13, 21, 34
    """
    initial = tuple(seeds)

    def produce() -> Iterator[T]:
        yield from initial
        window = deque(initial, maxlen=len(initial))
        while True:
            value = fn(*window)
            window.append(value)
            yield value

    return Seq(produce)


__all__ = ("iterate",)
