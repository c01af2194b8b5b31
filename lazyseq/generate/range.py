"""Numeric ranges"""

from __future__ import annotations

from collections.abc import Iterator

from .._errors import ConstructionError
from ..core.seq import Seq


def range(start: int, end: int, step: int = 1) -> Seq[int]:
    """
    Half-open arithmetic progression.

    - step > 0 and start < end: start, start + step, ... while < end
    - step < 0 and start > end: start, start + step, ... while > end
    - any other combination: empty

    Example:
        range(1, 5)       # 1, 2, 3, 4
        range(4, 0)       # empty
        range(4, 0, -1)   # 4, 3, 2, 1
    """
    for name, value in (("start", start), ("end", end), ("step", step)):
        if isinstance(value, bool) or not isinstance(value, int):
            raise ConstructionError(f"range(): {name} must be an int, got {type(value).__name__}")
    if step == 0:
        raise ConstructionError("range(): step must be non-zero")

    def produce() -> Iterator[int]:
        value = start
        if step > 0 and start < end:
            while value < end:
                yield value
                value += step
        elif step < 0 and start > end:
            while value > end:
                yield value
                value += step

    return Seq(produce)


__all__ = ("range",)
