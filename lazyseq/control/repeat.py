"""Repeat combinators

repeat(item) and cycle(source), finite or infinite."""

from __future__ import annotations

import typing
from collections.abc import Iterable, Iterator
from dataclasses import dataclass

from .._errors import ConstructionError
from .._helpers import as_seq
from ..core.seq import Seq


@dataclass(frozen=True, slots=True)
class RepeatPolicy:
    """How many times to repeat. None means forever."""

    times: int | None = None

    def __post_init__(self) -> None:
        if self.times is None:
            return
        if isinstance(self.times, bool) or not isinstance(self.times, int):
            raise ConstructionError("RepeatPolicy.times must be an int or None")
        if self.times < 0:
            raise ConstructionError("RepeatPolicy.times must be >= 0")

    @property
    def infinite(self) -> bool:
        return self.times is None

    def rounds(self) -> Iterator[int]:
        round_idx = 0
        while self.times is None or round_idx < self.times:
            yield round_idx
            round_idx += 1


def _resolve_policy(name: str, times: int | None, policy: RepeatPolicy | None) -> RepeatPolicy:
    if policy is None:
        return RepeatPolicy(times=times)
    if times is not None:
        raise ConstructionError(f"{name}(): pass either 'times' or 'policy', not both")
    return policy


def repeat[T](
    item: T,
    times: int | None = None,
    *,
    policy: RepeatPolicy | None = None,
) -> Seq[T]:
    """The same item, `times` times or forever."""
    policy = _resolve_policy("repeat", times, policy)

    def produce() -> Iterator[T]:
        for _ in policy.rounds():
            yield item

    return Seq(produce)


def cycle[T](
    source: Seq[T] | Iterable[T] | typing.Any,
    times: int | None = None,
    *,
    policy: RepeatPolicy | None = None,
) -> Seq[T]:
    """
    Traverse source from the start again and again, `times` times or forever.

    Every round is a fresh traversal, so source must be restartable; a
    one-shot source yields its items in the first round only. An infinite
    cycle over a source that yields nothing in a round stops instead of
    spinning.
    """
    policy = _resolve_policy("cycle", times, policy)
    seq = as_seq(source)

    def produce() -> Iterator[T]:
        for _ in policy.rounds():
            produced = False
            with seq.cursor() as cursor:
                for item in cursor:
                    produced = True
                    yield item
            if not produced and policy.infinite:
                return

    return Seq(produce)


__all__ = ("RepeatPolicy", "cycle", "repeat")
