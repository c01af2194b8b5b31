from __future__ import annotations

import itertools
from collections.abc import Callable, Iterable, Iterator
from dataclasses import dataclass, field

import pytest

from lazyseq import Seq, bracket


class ProbeError(Exception):
    pass


@dataclass
class Probe:
    """Instrumented resource-owning source: counts acquisitions, pulls and releases."""

    items: Iterable[int] | None = None  # None: 0, 1, 2, ... forever
    fail_at: int | None = None
    release_error: Exception | None = None
    acquired: int = 0
    released: int = 0
    pulls: int = 0
    events: list[str] = field(default_factory=list)

    def _acquire(self) -> int:
        self.acquired += 1
        self.events.append("acquire")
        return self.acquired

    def _release(self, token: int) -> None:
        self.released += 1
        self.events.append("release")
        if self.release_error is not None:
            raise self.release_error

    def _use(self, token: int) -> Iterator[int]:
        source = itertools.count() if self.items is None else self.items
        for index, item in enumerate(source):
            if index == self.fail_at:
                raise ProbeError(f"failed at {index}")
            self.pulls += 1
            yield item

    def seq(self) -> Seq[int]:
        return bracket(self._acquire, release=self._release, use=self._use)


@pytest.fixture
def make_probe() -> Callable[..., Probe]:
    return Probe
