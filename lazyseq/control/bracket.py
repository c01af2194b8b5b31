"""
Bracket sources
===============

Root sequences that own a resource per traversal: acquire -> stream -> release.

The resource is acquired when the traversal begins (`Seq.cursor()`) and
released exactly once when the cursor reaches a terminal state: exhaustion,
early close (take, break out of a with-block, ...) or an error.
"""

from __future__ import annotations

import logging
from collections.abc import Callable, Iterable, Iterator
from contextlib import AbstractContextManager, ExitStack

from .._helpers import identity
from ..core.cursor import close_after_error
from ..core.seq import Seq

logger = logging.getLogger(__name__)


class _ResourceProducer[R, T]:
    """Iterator over use(resource) that releases the resource on close()."""

    __slots__ = ("_resource", "_release", "_items", "_released")

    def __init__(
        self,
        resource: R,
        release: Callable[[R], object],
        items: Iterator[T],
    ) -> None:
        self._resource = resource
        self._release = release
        self._items = items
        self._released = False

    def __iter__(self) -> _ResourceProducer[R, T]:
        return self

    def __next__(self) -> T:
        return next(self._items)

    def close(self) -> None:
        if self._released:
            return
        self._released = True
        close_items = getattr(self._items, "close", None)
        try:
            if close_items is not None:
                close_items()
        except BaseException as exc:
            close_after_error(self._release_resource, exc)
            raise
        self._release_resource()

    def _release_resource(self) -> None:
        logger.debug("releasing %r", self._resource)
        self._release(self._resource)


# ============================================================================
# Sources
# ============================================================================


def bracket[R, T](
    acquire: Callable[[], R],
    *,
    release: Callable[[R], object],
    use: Callable[[R], Iterable[T]],
) -> Seq[T]:
    """
    Resource-owning sequence: acquire -> stream use(resource) -> release (always).

    Example:
        rows = bracket(
            lambda: sqlite3.connect(path),
            release=lambda conn: conn.close(),
            use=lambda conn: conn.execute("SELECT * FROM users"),
        )
        rows.take(10).to_list()  # connection closed after the 10th row
    """

    def produce() -> Iterator[T]:
        resource = acquire()
        logger.debug("acquired %r", resource)
        try:
            items = iter(use(resource))
        except BaseException as exc:
            close_after_error(lambda: release(resource), exc)
            raise
        return _ResourceProducer(resource, release, items)

    return Seq(produce)


def managed[C, T](
    factory: Callable[[], AbstractContextManager[C]],
    *,
    use: Callable[[C], Iterable[T]] = identity,
) -> Seq[T]:
    """
    Bracket over a context manager: factory() is entered on each traversal
    and exited exactly once when the traversal ends.

    Example:
        lines = managed(lambda: open(path, encoding="utf-8"))
        lines.map(str.rstrip).take(3).to_list()
    """

    def acquire() -> tuple[ExitStack, C]:
        stack = ExitStack()
        return stack, stack.enter_context(factory())

    def release(entered: tuple[ExitStack, C]) -> None:
        entered[0].close()

    def use_entered(entered: tuple[ExitStack, C]) -> Iterable[T]:
        return use(entered[1])

    return bracket(acquire, release=release, use=use_entered)


__all__ = ("bracket", "managed")
