"""
Cursor
======

Per-traversal pull state over a single producer.

A cursor is created by `Seq.cursor()` and belongs to exactly one traversal.
It moves through:

    NOT_STARTED -> PRODUCING <-> SUSPENDED -> EXHAUSTED | ABORTED

Both terminal states close the producer exactly once.
"""

from __future__ import annotations

import enum
import logging
import typing
from collections.abc import Callable, Iterator
from types import TracebackType

logger = logging.getLogger(__name__)

_MISSING: typing.Any = object()


def close_after_error(close: Callable[[], object], error: BaseException) -> None:
    """
    Run close() while `error` is propagating.

    A failure in close() is logged and noted on `error` instead of
    replacing it: the caller sees the exception that aborted the traversal.
    """
    try:
        close()
    except Exception as close_error:
        logger.exception("cleanup failed while %s was propagating", type(error).__name__)
        error.add_note(f"cleanup also failed: {close_error!r}")


class CursorState(enum.Enum):
    NOT_STARTED = "not_started"
    PRODUCING = "producing"
    SUSPENDED = "suspended"
    EXHAUSTED = "exhausted"
    ABORTED = "aborted"

    @property
    def terminal(self) -> bool:
        return self is CursorState.EXHAUSTED or self is CursorState.ABORTED


class Cursor[T]:
    """
    Pull interface over a producer: has_next() / next() / close().

    Also an iterator and a context manager, so the usual way to consume
    a sequence with guaranteed cleanup is:

        with seq.cursor() as cursor:
            for item in cursor:
                ...

    Leaving the block before exhaustion closes the producer right away.
    An exception raised by the producer aborts the cursor, closes the
    producer and then propagates unchanged.
    """

    __slots__ = ("_producer", "_pending", "_state")

    def __init__(self, producer: Iterator[T], /) -> None:
        self._producer = producer
        self._pending: T = _MISSING
        self._state = CursorState.NOT_STARTED

    @property
    def state(self) -> CursorState:
        return self._state

    @property
    def closed(self) -> bool:
        return self._state.terminal

    # Pull protocol

    def has_next(self) -> bool:
        """Pull ahead (at most one item) and report whether an item is available."""
        if self._pending is not _MISSING:
            return True
        if self._state.terminal:
            return False
        try:
            self._pending = self._pull()
        except StopIteration:
            return False
        return True

    def next(self) -> T:
        """Return the next item; raises StopIteration when exhausted."""
        return self.__next__()

    def close(self) -> None:
        """Abandon the traversal. Idempotent."""
        if self._state.terminal:
            return
        self._finish(CursorState.ABORTED)

    # Iterator protocol

    def __iter__(self) -> Cursor[T]:
        return self

    def __next__(self) -> T:
        if self._pending is not _MISSING:
            item = self._pending
            self._pending = _MISSING
            return item
        if self._state.terminal:
            raise StopIteration
        return self._pull()

    # Context manager protocol

    def __enter__(self) -> Cursor[T]:
        return self

    def __exit__(
        self,
        exc_type: type[BaseException] | None,
        exc: BaseException | None,
        tb: TracebackType | None,
    ) -> None:
        if exc is None or isinstance(exc, GeneratorExit):
            self.close()
        elif not self._state.terminal:
            close_after_error(self.close, exc)

    def __del__(self) -> None:
        # plain for-loops drop the cursor without closing it
        if not self._state.terminal:
            self.close()

    def __repr__(self) -> str:
        return f"Cursor({self._state.value})"

    # Internals

    def _pull(self) -> T:
        self._state = CursorState.PRODUCING
        try:
            item = next(self._producer)
        except StopIteration:
            self._finish(CursorState.EXHAUSTED)
            raise
        except BaseException as exc:
            close_after_error(lambda: self._finish(CursorState.ABORTED), exc)
            raise
        self._state = CursorState.SUSPENDED
        return item

    def _finish(self, state: CursorState) -> None:
        self._state = state
        self._pending = _MISSING
        logger.debug("cursor %s", state.value)
        close = getattr(self._producer, "close", None)
        if close is not None:
            close()


__all__ = ("Cursor", "CursorState", "close_after_error")
