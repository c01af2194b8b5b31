"""
Lifting values into Seq.

Constructors turning containers, producer factories, Results and optionals
into lazy sequences.
"""

from __future__ import annotations

import logging
import typing
from collections.abc import Iterable, Iterator

from kungfu import Error, Ok, Result

from .._errors import ConstructionError
from .._types import ProducerFactory
from ..core.seq import Seq

logger = logging.getLogger(__name__)

_TEXT_TYPES = (str, bytes, bytearray)


def _produce_values[T](values: Iterable[T]) -> Iterator[T]:
    yield from values


def from_iterable[T](values: Iterable[T]) -> Seq[T]:
    """
    Sequence over an ordered container.

    **When to use:** lists, tuples, dicts, ranges, or any re-iterable object.

    Example:
        from lazyseq import lift as L

        L.up.from_iterable([1, 2, 3]).to_list()  # [1, 2, 3]

    NOTE: Restartability is inherited from `values`. A one-shot iterator
          (a generator object, an open file) yields its items only on the
          first traversal. Use from_factory to restart a producer.
    """
    return Seq(_produce_values, (values,))


def from_factory[T](factory: ProducerFactory[T], *args: typing.Any) -> Seq[T]:
    """
    Sequence driven by a producer factory.

    `factory(*args)` is called at the start of every traversal and must return
    an iterator (usually a generator function is passed as factory).

    Example:
        from lazyseq import lift as L

        def countdown(n):
            while n > 0:
                yield n
                n -= 1

        L.up.from_factory(countdown, 3).to_list()  # [3, 2, 1]
    """
    if not callable(factory):
        raise ConstructionError(
            f"Producer factory must be callable, got {type(factory).__name__}"
        )
    return Seq(factory, args or None)


def from_seq[T](seq: Seq[T]) -> Seq[T]:
    """Identity. A Seq is immutable, so it's returned as is."""
    return seq


def of[T](*values: T) -> Seq[T]:
    """Sequence of the given values."""
    return from_iterable(values)


def empty() -> Seq[typing.Any]:
    """Sequence without items."""
    return from_iterable(())


def from_any(source: typing.Any) -> Seq[typing.Any]:
    """
    Permissive constructor for "anything sequence-like".

    - Seq: returned as is
    - iterable (except str / bytes): from_iterable
    - callable: from_factory
    - anything else: empty sequence (never an error)
    """
    if isinstance(source, Seq):
        return source
    if isinstance(source, Iterable) and not isinstance(source, _TEXT_TYPES):
        return from_iterable(source)
    if callable(source):
        return from_factory(source)

    logger.debug("from_any: %s is not sequence-like, using empty()", type(source).__name__)
    return empty()


def from_result[T, E](result: Result[T, E]) -> Seq[T]:
    """
    Lift a kungfu Result. Ok(value) becomes a one-element sequence, Error
    becomes an empty one.
    """
    match result:
        case Ok(value):
            return of(value)
        case Error(_):
            return empty()
    raise ConstructionError(f"Expected a Result, got {type(result).__name__}")


def optional[T](value: T | None) -> Seq[T]:
    """None becomes an empty sequence, any other value a one-element sequence."""
    if value is None:
        return empty()
    return of(value)


__all__ = (
    "empty",
    "from_any",
    "from_factory",
    "from_iterable",
    "from_result",
    "from_seq",
    "of",
    "optional",
)
