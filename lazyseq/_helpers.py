"""Internal helpers for lazyseq.

Common functions used across multiple operator modules.
These are not part of the public API."""

from __future__ import annotations

import inspect
import typing
from collections.abc import Callable, Iterable

from ._errors import ConstructionError
from .core.seq import Seq

_TEXT_TYPES = (str, bytes, bytearray)


# Identity function
def identity[T](x: T) -> T:
    """Identity function: returns its argument unchanged."""
    return x


def is_null(x: object) -> bool:
    return x is None


# Sequence-like coercion
def as_seq[T](value: Seq[T] | Iterable[T] | T) -> Seq[T]:
    """
    Interpret a value as a sequence.

    - Seq: used as is
    - str / bytes: a single item, not a sequence of characters
    - any other iterable: wrapped with from_iterable
    - anything else: wrapped as a one-element sequence
    """
    from .lift.up import from_iterable, of

    if isinstance(value, Seq):
        return value
    if isinstance(value, _TEXT_TYPES):
        return of(value)
    if isinstance(value, Iterable):
        return from_iterable(value)
    return of(value)


# Callback arity
def positional_arity(fn: Callable[..., typing.Any], *, default: int) -> int | None:
    """
    Count the positional parameters fn needs. None means unbounded (*args).

    Python functions get their defaulted parameters filled too, so
    `lambda item, index=0: ...` still receives the index. For builtins and
    method descriptors those are only filled up to `default`: str.rstrip
    never gets an index as chars while bool still gets its item.

    Falls back to `default` for callables without an inspectable signature
    (most builtin types).
    """
    try:
        signature = inspect.signature(fn)
    except (TypeError, ValueError):
        return default

    required = optional = 0
    for parameter in signature.parameters.values():
        if parameter.kind is inspect.Parameter.VAR_POSITIONAL:
            return None
        if parameter.kind not in (
            inspect.Parameter.POSITIONAL_ONLY,
            inspect.Parameter.POSITIONAL_OR_KEYWORD,
        ):
            continue
        if parameter.default is inspect.Parameter.empty:
            required += 1
        else:
            optional += 1
    if inspect.isfunction(inspect.unwrap(fn)) or inspect.ismethod(fn):
        return required + optional
    return max(required, min(default, required + optional))


def adapt[R](fn: Callable[..., R], *, arity: int, minimum: int) -> Callable[..., R]:
    """
    Make fn callable with `arity` positional arguments.

    Extra trailing arguments (typically the index) are dropped when fn
    doesn't accept them. Resolved once, not per call.
    """
    if not callable(fn):
        raise ConstructionError(f"Expected a callable, got {type(fn).__name__}")

    accepted = positional_arity(fn, default=minimum)
    if accepted is None or accepted >= arity:
        return fn

    def call(*args: typing.Any) -> R:
        return fn(*args[:accepted])

    return call


__all__ = (
    "adapt",
    "as_seq",
    "identity",
    "is_null",
    "positional_arity",
)
