"""
Seq
===

Immutable descriptor of a lazy, pull-based, possibly infinite series of items.

A Seq only stores a producer factory and optional bound arguments. Every
traversal (`cursor()` / `iter()`) calls the factory again and gets its own
Cursor, so a Seq can be traversed any number of times and shared freely
between operator chains and threads.

Operators are available both as free functions (lazyseq.transform,
lazyseq.control, lazyseq.collection, ...) and as chainable methods here.
"""

from __future__ import annotations

import logging
import typing
from collections.abc import Callable, Iterable, Iterator
from dataclasses import dataclass

from .._errors import ProtocolViolation
from .cursor import Cursor

if typing.TYPE_CHECKING:
    from kungfu import Result

    from .._types import (
        Action,
        Comparator,
        IndexedMapper,
        IndexedPredicate,
        ProducerFactory,
        Reducer,
        Selector,
    )
    from ..control.repeat import RepeatPolicy

logger = logging.getLogger(__name__)


@dataclass(frozen=True, slots=True)
class Seq[T]:
    factory: ProducerFactory[T]
    args: tuple[typing.Any, ...] | None = None

    # ========================================================================
    # Traversal
    # ========================================================================

    def cursor(self) -> Cursor[T]:
        """Begin a traversal: invoke the factory and wrap the producer."""
        if self.args is None:
            producer = self.factory()
        else:
            producer = self.factory(*self.args)

        if not isinstance(producer, Iterator):
            raise ProtocolViolation(producer)

        logger.debug("cursor opened for %r", self)
        return Cursor(producer)

    def __iter__(self) -> Iterator[T]:
        return self.cursor()

    def __repr__(self) -> str:
        name = getattr(self.factory, "__qualname__", type(self.factory).__name__)
        return f"Seq({name})"

    # ========================================================================
    # Construction
    # ========================================================================

    @staticmethod
    def from_iterable[V](values: Iterable[V]) -> Seq[V]:
        from ..lift.up import from_iterable
        return from_iterable(values)

    @staticmethod
    def from_factory[V](factory: ProducerFactory[V], *args: typing.Any) -> Seq[V]:
        from ..lift.up import from_factory
        return from_factory(factory, *args)

    @staticmethod
    def from_seq[V](seq: Seq[V]) -> Seq[V]:
        from ..lift.up import from_seq
        return from_seq(seq)

    @staticmethod
    def from_any(source: typing.Any) -> Seq[typing.Any]:
        from ..lift.up import from_any
        return from_any(source)

    @staticmethod
    def of[V](*values: V) -> Seq[V]:
        from ..lift.up import of
        return of(*values)

    @staticmethod
    def empty() -> Seq[typing.Any]:
        from ..lift.up import empty
        return empty()

    @staticmethod
    def bracket[R, V](
        acquire: Callable[[], R],
        *,
        release: Callable[[R], object],
        use: Callable[[R], Iterable[V]],
    ) -> Seq[V]:
        from ..control.bracket import bracket
        return bracket(acquire, release=release, use=use)

    @staticmethod
    def range(start: int, end: int, step: int = 1) -> Seq[int]:
        from ..generate.range import range as range_
        return range_(start, end, step)

    @staticmethod
    def iterate[V](seeds: Iterable[V], fn: Callable[..., V]) -> Seq[V]:
        from ..generate.iterate import iterate
        return iterate(seeds, fn)

    @staticmethod
    def repeat[V](
        item: V,
        times: int | None = None,
        *,
        policy: RepeatPolicy | None = None,
    ) -> Seq[V]:
        from ..control.repeat import repeat
        return repeat(item, times, policy=policy)

    @staticmethod
    def cycle[V](
        source: Seq[V] | Iterable[V],
        times: int | None = None,
        *,
        policy: RepeatPolicy | None = None,
    ) -> Seq[V]:
        from ..control.repeat import cycle
        return cycle(source, times, policy=policy)

    @staticmethod
    def concat(first: typing.Any, second: typing.Any) -> Seq[typing.Any]:
        from ..collection.concat import concat
        return concat(first, second)

    @staticmethod
    def concat_many(sources: typing.Any) -> Seq[typing.Any]:
        from ..collection.concat import concat_many
        return concat_many(sources)

    @staticmethod
    def zip(
        first: typing.Any,
        second: typing.Any,
        combiner: Callable[..., typing.Any] | None = None,
    ) -> Seq[typing.Any]:
        from ..collection.zip import zip as zip_
        return zip_(first, second, combiner)

    @staticmethod
    def zip_many(
        sources: typing.Any,
        combiner: Callable[..., typing.Any] | None = None,
    ) -> Seq[typing.Any]:
        from ..collection.zip import zip_many
        return zip_many(sources, combiner)

    # ========================================================================
    # Filtering & mapping
    # ========================================================================

    def filter(self, predicate: IndexedPredicate[T]) -> Seq[T]:
        from ..transform.filter import filter as filter_
        return filter_(self, predicate)

    def reject(self, predicate: IndexedPredicate[T]) -> Seq[T]:
        from ..transform.filter import reject
        return reject(self, predicate)

    def reject_nulls(self) -> Seq[T]:
        from ..transform.filter import reject_nulls
        return reject_nulls(self)

    def map[R](self, fn: IndexedMapper[T, R]) -> Seq[R]:
        from ..transform.map import map as map_
        return map_(self, fn)

    def peek(self, action: Action[T]) -> Seq[T]:
        from ..transform.effects import peek
        return peek(self, action)

    # ========================================================================
    # Slicing
    # ========================================================================

    def take(self, n: int) -> Seq[T]:
        from ..control.limit import take
        return take(self, n)

    def take_while(self, predicate: IndexedPredicate[T]) -> Seq[T]:
        from ..control.limit import take_while
        return take_while(self, predicate)

    def skip(self, n: int) -> Seq[T]:
        from ..control.limit import skip
        return skip(self, n)

    def skip_while(self, predicate: IndexedPredicate[T]) -> Seq[T]:
        from ..control.limit import skip_while
        return skip_while(self, predicate)

    # ========================================================================
    # Combination
    # ========================================================================

    def flatten(self) -> Seq[typing.Any]:
        from ..collection.flatten import flatten
        return flatten(self)

    def flat_map[R](self, fn: IndexedMapper[T, typing.Any]) -> Seq[R]:
        from ..collection.flatten import flat_map
        return flat_map(self, fn)

    def prepend(self, item: T) -> Seq[T]:
        from ..collection.concat import prepend
        return prepend(self, item)

    def prepend_many(self, items: Seq[T] | Iterable[T]) -> Seq[T]:
        from ..collection.concat import prepend_many
        return prepend_many(self, items)

    def append(self, item: T) -> Seq[T]:
        from ..collection.concat import append
        return append(self, item)

    def append_many(self, items: Seq[T] | Iterable[T]) -> Seq[T]:
        from ..collection.concat import append_many
        return append_many(self, items)

    # ========================================================================
    # Ordering
    # ========================================================================

    def sort(self, *, reverse: bool = False) -> Seq[T]:
        from ..collection.sort import sort
        return sort(self, reverse=reverse)

    def sort_with(self, comparator: Comparator[T]) -> Seq[T]:
        from ..collection.sort import sort_with
        return sort_with(self, comparator)

    def sort_by(self, key: Selector[T, typing.Any], *, reverse: bool = False) -> Seq[T]:
        from ..collection.sort import sort_by
        return sort_by(self, key, reverse=reverse)

    # ========================================================================
    # Terminal consumers
    # ========================================================================

    def min(
        self,
        comparator: Comparator[T] | None = None,
        default: T | None = None,
    ) -> T | None:
        from ..selection.best import min as min_
        return min_(self, comparator, default)

    def max(
        self,
        comparator: Comparator[T] | None = None,
        default: T | None = None,
    ) -> T | None:
        from ..selection.best import max as max_
        return max_(self, comparator, default)

    def reduce[A](self, fn: Reducer[A, T], initial: A) -> A:
        from ..collection.fold import reduce
        return reduce(self, fn, initial)

    def count(self) -> int:
        from ..collection.fold import count
        return count(self)

    def each(self, fn: Action[T]) -> int:
        from ..collection.fold import each
        return each(self, fn)

    def to_list(self) -> list[T]:
        from ..collection.fold import to_list
        return to_list(self)

    def force(self) -> Seq[T]:
        from ..collection.fold import force
        return force(self)

    def to_result[E](self, *, on_error: Callable[[Exception], E]) -> Result[list[T], E]:
        from ..lift.down import to_result
        return to_result(self, on_error=on_error)


__all__ = ("Seq",)
