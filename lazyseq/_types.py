"""
Core type definitions for lazyseq.

Aliases for the callables and producers used across the library.
"""

from __future__ import annotations

import typing
from collections.abc import Callable, Iterator

# ============================================================================
# Producers
# ============================================================================

# Producer = resumable routine yielding one item per pull
type Producer[T] = Iterator[T]

# ProducerFactory = called once per traversal (with bound args) to get a fresh Producer
type ProducerFactory[T] = Callable[..., Iterator[T]]

# ============================================================================
# Callbacks
# ============================================================================

# Predicate = test on a single item
type Predicate[T] = Callable[[T], bool]

# IndexedPredicate = test on (item, index); one-argument callables also accepted
type IndexedPredicate[T] = Callable[[T, int], bool] | Callable[[T], bool]

# IndexedMapper = transform of (item, index)
type IndexedMapper[T, R] = Callable[[T, int], R] | Callable[[T], R]

# Action = side effect on (item, index)
type Action[T] = Callable[[T, int], typing.Any] | Callable[[T], typing.Any]

# Reducer = left fold step (acc, item, index) -> acc
type Reducer[A, T] = Callable[[A, T, int], A] | Callable[[A, T], A]

# Comparator = negative / zero / positive, like cmp()
type Comparator[T] = Callable[[T, T], int]

# Selector = key extraction for ordering
type Selector[T, K] = Callable[[T], K]

__all__ = (
    "Action",
    "Comparator",
    "IndexedMapper",
    "IndexedPredicate",
    "Predicate",
    "Producer",
    "ProducerFactory",
    "Reducer",
    "Selector",
)
