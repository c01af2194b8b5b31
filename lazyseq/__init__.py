"""
Lazy, restartable, composable sequences.

Core building blocks for streaming data through filter / map / flatten /
slicing / combination / ordering / aggregation pipelines with deterministic
cleanup of the resources a producer holds.

Architecture:
- Seq is an immutable descriptor (producer factory + bound args)
- Every traversal calls the factory again and gets its own Cursor
- Operators are free functions returning new Seqs, also chainable as Seq methods
- Terminal consumers (to_list, reduce, count, each, min, max) close what they open

Example:
    from lazyseq import Seq

    Seq.range(1, 100).filter(lambda n: n % 2 == 0).map(lambda n: n * n).take(3).to_list()
    # [4, 16, 36]
"""

import logging

# Core types
from .core import Cursor, CursorState, Seq
from ._types import (
    Action,
    Comparator,
    IndexedMapper,
    IndexedPredicate,
    Predicate,
    Producer,
    ProducerFactory,
    Reducer,
    Selector,
)

# Lift helpers
from . import lift
from .lift import (
    empty,
    from_any,
    from_factory,
    from_iterable,
    from_result,
    from_seq,
    of,
    optional,
)

# Control
from .control import (
    RepeatPolicy,
    bracket,
    cycle,
    managed,
    repeat,
    skip,
    skip_while,
    take,
    take_while,
)

# Transform
from .transform import filter, map, peek, reject, reject_nulls

# Collection
from .collection import (
    append,
    append_many,
    concat,
    concat_many,
    count,
    each,
    flat_map,
    flatten,
    force,
    prepend,
    prepend_many,
    reduce,
    sort,
    sort_by,
    sort_with,
    to_list,
    zip,
    zip_many,
)

# Selection
from .selection import max, min

# Generators
from .generate import iterate, range

# Errors
from ._errors import ConstructionError, ProtocolViolation, SeqError

logging.getLogger(__name__).addHandler(logging.NullHandler())

__all__ = (
    # Core
    "Cursor",
    "CursorState",
    "Seq",
    # Types
    "Action",
    "Comparator",
    "IndexedMapper",
    "IndexedPredicate",
    "Predicate",
    "Producer",
    "ProducerFactory",
    "Reducer",
    "Selector",
    # Lift
    "lift",
    "empty",
    "from_any",
    "from_factory",
    "from_iterable",
    "from_result",
    "from_seq",
    "of",
    "optional",
    # Control
    "RepeatPolicy",
    "bracket",
    "cycle",
    "managed",
    "repeat",
    "skip",
    "skip_while",
    "take",
    "take_while",
    # Transform
    "filter",
    "map",
    "peek",
    "reject",
    "reject_nulls",
    # Collection
    "append",
    "append_many",
    "concat",
    "concat_many",
    "count",
    "each",
    "flat_map",
    "flatten",
    "force",
    "prepend",
    "prepend_many",
    "reduce",
    "sort",
    "sort_by",
    "sort_with",
    "to_list",
    "zip",
    "zip_many",
    # Selection
    "max",
    "min",
    # Generators
    "iterate",
    "range",
    # Errors
    "ConstructionError",
    "ProtocolViolation",
    "SeqError",
)
