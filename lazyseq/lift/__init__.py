"""
Lift helpers with semantic namespaces.

    from lazyseq import lift as L

Architecture:
- L.up.*    - values into Seq (containers, factories, Result, optionals)
- L.down.*  - Seq into kungfu Result

Examples:
    from lazyseq import lift as L

    rows = L.up.from_factory(fetch_rows, cursor)
    maybe = L.up.optional(cache.get(key))

    result = L.down.to_result(rows, on_error=str)
    head = L.down.first(rows, error=lambda: "no rows")
"""

from __future__ import annotations

from . import down as down_ns
from . import up as up_ns

from .down import first, to_result
from .up import (
    empty,
    from_any,
    from_factory,
    from_iterable,
    from_result,
    from_seq,
    of,
    optional,
)

# L.up.* / L.down.*
up = up_ns
down = down_ns

__all__ = (
    # Namespaces
    "up",
    "down",
    # Up
    "empty",
    "from_any",
    "from_factory",
    "from_iterable",
    "from_result",
    "from_seq",
    "of",
    "optional",
    # Down
    "first",
    "to_result",
)
