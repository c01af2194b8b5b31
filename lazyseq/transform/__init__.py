from .effects import peek
from .filter import filter, reject, reject_nulls
from .map import map

__all__ = (
    # Filter
    "filter",
    "reject",
    "reject_nulls",
    # Map
    "map",
    # Effects
    "peek",
)
