from .cursor import Cursor, CursorState
from .seq import Seq

__all__ = (
    "Cursor",
    "CursorState",
    "Seq",
)
