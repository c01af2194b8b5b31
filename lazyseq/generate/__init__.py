from .iterate import iterate
from .range import range

__all__ = ("iterate", "range")
