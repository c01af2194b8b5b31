from .best import max, min

__all__ = ("max", "min")
