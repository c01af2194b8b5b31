from __future__ import annotations

import typing


class SeqError(Exception):
    """Base class for errors raised by the sequence engine itself."""


class ConstructionError(SeqError, ValueError):
    """Invalid arguments given to a constructor, generator or operator."""


class ProtocolViolation(SeqError, TypeError):
    """Producer factory returned something that is not an iterator."""

    produced: typing.Any

    def __init__(self, produced: typing.Any) -> None:
        self.produced = produced
        super().__init__(
            f"Producer factory must return an iterator, got {type(produced).__name__}"
        )


__all__ = ("ConstructionError", "ProtocolViolation", "SeqError")
