from .bracket import bracket, managed
from .limit import skip, skip_while, take, take_while
from .repeat import RepeatPolicy, cycle, repeat

__all__ = (
    # Policies
    "RepeatPolicy",
    # Bracket
    "bracket",
    "managed",
    # Limit
    "skip",
    "skip_while",
    "take",
    "take_while",
    # Repeat
    "cycle",
    "repeat",
)
