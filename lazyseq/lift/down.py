"""
Lowering Seq into a kungfu Result.

Terminal consumers that report traversal failures as values instead of
exceptions. Cleanup has already happened when the Result is returned.
"""

from __future__ import annotations

from collections.abc import Callable

from kungfu import Error, Ok, Result

from ..core.seq import Seq


def to_result[T, E](
    seq: Seq[T],
    *,
    on_error: Callable[[Exception], E],
) -> Result[list[T], E]:
    """
    Traverse to completion, return Ok(items) or Error(on_error(exc)).

    **When to use:** at a collaborator boundary (export job, request handler)
    where a failed traversal should become a value.

    Example:
        from lazyseq import lift as L

        result = L.down.to_result(rows, on_error=lambda e: ExportFailed(str(e)))
        match result:
            case Ok(items): ...
            case Error(err): ...

    NOTE: Only Exception subclasses are converted. KeyboardInterrupt and
          friends propagate.
    """
    try:
        items = seq.to_list()
    except Exception as exc:
        return Error(on_error(exc))
    return Ok(items)


def first[T, E](seq: Seq[T], *, error: Callable[[], E]) -> Result[T, E]:
    """
    Ok(first item), or Error(error()) if the sequence is empty.

    Pulls a single item and closes the traversal right after.
    Exceptions from the producer propagate.
    """
    with seq.cursor() as cursor:
        if cursor.has_next():
            return Ok(next(cursor))
    return Error(error())


__all__ = ("first", "to_result")
