"""
Lifting into Interp.

Plain values and exception-raising code turned into lazy settle-later
values the combinators can consume.
"""

from __future__ import annotations

from collections.abc import Awaitable, Callable
from typing import Never

from kungfu import Error, LazyCoroResult, Ok, Result

from .._helpers import identity
from .._types import Interp


def resolved[T](value: T) -> Interp[T, Never]:
    """Interp that always fulfils with value."""
    return LazyCoroResult.pure(value)


def rejected[E](error: E) -> Interp[Never, E]:
    """Interp that always rejects with error. Dual of resolved()."""
    return Error(error).to_async()


def catching[T, E: Exception](
    thunk: Callable[[], T],
    *,
    expected: type[E],
) -> Interp[T, E]:
    """
    Run sync thunk when awaited; an expected exception becomes a rejection.

    Only instances of expected are turned into Error. Anything else is a
    bug in thunk and propagates to whoever awaits.

    Example:
        parsed = catching(lambda: from_json(Rectangle, raw), expected=DecodeError)
        await parsed  # Ok(Rectangle(...)) | Error(DecodeError(...))
    """
    async def run() -> Result[T, E]:
        try:
            value = thunk()
        except expected as exc:
            return Error(exc)
        return Ok(value)

    return LazyCoroResult(run)


def attempt[T, E](
    thunk: Callable[[], Awaitable[T]],
    *,
    on_error: Callable[[Exception], E] = identity,
) -> Interp[T, E]:
    """
    Await thunk() when run; a raised exception becomes a rejection.

    This is the bridge from native awaitables (coroutines, asyncio
    futures and tasks) whose failure is an exception rather than an
    Error value. By default the exception itself is the error.

    Example:
        from drills import lift as L
        from drills import collect_settled

        interps = [L.up.attempt(lambda u=u: fetch(u)) for u in urls]
        pages = await collect_settled(interps)

    NOTE: thunk must be zero-arg. A bare coroutine object can only be
          awaited once, so each run needs a fresh one.
    """
    async def run() -> Result[T, E]:
        try:
            return Ok(await thunk())
        except Exception as exc:
            return Error(on_error(exc))

    return LazyCoroResult(run)


__all__ = (
    "resolved",
    "rejected",
    "catching",
    "attempt",
)
