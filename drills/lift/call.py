"""
Calling Result-returning async functions as Interp.
"""

from __future__ import annotations

from collections.abc import Awaitable, Callable

from kungfu import LazyCoroResult, Result

from .._types import Interp


def call[T, E, **P](
    func: Callable[P, Awaitable[Result[T, E]]],
    *args: P.args,
    **kwargs: P.kwargs,
) -> Interp[T, E]:
    """
    Defer func(*args, **kwargs) into an Interp.

    func runs each time the Interp is awaited, never at call() time.

    Example:
        from drills import lift as L

        async def fetch_size(path: str) -> Result[int, Unavailable]: ...

        sizes = [L.call(mirror.fetch_size, path) for mirror in mirrors]
        await collect_settled(sizes)
    """
    async def run() -> Result[T, E]:
        return await func(*args, **kwargs)

    return LazyCoroResult(run)


__all__ = ("call",)
