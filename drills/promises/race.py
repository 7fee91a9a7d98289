"""
Race combinators
================

Settle with whichever input settles first, fulfilled or rejected.
"""

from __future__ import annotations

import asyncio
import typing
from collections.abc import Callable, Coroutine, Sequence
from dataclasses import dataclass

from kungfu import LazyCoroResult, Result

from .._helpers import wrap_lazy_coro_result_writer
from ..writer import LazyCoroResultWriter, Log, WriterResult


@dataclass(frozen=True, slots=True)
class RacePolicy:
    """Configuration for race_first: whether losers are cancelled."""

    cancel_pending: bool = True

    def __post_init__(self) -> None:
        if not isinstance(self.cancel_pending, bool):
            raise ValueError("RacePolicy.cancel_pending must be a bool")


# Losers left running by RacePolicy(cancel_pending=False); asyncio only keeps
# weak references to tasks.
_detached: set[asyncio.Task[typing.Any]] = set()


def _consume(task: asyncio.Task[typing.Any]) -> None:
    if not task.cancelled():
        task.exception()


def _release(task: asyncio.Task[typing.Any]) -> None:
    _detached.discard(task)
    _consume(task)


# ============================================================================
# Generic combinator (extract + wrap pattern)
# ============================================================================


def race_firstM[M, Raw, RawOut](
    interps: Sequence[Callable[[], Coroutine[typing.Any, typing.Any, Raw]]],
    *,
    single: Callable[[Raw], RawOut],
    wrap: Callable[[Callable[[], Coroutine[typing.Any, typing.Any, RawOut]]], M],
    policy: RacePolicy = RacePolicy(),
) -> M:
    """
    Generic race combinator.

    The first raw outcome to complete is passed through single().
    """

    async def run() -> RawOut:
        if not interps:
            raise ValueError("race_firstM() requires at least one interpretation")

        tasks = [asyncio.create_task(i()) for i in interps]
        try:
            done, pending = await asyncio.wait(tasks, return_when=asyncio.FIRST_COMPLETED)
            # Several may finish in the same loop turn; input order breaks the tie.
            first = next(t for t in tasks if t in done)
            raw = first.result()
        except BaseException:
            # Outer cancellation or a crashed winner: nobody will read the rest.
            for t in tasks:
                if not t.done():
                    t.cancel()
                else:
                    _consume(t)
            raise

        for t in done:
            if t is not first:
                _consume(t)
        for t in pending:
            if policy.cancel_pending:
                t.cancel()
            else:
                _detached.add(t)
                t.add_done_callback(_release)
        return single(raw)

    return wrap(run)


# ============================================================================
# Sugar for LazyCoroResult
# ============================================================================


def race_first[T, E](
    interps: Sequence[LazyCoroResult[T, E]],
    *,
    policy: RacePolicy = RacePolicy(),
) -> LazyCoroResult[list[T], E]:
    """
    [value] of the first input to settle, or its rejection.

    Example:
        await race_first([resolved("first"), slow("second")])
        # Ok(['first'])
    """

    def single(r: Result[T, E]) -> Result[list[T], E]:
        return r.map(lambda value: [value])

    return race_firstM(interps, single=single, wrap=LazyCoroResult, policy=policy)


# ============================================================================
# Sugar for LazyCoroResultWriter
# ============================================================================


def race_first_w[T, E, W](
    interps: Sequence[LazyCoroResultWriter[T, E, W]],
    *,
    policy: RacePolicy = RacePolicy(),
) -> LazyCoroResultWriter[list[T], E, W]:
    """
    [value] of the first input to settle, or its rejection.

    NOTE: only the winner's log is preserved.
    """

    def single(wr: WriterResult[T, E, Log[W]]) -> WriterResult[list[T], E, Log[W]]:
        return WriterResult(wr.result.map(lambda value: [value]), wr.log)

    return race_firstM(interps, single=single, wrap=wrap_lazy_coro_result_writer, policy=policy)


__all__ = ("RacePolicy", "race_first", "race_first_w", "race_firstM")
