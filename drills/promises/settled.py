"""
Collect-settled combinators
===========================

Wait for every input, keep what fulfilled, drop what rejected.
"""

from __future__ import annotations

import asyncio
import typing
from collections.abc import Callable, Coroutine, Sequence

from kungfu import Error, LazyCoroResult, Ok, Result

from .._helpers import extract_writer_result, identity, merge_writer_logs, wrap_lazy_coro_result_writer
from .._types import NoError
from ..writer import LazyCoroResultWriter, Log, WriterResult


# ============================================================================
# Generic combinator (extract + wrap pattern)
# ============================================================================


def collect_settledM[M, T, E, RawIn, RawOut](
    interps: Sequence[Callable[[], Coroutine[typing.Any, typing.Any, RawIn]]],
    *,
    extract: Callable[[RawIn], Result[T, E]],
    combine: Callable[[list[T], list[RawIn]], RawOut],
    wrap: Callable[[Callable[[], Coroutine[typing.Any, typing.Any, RawOut]]], M],
) -> M:
    """
    Generic collect-settled combinator.

    Runs all concurrently, waits for every one, passes the fulfilled
    values (input order) and all raw outcomes to combine.
    """

    async def run() -> RawOut:
        raws: list[RawIn] = await asyncio.gather(*(i() for i in interps))

        values: list[T] = []
        for raw in raws:
            match extract(raw):
                case Ok(value):
                    values.append(value)
                case Error(_):
                    pass

        return combine(values, raws)

    return wrap(run)


# ============================================================================
# Sugar for LazyCoroResult
# ============================================================================


def collect_settled[T, E](
    interps: Sequence[LazyCoroResult[T, E]],
) -> LazyCoroResult[list[T], NoError]:
    """
    Fulfilled values of all inputs, in input order. Never fails.

    Example:
        await collect_settled([resolved(1), rejected("x"), resolved(3)])
        # Ok([1, 3])
    """

    def combine(values: list[T], raws: list[Result[T, E]]) -> Result[list[T], NoError]:
        _ = raws
        return Ok(values)

    return collect_settledM(
        interps,
        extract=identity,
        combine=combine,
        wrap=LazyCoroResult,
    )


# ============================================================================
# Sugar for LazyCoroResultWriter
# ============================================================================


def collect_settled_w[T, E, W](
    interps: Sequence[LazyCoroResultWriter[T, E, W]],
) -> LazyCoroResultWriter[list[T], NoError, W]:
    """
    Fulfilled values of all inputs, in input order.

    NOTE: logs of every input are merged in input order, rejected ones
          included, so dropped values still leave a trace.
    """

    def combine(
        values: list[T],
        raws: list[WriterResult[T, E, Log[W]]],
    ) -> WriterResult[list[T], NoError, Log[W]]:
        return WriterResult(Ok(values), merge_writer_logs(raws))

    return collect_settledM(
        interps,
        extract=extract_writer_result,
        combine=combine,
        wrap=wrap_lazy_coro_result_writer,
    )


__all__ = ("collect_settled", "collect_settled_w", "collect_settledM")
