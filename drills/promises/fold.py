"""
Fold combinators
================

Left fold over the inputs that fulfilled, skipping the ones that rejected.
"""

from __future__ import annotations

import asyncio
import typing
from collections.abc import Callable, Coroutine, Sequence

from kungfu import Error, LazyCoroResult, Ok, Result

from .._errors import NothingToFoldError
from .._helpers import extract_writer_result, identity, merge_writer_logs, wrap_lazy_coro_result_writer
from .._types import Reducer
from ..writer import LazyCoroResultWriter, Log, WriterResult


class _Missing:
    __slots__ = ()

    def __repr__(self) -> str:
        return "<missing>"


MISSING: typing.Final = _Missing()


# ============================================================================
# Generic combinator (extract + wrap pattern)
# ============================================================================


def fold_settledM[M, T, E, RawIn, RawOut](
    interps: Sequence[Callable[[], Coroutine[typing.Any, typing.Any, RawIn]]],
    reducer: Reducer[T],
    *,
    initial: T | _Missing = MISSING,
    extract: Callable[[RawIn], Result[T, E]],
    combine_ok: Callable[[T, list[RawIn]], RawOut],
    combine_err: Callable[[NothingToFoldError, list[RawIn]], RawOut],
    wrap: Callable[[Callable[[], Coroutine[typing.Any, typing.Any, RawOut]]], M],
) -> M:
    """
    Generic fold-settled combinator.

    Every input settles before the fold starts, so which values survive
    never depends on timing.
    """

    async def run() -> RawOut:
        raws: list[RawIn] = await asyncio.gather(*(i() for i in interps))

        acc: T | _Missing = initial
        for raw in raws:
            match extract(raw):
                case Ok(value):
                    acc = value if isinstance(acc, _Missing) else reducer(acc, value)
                case Error(_):
                    continue

        if isinstance(acc, _Missing):
            return combine_err(NothingToFoldError(total=len(raws)), raws)
        return combine_ok(acc, raws)

    return wrap(run)


# ============================================================================
# Sugar for LazyCoroResult
# ============================================================================


def fold_settled[T, E](
    interps: Sequence[LazyCoroResult[T, E]],
    reducer: Reducer[T],
    *,
    initial: T | _Missing = MISSING,
) -> LazyCoroResult[T, NothingToFoldError]:
    """
    reducer folded left to right over the fulfilled values.

    Without initial, the first fulfilled value seeds the fold and an
    all-rejected input settles as Error(NothingToFoldError).

    Example:
        await fold_settled([resolved(1), rejected("x"), resolved(3)], operator.add)
        # Ok(4)
    """

    def combine_ok(acc: T, raws: list[Result[T, E]]) -> Result[T, NothingToFoldError]:
        _ = raws
        return Ok(acc)

    def combine_err(e: NothingToFoldError, raws: list[Result[T, E]]) -> Result[T, NothingToFoldError]:
        _ = raws
        return Error(e)

    return fold_settledM(
        interps,
        reducer,
        initial=initial,
        extract=identity,
        combine_ok=combine_ok,
        combine_err=combine_err,
        wrap=LazyCoroResult,
    )


# ============================================================================
# Sugar for LazyCoroResultWriter
# ============================================================================


def fold_settled_w[T, E, W](
    interps: Sequence[LazyCoroResultWriter[T, E, W]],
    reducer: Reducer[T],
    *,
    initial: T | _Missing = MISSING,
) -> LazyCoroResultWriter[T, NothingToFoldError, W]:
    """Fold over fulfilled values; logs of all inputs merged in input order."""

    def combine_ok(
        acc: T,
        raws: list[WriterResult[T, E, Log[W]]],
    ) -> WriterResult[T, NothingToFoldError, Log[W]]:
        return WriterResult(Ok(acc), merge_writer_logs(raws))

    def combine_err(
        e: NothingToFoldError,
        raws: list[WriterResult[T, E, Log[W]]],
    ) -> WriterResult[T, NothingToFoldError, Log[W]]:
        return WriterResult(Error(e), merge_writer_logs(raws))

    return fold_settledM(
        interps,
        reducer,
        initial=initial,
        extract=extract_writer_result,
        combine_ok=combine_ok,
        combine_err=combine_err,
        wrap=wrap_lazy_coro_result_writer,
    )


__all__ = ("MISSING", "fold_settled", "fold_settled_w", "fold_settledM")
