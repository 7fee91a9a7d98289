"""Internal helpers shared by the promise combinators.

Not part of the public API, but usable when plugging another monad
into the generic *M combinators."""

from __future__ import annotations

import typing
from collections.abc import Callable, Coroutine, Iterable

from kungfu import Result

from .writer import LazyCoroResultWriter, Log, WriterResult


def identity[T](x: T) -> T:
    return x


# Extract functions (Raw -> Result[T, E])
def extract_writer_result[T, E, W](wr: WriterResult[T, E, Log[W]]) -> Result[T, E]:
    """LazyCoroResultWriter settles into WriterResult; its Result is the .result part."""
    return wr.result


# Wrap functions (thunk -> M)
def wrap_lazy_coro_result_writer[T, E, W](
    fn: Callable[[], Coroutine[typing.Any, typing.Any, WriterResult[T, E, Log[W]]]]
) -> LazyCoroResultWriter[T, E, W]:
    return LazyCoroResultWriter(fn)


def merge_writer_logs[T, E, W](wrs: Iterable[WriterResult[T, E, Log[W]]]) -> Log[W]:
    """
    Concatenate the logs of several WriterResults in iteration order.

    Rejected results contribute their logs too.
    """
    merged = Log[W]()
    for wr in wrs:
        merged = merged.combine(wr.log)
    return merged


__all__ = (
    "identity",
    "extract_writer_result",
    "wrap_lazy_coro_result_writer",
    "merge_writer_logs",
)
