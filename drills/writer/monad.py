"""LazyCoroResultWriter

A lazy, awaitable computation that settles into Result[T, E] and
carries a Log[W] written along the way."""

from __future__ import annotations

import typing
from collections.abc import Callable, Coroutine

from kungfu import Error, LazyCoroResult, Ok

from .log import Log
from .result import WriterResult


class LazyCoroResultWriter[T, E, W]:
    """Lazy coroutine producing WriterResult[T, E, Log[W]].

    Calling the instance starts a fresh run; awaiting it is the same as
    awaiting the call. Rejected runs keep their log.
    """

    __slots__ = ("_value",)

    def __init__(
        self,
        value: Callable[[], Coroutine[typing.Any, typing.Any, WriterResult[T, E, Log[W]]]],
        /,
    ) -> None:
        self._value = value

    @staticmethod
    def from_lazy_coro_result[V, Err, LogT](
        lazy: LazyCoroResult[V, Err],
        log_type: type[LogT],
    ) -> LazyCoroResultWriter[V, Err, LogT]:
        """Lift a plain Interp, starting with an empty log."""
        _ = log_type  # Used only for type inference

        async def wrapper() -> WriterResult[V, Err, Log[LogT]]:
            result = await lazy
            return WriterResult(result, Log[LogT]())

        return LazyCoroResultWriter(wrapper)

    def with_log(self, *entries: W) -> LazyCoroResultWriter[T, E, W]:
        """Append entries after the computation's own log."""

        async def wrapper() -> WriterResult[T, E, Log[W]]:
            wr = await self()
            return WriterResult(wr.result, wr.log.combine(Log.of(*entries)))

        return LazyCoroResultWriter(wrapper)

    def __call__(self) -> Coroutine[typing.Any, typing.Any, WriterResult[T, E, Log[W]]]:
        return self._value()

    def __await__(self) -> typing.Generator[typing.Any, None, WriterResult[T, E, Log[W]]]:
        return self().__await__()


def writer_ok[T, W](
    value: T,
    *log_entries: W,
) -> LazyCoroResultWriter[T, typing.Never, W]:
    """Fulfilled writer with optional log entries."""

    async def wrapper() -> WriterResult[T, typing.Never, Log[W]]:
        return WriterResult(Ok(value), Log.of(*log_entries))

    return LazyCoroResultWriter(wrapper)


def writer_error[E, W](
    error: E,
    *log_entries: W,
) -> LazyCoroResultWriter[typing.Never, E, W]:
    """Rejected writer with optional log entries."""

    async def wrapper() -> WriterResult[typing.Never, E, Log[W]]:
        return WriterResult(Error(error), Log.of(*log_entries))

    return LazyCoroResultWriter(wrapper)


__all__ = (
    "LazyCoroResultWriter",
    "writer_ok",
    "writer_error",
)
