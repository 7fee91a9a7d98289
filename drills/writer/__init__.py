"""
Writer Monad
============

LazyCoroResultWriter pairs every settled value with a Log:
- Lazy (nothing runs until awaited)
- Coro (asynchronous)
- Result[T, E] (fulfilled or rejected)
- Writer[Log[W]] (entries accumulated alongside)

The *_w combinators in drills.promises carry these logs through.
"""

from .log import Log
from .result import WriterResult
from .monad import LazyCoroResultWriter, writer_ok, writer_error

__all__ = (
    "Log",
    "WriterResult",
    "LazyCoroResultWriter",
    "writer_ok",
    "writer_error",
)
