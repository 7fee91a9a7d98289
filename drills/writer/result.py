"""
WriterResult - settled Result plus its log
==========================================
"""

from __future__ import annotations

from dataclasses import dataclass

from kungfu import Result


@dataclass(frozen=True, slots=True)
class WriterResult[T, E, W]:
    """
    What a LazyCoroResultWriter produces once awaited.

    result is Ok(value) for a fulfilled computation and Error(err) for a
    rejected one; log is whatever was written along the way.
    """

    result: Result[T, E]
    log: W


__all__ = ("WriterResult",)
