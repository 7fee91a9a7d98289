"""
Log - append-only accumulator for the Writer monad
==================================================
"""

from __future__ import annotations


class Log[A](list[A]):
    """
    Ordered log entries.

    A list with two monoid operations: Log() is the empty log and
    combine() concatenates. Neither operation mutates its operands.
    """

    @staticmethod
    def of[T](*items: T) -> Log[T]:
        """Create log with items."""
        return Log[T](items)

    def combine(self, other: Log[A], /) -> Log[A]:
        """
        Concatenate two logs into a new one.

        Example:
            Log.of("a", "b").combine(Log.of("c"))  # Log(["a", "b", "c"])
        """
        result: Log[A] = Log(self)
        result.extend(other)
        return result


__all__ = ("Log",)
