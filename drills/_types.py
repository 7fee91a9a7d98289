"""
Core type definitions for drills.

Aliases and protocols shared across the subpackages.
"""

from __future__ import annotations

import typing
from collections.abc import Callable

from kungfu import LazyCoroResult

# ============================================================================
# Type aliases
# ============================================================================

# Reducer = binary step of a left fold
type Reducer[T] = Callable[[T, T], T]

# NoError = "never fails" (bottom type, no value can be constructed)
type NoError = typing.Never

# ============================================================================
# Concrete type shortcuts
# ============================================================================

# LCR = LazyCoroResult shortcut
type LCR[T, E] = LazyCoroResult[T, E]

# Interp = the settle-later value every async combinator consumes and returns
type Interp[T, E] = LazyCoroResult[T, E]

# ============================================================================
# Protocols
# ============================================================================


@typing.runtime_checkable
class Renderable(typing.Protocol):
    """Anything that can produce its final selector text."""

    def render(self) -> str: ...


__all__ = (
    # Type aliases
    "Reducer",
    "NoError",
    # Concrete shortcuts
    "LCR",
    "Interp",
    # Protocols
    "Renderable",
)
