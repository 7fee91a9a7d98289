"""
Bridges from plain Python into Interp.

    from drills import lift as L

    L.up.*    - plain values and exceptions into Interp
    L.call()  - defer a Result-returning async call

Examples:
    ok = L.up.resolved(42)
    no = L.up.rejected(ValueError("nope"))
    fut = L.up.attempt(lambda: loop.run_in_executor(None, work))
    size = L.call(mirror.fetch_size, "/pkg/a")
"""

from __future__ import annotations

from . import up as up_ns

from .call import call
from .up import attempt, catching, rejected, resolved

up = up_ns

__all__ = (
    # Namespaces
    "up",
    # Up
    "resolved",
    "rejected",
    "catching",
    "attempt",
    # Call
    "call",
)
