"""
drills - small, independent building blocks.

- objects:   Rectangle value object and a typed JSON bridge
- selectors: CSS compound selector builder with ordering rules, plus combine()
- promises:  settle-later combinators (propose, collect_settled,
             race_first, fold_settled) over kungfu's LazyCoroResult

Architecture (promises):
- Generic combinators (*M functions) work with any monad via extract + wrap
- Sugar functions for LazyCoroResult (no suffix)
- Sugar functions for LazyCoroResultWriter (*_w suffix)
"""

# Core types
from ._types import LCR, Interp, NoError, Reducer, Renderable

# Lift helpers
from . import lift
from .lift import attempt, call, catching, rejected, resolved

# Writer monad
from . import writer
from .writer import LazyCoroResultWriter, Log, WriterResult, writer_error, writer_ok

# Objects
from .objects import Rectangle, decode, from_json, to_json

# Selectors
from .selectors import (
    Combinator,
    CombinedSelector,
    Segment,
    SelectorBuilder,
    SelectorState,
    combine,
    css,
)

# Promises
from .promises import (
    RacePolicy,
    # LazyCoroResult
    collect_settled,
    fold_settled,
    propose,
    race_first,
    # LazyCoroResultWriter
    collect_settled_w,
    fold_settled_w,
    race_first_w,
    # Generic
    collect_settledM,
    fold_settledM,
    race_firstM,
)

# Errors
from ._errors import (
    DecodeError,
    DuplicateSegmentError,
    NothingToFoldError,
    OutOfOrderError,
    SelectorError,
    WrongParameterError,
)

__all__ = (
    # Types
    "LCR",
    "Interp",
    "NoError",
    "Reducer",
    "Renderable",
    # Lift
    "lift",
    "attempt",
    "call",
    "catching",
    "rejected",
    "resolved",
    # Writer
    "writer",
    "LazyCoroResultWriter",
    "Log",
    "WriterResult",
    "writer_error",
    "writer_ok",
    # Objects
    "Rectangle",
    "decode",
    "from_json",
    "to_json",
    # Selectors
    "Combinator",
    "CombinedSelector",
    "Segment",
    "SelectorBuilder",
    "SelectorState",
    "combine",
    "css",
    # Promises - LazyCoroResult
    "RacePolicy",
    "collect_settled",
    "fold_settled",
    "propose",
    "race_first",
    # Promises - LazyCoroResultWriter
    "collect_settled_w",
    "fold_settled_w",
    "race_first_w",
    # Promises - Generic
    "collect_settledM",
    "fold_settledM",
    "race_firstM",
    # Errors
    "DecodeError",
    "DuplicateSegmentError",
    "NothingToFoldError",
    "OutOfOrderError",
    "SelectorError",
    "WrongParameterError",
)
