"""Selector model: segment ranks and the mutable state a builder fills in."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import IntEnum, StrEnum


class Segment(IntEnum):
    """Selector segment categories, valued by the rank they must appear in.

        element#id.class[attr]:pseudo-class::pseudo-element
        1      2  3     4     5             6
    """

    ELEMENT = 1
    ID = 2
    CLASS = 3
    ATTRIBUTE = 4
    PSEUDO_CLASS = 5
    PSEUDO_ELEMENT = 6


class Combinator(StrEnum):
    """CSS combinator tokens accepted by combine()."""

    DESCENDANT = " "
    CHILD = ">"
    NEXT_SIBLING = "+"
    SUBSEQUENT_SIBLING = "~"


@dataclass(slots=True)
class SelectorState:
    """Raw segment values of one compound selector.

    Values are stored without their CSS prefixes; rendering adds them.
    last_stage is the rank of the most recent successful write, 0 while
    nothing has been written.
    """

    element: str | None = None
    id: str | None = None
    classes: list[str] = field(default_factory=list)
    attributes: list[str] = field(default_factory=list)
    pseudo_classes: list[str] = field(default_factory=list)
    pseudo_element: str | None = None
    last_stage: int = 0


__all__ = ("Combinator", "Segment", "SelectorState")
