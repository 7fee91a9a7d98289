"""
Compound selector builder
=========================

Accumulates the segments of one compound selector

    element#id.class[attr]:pseudoClass::pseudoElement

and refuses writes that would break CSS ordering. Every write returns
the builder so calls chain; render() produces the text.
"""

from __future__ import annotations

from .._errors import DuplicateSegmentError, OutOfOrderError
from .model import Segment, SelectorState


class SelectorBuilder:
    """Mutable compound selector.

    Invariants:
    - a write of rank R fails once any segment of a higher rank exists
    - element, id and pseudo-element are written at most once each
    - a failed write leaves the state untouched

    Example:
        SelectorBuilder().set_id("main").add_class("container").render()
        # '#main.container'
    """

    __slots__ = ("_state",)

    def __init__(self) -> None:
        self._state = SelectorState()

    @property
    def state(self) -> SelectorState:
        return self._state

    def _admit(self, segment: Segment, occupied: bool = False) -> None:
        if occupied:
            raise DuplicateSegmentError(segment)
        if self._state.last_stage > segment:
            raise OutOfOrderError(segment, self._state.last_stage)

    def set_element(self, tag: str) -> SelectorBuilder:
        self._admit(Segment.ELEMENT, occupied=self._state.element is not None)
        self._state.element = tag
        self._state.last_stage = Segment.ELEMENT
        return self

    def set_id(self, name: str) -> SelectorBuilder:
        self._admit(Segment.ID, occupied=self._state.id is not None)
        self._state.id = name
        self._state.last_stage = Segment.ID
        return self

    def add_class(self, name: str) -> SelectorBuilder:
        self._admit(Segment.CLASS)
        self._state.classes.append(name)
        self._state.last_stage = Segment.CLASS
        return self

    def add_attribute(self, expr: str) -> SelectorBuilder:
        self._admit(Segment.ATTRIBUTE)
        self._state.attributes.append(expr)
        self._state.last_stage = Segment.ATTRIBUTE
        return self

    def add_pseudo_class(self, name: str) -> SelectorBuilder:
        self._admit(Segment.PSEUDO_CLASS)
        self._state.pseudo_classes.append(name)
        self._state.last_stage = Segment.PSEUDO_CLASS
        return self

    def set_pseudo_element(self, name: str) -> SelectorBuilder:
        self._admit(Segment.PSEUDO_ELEMENT, occupied=self._state.pseudo_element is not None)
        self._state.pseudo_element = name
        self._state.last_stage = Segment.PSEUDO_ELEMENT
        return self

    def render(self) -> str:
        s = self._state
        parts: list[str] = []
        if s.element is not None:
            parts.append(s.element)
        if s.id is not None:
            parts.append(f"#{s.id}")
        parts.extend(f".{name}" for name in s.classes)
        parts.extend(f"[{expr}]" for expr in s.attributes)
        parts.extend(f":{name}" for name in s.pseudo_classes)
        if s.pseudo_element is not None:
            parts.append(f"::{s.pseudo_element}")
        return "".join(parts)

    def __str__(self) -> str:
        return self.render()

    def __repr__(self) -> str:
        return f"SelectorBuilder({self.render()!r})"


__all__ = ("SelectorBuilder",)
