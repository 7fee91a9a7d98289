"""
css - entry point for building selectors.

Each method starts a fresh SelectorBuilder with one segment written:

    from drills.selectors import css

    css.id("main").add_class("container").add_class("editable").render()
    # '#main.container.editable'

    css.element("a").add_attribute('href$=".png"').add_pseudo_class("focus").render()
    # 'a[href$=".png"]:focus'

    css.combine(
        css.element("div").set_id("main"),
        "+",
        css.combine(css.element("table"), "~", css.element("tr")),
    ).render()
    # 'div#main + table ~ tr'
"""

from __future__ import annotations

from .._types import Renderable
from .builder import SelectorBuilder
from .combined import CombinedSelector, combine
from .model import Combinator


class SelectorFactory:
    """Stateless namespace; every call returns a new, independent builder."""

    __slots__ = ()

    def element(self, tag: str) -> SelectorBuilder:
        return SelectorBuilder().set_element(tag)

    def id(self, name: str) -> SelectorBuilder:
        return SelectorBuilder().set_id(name)

    def class_(self, name: str) -> SelectorBuilder:
        return SelectorBuilder().add_class(name)

    def attr(self, expr: str) -> SelectorBuilder:
        return SelectorBuilder().add_attribute(expr)

    def pseudo_class(self, name: str) -> SelectorBuilder:
        return SelectorBuilder().add_pseudo_class(name)

    def pseudo_element(self, name: str) -> SelectorBuilder:
        return SelectorBuilder().set_pseudo_element(name)

    def combine(
        self,
        left: Renderable,
        combinator: Combinator | str,
        right: Renderable,
    ) -> CombinedSelector:
        return combine(left, combinator, right)


css = SelectorFactory()

__all__ = ("SelectorFactory", "css")
