"""Complex selectors: two renderable selectors joined by a combinator."""

from __future__ import annotations

from dataclasses import dataclass

from .._types import Renderable
from .model import Combinator


@dataclass(frozen=True, slots=True)
class CombinedSelector:
    """left <combinator> right, rendered on demand.

    Either side may itself be a CombinedSelector; nesting follows the
    argument structure exactly and has no depth limit.
    """

    left: Renderable
    combinator: Combinator | str
    right: Renderable

    def __post_init__(self) -> None:
        for side, node in (("left", self.left), ("right", self.right)):
            if isinstance(node, str) or not isinstance(node, Renderable):
                raise TypeError(f"CombinedSelector.{side} must be a selector, got {type(node).__name__}")

    def render(self) -> str:
        # Walk iteratively so deep right- or left-nested chains do not hit
        # the recursion limit. Stack holds nodes and literal separators.
        parts: list[str] = []
        stack: list[Renderable | str] = [self]
        while stack:
            node = stack.pop()
            if isinstance(node, str):
                parts.append(node)
            elif isinstance(node, CombinedSelector):
                stack.append(node.right)
                stack.append(f" {node.combinator} ")
                stack.append(node.left)
            else:
                parts.append(node.render())
        return "".join(parts)

    def __str__(self) -> str:
        return self.render()


def combine(left: Renderable, combinator: Combinator | str, right: Renderable) -> CombinedSelector:
    """
    Join two selectors with a combinator token.

    Example:
        combine(css.element("ul"), Combinator.CHILD, css.element("li")).render()
        # 'ul > li'
    """
    return CombinedSelector(left, combinator, right)


__all__ = ("CombinedSelector", "combine")
