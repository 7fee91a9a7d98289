"""CSS selector builder."""

from .builder import SelectorBuilder
from .combined import CombinedSelector, combine
from .facade import SelectorFactory, css
from .model import Combinator, Segment, SelectorState

__all__ = (
    "Combinator",
    "CombinedSelector",
    "Segment",
    "SelectorBuilder",
    "SelectorFactory",
    "SelectorState",
    "combine",
    "css",
)
