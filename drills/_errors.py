from __future__ import annotations

import typing

if typing.TYPE_CHECKING:
    from .selectors.model import Segment


class SelectorError(Exception):
    """Base class for selector builder failures."""


class DuplicateSegmentError(SelectorError):
    """Element, id or pseudo-element written twice into the same selector."""

    segment: Segment

    def __init__(self, segment: Segment) -> None:
        self.segment = segment
        super().__init__(
            "Element, id and pseudo-element should not occur more then one time inside the selector"
        )


class OutOfOrderError(SelectorError):
    """Segment written after a segment of a higher rank."""

    attempted: Segment
    last_stage: int

    def __init__(self, attempted: Segment, last_stage: int) -> None:
        self.attempted = attempted
        self.last_stage = last_stage
        super().__init__(
            "Selector parts should be arranged in the following order: "
            "element, id, class, attribute, pseudo-class, pseudo-element"
        )


class DecodeError(ValueError):
    """JSON text does not describe the requested record."""

    reason: str

    def __init__(self, reason: str) -> None:
        self.reason = reason
        super().__init__(f"Cannot decode record: {reason}")


class WrongParameterError(Exception):
    """propose() got something other than a boolean."""

    def __init__(self) -> None:
        super().__init__("Wrong parameter is passed! Ask her again.")


class NothingToFoldError(Exception):
    """fold_settled had no fulfilled values and no initial accumulator."""

    total: int

    def __init__(self, total: int) -> None:
        self.total = total
        super().__init__(f"Nothing to fold: all {total} inputs were rejected")


__all__ = (
    "DecodeError",
    "DuplicateSegmentError",
    "NothingToFoldError",
    "OutOfOrderError",
    "SelectorError",
    "WrongParameterError",
)
