from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True, slots=True)
class Rectangle:
    """Width and height, plus the area derived from them.

    Example:
        r = Rectangle(10, 20)
        r.width   # 10
        r.area    # 200
    """

    width: float
    height: float

    @property
    def area(self) -> float:
        return self.width * self.height


__all__ = ("Rectangle",)
