"""Value objects and the JSON bridge."""

from .codec import decode, from_json, to_json
from .rectangle import Rectangle

__all__ = ("Rectangle", "decode", "from_json", "to_json")
