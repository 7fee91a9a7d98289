"""
JSON bridge
===========

to_json() writes the same compact text a browser's JSON.stringify does.
from_json() is its typed counterpart: instead of bolting behaviour onto
whatever the text happens to contain, it builds a known dataclass,
checking every value against the field's annotation and rebuilding
nested dataclasses on the way.
"""

from __future__ import annotations

import dataclasses
import json
import math
import types
import typing
from collections.abc import Mapping, Sequence

from .._errors import DecodeError
from .._types import Interp
from ..lift.up import catching

_SEPARATORS = (",", ":")


def _plain(value: typing.Any) -> typing.Any:
    # JSON has no NaN or Infinity; JSON.stringify writes them as null.
    if isinstance(value, float) and not math.isfinite(value):
        return None
    if dataclasses.is_dataclass(value) and not isinstance(value, type):
        return {f.name: _plain(getattr(value, f.name)) for f in dataclasses.fields(value)}
    if isinstance(value, dict):
        return {k: _plain(v) for k, v in value.items()}
    if isinstance(value, (list, tuple)):
        return [_plain(v) for v in value]
    return value


def to_json(value: typing.Any) -> str:
    """
    Serialize value to compact JSON text.

    Dataclass instances are written as their fields, in declaration order.
    Non-finite floats are written as null.

    Example:
        to_json([1, 2, 3])            # '[1,2,3]'
        to_json(Rectangle(10, 20))    # '{"width":10,"height":20}'
    """
    return json.dumps(_plain(value), separators=_SEPARATORS, allow_nan=False)


def _type_name(annotation: typing.Any) -> str:
    return getattr(annotation, "__name__", None) or repr(annotation)


def _mismatch(path: str, annotation: typing.Any, value: typing.Any) -> DecodeError:
    return DecodeError(f"{path}: expected {_type_name(annotation)}, got {type(value).__name__}")


def _convert(value: typing.Any, annotation: typing.Any, path: str) -> typing.Any:
    if annotation is typing.Any:
        return value
    if annotation is None or annotation is type(None):
        if value is not None:
            raise _mismatch(path, type(None), value)
        return None

    origin = typing.get_origin(annotation)
    args = typing.get_args(annotation)

    if origin is typing.Union or origin is types.UnionType:
        for option in args:
            try:
                return _convert(value, option, path)
            except DecodeError:
                continue
        raise DecodeError(f"{path}: {type(value).__name__} matches none of {annotation}")

    if origin is typing.Literal:
        if value not in args:
            raise DecodeError(f"{path}: {value!r} is not one of {args}")
        return value

    if origin in (list, Sequence) or annotation is list:
        if not isinstance(value, list):
            raise _mismatch(path, list, value)
        if not args:
            return value
        return [_convert(item, args[0], f"{path}[{n}]") for n, item in enumerate(value)]

    if origin is tuple or annotation is tuple:
        if not isinstance(value, list):
            raise _mismatch(path, tuple, value)
        if not args:
            return tuple(value)
        if len(args) == 2 and args[1] is Ellipsis:
            return tuple(_convert(item, args[0], f"{path}[{n}]") for n, item in enumerate(value))
        if len(args) != len(value):
            raise DecodeError(f"{path}: expected {len(args)} items, got {len(value)}")
        return tuple(_convert(item, arg, f"{path}[{n}]") for n, (item, arg) in enumerate(zip(value, args)))

    if origin in (dict, Mapping) or annotation is dict:
        if not isinstance(value, dict):
            raise _mismatch(path, dict, value)
        if not args:
            return value
        return {k: _convert(v, args[1], f"{path}.{k}") for k, v in value.items()}

    if dataclasses.is_dataclass(annotation) and isinstance(annotation, type):
        return _build(annotation, value, path)

    if annotation is bool:
        ok = isinstance(value, bool)
    elif annotation is int:
        ok = isinstance(value, int) and not isinstance(value, bool)
    elif annotation is float:
        ok = isinstance(value, (int, float)) and not isinstance(value, bool)
    elif isinstance(annotation, type):
        ok = isinstance(value, annotation)
    else:
        # NewType, TypeVar and friends: nothing sound to check against
        ok = True
    if not ok:
        raise _mismatch(path, annotation, value)
    return value


def _build[T](record_type: type[T], payload: typing.Any, path: str) -> T:
    if not isinstance(payload, dict):
        raise DecodeError(f"{path}: expected a JSON object, got {type(payload).__name__}")

    fields = [f for f in dataclasses.fields(record_type) if f.init]
    known = {f.name for f in fields}

    unknown = sorted(set(payload) - known)
    if unknown:
        raise DecodeError(f"{path}: unknown fields for {record_type.__name__}: {', '.join(unknown)}")

    missing = [
        f.name
        for f in fields
        if f.name not in payload
        and f.default is dataclasses.MISSING
        and f.default_factory is dataclasses.MISSING
    ]
    if missing:
        raise DecodeError(f"{path}: missing fields for {record_type.__name__}: {', '.join(missing)}")

    hints = typing.get_type_hints(record_type)
    kwargs = {
        f.name: _convert(payload[f.name], hints.get(f.name, typing.Any), f"{path}.{f.name}")
        for f in fields
        if f.name in payload
    }
    return record_type(**kwargs)


def from_json[T](record_type: type[T], raw: str | bytes) -> T:
    """
    Parse raw and build a record_type from it.

    record_type must be a dataclass. The payload has to be a JSON object
    carrying every required field and nothing else, each value matching
    its field annotation; nested dataclass fields are built the same way.
    Anything else raises DecodeError naming the offending path.

    Example:
        r = from_json(Rectangle, '{"width":10,"height":20}')
        r.area  # 200

        from_json(Rectangle, '{"width":"10","height":2}')
        # DecodeError: Rectangle.width: expected float, got str
    """
    if not (dataclasses.is_dataclass(record_type) and isinstance(record_type, type)):
        raise TypeError(f"{record_type!r} is not a dataclass type")

    try:
        payload = json.loads(raw)
    except json.JSONDecodeError as exc:
        raise DecodeError(f"invalid JSON ({exc.msg} at position {exc.pos})") from exc

    return _build(record_type, payload, record_type.__name__)


def decode[T](record_type: type[T], raw: str | bytes) -> Interp[T, DecodeError]:
    """from_json() as an Interp: DecodeError becomes a rejection, TypeError still raises."""
    return catching(lambda: from_json(record_type, raw), expected=DecodeError)


__all__ = ("decode", "from_json", "to_json")
