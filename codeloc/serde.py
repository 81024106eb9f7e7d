"""Serialization of positions, ranges and locations.

Values are converted to the plain LSP shape first::

    {"uri": "file:///src/main.py",
     "range": {"start": {"line": 1, "character": 0},
               "end": {"line": 2, "character": 4}}}

and then encoded as JSON (orjson) or MessagePack (msgspec). The shape is
described by msgspec structs, so decoding checks field names and types
before the validating constructors run. A payload can never produce a range
that starts after it ends or a location outside the ``file`` scheme.
"""

from __future__ import annotations

from typing import Any, Callable, TypeVar, Union

import msgspec
import orjson

from .errors import DecodeError
from .logging import get_logger
from .lsp.location import Location
from .lsp.position import Position
from .lsp.range import Range

LOGGER = get_logger(__name__)

Value = Union[Position, Range, Location]
T = TypeVar("T", Position, Range, Location)


class PositionData(msgspec.Struct):
    line: int
    character: int


class RangeData(msgspec.Struct):
    start: PositionData
    end: PositionData


class LocationData(msgspec.Struct):
    uri: str
    range: RangeData


_WIRE_TYPES: dict[type, type[msgspec.Struct]] = {
    Position: PositionData,
    Range: RangeData,
    Location: LocationData,
}

_MSGPACK_ENCODER = msgspec.msgpack.Encoder()
_MSGPACK_DECODERS = {value_type: msgspec.msgpack.Decoder(type=wire) for value_type, wire in _WIRE_TYPES.items()}


def _position_wire(position: Position) -> PositionData:
    return PositionData(line=position.line, character=position.character)


def _range_wire(range_: Range) -> RangeData:
    return RangeData(start=_position_wire(range_.start), end=_position_wire(range_.end))


def _location_wire(location: Location) -> LocationData:
    return LocationData(uri=location.uri.text, range=_range_wire(location.range))


def _position_from_wire(wire: PositionData) -> Position:
    return Position(wire.line, wire.character)


def _range_from_wire(wire: RangeData) -> Range:
    return Range.validated(_position_from_wire(wire.start), _position_from_wire(wire.end))


def _location_from_wire(wire: LocationData) -> Location:
    return Location.validated(wire.uri, _range_from_wire(wire.range))


_TO_WIRE: dict[type, Callable[[Any], msgspec.Struct]] = {
    Position: _position_wire,
    Range: _range_wire,
    Location: _location_wire,
}

_FROM_WIRE: dict[type, Callable[[Any], Any]] = {
    Position: _position_from_wire,
    Range: _range_from_wire,
    Location: _location_from_wire,
}


def _to_wire(value: Value) -> msgspec.Struct:
    converter = _TO_WIRE.get(type(value))
    if converter is None:
        raise TypeError(f"Cannot serialize {type(value).__name__}")
    return converter(value)


def _wire_type(target: type) -> type[msgspec.Struct]:
    wire = _WIRE_TYPES.get(target)
    if wire is None:
        raise TypeError(f"Cannot deserialize into {target.__name__}")
    return wire


def to_data(value: Value) -> dict[str, Any]:
    """Return the plain LSP representation of a value."""
    return msgspec.to_builtins(_to_wire(value))


def from_data(data: object, target: type[T]) -> T:
    """Rebuild a validated ``target`` from its plain representation."""
    try:
        wire = msgspec.convert(data, type=_wire_type(target))
    except msgspec.ValidationError as error:
        raise DecodeError(str(error)) from error
    return _FROM_WIRE[target](wire)


def dumps_json(value: Value, *, indent: bool = False) -> bytes:
    option = orjson.OPT_INDENT_2 if indent else 0
    return orjson.dumps(to_data(value), option=option)


def loads_json(payload: bytes | str, target: type[T]) -> T:
    try:
        data = orjson.loads(payload)
    except orjson.JSONDecodeError as error:
        LOGGER.debug("Undecodable JSON payload: %s", error)
        raise DecodeError(f"malformed JSON: {error}") from error
    return from_data(data, target)


def dumps_msgpack(value: Value) -> bytes:
    return _MSGPACK_ENCODER.encode(_to_wire(value))


def loads_msgpack(payload: bytes, target: type[T]) -> T:
    decoder = _MSGPACK_DECODERS.get(target)
    if decoder is None:
        raise TypeError(f"Cannot deserialize into {target.__name__}")
    try:
        wire = decoder.decode(payload)
    except msgspec.ValidationError as error:
        raise DecodeError(str(error)) from error
    except msgspec.DecodeError as error:
        LOGGER.debug("Undecodable MessagePack payload: %s", error)
        raise DecodeError(f"malformed MessagePack: {error}") from error
    return _FROM_WIRE[target](wire)


def location_to_data(location: Location) -> dict[str, Any]:
    return to_data(location)


def range_to_data(range_: Range) -> dict[str, Any]:
    return to_data(range_)


__all__ = [
    "LocationData",
    "PositionData",
    "RangeData",
    "dumps_json",
    "dumps_msgpack",
    "from_data",
    "loads_json",
    "loads_msgpack",
    "location_to_data",
    "range_to_data",
    "to_data",
]
