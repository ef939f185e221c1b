"""JSON encoding and decoding of UUIDs.

A UUID is written as its canonical hyphenated string. When read back, a
value may be any spelling that ``UUID.parse`` accepts, a sequence of exactly
16 byte values, a 16-byte ``bytes`` object, or a non-negative integer below
2**128 taken as the big-endian value of the UUID.
"""

from __future__ import annotations

import json
from collections.abc import Sequence
from typing import Any

from .identifier import UUID, UUID_BYTES

_EXPECTING = "a UUID as a string, 16-byte array, or u128"
_U128_LIMIT = 1 << 128


def to_json_value(uuid: UUID) -> str:
    """Return the JSON-ready form of ``uuid``: its canonical string."""
    return str(uuid)


def _from_sequence(values: Sequence[Any]) -> UUID:
    if len(values) != UUID_BYTES:
        raise ValueError(
            f"invalid length {len(values)}, expected {_EXPECTING}"
        )
    data = bytearray()
    for value in values:
        if isinstance(value, bool) or not isinstance(value, int):
            raise TypeError(f"invalid byte value {value!r}, expected an integer 0-255")
        if not 0 <= value <= 0xFF:
            raise ValueError(f"byte value {value} is out of range 0-255")
        data.append(value)
    return UUID.from_bytes(data)


def from_json_value(value: Any) -> UUID:
    """Build a UUID from a decoded JSON value or raw bytes.

    Raises ``UuidParseError`` for a malformed string, ``ValueError`` for a
    wrong length or out-of-range number, and ``TypeError`` for any other kind
    of value.
    """
    if isinstance(value, str):
        return UUID.parse(value)
    if isinstance(value, (bytes, bytearray, memoryview)):
        data = bytes(value)
        if len(data) != UUID_BYTES:
            raise ValueError(f"invalid length {len(data)}, expected {_EXPECTING}")
        return UUID.from_bytes(data)
    if isinstance(value, bool):
        raise TypeError(f"invalid type: boolean, expected {_EXPECTING}")
    if isinstance(value, int):
        if not 0 <= value < _U128_LIMIT:
            raise ValueError(f"invalid value {value}, expected {_EXPECTING}")
        return UUID.from_bytes(value.to_bytes(UUID_BYTES, "big"))
    if isinstance(value, (list, tuple)):
        return _from_sequence(value)
    raise TypeError(f"invalid type {type(value).__name__}, expected {_EXPECTING}")


def dumps(uuid: UUID) -> str:
    """Serialise ``uuid`` to a JSON document."""
    return json.dumps(to_json_value(uuid))


def loads(text: str) -> UUID:
    """Deserialise a UUID from a JSON document."""
    return from_json_value(json.loads(text))