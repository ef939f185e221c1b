"""Hexadecimal encoding of byte strings."""

from __future__ import annotations

from collections.abc import Iterable


def to_hex(data: bytes | bytearray | memoryview | Iterable[int]) -> str:
    """Return the lowercase hexadecimal spelling of ``data``."""
    return bytes(data).hex()