"""The 128-bit UUID value: construction, parsing and formatting."""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import timedelta

from .errors import (
    DurationToTicksError,
    InvalidBracesError,
    InvalidCharacterError,
    InvalidHyphenPlacementError,
    InvalidLengthError,
)

UUID_BYTES = 16

_URN_PREFIX = "urn:uuid:"
_HYPHEN_POSITIONS = frozenset({8, 13, 18, 23})
_HEX_DIGITS = frozenset("0123456789abcdefABCDEF")
_TICK_LIMIT = 1 << 60
_NANOS_PER_TICK = 100


def _duration_to_nanos(duration: timedelta | int) -> int:
    if isinstance(duration, timedelta):
        whole_seconds = duration.days * 86_400 + duration.seconds
        nanos = (whole_seconds * 1_000_000 + duration.microseconds) * 1_000
    elif isinstance(duration, int) and not isinstance(duration, bool):
        nanos = duration
    else:
        raise TypeError("duration must be a timedelta or an integer count of nanoseconds")
    if nanos < 0:
        raise ValueError("duration must not be negative")
    return nanos


@dataclass(frozen=True, order=True)
class UUID:
    """A UUID held as 16 raw bytes in network order."""

    raw: bytes = field(default=bytes(UUID_BYTES))

    def __post_init__(self) -> None:
        data = bytes(self.raw)
        if len(data) != UUID_BYTES:
            raise ValueError(f"a UUID is exactly {UUID_BYTES} bytes, got {len(data)}")
        object.__setattr__(self, "raw", data)

    @classmethod
    def from_bytes(cls, data: bytes | bytearray | memoryview) -> UUID:
        """Build a UUID from exactly 16 bytes."""
        return cls(bytes(data))

    @classmethod
    def parse(cls, text: str) -> UUID:
        """Parse any standard spelling of a UUID.

        Accepted forms are the canonical hyphenated form, 32 bare hex digits,
        either of these inside braces, and any of them after a
        case-insensitive ``urn:uuid:`` prefix.
        """
        prefix = text[: len(_URN_PREFIX)]
        if prefix.isascii() and prefix.lower() == _URN_PREFIX:
            text = text[len(_URN_PREFIX):]

        if text.startswith("{"):
            if not text.endswith("}"):
                raise InvalidBracesError()
            text = text[1:-1]
        elif text.endswith("}"):
            raise InvalidBracesError()

        length = len(text.encode("utf-8"))
        if length == 32:
            expect_hyphens = False
        elif length == 36:
            expect_hyphens = True
        else:
            raise InvalidLengthError()

        digits: list[str] = []
        for idx, ch in enumerate(text):
            if ch == "-":
                if not expect_hyphens or idx not in _HYPHEN_POSITIONS:
                    raise InvalidHyphenPlacementError()
                continue
            if ch not in _HEX_DIGITS:
                raise InvalidCharacterError(ch, idx)
            if len(digits) >= 32:
                raise InvalidLengthError()
            digits.append(ch)

        if len(digits) != 32:
            raise InvalidLengthError()

        return cls(bytes.fromhex("".join(digits)))

    def as_bytes(self) -> bytes:
        """Return the 16 raw bytes."""
        return self.raw

    @staticmethod
    def duration_to_ticks(duration: timedelta | int) -> int:
        """Convert a duration to whole 100-nanosecond ticks.

        ``duration`` is a ``timedelta`` or an integer number of nanoseconds.
        Raises ``DurationToTicksError`` when the tick count does not fit in
        the 60-bit UUID timestamp field.
        """
        ticks = _duration_to_nanos(duration) // _NANOS_PER_TICK
        if ticks >= _TICK_LIMIT:
            raise DurationToTicksError()
        return ticks

    def __bytes__(self) -> bytes:
        return self.raw

    def __str__(self) -> str:
        h = self.raw.hex()
        return f"{h[0:8]}-{h[8:12]}-{h[12:16]}-{h[16:20]}-{h[20:32]}"

    def __repr__(self) -> str:
        return f"UUID('{self}')"