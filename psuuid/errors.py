"""Exceptions raised while building and parsing UUIDs."""

from __future__ import annotations


class UuidConstructionError(ValueError):
    """A UUID could not be built from the values supplied."""

    default_message = "The UUID could not be constructed."

    def __init__(self, *args: object) -> None:
        super().__init__(*(args or (self.default_message,)))


class TimestampBeforeEpochError(UuidConstructionError):
    """The timestamp lies before the epoch the UUID version counts from."""

    default_message = "The timestamp provided is too low."


class TimestampOverflowError(UuidConstructionError):
    """The timestamp does not fit in the UUID's timestamp field."""

    default_message = "The timestamp provided is too high."


class DurationToTicksError(TimestampOverflowError):
    """A duration is too long to be expressed as a 60-bit tick count."""

    default_message = "The timestamp provided is too high."


class UuidParseError(ValueError):
    """A string is not a valid UUID spelling."""

    default_message = "invalid UUID string"

    def __init__(self, *args: object) -> None:
        super().__init__(*(args or (self.default_message,)))


class InvalidLengthError(UuidParseError):
    """The string has the wrong number of characters or hex digits."""

    default_message = "invalid length"


class InvalidCharacterError(UuidParseError):
    """A character that is not a hex digit appeared in the string."""

    def __init__(self, ch: str, idx: int) -> None:
        self.ch = ch
        self.idx = idx
        super().__init__(f"invalid character `{ch}` at index {idx}")

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, InvalidCharacterError):
            return NotImplemented
        return (self.ch, self.idx) == (other.ch, other.idx)

    def __hash__(self) -> int:
        return hash((type(self), self.ch, self.idx))


class InvalidHyphenPlacementError(UuidParseError):
    """A hyphen appeared outside the canonical positions."""

    default_message = "hyphens are in the wrong position"


class InvalidBracesError(UuidParseError):
    """Braces around the UUID are unbalanced or misplaced."""

    default_message = "mismatching or misplaced braces"