import pytest

from psuuid.errors import (
    DurationToTicksError,
    InvalidBracesError,
    InvalidCharacterError,
    InvalidHyphenPlacementError,
    InvalidLengthError,
    TimestampBeforeEpochError,
    TimestampOverflowError,
    UuidConstructionError,
    UuidParseError,
)


def test_timestamp_before_epoch_message():
    assert str(TimestampBeforeEpochError()) == "The timestamp provided is too low."


def test_timestamp_overflow_message():
    assert str(TimestampOverflowError()) == "The timestamp provided is too high."


def test_duration_to_ticks_converts_to_overflow():
    err = DurationToTicksError()
    assert isinstance(err, TimestampOverflowError)
    assert str(err) == "The timestamp provided is too high."


@pytest.mark.parametrize(
    "cls, message",
    [
        (TimestampBeforeEpochError, "The timestamp provided is too low."),
        (TimestampOverflowError, "The timestamp provided is too high."),
        (DurationToTicksError, "The timestamp provided is too high."),
    ],
)
def test_construction_errors_share_base(cls, message):
    err = cls()
    assert isinstance(err, UuidConstructionError)
    assert isinstance(err, ValueError)
    assert str(err) == message


@pytest.mark.parametrize(
    "cls, message",
    [
        (InvalidLengthError, "invalid length"),
        (InvalidHyphenPlacementError, "hyphens are in the wrong position"),
        (InvalidBracesError, "mismatching or misplaced braces"),
    ],
)
def test_parse_error_messages(cls, message):
    err = cls()
    assert str(err) == message
    assert isinstance(err, UuidParseError)


def test_invalid_character_fields_and_message():
    err = InvalidCharacterError("g", 35)
    assert err.ch == "g"
    assert err.idx == 35
    assert str(err) == "invalid character `g` at index 35"


def test_invalid_character_equality():
    assert InvalidCharacterError("Z", 31) == InvalidCharacterError("Z", 31)
    assert not InvalidCharacterError("Z", 31) == InvalidCharacterError("Z", 30)
    assert len({InvalidCharacterError("G", 0), InvalidCharacterError("G", 0)}) == 1


def test_custom_message_overrides_default():
    assert str(InvalidLengthError("too short")) == "too short"