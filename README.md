# psuuid

A small UUID library: a 16-byte `UUID` value with strict parsing and
canonical formatting, helpers for the Gregorian epoch and 100-nanosecond tick
counts used by time-based UUIDs, pure-Python MD5 and SHA-1 digests, and JSON
serialization. It has no dependencies outside the standard library.

## Installation

```
pip install psuuid
```

## The UUID value

`psuuid.identifier.UUID` is a frozen, ordered dataclass holding exactly 16
bytes in network order. Building one from any other length raises
`ValueError`.

```python
from psuuid.identifier import UUID

uuid = UUID.parse("urn:uuid:{6BA7B810-9DAD-11D1-80B4-00C04FD430C8}")
print(uuid)              # 6ba7b810-9dad-11d1-80b4-00c04fd430c8
uuid.as_bytes()          # the 16 raw bytes (also bytes(uuid))

same = UUID.from_bytes(uuid.as_bytes())
assert same == uuid
```

`str(uuid)` gives the canonical lowercase hyphenated form.

`UUID.parse` accepts:

- the canonical form `xxxxxxxx-xxxx-xxxx-xxxx-xxxxxxxxxxxx`,
- 32 hex digits without hyphens,
- either of those inside braces `{...}`,
- any of the above after a case-insensitive `urn:uuid:` prefix.

Hex digits may be upper or lower case. Surrounding whitespace is not
accepted. Malformed input raises a subclass of
`psuuid.errors.UuidParseError` (itself a `ValueError`):

- `InvalidLengthError` – not 32 or 36 characters, or the wrong number of
  hex digits;
- `InvalidCharacterError` – a non-hex character; its `ch` and `idx`
  attributes give the character and its index (counted after any prefix and
  braces are removed);
- `InvalidHyphenPlacementError` – a hyphen outside positions 8, 13, 18, 23,
  or in the 32-digit form;
- `InvalidBracesError` – an opening brace without a closing one, or the
  reverse.

## Timestamps

```python
from datetime import timedelta
from psuuid import gregorian
from psuuid.identifier import UUID

gregorian.epoch()            # datetime for 1582-10-15 00:00 UTC
gregorian.elapsed()          # timedelta from that epoch until now
UUID.duration_to_ticks(timedelta(microseconds=1))   # 10
UUID.duration_to_ticks(199)                         # 1 (integer nanoseconds)
```

`duration_to_ticks` takes a `timedelta` or a non-negative integer count of
nanoseconds and returns whole 100-ns ticks, truncating any remainder. It
raises `psuuid.errors.DurationToTicksError` when the result is 2**60 or more
and so does not fit in the 60-bit UUID timestamp field. `gregorian.elapsed`
raises `ValueError` if the system clock reads earlier than the epoch.

## Digests

```python
from psuuid.md5 import md5, Md5
from psuuid.sha1 import sha1, Sha1
from psuuid.hexutil import to_hex

to_hex(md5(b"abc"))       # '900150983cd24fb0d6963f7d28e17f72'
to_hex(sha1(b"abc"))      # 'a9993e364706816aba3e25717850c26c9cd0d89d'

hasher = Md5(b"The quick ")
hasher.update(b"brown fox")
hasher.hexdigest()
```

`Md5` and `Sha1` are incremental hashers: `update` returns the hasher so
calls can be chained, `finalize` returns the raw digest without ending the
hasher, `hexdigest` (and `str()`) give it in lowercase hex, and `copy`
returns an independent hasher with the same state. `to_hex` turns any bytes
or iterable of byte values into lowercase hexadecimal.

## JSON

```python
from psuuid import serialization

text = serialization.dumps(uuid)     # '"6ba7b810-9dad-11d1-80b4-00c04fd430c8"'
assert serialization.loads(text) == uuid
```

`to_json_value` gives the canonical string. `from_json_value` (and so
`loads`) accepts any spelling `UUID.parse` accepts, a list or tuple of
exactly 16 integers from 0 to 255, a 16-byte `bytes` object, or a
non-negative integer below 2**128 read as the big-endian value. A malformed
string raises `UuidParseError`, a wrong length or out-of-range number raises
`ValueError`, and any other kind of value raises `TypeError`.

## What this package does not do

It does not generate UUIDs of any version: there are no time-based, random,
name-based or other generators, and no helpers for setting or reading the
version and variant fields. It has no command-line tool.

## Running the tests

```
pip install -e ".[test]"
pytest
```