"""A self-contained MD5 message digest."""

from __future__ import annotations

import struct

_MASK = 0xFFFFFFFF

_S = (
    7, 12, 17, 22, 7, 12, 17, 22, 7, 12, 17, 22, 7, 12, 17, 22,
    5, 9, 14, 20, 5, 9, 14, 20, 5, 9, 14, 20, 5, 9, 14, 20,
    4, 11, 16, 23, 4, 11, 16, 23, 4, 11, 16, 23, 4, 11, 16, 23,
    6, 10, 15, 21, 6, 10, 15, 21, 6, 10, 15, 21, 6, 10, 15, 21,
)

_K = (
    0xD76AA478, 0xE8C7B756, 0x242070DB, 0xC1BDCEEE,
    0xF57C0FAF, 0x4787C62A, 0xA8304613, 0xFD469501,
    0x698098D8, 0x8B44F7AF, 0xFFFF5BB1, 0x895CD7BE,
    0x6B901122, 0xFD987193, 0xA679438E, 0x49B40821,
    0xF61E2562, 0xC040B340, 0x265E5A51, 0xE9B6C7AA,
    0xD62F105D, 0x02441453, 0xD8A1E681, 0xE7D3FBC8,
    0x21E1CDE6, 0xC33707D6, 0xF4D50D87, 0x455A14ED,
    0xA9E3E905, 0xFCEFA3F8, 0x676F02D9, 0x8D2A4C8A,
    0xFFFA3942, 0x8771F681, 0x6D9D6122, 0xFDE5380C,
    0xA4BEEA44, 0x4BDECFA9, 0xF6BB4B60, 0xBEBFBC70,
    0x289B7EC6, 0xEAA127FA, 0xD4EF3085, 0x04881D05,
    0xD9D4D039, 0xE6DB99E5, 0x1FA27CF8, 0xC4AC5665,
    0xF4292244, 0x432AFF97, 0xAB9423A7, 0xFC93A039,
    0x655B59C3, 0x8F0CCC92, 0xFFEFF47D, 0x85845DD1,
    0x6FA87E4F, 0xFE2CE6E0, 0xA3014314, 0x4E0811A1,
    0xF7537E82, 0xBD3AF235, 0x2AD7D2BB, 0xEB86D391,
)

_INITIAL_STATE = (0x67452301, 0xEFCDAB89, 0x98BADCFE, 0x10325476)


def _rotl(value: int, shift: int) -> int:
    return ((value << shift) | (value >> (32 - shift))) & _MASK


def _compress(state: tuple[int, ...], block: bytes) -> tuple[int, ...]:
    m = struct.unpack("<16I", block)
    a, b, c, d = state
    for i, (k, s) in enumerate(zip(_K, _S)):
        if i < 16:
            f = (b & c) | (~b & d)
            g = i
        elif i < 32:
            f = (d & b) | (~d & c)
            g = (5 * i + 1) & 15
        elif i < 48:
            f = b ^ c ^ d
            g = (3 * i + 5) & 15
        else:
            f = c ^ (b | (~d & _MASK))
            g = (7 * i) & 15
        f = (f + a + k + m[g]) & _MASK
        a, d, c = d, c, b
        b = (b + _rotl(f, s)) & _MASK
    return tuple((x + y) & _MASK for x, y in zip(state, (a, b, c, d)))


class Md5:
    """Incremental MD5 hasher."""

    def __init__(self, data: bytes = b"") -> None:
        self._state: tuple[int, ...] = _INITIAL_STATE
        self._length = 0
        self._buffer = bytearray()
        if data:
            self.update(data)

    def update(self, data: bytes) -> Md5:
        """Feed more data into the hash; returns the hasher for chaining."""
        data = bytes(data)
        self._length += len(data)
        self._buffer += data
        full = len(self._buffer) - len(self._buffer) % 64
        view = memoryview(self._buffer)
        for start in range(0, full, 64):
            self._state = _compress(self._state, bytes(view[start:start + 64]))
        view.release()
        del self._buffer[:full]
        return self

    def finalize(self) -> bytes:
        """Return the 16-byte digest of everything fed so far."""
        bits = (self._length * 8) & 0xFFFFFFFFFFFFFFFF
        tail = bytes(self._buffer) + b"\x80"
        tail += b"\x00" * ((56 - len(tail)) % 64)
        tail += struct.pack("<Q", bits)
        state = self._state
        for start in range(0, len(tail), 64):
            state = _compress(state, tail[start:start + 64])
        return struct.pack("<4I", *state)

    def hexdigest(self) -> str:
        """Return the digest as lowercase hexadecimal."""
        return self.finalize().hex()

    def copy(self) -> Md5:
        """Return an independent hasher with the same state."""
        other = Md5()
        other._state = self._state
        other._length = self._length
        other._buffer = bytearray(self._buffer)
        return other

    def __str__(self) -> str:
        return self.hexdigest()


def md5(data: bytes) -> bytes:
    """Return the 16-byte MD5 digest of ``data``."""
    return Md5(data).finalize()