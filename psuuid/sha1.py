"""A self-contained SHA-1 message digest."""

from __future__ import annotations

import struct

_MASK = 0xFFFFFFFF

_INITIAL_STATE = (0x67452301, 0xEFCDAB89, 0x98BADCFE, 0x10325476, 0xC3D2E1F0)


def _rotl(value: int, shift: int) -> int:
    return ((value << shift) | (value >> (32 - shift))) & _MASK


def _compress(state: tuple[int, ...], block: bytes) -> tuple[int, ...]:
    w = list(struct.unpack(">16I", block))
    for i in range(16, 80):
        w.append(_rotl(w[i - 3] ^ w[i - 8] ^ w[i - 14] ^ w[i - 16], 1))

    a, b, c, d, e = state
    for i, word in enumerate(w):
        if i < 20:
            f, k = (b & c) | (~b & d), 0x5A827999
        elif i < 40:
            f, k = b ^ c ^ d, 0x6ED9EBA1
        elif i < 60:
            f, k = (b & c) | (b & d) | (c & d), 0x8F1BBCDC
        else:
            f, k = b ^ c ^ d, 0xCA62C1D6
        temp = (_rotl(a, 5) + (f & _MASK) + e + k + word) & _MASK
        e, d, c, b, a = d, c, _rotl(b, 30), a, temp
    return tuple((x + y) & _MASK for x, y in zip(state, (a, b, c, d, e)))


class Sha1:
    """Incremental SHA-1 hasher."""

    def __init__(self, data: bytes = b"") -> None:
        self._state: tuple[int, ...] = _INITIAL_STATE
        self._length = 0
        self._buffer = bytearray()
        if data:
            self.update(data)

    def update(self, data: bytes) -> Sha1:
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
        """Return the 20-byte digest of everything fed so far."""
        bits = (self._length * 8) & 0xFFFFFFFFFFFFFFFF
        tail = bytes(self._buffer) + b"\x80"
        tail += b"\x00" * ((56 - len(tail)) % 64)
        tail += struct.pack(">Q", bits)
        state = self._state
        for start in range(0, len(tail), 64):
            state = _compress(state, tail[start:start + 64])
        return struct.pack(">5I", *state)

    def hexdigest(self) -> str:
        """Return the digest as lowercase hexadecimal."""
        return self.finalize().hex()

    def copy(self) -> Sha1:
        """Return an independent hasher with the same state."""
        other = Sha1()
        other._state = self._state
        other._length = self._length
        other._buffer = bytearray(self._buffer)
        return other

    def __str__(self) -> str:
        return self.hexdigest()


def sha1(data: bytes) -> bytes:
    """Return the 20-byte SHA-1 digest of ``data``."""
    return Sha1(data).finalize()