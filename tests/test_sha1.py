import hashlib

import pytest

from psuuid.hexutil import to_hex
from psuuid.sha1 import Sha1, sha1


@pytest.mark.parametrize(
    "text, expected",
    [
        ("", "da39a3ee5e6b4b0d3255bfef95601890afd80709"),
        ("abc", "a9993e364706816aba3e25717850c26c9cd0d89d"),
        (
            "abcdbcdecdefdefgefghfghighijhijkijkljklmklmnlmnomnopnopq",
            "84983e441c3bd26ebaae4aa1f95129e5e54670f1",
        ),
        (
            "The quick brown fox jumps over the lazy dog",
            "2fd4e1c67a2d28fced849ee1bb76e7391b93eb12",
        ),
        (
            "The quick brown fox jumps over the lazy dog.",
            "408d94384216f890ff7a0c3528e8bed1e0b01621",
        ),
    ],
)
def test_fips_vectors(text, expected):
    assert to_hex(sha1(text.encode())) == expected


def test_incremental_vs_one_shot():
    data = b"fmt the fear and do it anyway!"
    hasher = Sha1()
    for start in range(0, len(data), 5):
        hasher.update(data[start:start + 5])
    assert hasher.finalize() == sha1(data)


@pytest.mark.parametrize("size", [0, 1, 55, 56, 57, 63, 64, 65, 119, 120, 128, 1000])
def test_block_boundaries_match_reference(size):
    data = bytes(i % 251 for i in range(size))
    assert sha1(data) == hashlib.sha1(data).digest()


def test_digest_length():
    assert len(sha1(b"anything")) == 20


def test_update_chains():
    assert Sha1().update(b"a").update(b"bc").hexdigest() == (
        "a9993e364706816aba3e25717850c26c9cd0d89d"
    )


def test_finalize_does_not_consume_state():
    hasher = Sha1(b"ab")
    first = hasher.finalize()
    hasher.update(b"c")
    assert first == sha1(b"ab")
    assert hasher.finalize() == sha1(b"abc")


def test_copy_is_independent():
    hasher = Sha1(b"The quick brown fox jumps over the lazy dog")
    clone = hasher.copy()
    clone.update(b".")
    assert hasher.hexdigest() == "2fd4e1c67a2d28fced849ee1bb76e7391b93eb12"
    assert clone.hexdigest() == "408d94384216f890ff7a0c3528e8bed1e0b01621"


def test_str_is_hexdigest():
    hasher = Sha1(b"abc")
    assert str(hasher) == "a9993e364706816aba3e25717850c26c9cd0d89d"
    assert str(hasher) == hasher.hexdigest()