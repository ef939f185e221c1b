from psuuid.hexutil import to_hex


def test_empty_slice():
    assert to_hex(b"") == ""


def test_single_byte_zero():
    assert to_hex([0]) == "00"


def test_single_byte_max():
    assert to_hex([255]) == "ff"


def test_single_byte_mid_range():
    assert to_hex([42]) == "2a"


def test_multiple_bytes():
    assert to_hex(bytes([0x00, 0x01, 0x0A, 0xFF])) == "00010aff"


def test_all_zeros():
    assert to_hex(bytes(10)) == "00000000000000000000"


def test_all_ones():
    assert to_hex(b"\xff" * 5) == "ffffffffff"


def test_mixed_bytes():
    assert to_hex([0x1A, 0x2B, 0x3C, 0x4D, 0x5E]) == "1a2b3c4d5e"


def test_large_input():
    assert to_hex(b"\xaa" * 100) == "aa" * 100


def test_ensures_lowercase():
    assert to_hex([0xAB, 0xCD]) == "abcd"


def test_bytes_literal():
    assert to_hex(b"\xde\xad\xbe\xef") == "deadbeef"


def test_bytearray_and_memoryview():
    data = bytearray(b"\xde\xad\xbe\xef")
    assert to_hex(data) == "deadbeef"
    assert to_hex(memoryview(data)) == "deadbeef"