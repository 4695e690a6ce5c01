from __future__ import annotations

import pytest

from mpls_decode.util.assertx import ContentError, InvalidTextError, UnexpectedEndError
from mpls_decode.util.reader import ByteReader, bits, nibbles


def test_big_endian_integers() -> None:
    reader = ByteReader(bytes.fromhex("01 0203 04050607 08090a0b0c0d0e0f"))
    assert reader.u8() == 0x01
    assert reader.u16() == 0x0203
    assert reader.u32() == 0x04050607
    assert reader.u64() == 0x08090A0B0C0D0E0F
    assert reader.remaining == 0


def test_address_field() -> None:
    reader = ByteReader(bytes([0x00, 0x00, 0x66, 0x92, 0x00, 0x01]))
    assert reader.u32() == 26_258
    assert reader.tell() == 4


def test_short_read_raises_unexpected_end() -> None:
    reader = ByteReader(b"\x00\x01\x02")
    reader.u8()
    with pytest.raises(UnexpectedEndError) as excinfo:
        reader.u32()
    assert excinfo.value.offset == 1
    assert excinfo.value.needed == 4
    assert excinfo.value.remaining == 2
    # a failed read does not move the cursor
    assert reader.tell() == 1


def test_read_text() -> None:
    reader = ByteReader(b"00086M2TS\x00\x01")
    assert reader.read_text(9) == "00086M2TS"
    assert reader.remaining == 2


def test_invalid_utf8_is_content_error() -> None:
    reader = ByteReader(b"\xff\xfe\x30\x30")
    with pytest.raises(InvalidTextError) as excinfo:
        reader.read_text(4)
    assert isinstance(excinfo.value, ContentError)
    assert excinfo.value.offset == 0


def test_read_bytes_copies_out() -> None:
    data = bytearray(b"abcd")
    reader = ByteReader(data)
    chunk = reader.read_bytes(2)
    data[0] = ord("z")
    assert chunk == b"ab"
    assert isinstance(chunk, bytes)


def test_length_value_advances_to_declared_end() -> None:
    # declared length 5, inner decoder reads only 2 bytes
    reader = ByteReader(b"\x05\xaa\xbb\xcc\xdd\xee\x42")
    value = reader.length_value(8, lambda inner: inner.u16())
    assert value == 0xAABB
    assert reader.tell() == 6
    assert reader.u8() == 0x42


@pytest.mark.parametrize("width, prefix", [(16, b"\x00\x02"), (32, b"\x00\x00\x00\x02")])
def test_length_value_widths(width: int, prefix: bytes) -> None:
    reader = ByteReader(prefix + b"\x12\x34\xff")
    assert reader.length_value(width, lambda inner: inner.u16()) == 0x1234
    assert reader.remaining == 1


def test_length_value_bounds_inner_reader() -> None:
    reader = ByteReader(b"\x01\xaa\xbb\xcc")
    with pytest.raises(UnexpectedEndError):
        reader.length_value(8, lambda inner: inner.u16())


def test_length_value_declared_length_exceeds_input() -> None:
    reader = ByteReader(b"\x00\x10\x01\x02")
    with pytest.raises(UnexpectedEndError) as excinfo:
        reader.length_value(16, lambda inner: inner.u8())
    assert excinfo.value.needed == 16


def test_nested_frames_report_absolute_offsets() -> None:
    reader = ByteReader(b"\xee\x03\x05\x01\x02\xff")

    def outer(inner: ByteReader) -> int:
        return inner.length_value(8, lambda innermost: innermost.u16())

    reader.skip(1)
    with pytest.raises(UnexpectedEndError) as excinfo:
        reader.length_value(8, outer)
    assert excinfo.value.offset == 3


def test_bitfields() -> None:
    assert bits(0x0011, 4) == 1
    assert bits(0x0001, 4) == 0
    assert bits(0xABCD, 0, 4) == 0xD
    assert bits(0xFFFF_FFF7, 0, 4) == 0x7
    assert nibbles(0x61) == (0x6, 0x1)
