from __future__ import annotations

"""Big-endian cursor over an in-memory playlist buffer.

Every composite record in an MPLS file is either fixed-size or framed by a
leading length field. ``ByteReader.length_value`` implements the framing:
the inner decoder sees only the declared region and the outer cursor always
lands on the region end, so fields appended by newer format revisions are
skipped.
"""

from typing import Callable, TypeVar

from mpls_decode.util.assertx import InvalidTextError, UnexpectedEndError

T = TypeVar("T")

_LENGTH_READERS = {8: "u8", 16: "u16", 32: "u32"}


def bits(value: int, shift: int, width: int = 1) -> int:
    return (value >> shift) & ((1 << width) - 1)


def nibbles(value: int) -> tuple[int, int]:
    return (value & 0xF0) >> 4, value & 0x0F


class ByteReader:
    __slots__ = ("_data", "_pos", "_end")

    def __init__(self, data: bytes | memoryview, start: int = 0, end: int | None = None) -> None:
        self._data = data if isinstance(data, memoryview) else memoryview(bytes(data))
        self._pos = start
        self._end = len(self._data) if end is None else end

    def tell(self) -> int:
        """Absolute offset of the cursor in the original buffer."""
        return self._pos

    @property
    def remaining(self) -> int:
        return self._end - self._pos

    def require(self, n: int) -> None:
        if self._end - self._pos < n:
            raise UnexpectedEndError(self._pos, n, self._end - self._pos)

    def skip(self, n: int) -> None:
        self.require(n)
        self._pos += n

    def read_bytes(self, n: int) -> bytes:
        self.require(n)
        result = bytes(self._data[self._pos : self._pos + n])
        self._pos += n
        return result

    def _read_uint(self, size: int) -> int:
        self.require(size)
        value = int.from_bytes(self._data[self._pos : self._pos + size], byteorder="big")
        self._pos += size
        return value

    def u8(self) -> int:
        return self._read_uint(1)

    def u16(self) -> int:
        return self._read_uint(2)

    def u32(self) -> int:
        return self._read_uint(4)

    def u64(self) -> int:
        return self._read_uint(8)

    def read_text(self, n: int) -> str:
        offset = self._pos
        raw = self.read_bytes(n)
        try:
            return raw.decode("utf-8")
        except UnicodeDecodeError as exc:
            raise InvalidTextError(
                f"invalid UTF-8 in {n}-byte text field at offset {offset}: {raw.hex()}",
                offset,
            ) from exc

    def length_value(self, width: int, inner: Callable[[ByteReader], T]) -> T:
        """Decode one length-framed record.

        Reads a ``width``-bit length, hands ``inner`` a reader limited to that
        many bytes and then moves this reader past the whole region.
        """
        length = getattr(self, _LENGTH_READERS[width])()
        return self.framed(length, inner)

    def framed(self, length: int, inner: Callable[[ByteReader], T]) -> T:
        """Run ``inner`` over the next ``length`` bytes, then skip past them."""
        self.require(length)
        child = ByteReader(self._data, self._pos, self._pos + length)
        value = inner(child)
        self._pos += length
        return value

    def __repr__(self) -> str:
        return f"ByteReader(pos={self._pos}, remaining={self.remaining})"
