from __future__ import annotations

import logging
from dataclasses import dataclass

from mpls_decode.models.playlist import ExtensionDataEntry
from mpls_decode.util.reader import ByteReader, bits

LOGGER = logging.getLogger(__name__)


@dataclass(frozen=True)
class _EntryHeader:
    data_type: int
    data_version: int
    data_len: int


def _entry_header(reader: ByteReader) -> _EntryHeader:
    data_type = reader.u16()
    data_version = reader.u16()
    reader.skip(4)  # data address, payloads are read in header order
    return _EntryHeader(data_type=data_type, data_version=data_version, data_len=reader.u32())


def _extension_data(reader: ByteReader) -> tuple[ExtensionDataEntry, ...]:
    reader.skip(4)  # data block start address
    count = bits(reader.u32(), 0, 4)
    headers = [_entry_header(reader) for _ in range(count)]
    entries = []
    for header in headers:
        entries.append(
            ExtensionDataEntry(
                data_type=header.data_type,
                data_version=header.data_version,
                data=reader.read_bytes(header.data_len),
            )
        )
        LOGGER.debug(
            "extension entry: type=%d version=%d bytes=%d",
            header.data_type,
            header.data_version,
            header.data_len,
        )
    return tuple(entries)


def read_extension_data(reader: ByteReader) -> tuple[ExtensionDataEntry, ...]:
    """Read the extension section; a zero length means there is none."""
    length = reader.u32()
    if length == 0:
        return ()
    return reader.framed(length, _extension_data)
