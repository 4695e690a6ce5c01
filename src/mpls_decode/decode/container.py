from __future__ import annotations

"""Top-level movie playlist decoder.

Layout (all integers big-endian):

    0   "MPLS" type indicator
    4   version string, e.g. "0200" or "0300"
    8   PlayList start address
    12  PlayListMark start address
    16  ExtensionData start address (0 when absent)
    20  reserved, 20 bytes
    40  AppInfoPlayList, PlayList, PlayListMark[, ExtensionData]

Sections are decoded in order from the cursor; the addresses are kept on the
result but only the extension address changes what is read.
"""

import logging

from mpls_decode.decode.extension import read_extension_data
from mpls_decode.decode.marks import read_app_info_play_list, read_play_list_marks
from mpls_decode.decode.play_items import read_play_list
from mpls_decode.models.mpls import Mpls
from mpls_decode.util.assertx import TagMismatchError
from mpls_decode.util.logging import log_indent
from mpls_decode.util.reader import ByteReader

LOGGER = logging.getLogger(__name__)

MPLS_TAG = b"MPLS"
RESERVED_HEADER_LEN = 20


def decode(data: bytes | bytearray | memoryview) -> Mpls:
    """Decode a complete movie playlist from ``data``.

    Raises ``UnexpectedEndError`` when the buffer is too short for a declared
    field or record and ``ContentError`` when a closed constraint is violated.
    Bytes after the last section are ignored.
    """
    reader = ByteReader(bytes(data))
    tag = reader.read_bytes(len(MPLS_TAG))
    if tag != MPLS_TAG:
        raise TagMismatchError(f"not a movie playlist: bad tag {tag!r}", 0)
    version = reader.read_text(4)
    play_list_address = reader.u32()
    mark_address = reader.u32()
    extension_address = reader.u32()
    reader.skip(RESERVED_HEADER_LEN)
    LOGGER.debug(
        "decode: version=%s play_list=%d marks=%d ext=%d",
        version,
        play_list_address,
        mark_address,
        extension_address,
    )

    with log_indent():
        app_info_play_list = read_app_info_play_list(reader)
        play_list = read_play_list(reader)
        marks = read_play_list_marks(reader)
        ext = read_extension_data(reader) if extension_address != 0 else ()

    return Mpls(
        version=version,
        play_list_address=play_list_address,
        mark_address=mark_address,
        extension_address=extension_address,
        app_info_play_list=app_info_play_list,
        play_list=play_list,
        marks=marks,
        ext=ext,
    )
