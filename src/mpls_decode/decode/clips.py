from __future__ import annotations

from mpls_decode.models.clip import Clip, TimeStamp
from mpls_decode.util.assertx import InvalidTextError
from mpls_decode.util.reader import ByteReader

CLIP_NAME_LEN = 5
CODEC_ID_LEN = 4


def _fixed_text(reader: ByteReader, length: int, field: str) -> str:
    offset = reader.tell()
    text = reader.read_text(length)
    # multi-byte UTF-8 would shorten the string below the field width
    if len(text) != length:
        raise InvalidTextError(f"{field} at offset {offset} is not {length} characters", offset)
    return text


def read_clip(reader: ByteReader, with_stc_ref: bool = False) -> Clip:
    """Read a clip name + codec id.

    Clips listed as alternate angles or multi-clip entries carry a trailing
    STC reference byte, which is skipped.
    """
    file_name = _fixed_text(reader, CLIP_NAME_LEN, "clip file name")
    codec_id = _fixed_text(reader, CODEC_ID_LEN, "clip codec id")
    if with_stc_ref:
        reader.skip(1)
    return Clip(file_name=file_name, codec_id=codec_id)


def read_time_stamp(reader: ByteReader) -> TimeStamp:
    return TimeStamp(raw=reader.u32())
