from __future__ import annotations

import logging

from mpls_decode.decode import codes
from mpls_decode.models.stream import (
    AudioStreamFormat,
    GraphicsFormat,
    HdrVideoFormat,
    PlayItemStreamRef,
    SdrVideoFormat,
    Stream,
    StreamAttributes,
    StreamEntry,
    StreamFormat,
    StreamNumberTable,
    SubPathClipStreamRef,
    SubPathStreamRef,
    TextFormat,
    UnknownFormat,
)
from mpls_decode.util.assertx import StreamEntryTypeError
from mpls_decode.util.reader import ByteReader

LOGGER = logging.getLogger(__name__)

SDR_VIDEO_CODING_TYPES = frozenset({0x01, 0x02, 0x1B, 0x20, 0xEA})
HDR_VIDEO_CODING_TYPES = frozenset({0x24})
AUDIO_CODING_TYPES = frozenset(
    {0x03, 0x04, 0x80, 0x81, 0x82, 0x83, 0x84, 0x85, 0x86, 0xA1, 0xA2}
)
GRAPHICS_CODING_TYPES = frozenset({0x90, 0x91})
TEXT_CODING_TYPES = frozenset({0x92})

LANGUAGE_CODE_LEN = 3

# Stream categories in the order of the count header.
STREAM_COUNT_ORDER = (
    "primary_video_streams",
    "primary_audio_streams",
    "primary_pgs_streams",
    "primary_igs_streams",
    "secondary_audio_streams",
    "secondary_video_streams",
    "secondary_pgs_streams",
    "dolby_vision_streams",
)

# The lists follow in a different order: secondary video comes before
# secondary audio.
STREAM_LIST_ORDER = (
    "primary_video_streams",
    "primary_audio_streams",
    "primary_pgs_streams",
    "primary_igs_streams",
    "secondary_video_streams",
    "secondary_audio_streams",
    "secondary_pgs_streams",
    "dolby_vision_streams",
)


def _stream_entry(reader: ByteReader) -> StreamEntry:
    offset = reader.tell()
    stream_type = reader.u8()
    if stream_type == 0x1:
        ref = PlayItemStreamRef(stream_pid=reader.u16())
    elif stream_type == 0x2:
        sub_path_id = reader.u8()
        sub_clip_id = reader.u8()
        ref = SubPathClipStreamRef(
            sub_path_id=sub_path_id,
            sub_clip_id=sub_clip_id,
            stream_pid=reader.u16(),
        )
    elif stream_type in (0x3, 0x4):
        sub_path_id = reader.u8()
        ref = SubPathStreamRef(sub_path_id=sub_path_id, stream_pid=reader.u16())
    else:
        raise StreamEntryTypeError(
            f"invalid stream entry type {stream_type:#04x} at offset {offset}", offset
        )
    return StreamEntry(stream_type=stream_type, ref=ref)


def read_stream_entry(reader: ByteReader) -> StreamEntry:
    return reader.length_value(8, _stream_entry)


def _stream_format(reader: ByteReader, coding_type: int) -> StreamFormat:
    if coding_type in SDR_VIDEO_CODING_TYPES:
        video_format, frame_rate = codes.video_format(reader.u8())
        return SdrVideoFormat(video_format=video_format, frame_rate=frame_rate)
    if coding_type in HDR_VIDEO_CODING_TYPES:
        video_format, frame_rate = codes.video_format(reader.u8())
        dynamic_range, color_space = codes.dynamic_range_color_space(reader.u8())
        return HdrVideoFormat(
            video_format=video_format,
            frame_rate=frame_rate,
            dynamic_range=dynamic_range,
            color_space=color_space,
        )
    if coding_type in AUDIO_CODING_TYPES:
        audio_format, sample_rates = codes.audio_format(reader.u8())
        return AudioStreamFormat(
            audio_format=audio_format,
            sample_rates=sample_rates,
            language=reader.read_text(LANGUAGE_CODE_LEN),
        )
    if coding_type in GRAPHICS_CODING_TYPES:
        return GraphicsFormat(language=reader.read_text(LANGUAGE_CODE_LEN))
    if coding_type in TEXT_CODING_TYPES:
        character_code = codes.character_code(reader.u8())
        return TextFormat(
            language=reader.read_text(LANGUAGE_CODE_LEN),
            character_code=character_code,
        )
    LOGGER.debug("stream attrs: unknown coding type %#04x", coding_type)
    return UnknownFormat()


def _stream_attributes(reader: ByteReader) -> StreamAttributes:
    coding_type = reader.u8()
    return StreamAttributes(
        coding_type=coding_type,
        format=_stream_format(reader, coding_type),
    )


def read_stream_attributes(reader: ByteReader) -> StreamAttributes:
    return reader.length_value(8, _stream_attributes)


def read_stream(reader: ByteReader) -> Stream:
    entry = read_stream_entry(reader)
    attrs = read_stream_attributes(reader)
    return Stream(entry=entry, attrs=attrs)


def _stream_number_table(reader: ByteReader) -> StreamNumberTable:
    reader.skip(2)
    counts = {category: reader.u8() for category in STREAM_COUNT_ORDER}
    reader.skip(4)
    streams: dict[str, tuple[Stream, ...]] = {}
    for category in STREAM_LIST_ORDER:
        streams[category] = tuple(read_stream(reader) for _ in range(counts[category]))
    LOGGER.debug(
        "stn: %s",
        " ".join(f"{name.removesuffix('_streams')}={n}" for name, n in counts.items()),
    )
    return StreamNumberTable(**streams)


def read_stream_number_table(reader: ByteReader) -> StreamNumberTable:
    return reader.length_value(16, _stream_number_table)
