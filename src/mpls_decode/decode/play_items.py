from __future__ import annotations

import logging

from mpls_decode.decode.clips import read_clip, read_time_stamp
from mpls_decode.decode.streams import read_stream_number_table
from mpls_decode.decode.sub_paths import read_sub_path
from mpls_decode.models.clip import Clip
from mpls_decode.models.playlist import AngleInfo, PlayItem, PlayList
from mpls_decode.util.logging import log_indent
from mpls_decode.util.reader import ByteReader, bits

LOGGER = logging.getLogger(__name__)


def _angle_block(reader: ByteReader) -> tuple[AngleInfo, tuple[Clip, ...]]:
    # the main clip is counted as the first angle
    additional = max(reader.u8() - 1, 0)
    flags = reader.u8()
    angle_info = AngleInfo(
        is_different_audios=bits(flags, 1) == 1,
        is_seamless_angle_change=bits(flags, 0) == 1,
    )
    clips = tuple(read_clip(reader, with_stc_ref=True) for _ in range(additional))
    return angle_info, clips


def _play_item(reader: ByteReader) -> PlayItem:
    clip = read_clip(reader)
    # reserved:11 | is_multi_angle:1 | connection_condition:4
    is_multi_angle = bits(reader.u16(), 4) == 1
    reader.skip(1)  # ref_to_stc_id
    in_time = read_time_stamp(reader)
    out_time = read_time_stamp(reader)
    user_opt_mask = reader.u64()
    reader.skip(1)  # random access flag
    reader.skip(3)  # still mode + still time
    angle_info = None
    angles: tuple[Clip, ...] = ()
    if is_multi_angle:
        angle_info, angles = _angle_block(reader)
    stream_number_table = read_stream_number_table(reader)
    LOGGER.debug(
        "play item %s: multi_angle=%s angles=%d",
        clip.file_name,
        is_multi_angle,
        len(angles),
    )
    return PlayItem(
        clip=clip,
        in_time=in_time,
        out_time=out_time,
        user_opt_mask=user_opt_mask,
        angle_info=angle_info,
        angles=angles,
        stream_number_table=stream_number_table,
    )


def read_play_item(reader: ByteReader) -> PlayItem:
    return reader.length_value(16, _play_item)


def _play_list(reader: ByteReader) -> PlayList:
    reader.skip(2)
    play_item_count = reader.u16()
    sub_path_count = reader.u16()
    LOGGER.debug("playlist: play_items=%d sub_paths=%d", play_item_count, sub_path_count)
    with log_indent():
        play_items = tuple(read_play_item(reader) for _ in range(play_item_count))
        sub_paths = tuple(read_sub_path(reader) for _ in range(sub_path_count))
    return PlayList(play_items=play_items, sub_paths=sub_paths)


def read_play_list(reader: ByteReader) -> PlayList:
    return reader.length_value(32, _play_list)
