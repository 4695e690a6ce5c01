from __future__ import annotations

import logging

from mpls_decode.decode.clips import read_clip, read_time_stamp
from mpls_decode.models.clip import Clip
from mpls_decode.models.playlist import SubPath, SubPlayItem
from mpls_decode.util.logging import log_indent
from mpls_decode.util.reader import ByteReader, bits

LOGGER = logging.getLogger(__name__)


def _multi_clip_entries(reader: ByteReader) -> tuple[Clip, ...]:
    # the sub-play-item's own clip is the first entry
    additional = max(reader.u8() - 1, 0)
    reader.skip(1)
    return tuple(read_clip(reader, with_stc_ref=True) for _ in range(additional))


def _sub_play_item(reader: ByteReader) -> SubPlayItem:
    clip = read_clip(reader)
    # reserved:27 | connection_condition:4 | is_multi_clip:1
    is_multi_clip = bits(reader.u32(), 0) == 1
    reader.skip(1)  # ref_to_stc_id
    in_time = read_time_stamp(reader)
    out_time = read_time_stamp(reader)
    sync_play_item_id = reader.u16()
    sync_start_pts = reader.u32()
    multi_clip_entries = _multi_clip_entries(reader) if is_multi_clip else ()
    return SubPlayItem(
        clip=clip,
        in_time=in_time,
        out_time=out_time,
        sync_play_item_id=sync_play_item_id,
        sync_start_pts=sync_start_pts,
        multi_clip_entries=multi_clip_entries,
    )


def read_sub_play_item(reader: ByteReader) -> SubPlayItem:
    return reader.length_value(16, _sub_play_item)


def _sub_path(reader: ByteReader) -> SubPath:
    reader.skip(1)
    sub_path_type = reader.u8()
    is_repeat = bits(reader.u16(), 0) == 1
    reader.skip(1)
    item_count = reader.u8()
    LOGGER.debug("sub path: type=%d repeat=%s items=%d", sub_path_type, is_repeat, item_count)
    with log_indent():
        play_items = tuple(read_sub_play_item(reader) for _ in range(item_count))
    return SubPath(sub_path_type=sub_path_type, is_repeat=is_repeat, play_items=play_items)


def read_sub_path(reader: ByteReader) -> SubPath:
    return reader.length_value(32, _sub_path)
