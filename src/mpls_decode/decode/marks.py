from __future__ import annotations

import logging

from mpls_decode.decode import codes
from mpls_decode.decode.clips import read_time_stamp
from mpls_decode.models.playlist import AppInfoPlayList, PlayListMark
from mpls_decode.util.reader import ByteReader

LOGGER = logging.getLogger(__name__)

# only these raw playback_count values are kept
COUNTED_PLAYBACK_VALUES = frozenset({0x2, 0x3})


def _app_info_play_list(reader: ByteReader) -> AppInfoPlayList:
    reader.skip(1)
    playback_type = codes.playback_type(reader.u8())
    playback_count = reader.u16()
    user_opt_mask = reader.u64()
    flags = reader.u16()
    return AppInfoPlayList(
        playback_type=playback_type,
        playback_count=playback_count if playback_count in COUNTED_PLAYBACK_VALUES else None,
        user_opt_mask=user_opt_mask,
        flags=flags,
    )


def read_app_info_play_list(reader: ByteReader) -> AppInfoPlayList:
    return reader.length_value(32, _app_info_play_list)


def _mark(reader: ByteReader) -> PlayListMark:
    reader.skip(1)
    mark_type = codes.mark_type(reader.u8())
    play_item_id = reader.u16()
    time_stamp = read_time_stamp(reader)
    reader.skip(2)  # entry ES PID
    duration = read_time_stamp(reader)
    return PlayListMark(
        mark_type=mark_type,
        play_item_id=play_item_id,
        time_stamp=time_stamp,
        duration=duration if duration.raw != 0 else None,
    )


def _marks(reader: ByteReader) -> tuple[PlayListMark, ...]:
    count = reader.u16()
    LOGGER.debug("marks: count=%d", count)
    return tuple(_mark(reader) for _ in range(count))


def read_play_list_marks(reader: ByteReader) -> tuple[PlayListMark, ...]:
    return reader.length_value(32, _marks)
