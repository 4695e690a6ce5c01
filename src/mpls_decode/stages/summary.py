from __future__ import annotations

"""Stage C: summary.

Condenses mpls.json into summary.json: counts, total duration of the main
path, the ordered list of main-feature clips and a stream overview.
"""

from pathlib import Path
import logging

from mpls_decode.models.enums import MarkType
from mpls_decode.models.mpls import Mpls
from mpls_decode.models.stream import (
    AudioStreamFormat,
    HdrVideoFormat,
    SdrVideoFormat,
    Stream,
)
from mpls_decode.models.summary import PlaylistSummaryModel
from mpls_decode.util.io import read_json, write_json


def _duration_seconds(mpls: Mpls) -> float:
    total = 0.0
    for item in mpls.play_list.play_items:
        # out < in only on corrupt discs; count those items as empty
        total += max(item.out_time.seconds - item.in_time.seconds, 0.0)
    return total


def _streams(mpls: Mpls) -> list[Stream]:
    return [
        stream
        for item in mpls.play_list.play_items
        for stream in item.stream_number_table.all_streams()
    ]


def _audio_languages(streams: list[Stream]) -> list[str]:
    languages: list[str] = []
    for stream in streams:
        fmt = stream.attrs.format
        if isinstance(fmt, AudioStreamFormat) and fmt.language not in languages:
            languages.append(fmt.language)
    return languages


def _frame_rate(mpls: Mpls) -> float | None:
    for item in mpls.play_list.play_items:
        for stream in item.stream_number_table.primary_video_streams:
            fmt = stream.attrs.format
            if isinstance(fmt, (SdrVideoFormat, HdrVideoFormat)) and fmt.frame_rate is not None:
                return round(fmt.frame_rate.fps, 3)
    return None


def run(mpls_path: Path, out_dir: Path) -> PlaylistSummaryModel:
    mpls = read_json(mpls_path, Mpls)
    streams = _streams(mpls)
    model = PlaylistSummaryModel(
        source=str(mpls_path),
        version=mpls.version,
        playback_type=mpls.app_info_play_list.playback_type.value,
        play_items=len(mpls.play_list.play_items),
        sub_paths=len(mpls.play_list.sub_paths),
        marks=len(mpls.marks),
        chapters=sum(1 for mark in mpls.marks if mark.mark_type == MarkType.ENTRY_POINT),
        extension_entries=len(mpls.ext),
        angle_count=len(mpls.angles()),
        duration_seconds=round(_duration_seconds(mpls), 3),
        clips=[item.clip.file_name for item in mpls.play_list.play_items],
        streams=len(streams),
        audio_languages=_audio_languages(streams),
        frame_rate=_frame_rate(mpls),
    )
    logging.getLogger(__name__).info(
        "summary: angles=%d chapters=%d duration=%.3fs",
        model.angle_count,
        model.chapters,
        model.duration_seconds,
    )
    write_json(out_dir / "summary.json", model)
    return model
