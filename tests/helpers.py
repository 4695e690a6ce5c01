from __future__ import annotations

"""Builders for synthetic movie playlist buffers.

Each builder returns the exact on-disc bytes of one record, including its
length prefix where the record is framed.
"""

from dataclasses import dataclass, field
from pathlib import Path


def u8(value: int) -> bytes:
    return value.to_bytes(1, "big")


def u16(value: int) -> bytes:
    return value.to_bytes(2, "big")


def u32(value: int) -> bytes:
    return value.to_bytes(4, "big")


def u64(value: int) -> bytes:
    return value.to_bytes(8, "big")


def frame(width: int, body: bytes) -> bytes:
    return len(body).to_bytes(width // 8, "big") + body


def clip(name: str, codec: str = "M2TS", stc_ref: bool = False) -> bytes:
    data = name.encode("ascii") + codec.encode("ascii")
    if stc_ref:
        data += u8(0)
    return data


def stream_entry(stream_type: int = 1, *refs: int) -> bytes:
    if stream_type == 1:
        body = u8(1) + u16(refs[0] if refs else 0x1011)
    elif stream_type == 2:
        body = u8(2) + u8(refs[0]) + u8(refs[1]) + u16(refs[2])
    elif stream_type in (3, 4):
        body = u8(stream_type) + u8(refs[0]) + u16(refs[1])
    else:
        body = u8(stream_type) + bytes(refs)
    return frame(8, body)


def stream_attrs(coding_type: int, payload: bytes = b"") -> bytes:
    return frame(8, u8(coding_type) + payload)


def video_stream(pid: int = 0x1011, packed: int = 0x61) -> bytes:
    return stream_entry(1, pid) + stream_attrs(0x1B, u8(packed))


def audio_stream(pid: int = 0x1100, lang: str = "eng") -> bytes:
    return stream_entry(1, pid) + stream_attrs(0x81, u8(0x61) + lang.encode("ascii"))


STN_COUNT_ORDER = (
    "primary_video",
    "primary_audio",
    "primary_pgs",
    "primary_igs",
    "secondary_audio",
    "secondary_video",
    "secondary_pgs",
    "dolby_vision",
)

STN_LIST_ORDER = (
    "primary_video",
    "primary_audio",
    "primary_pgs",
    "primary_igs",
    "secondary_video",
    "secondary_audio",
    "secondary_pgs",
    "dolby_vision",
)


def stream_number_table(**streams: list[bytes]) -> bytes:
    counts = b"".join(u8(len(streams.get(name, []))) for name in STN_COUNT_ORDER)
    body = u16(0) + counts + u32(0)
    for name in STN_LIST_ORDER:
        body += b"".join(streams.get(name, []))
    return frame(16, body)


def play_item(
    name: str,
    in_time: int = 0,
    out_time: int = 45_000,
    angles: list[str] | None = None,
    angle_count: int | None = None,
    angle_flags: int = 0,
    multi_angle: bool | None = None,
    user_opt_mask: int = 0,
    stn: bytes | None = None,
    trailer: bytes = b"",
    angle_block_override: bytes | None = None,
) -> bytes:
    if multi_angle is None:
        multi_angle = angles is not None
    flags = 0x0001 | (0x0010 if multi_angle else 0)
    body = (
        clip(name)
        + u16(flags)
        + u8(0)
        + u32(in_time)
        + u32(out_time)
        + u64(user_opt_mask)
        + u8(0)
        + b"\x00\x00\x00"
    )
    if angle_block_override is not None:
        body += angle_block_override
    elif angles is not None:
        count = len(angles) + 1 if angle_count is None else angle_count
        body += u8(count) + u8(angle_flags)
        body += b"".join(clip(angle, stc_ref=True) for angle in angles)
    body += stn if stn is not None else stream_number_table()
    body += trailer
    return frame(16, body)


def sub_play_item(
    name: str,
    in_time: int = 0,
    out_time: int = 45_000,
    sync_play_item_id: int = 0,
    sync_start_pts: int = 0,
    multi_clips: list[str] | None = None,
) -> bytes:
    multi = multi_clips is not None
    body = (
        clip(name)
        + u32(0x0000_0002 | (1 if multi else 0))
        + u8(0)
        + u32(in_time)
        + u32(out_time)
        + u16(sync_play_item_id)
        + u32(sync_start_pts)
    )
    if multi:
        body += u8(len(multi_clips) + 1) + u8(0)
        body += b"".join(clip(entry, stc_ref=True) for entry in multi_clips)
    return frame(16, body)


def sub_path(sub_path_type: int, items: list[bytes], repeat: bool = False) -> bytes:
    body = u8(0) + u8(sub_path_type) + u16(1 if repeat else 0) + u8(0) + u8(len(items))
    body += b"".join(items)
    return frame(32, body)


def play_list(items: list[bytes], sub_paths: list[bytes] | None = None) -> bytes:
    sub_paths = sub_paths or []
    body = u16(0) + u16(len(items)) + u16(len(sub_paths)) + b"".join(items) + b"".join(sub_paths)
    return frame(32, body)


def app_info(playback_type: int = 1, playback_count: int = 0, mask: int = 0, flags: int = 0) -> bytes:
    body = u8(0) + u8(playback_type) + u16(playback_count) + u64(mask) + u16(flags)
    return frame(32, body)


def mark(mark_type: int, play_item_id: int, time_stamp: int, duration: int = 0) -> bytes:
    return u8(0) + u8(mark_type) + u16(play_item_id) + u32(time_stamp) + u16(0xFFFF) + u32(duration)


def marks(entries: list[bytes]) -> bytes:
    return frame(32, u16(len(entries)) + b"".join(entries))


def extension_data(entries: list[tuple[int, int, bytes]], count_high_bits: int = 0) -> bytes:
    headers = b""
    payloads = b""
    for data_type, data_version, payload in entries:
        headers += u16(data_type) + u16(data_version) + u32(0) + u32(len(payload))
        payloads += payload
    body = u32(0) + u32(count_high_bits | len(entries)) + headers + payloads
    return frame(32, body)


@dataclass
class MplsBuilder:
    items: list[bytes] = field(default_factory=list)
    sub_paths: list[bytes] = field(default_factory=list)
    marks: list[bytes] = field(default_factory=list)
    ext: bytes | None = None
    app_info: bytes = field(default_factory=app_info)
    version: str = "0300"
    tag: bytes = b"MPLS"

    def build(self) -> bytes:
        app = self.app_info
        pl = play_list(self.items, self.sub_paths)
        mk = marks(self.marks)
        play_list_address = 40 + len(app)
        mark_address = play_list_address + len(pl)
        ext_address = mark_address + len(mk) if self.ext is not None else 0
        header = (
            self.tag
            + self.version.encode("ascii")
            + u32(play_list_address)
            + u32(mark_address)
            + u32(ext_address)
            + bytes(20)
        )
        return header + app + pl + mk + (self.ext or b"")


def simple_mpls() -> bytes:
    """Single-angle main feature with three segments."""
    builder = MplsBuilder(
        items=[
            play_item("00055", 0, 90_000, stn=stream_number_table(
                primary_video=[video_stream()],
                primary_audio=[audio_stream(0x1100, "eng"), audio_stream(0x1101, "fra")],
            )),
            play_item("00059", 90_000, 180_000),
            play_item("00061", 180_000, 225_000),
        ],
        marks=[
            mark(1, 0, 0),
            mark(1, 1, 90_000),
            mark(2, 2, 180_000, duration=4_500),
        ],
    )
    return builder.build()


def multi_angle_mpls() -> bytes:
    """Four-angle playlist; only some play items carry alternate clips."""
    builder = MplsBuilder(
        items=[
            play_item("00081"),
            play_item("00082", angles=["00083", "00084", "00085"], angle_flags=0x01),
            play_item("00086"),
            play_item("00087", angles=["00088", "00089", "00090"], angle_flags=0x03),
            play_item("00091"),
            play_item("00092", angles=["00093"]),
        ],
        ext=extension_data([(1, 1, b"\x01\x02\x03"), (3, 2, b"vendor")]),
    )
    return builder.build()


def write_mpls(path: Path, data: bytes) -> Path:
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_bytes(data)
    return path
