from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field, model_validator

from mpls_decode.models.clip import Clip, TimeStamp
from mpls_decode.models.enums import MarkType, PlaybackType
from mpls_decode.models.stream import StreamNumberTable


class AngleInfo(BaseModel):
    model_config = ConfigDict(extra="forbid", frozen=True)

    is_different_audios: bool
    is_seamless_angle_change: bool


class PlayItem(BaseModel):
    model_config = ConfigDict(extra="forbid", frozen=True)

    clip: Clip
    in_time: TimeStamp
    out_time: TimeStamp
    user_opt_mask: int
    angle_info: AngleInfo | None = None
    # alternate clips only; the main clip is angle 0
    angles: tuple[Clip, ...] = ()
    stream_number_table: StreamNumberTable

    @model_validator(mode="after")
    def _validate(self) -> "PlayItem":
        if self.angles and self.angle_info is None:
            raise ValueError("alternate angle clips require angle_info")
        return self

    def clip_for_angle(self, index: int) -> Clip:
        """Clip played for angle ``index``, falling back to the main clip."""
        if index <= 0 or index > len(self.angles):
            return self.clip
        return self.angles[index - 1]


class SubPlayItem(BaseModel):
    model_config = ConfigDict(extra="forbid", frozen=True)

    clip: Clip
    in_time: TimeStamp
    out_time: TimeStamp
    sync_play_item_id: int
    sync_start_pts: int
    multi_clip_entries: tuple[Clip, ...] = ()


class SubPath(BaseModel):
    model_config = ConfigDict(extra="forbid", frozen=True)

    sub_path_type: int
    is_repeat: bool
    play_items: tuple[SubPlayItem, ...] = ()


class PlayList(BaseModel):
    model_config = ConfigDict(extra="forbid", frozen=True)

    play_items: tuple[PlayItem, ...] = ()
    sub_paths: tuple[SubPath, ...] = ()


class AppInfoPlayList(BaseModel):
    model_config = ConfigDict(extra="forbid", frozen=True)

    playback_type: PlaybackType
    playback_count: int | None = None
    user_opt_mask: int
    flags: int


class PlayListMark(BaseModel):
    model_config = ConfigDict(extra="forbid", frozen=True)

    mark_type: MarkType
    play_item_id: int
    time_stamp: TimeStamp
    duration: TimeStamp | None = None

    @model_validator(mode="after")
    def _validate(self) -> "PlayListMark":
        if self.duration is not None and self.duration.raw == 0:
            raise ValueError("zero duration must be stored as None")
        return self


class ExtensionDataEntry(BaseModel):
    model_config = ConfigDict(
        extra="forbid",
        frozen=True,
        ser_json_bytes="base64",
        val_json_bytes="base64",
    )

    data_type: int
    data_version: int
    data: bytes = Field(default=b"")
