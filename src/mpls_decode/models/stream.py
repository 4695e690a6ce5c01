from __future__ import annotations

from typing import Annotated, Literal, Union

from pydantic import BaseModel, ConfigDict, Field, model_validator

from mpls_decode.models.enums import (
    AudioFormat,
    CharacterCode,
    ColorSpace,
    DynamicRange,
    VideoFormat,
)


class PlayItemStreamRef(BaseModel):
    model_config = ConfigDict(extra="forbid", frozen=True)

    kind: Literal["play_item"] = "play_item"
    stream_pid: int


class SubPathClipStreamRef(BaseModel):
    model_config = ConfigDict(extra="forbid", frozen=True)

    kind: Literal["sub_path_clip"] = "sub_path_clip"
    sub_path_id: int
    sub_clip_id: int
    stream_pid: int


class SubPathStreamRef(BaseModel):
    model_config = ConfigDict(extra="forbid", frozen=True)

    kind: Literal["sub_path"] = "sub_path"
    sub_path_id: int
    stream_pid: int


StreamEntryRef = Annotated[
    Union[PlayItemStreamRef, SubPathClipStreamRef, SubPathStreamRef],
    Field(discriminator="kind"),
]


class StreamEntry(BaseModel):
    model_config = ConfigDict(extra="forbid", frozen=True)

    stream_type: int
    ref: StreamEntryRef

    @model_validator(mode="after")
    def _validate(self) -> "StreamEntry":
        expected = {1: "play_item", 2: "sub_path_clip", 3: "sub_path", 4: "sub_path"}
        if expected.get(self.stream_type) != self.ref.kind:
            raise ValueError("stream_type does not match ref kind")
        return self


class FrameRate(BaseModel):
    model_config = ConfigDict(extra="forbid", frozen=True)

    numerator: int
    denominator: int

    @property
    def fps(self) -> float:
        return self.numerator / self.denominator


class SdrVideoFormat(BaseModel):
    model_config = ConfigDict(extra="forbid", frozen=True)

    kind: Literal["sdr_video"] = "sdr_video"
    video_format: VideoFormat
    frame_rate: FrameRate | None = None


class HdrVideoFormat(BaseModel):
    model_config = ConfigDict(extra="forbid", frozen=True)

    kind: Literal["hdr_video"] = "hdr_video"
    video_format: VideoFormat
    frame_rate: FrameRate | None = None
    dynamic_range: DynamicRange
    color_space: ColorSpace


class AudioStreamFormat(BaseModel):
    model_config = ConfigDict(extra="forbid", frozen=True)

    kind: Literal["audio"] = "audio"
    audio_format: AudioFormat
    # empty when the sample-rate code is unknown
    sample_rates: tuple[int, ...] = ()
    language: str


class GraphicsFormat(BaseModel):
    model_config = ConfigDict(extra="forbid", frozen=True)

    kind: Literal["graphics"] = "graphics"
    language: str


class TextFormat(BaseModel):
    model_config = ConfigDict(extra="forbid", frozen=True)

    kind: Literal["text"] = "text"
    language: str
    character_code: CharacterCode


class UnknownFormat(BaseModel):
    model_config = ConfigDict(extra="forbid", frozen=True)

    kind: Literal["unknown"] = "unknown"


StreamFormat = Annotated[
    Union[
        SdrVideoFormat,
        HdrVideoFormat,
        AudioStreamFormat,
        GraphicsFormat,
        TextFormat,
        UnknownFormat,
    ],
    Field(discriminator="kind"),
]


class StreamAttributes(BaseModel):
    model_config = ConfigDict(extra="forbid", frozen=True)

    coding_type: int
    format: StreamFormat


class Stream(BaseModel):
    """A media stream within a clip: how it is reached and what it carries."""

    model_config = ConfigDict(extra="forbid", frozen=True)

    entry: StreamEntry
    attrs: StreamAttributes


class StreamNumberTable(BaseModel):
    model_config = ConfigDict(extra="forbid", frozen=True)

    primary_video_streams: tuple[Stream, ...] = ()
    primary_audio_streams: tuple[Stream, ...] = ()
    primary_pgs_streams: tuple[Stream, ...] = ()
    primary_igs_streams: tuple[Stream, ...] = ()
    secondary_video_streams: tuple[Stream, ...] = ()
    secondary_audio_streams: tuple[Stream, ...] = ()
    secondary_pgs_streams: tuple[Stream, ...] = ()
    dolby_vision_streams: tuple[Stream, ...] = ()

    def all_streams(self) -> list[Stream]:
        return [
            *self.primary_video_streams,
            *self.primary_audio_streams,
            *self.primary_pgs_streams,
            *self.primary_igs_streams,
            *self.secondary_video_streams,
            *self.secondary_audio_streams,
            *self.secondary_pgs_streams,
            *self.dolby_vision_streams,
        ]
