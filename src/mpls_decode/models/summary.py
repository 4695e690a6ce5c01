from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field, model_validator


class AngleSegmentsModel(BaseModel):
    model_config = ConfigDict(extra="forbid")

    index: int = Field(..., ge=0)
    segments: list[str]


class AnglesModel(BaseModel):
    model_config = ConfigDict(extra="forbid")

    source: str
    angles: list[AngleSegmentsModel]

    @model_validator(mode="after")
    def _validate(self) -> "AnglesModel":
        indices = [angle.index for angle in self.angles]
        if len(indices) != len(set(indices)):
            raise ValueError("angle index must be unique")
        lengths = {len(angle.segments) for angle in self.angles}
        if len(lengths) > 1:
            raise ValueError("all angles must have the same number of segments")
        return self


class PlaylistSummaryModel(BaseModel):
    model_config = ConfigDict(extra="forbid")

    source: str
    version: str
    playback_type: str
    play_items: int
    sub_paths: int
    marks: int
    chapters: int
    extension_entries: int
    angle_count: int
    duration_seconds: float = Field(..., ge=0.0)
    clips: list[str] = Field(default_factory=list)
    streams: int = 0
    audio_languages: list[str] = Field(default_factory=list)
    # of the first primary video stream
    frame_rate: float | None = None
