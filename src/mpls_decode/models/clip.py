from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field, model_validator

CLOCK_HZ = 45_000


class TimeStamp(BaseModel):
    """A presentation time in 45 kHz ticks of the clip's system time clock."""

    model_config = ConfigDict(extra="forbid", frozen=True)

    raw: int = Field(..., ge=0)

    @property
    def seconds(self) -> float:
        return self.raw / CLOCK_HZ


class Clip(BaseModel):
    """A clip file, also known as a segment.

    ``file_name`` is the five-digit stream file stem (``"00055"``) and
    ``codec_id`` the four-letter container id, ``"M2TS"`` on Blu-ray discs.
    """

    model_config = ConfigDict(extra="forbid", frozen=True)

    file_name: str
    codec_id: str

    @model_validator(mode="after")
    def _validate(self) -> "Clip":
        if len(self.file_name) != 5:
            raise ValueError("clip file_name must be exactly 5 characters")
        if len(self.codec_id) != 4:
            raise ValueError("clip codec_id must be exactly 4 characters")
        return self
