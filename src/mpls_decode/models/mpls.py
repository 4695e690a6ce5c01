from __future__ import annotations

from dataclasses import dataclass

from pydantic import BaseModel, ConfigDict

from mpls_decode.models.clip import Clip
from mpls_decode.models.playlist import (
    AppInfoPlayList,
    ExtensionDataEntry,
    PlayList,
    PlayListMark,
)


@dataclass(frozen=True)
class Angle:
    """A variant of the playlist where some segments are swapped out.

    Every angle has one segment per play item; index 0 is the main feature.
    Angles are computed from the playlist on demand and never stored.
    """

    index: int
    play_list: PlayList

    def segments(self) -> list[Clip]:
        return [item.clip_for_angle(self.index) for item in self.play_list.play_items]

    def __str__(self) -> str:
        return str(self.index)


class Mpls(BaseModel):
    """A decoded movie playlist."""

    model_config = ConfigDict(extra="forbid", frozen=True)

    version: str
    play_list_address: int
    mark_address: int
    extension_address: int
    app_info_play_list: AppInfoPlayList
    play_list: PlayList
    marks: tuple[PlayListMark, ...] = ()
    ext: tuple[ExtensionDataEntry, ...] = ()

    def angles(self) -> list[Angle]:
        """All angles of the playlist, the main feature included.

        Empty only when the playlist has no play items.
        """
        play_items = self.play_list.play_items
        if not play_items:
            return []
        count = 1 + max(len(item.angles) for item in play_items)
        return [Angle(index=index, play_list=self.play_list) for index in range(count)]
