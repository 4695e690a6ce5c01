from __future__ import annotations

"""Code tables for the enumerated fields of a playlist.

Unknown codes map to an UNKNOWN member (or ``None``/``()`` for rates) so
that discs using newer formats still decode.
"""

from mpls_decode.models.enums import (
    AudioFormat,
    CharacterCode,
    ColorSpace,
    DynamicRange,
    MarkType,
    PlaybackType,
    VideoFormat,
)
from mpls_decode.models.stream import FrameRate
from mpls_decode.util.reader import nibbles

PLAYBACK_TYPES = {
    0x1: PlaybackType.STANDARD,
    0x2: PlaybackType.RANDOM,
    0x3: PlaybackType.SHUFFLE,
}

MARK_TYPES = {
    0x1: MarkType.ENTRY_POINT,
    0x2: MarkType.LINK_POINT,
}

VIDEO_FORMATS = {
    0x1: VideoFormat.INTERLACED_480,
    0x2: VideoFormat.INTERLACED_576,
    0x3: VideoFormat.PROGRESSIVE_480,
    0x4: VideoFormat.INTERLACED_1080,
    0x5: VideoFormat.PROGRESSIVE_720,
    0x6: VideoFormat.PROGRESSIVE_1080,
    0x7: VideoFormat.PROGRESSIVE_576,
    0x8: VideoFormat.PROGRESSIVE_2160,
}

FRAME_RATES = {
    0x1: (24_000, 1_001),
    0x2: (24, 1),
    0x3: (25, 1),
    0x4: (30_000, 1_001),
    0x6: (50, 1),
    0x7: (60_000, 1_001),
}

DYNAMIC_RANGES = {
    0x0: DynamicRange.SDR,
    0x1: DynamicRange.HDR10,
    0x2: DynamicRange.DOLBY_VISION,
}

COLOR_SPACES = {
    0x1: ColorSpace.BT709,
    0x2: ColorSpace.BT2020,
}

AUDIO_FORMATS = {
    0x1: AudioFormat.MONO,
    0x3: AudioFormat.STEREO,
    0x6: AudioFormat.MULTICHANNEL,
    0xC: AudioFormat.STEREO_AND_MULTICHANNEL,
}

SAMPLE_RATES = {
    0x1: (48_000,),
    0x4: (96_000,),
    0x5: (192_000,),
    0xC: (48_000, 192_000),
    0xE: (48_000, 96_000),
}

CHARACTER_CODES = {
    0x1: CharacterCode.UTF8,
    0x2: CharacterCode.UTF16BE,
    0x3: CharacterCode.SHIFT_JIS,
    0x4: CharacterCode.EUC_KR,
    0x5: CharacterCode.GB18030,
    0x6: CharacterCode.EUC_CN,
    0x7: CharacterCode.BIG5,
}


def playback_type(code: int) -> PlaybackType:
    return PLAYBACK_TYPES.get(code, PlaybackType.UNKNOWN)


def mark_type(code: int) -> MarkType:
    return MARK_TYPES.get(code, MarkType.UNKNOWN)


def character_code(code: int) -> CharacterCode:
    return CHARACTER_CODES.get(code, CharacterCode.UNKNOWN)


def frame_rate(code: int) -> FrameRate | None:
    pair = FRAME_RATES.get(code)
    if pair is None:
        return None
    return FrameRate(numerator=pair[0], denominator=pair[1])


def video_format(packed: int) -> tuple[VideoFormat, FrameRate | None]:
    """Split a video attribute byte into (format, frame rate)."""
    high, low = nibbles(packed)
    return VIDEO_FORMATS.get(high, VideoFormat.UNKNOWN), frame_rate(low)


def dynamic_range_color_space(packed: int) -> tuple[DynamicRange, ColorSpace]:
    high, low = nibbles(packed)
    return (
        DYNAMIC_RANGES.get(high, DynamicRange.UNKNOWN),
        COLOR_SPACES.get(low, ColorSpace.UNKNOWN),
    )


def audio_format(packed: int) -> tuple[AudioFormat, tuple[int, ...]]:
    """Split an audio attribute byte into (channel layout, sample rates)."""
    high, low = nibbles(packed)
    return AUDIO_FORMATS.get(high, AudioFormat.UNKNOWN), SAMPLE_RATES.get(low, ())
