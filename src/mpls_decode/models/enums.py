from __future__ import annotations

from enum import StrEnum


class PlaybackType(StrEnum):
    STANDARD = "standard"
    RANDOM = "random"
    SHUFFLE = "shuffle"
    UNKNOWN = "unknown"


class MarkType(StrEnum):
    ENTRY_POINT = "entry_point"
    LINK_POINT = "link_point"
    UNKNOWN = "unknown"


class VideoFormat(StrEnum):
    INTERLACED_480 = "480i"
    INTERLACED_576 = "576i"
    INTERLACED_1080 = "1080i"
    PROGRESSIVE_480 = "480p"
    PROGRESSIVE_576 = "576p"
    PROGRESSIVE_720 = "720p"
    PROGRESSIVE_1080 = "1080p"
    PROGRESSIVE_2160 = "2160p"
    UNKNOWN = "unknown"


class DynamicRange(StrEnum):
    SDR = "sdr"
    HDR10 = "hdr10"
    DOLBY_VISION = "dolby_vision"
    UNKNOWN = "unknown"


class ColorSpace(StrEnum):
    BT709 = "bt709"
    BT2020 = "bt2020"
    UNKNOWN = "unknown"


class AudioFormat(StrEnum):
    MONO = "mono"
    STEREO = "stereo"
    MULTICHANNEL = "multichannel"
    STEREO_AND_MULTICHANNEL = "stereo_and_multichannel"
    UNKNOWN = "unknown"


class CharacterCode(StrEnum):
    UTF8 = "utf-8"
    UTF16BE = "utf-16be"
    SHIFT_JIS = "shift_jis"
    EUC_KR = "euc-kr"
    GB18030 = "gb18030"
    EUC_CN = "euc-cn"
    BIG5 = "big5"
    UNKNOWN = "unknown"
