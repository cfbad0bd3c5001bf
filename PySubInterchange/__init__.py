"""
PySubInterchange - Subtitle Interchange Engine

Converts between timed text cues and SubRip (SRT), WebVTT and Advanced SubStation Alpha (ASS) content.

Basic Usage
-----------

# Parse content, detecting the format
cues = parse_subtitle_file(content)

# Export the cues in another format
ass_text = export_subtitles(cues, "ass", video_width=1280, video_height=720)
"""
from __future__ import annotations

from PySubInterchange.Options import Options
from PySubInterchange.SubtitleCue import Cue, CueDefaults, CuePosition, CueStyle
from PySubInterchange.SubtitleData import SkippedBlock, SubtitleData
from PySubInterchange.SubtitleError import (
    MalformedTimecodeError,
    SubtitleError,
    SubtitleParseError,
    UnsupportedFormatError,
)
from PySubInterchange.SubtitleFileHandler import SubtitleFileHandler
from PySubInterchange.SubtitleFormatRegistry import SubtitleFormatRegistry
from PySubInterchange.SubtitleInterchange import (
    detect_subtitle_format,
    export_subtitles,
    export_to_ass,
    export_to_srt,
    export_to_vtt,
    get_subtitle_file_extension,
    get_subtitle_mime_type,
    hex_to_ass_color,
    parse_ass,
    parse_srt,
    parse_subtitle_data,
    parse_subtitle_file,
    parse_vtt,
)
from PySubInterchange.version import __version__

__all__ = [
    '__version__',
    'Cue',
    'CueDefaults',
    'CuePosition',
    'CueStyle',
    'MalformedTimecodeError',
    'Options',
    'SkippedBlock',
    'SubtitleData',
    'SubtitleError',
    'SubtitleFileHandler',
    'SubtitleFormatRegistry',
    'SubtitleParseError',
    'UnsupportedFormatError',
    'detect_subtitle_format',
    'export_subtitles',
    'export_to_ass',
    'export_to_srt',
    'export_to_vtt',
    'get_subtitle_file_extension',
    'get_subtitle_mime_type',
    'hex_to_ass_color',
    'parse_ass',
    'parse_srt',
    'parse_subtitle_data',
    'parse_subtitle_file',
    'parse_vtt',
]
