"""
Entry points for converting between cues and subtitle file content.

None of these functions touch the filesystem: content is passed in and returned as text.
"""
from __future__ import annotations

from collections.abc import Sequence

from PySubInterchange.Formats.AssFileHandler import AssFileHandler
from PySubInterchange.Formats.SrtFileHandler import SrtFileHandler
from PySubInterchange.Formats.VttFileHandler import VttFileHandler
from PySubInterchange.Helpers.Color import HexToAssColor
from PySubInterchange.Options import Options
from PySubInterchange.SubtitleCue import Cue
from PySubInterchange.SubtitleData import SubtitleData
from PySubInterchange.SubtitleError import UnsupportedFormatError
from PySubInterchange.SubtitleFormatDetector import UNKNOWN_FORMAT
from PySubInterchange.SubtitleFormatRegistry import SubtitleFormatRegistry


def parse_subtitle_data(content : str, format : str|None = None, options : Options|None = None) -> SubtitleData:
    """
    Parse subtitle content, detecting the format if it is not specified.

    Parameters
    ----------
    content : str
        The subtitle file content.
    format : str, optional
        One of 'srt', 'vtt' or 'ass'. Detected from the content when omitted.
    options : Options, optional
        Engine settings, including the default style and position for parsed cues.

    Returns
    -------
    SubtitleData
        Parsed cues, with diagnostics for any blocks that were skipped.

    Raises
    ------
    UnsupportedFormatError
        If the format is not recognised or cannot be detected.
    """
    if not format:
        format = SubtitleFormatRegistry.detect_format(content)
        if format == UNKNOWN_FORMAT:
            raise UnsupportedFormatError(f"Unable to detect subtitle format. Supported formats: {SubtitleFormatRegistry.list_available_formats()}", format)

    handler = SubtitleFormatRegistry.create_handler(format, options=options)
    return handler.parse_string(content)

def parse_subtitle_file(content : str, format : str|None = None, options : Options|None = None) -> list[Cue]:
    """
    Parse subtitle content into a list of cues, detecting the format if it is not specified.

    Cues have no identity, callers assign one before storing them.
    Malformed blocks are skipped, use :func:`parse_subtitle_data` to see which.
    """
    return parse_subtitle_data(content, format, options=options).cues

def export_subtitles(cues : Sequence[Cue], format : str, video_width : int|None = None, video_height : int|None = None, options : Options|None = None) -> str:
    """
    Export cues in the requested format ('srt', 'vtt' or 'ass').

    The video size only affects ASS output, where it sets PlayResX/PlayResY.
    """
    handler = SubtitleFormatRegistry.create_handler(format, options=options)
    metadata = {}
    if video_width:
        metadata['video_width'] = video_width
    if video_height:
        metadata['video_height'] = video_height
    return handler.compose(SubtitleData(cues=list(cues), metadata=metadata))

def detect_subtitle_format(content : str) -> str:
    """
    Identify the format of subtitle content: 'srt', 'vtt', 'ass' or 'unknown'
    """
    return SubtitleFormatRegistry.detect_format(content)

def get_subtitle_file_extension(format : str) -> str:
    """
    File extension (without a dot) for a format
    """
    return str(format).lower()

def get_subtitle_mime_type(format : str) -> str:
    """
    MIME type for a format, 'text/plain' for anything unrecognised
    """
    return SubtitleFormatRegistry.get_mime_type(format)

def parse_srt(content : str) -> list[Cue]:
    return SrtFileHandler().parse_cues(content)

def export_to_srt(cues : Sequence[Cue]) -> str:
    return SrtFileHandler().compose_cues(cues)

def parse_vtt(content : str) -> list[Cue]:
    return VttFileHandler().parse_cues(content)

def export_to_vtt(cues : Sequence[Cue]) -> str:
    return VttFileHandler().compose_cues(cues)

def parse_ass(content : str) -> list[Cue]:
    return AssFileHandler().parse_cues(content)

def export_to_ass(cues : Sequence[Cue], video_width : int|None = None, video_height : int|None = None) -> str:
    return export_subtitles(cues, AssFileHandler.FORMAT, video_width, video_height)

def hex_to_ass_color(hex_color : str) -> str:
    """
    Convert an RGB hex colour to ASS BGR notation, e.g. '#FF0000' -> '&H0000ff&'
    """
    return HexToAssColor(hex_color)
