"""
Conversion between each format's textual timecodes and seconds as a float.

SRT and WebVTT carry milliseconds, ASS carries centiseconds with unpadded hours.
"""
from datetime import timedelta

import pysubs2.time
import regex
import srt # type: ignore

from PySubInterchange.SubtitleError import MalformedTimecodeError

_SRT_TIMECODE_PATTERN = regex.compile(r'^(\d{1,2}):(\d{2}):(\d{2})[,.](\d{1,3})')
_VTT_TIMECODE_PATTERN = regex.compile(r'^(\d{1,2}):(\d{2}):(\d{2})[.,](\d{1,3})')
_VTT_SHORT_TIMECODE_PATTERN = regex.compile(r'^(\d{2}):(\d{2})[.,](\d{1,3})')
_ASS_TIMECODE_PATTERN = regex.compile(r'^(\d+):(\d{2}):(\d{2})\.(\d{2})$')

def _fraction_to_seconds(fraction : str) -> float:
    # '5' is half a second, not five milliseconds
    return int(fraction.ljust(3, '0')) / 1000

def _to_timedelta(seconds : float) -> timedelta:
    return timedelta(seconds=max(0.0, seconds))

def ParseSrtTimecode(timecode : str) -> float:
    """
    Parse an SRT timecode (H:MM:SS,mmm) into seconds.
    Hours may be one or two digits, the fraction one to three digits and either ',' or '.' is accepted.
    """
    match = _SRT_TIMECODE_PATTERN.match(timecode.strip())
    if not match:
        raise MalformedTimecodeError(f"Invalid SRT timecode: '{timecode}'", timecode)

    hours, minutes, seconds, fraction = match.groups()
    return int(hours) * 3600 + int(minutes) * 60 + int(seconds) + _fraction_to_seconds(fraction)

def FormatSrtTimecode(seconds : float) -> str:
    """
    Format seconds as HH:MM:SS,mmm
    """
    return srt.timedelta_to_srt_timestamp(_to_timedelta(seconds))

def ParseVttTimecode(timecode : str) -> float:
    """
    Parse a WebVTT timecode into seconds, accepting the short MM:SS.mmm form when the hours are omitted
    """
    text = timecode.strip()
    match = _VTT_TIMECODE_PATTERN.match(text)
    if match:
        hours, minutes, seconds, fraction = match.groups()
        return int(hours) * 3600 + int(minutes) * 60 + int(seconds) + _fraction_to_seconds(fraction)

    match = _VTT_SHORT_TIMECODE_PATTERN.match(text)
    if match:
        minutes, seconds, fraction = match.groups()
        return int(minutes) * 60 + int(seconds) + _fraction_to_seconds(fraction)

    raise MalformedTimecodeError(f"Invalid WebVTT timecode: '{timecode}'", timecode)

def FormatVttTimecode(seconds : float) -> str:
    """
    Format seconds as HH:MM:SS.mmm (hours are always included)
    """
    return srt.timedelta_to_srt_timestamp(_to_timedelta(seconds)).replace(',', '.')

def ParseAssTimecode(timecode : str) -> float:
    """
    Parse an ASS timecode (H:MM:SS.cc) into seconds
    """
    match = _ASS_TIMECODE_PATTERN.match(timecode.strip())
    if not match:
        raise MalformedTimecodeError(f"Invalid ASS timecode: '{timecode}'", timecode)

    hours, minutes, seconds, centiseconds = match.groups()
    ms = pysubs2.time.make_time(h=int(hours), m=int(minutes), s=int(seconds), ms=int(centiseconds) * 10)
    return ms / 1000

def FormatAssTimecode(seconds : float) -> str:
    """
    Format seconds as H:MM:SS.cc, truncating to centiseconds
    """
    # Floor to whole milliseconds, the epsilon absorbs float noise such as 2.999 * 1000
    ms = int(max(0.0, seconds) * 1000 + 1e-6)
    h, m, s, ms = pysubs2.time.ms_to_times(ms)
    return f"{h}:{m:02d}:{s:02d}.{ms // 10:02d}"
