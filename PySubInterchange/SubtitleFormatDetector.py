import logging

import regex

from PySubInterchange.Helpers.Text import NormaliseLineEndings

SRT_FORMAT = 'srt'
VTT_FORMAT = 'vtt'
ASS_FORMAT = 'ass'
UNKNOWN_FORMAT = 'unknown'

_VTT_HEADER = 'WEBVTT'
_ASS_SECTION_PATTERN = regex.compile(r'\[(?:Script Info|Events)\]')
_SRT_BLOCK_PATTERN = regex.compile(r'^\d+\n\d{2}:\d{2}:\d{2},\d{3} --> \d{2}:\d{2}:\d{2},\d{3}', regex.MULTILINE)

class SubtitleFormatDetector:
    """
    Classify subtitle content as SRT, WebVTT or ASS from its text.

    Checks run in a fixed order: the WEBVTT header, then ASS section headers, then an SRT index and timing line.
    """
    def detect(self, content : str) -> str:
        text = NormaliseLineEndings(content)

        if text.lstrip().startswith(_VTT_HEADER):
            return VTT_FORMAT

        if _ASS_SECTION_PATTERN.search(text):
            return ASS_FORMAT

        if _SRT_BLOCK_PATTERN.search(text):
            return SRT_FORMAT

        logging.debug("Unable to detect subtitle format from content")
        return UNKNOWN_FORMAT

def DetectSubtitleFormat(content : str) -> str:
    """
    Detect the subtitle format of content, returning 'srt', 'vtt', 'ass' or 'unknown'
    """
    return SubtitleFormatDetector().detect(content)
