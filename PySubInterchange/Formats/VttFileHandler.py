import regex

from PySubInterchange.Helpers.Text import NormaliseLineEndings, SplitBlocks
from PySubInterchange.Helpers.Timecode import FormatVttTimecode, ParseVttTimecode
from PySubInterchange.SubtitleData import SubtitleData
from PySubInterchange.SubtitleFileHandler import SubtitleFileHandler
from PySubInterchange.SubtitleFormatDetector import VTT_FORMAT

_HEADER_PATTERN = regex.compile(r"^\s*WEBVTT[^\n]*(?:\n(?![^\n]*-->)[^\n]+)*\n?")
_METADATA_BLOCK_PATTERN = regex.compile(r"^(?:NOTE|STYLE|REGION)(?:\s|$)")

class VttFileHandler(SubtitleFileHandler):
    """
    WebVTT subtitle format handler.

    Cue identifiers, NOTE and STYLE blocks are tolerated but not preserved.
    Cue settings after the end timestamp are ignored.
    """

    FORMAT = VTT_FORMAT
    MIME_TYPE = 'text/vtt'
    SUPPORTED_EXTENSIONS = {'.vtt': 10}

    _HEADER = "WEBVTT"

    def parse_string(self, content: str) -> SubtitleData:
        """Parse string content and return SubtitleData with cues and metadata."""
        text = _HEADER_PATTERN.sub('', NormaliseLineEndings(content), count=1)
        blocks = [block for block in SplitBlocks(text) if not self._is_metadata_block(block)]
        cues, skipped = self._parse_timed_blocks(blocks, ParseVttTimecode)
        return self._build_data(cues, skipped)

    def compose(self, data: SubtitleData) -> str:
        """Compose cues into WebVTT. The header is written even when there are no cues."""
        blocks = []
        for cue in data.sorted_cues():
            blocks.append(f"{FormatVttTimecode(cue.start_time)} --> {FormatVttTimecode(cue.end_time)}\n{cue.text}")

        return f"{self._HEADER}\n\n" + "\n\n".join(blocks)

    @staticmethod
    def _is_metadata_block(block : str) -> bool:
        """
        NOTE, STYLE and REGION blocks carry no cue. A block with a timing line is a cue,
        even if its identifier happens to start with one of those words.
        """
        if not _METADATA_BLOCK_PATTERN.match(block):
            return False
        return not any(" --> " in line for line in block.split("\n"))
