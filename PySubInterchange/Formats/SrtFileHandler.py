from PySubInterchange.Helpers.Text import NormaliseLineEndings, SplitBlocks
from PySubInterchange.Helpers.Timecode import FormatSrtTimecode, ParseSrtTimecode
from PySubInterchange.SubtitleData import SubtitleData
from PySubInterchange.SubtitleFileHandler import SubtitleFileHandler
from PySubInterchange.SubtitleFormatDetector import SRT_FORMAT


class SrtFileHandler(SubtitleFileHandler):
    """
    File handler for SubRip (SRT) subtitles.

    Blocks are separated by blank lines. The index line is not required, the first valid
    timing line in each block is used and the lines after it form the cue text.
    """

    FORMAT = SRT_FORMAT
    MIME_TYPE = 'application/x-subrip'
    SUPPORTED_EXTENSIONS = {'.srt': 10}

    def parse_string(self, content: str) -> SubtitleData:
        """
        Parse SRT string content and return SubtitleData with cues and metadata.
        """
        blocks = SplitBlocks(NormaliseLineEndings(content))
        cues, skipped = self._parse_timed_blocks(blocks, ParseSrtTimecode)
        return self._build_data(cues, skipped)

    def compose(self, data: SubtitleData) -> str:
        """
        Compose cues into SRT, renumbering from 1 in start time order.

        Blocks are separated by a blank line with no separator after the last one.
        """
        blocks = []
        for number, cue in enumerate(data.sorted_cues(), 1):
            timing = f"{FormatSrtTimecode(cue.start_time)} --> {FormatSrtTimecode(cue.end_time)}"
            blocks.append(f"{number}\n{timing}\n{cue.text}")

        return "\n\n".join(blocks)
