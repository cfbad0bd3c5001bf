from abc import ABC, abstractmethod
from collections.abc import Callable, Sequence
from typing import TextIO
import logging
import os

from PySubInterchange.Options import Options
from PySubInterchange.SubtitleCue import Cue, CueDefaults
from PySubInterchange.SubtitleData import SkippedBlock, SubtitleData
from PySubInterchange.SubtitleError import MalformedTimecodeError

# Default encodings for reading subtitle files
default_encoding = os.getenv('DEFAULT_ENCODING', 'utf-8')
fallback_encoding = os.getenv('FALLBACK_ENCODING', 'iso-8859-1')

_TIMING_SEPARATOR = " --> "


class SubtitleFileHandler(ABC):
    """
    Abstract interface for reading and writing subtitle content.

    Implementations handle format-specific operations while callers remain format-agnostic.
    Parsing is lenient: blocks that cannot be parsed are recorded in SubtitleData.skipped and otherwise ignored.
    """

    FORMAT : str = ''
    MIME_TYPE : str = 'text/plain'
    SUPPORTED_EXTENSIONS: dict[str, int] = {}

    def __init__(self, options : Options|None = None, defaults : CueDefaults|None = None):
        self.options : Options = options or Options()
        self.defaults : CueDefaults = defaults or self.options.cue_defaults()

    @abstractmethod
    def parse_string(self, content: str) -> SubtitleData:
        """
        Parse subtitle string content and return cues with file-level metadata.

        Returns:
            SubtitleData: Parsed cues, metadata and diagnostics for skipped blocks
        """
        raise NotImplementedError

    @abstractmethod
    def compose(self, data: SubtitleData) -> str:
        """
        Compose cues into text in the handler's format. Cues are written in start time order.

        Args:
            data: SubtitleData containing cues and metadata

        Returns:
            str: Subtitle content in the file handler's format
        """
        raise NotImplementedError

    def parse_file(self, file_obj: TextIO) -> SubtitleData:
        """
        Parse the content of an open text stream
        """
        return self.parse_string(file_obj.read())

    def parse_cues(self, content : str) -> list[Cue]:
        """
        Parse content and return only the cues
        """
        return self.parse_string(content).cues

    def compose_cues(self, cues : Sequence[Cue]) -> str:
        """
        Compose a list of cues with no file-level metadata
        """
        return self.compose(SubtitleData(cues=list(cues)))

    def get_file_extensions(self) -> list[str]:
        """
        Get file extensions supported by this handler.
        """
        return list(self.__class__.SUPPORTED_EXTENSIONS.keys())

    def get_extension_priorities(self) -> dict[str, int]:
        """
        Get priority for each supported extension.

        Returns:
            dict: Mapping of file extensions to their priority (higher = more preferred)
        """
        return self.__class__.SUPPORTED_EXTENSIONS.copy()

    def _build_data(self, cues : list[Cue], skipped : list[SkippedBlock], metadata : dict|None = None) -> SubtitleData:
        """
        Wrap parse results, reporting any skipped blocks
        """
        if skipped:
            logging.warning(f"Skipped {len(skipped)} malformed {self.FORMAT.upper()} block(s)")

        return SubtitleData(cues=cues, metadata=metadata or {'format': self.FORMAT}, detected_format=self.FORMAT, skipped=skipped)

    def _parse_timed_blocks(self, blocks : list[str], parse_timecode : Callable[[str], float]) -> tuple[list[Cue], list[SkippedBlock]]:
        """
        Extract a cue from each block of an SRT-style file.

        The timing line is the first line containing ' --> ' whose timecodes parse, so index
        and identifier lines before it are ignored. Everything after it is the cue text.
        """
        cues : list[Cue] = []
        skipped : list[SkippedBlock] = []

        for number, block in enumerate(blocks, 1):
            lines = block.split('\n')
            timing = None
            reason = "no timing line"

            for index, line in enumerate(lines):
                if _TIMING_SEPARATOR not in line:
                    continue
                start_text, end_text = line.split('-->', 1)
                try:
                    timing = (index, parse_timecode(start_text), parse_timecode(end_text))
                    break
                except MalformedTimecodeError as e:
                    reason = str(e)

            if timing is None:
                self._skip_block(skipped, number, block, reason)
                continue

            index, start, end = timing
            text = '\n'.join(lines[index + 1:]).strip()
            if not text:
                self._skip_block(skipped, number, block, "empty text")
                continue

            if end <= start:
                self._skip_block(skipped, number, block, "non-positive duration")
                continue

            cues.append(self.defaults.CreateCue(start, end, text))

        return cues, skipped

    def _skip_block(self, skipped : list[SkippedBlock], number : int, content : str, reason : str) -> None:
        logging.debug(f"Skipping {self.FORMAT.upper()} block {number}: {reason}")
        skipped.append(SkippedBlock(number, content, reason))
