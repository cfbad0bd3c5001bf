from __future__ import annotations

from typing import Any

from PySubInterchange.SubtitleCue import Cue


class SkippedBlock:
    """
    Diagnostic record for a block that a parser discarded.

    Attributes:
        number (int): 1-based position of the block in the source
        content (str): The raw text of the block
        reason (str): Why the block was skipped
    """
    def __init__(self, number : int, content : str, reason : str):
        self.number : int = number
        self.content : str = content
        self.reason : str = reason

    def __repr__(self) -> str:
        return f"SkippedBlock(number={self.number}, reason={self.reason!r})"


class SubtitleData:
    """
    Format-agnostic container for cues and file-level metadata.

    Attributes:
        cues (list[Cue]): Cues in source order (parsing) or in any order (composing)
        metadata (dict[str, Any]): File-level metadata read from or required by specific formats
        detected_format (str|None): The format the content was parsed as (e.g. 'srt')
        skipped (list[SkippedBlock]): Blocks discarded during parsing
    """

    def __init__(self, cues : list[Cue]|None = None, metadata : dict[str, Any]|None = None, detected_format : str|None = None,
                 skipped : list[SkippedBlock]|None = None):
        self.cues : list[Cue] = cues or []
        self.metadata : dict[str, Any] = metadata or {}
        self.detected_format : str|None = detected_format
        self.skipped : list[SkippedBlock] = skipped or []

    def sorted_cues(self) -> list[Cue]:
        """
        Cues ordered by start time. Cues with equal start times keep their relative order.
        """
        return sorted(self.cues, key=lambda cue: cue.start_time)
