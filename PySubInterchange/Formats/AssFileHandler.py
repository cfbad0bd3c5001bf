import logging

import regex

from PySubInterchange.Helpers.Alignment import GetAlignmentBucket
from PySubInterchange.Helpers.Color import Color
from PySubInterchange.Helpers.Text import (
    AssToPlainLineBreaks,
    NormaliseLineEndings,
    PlainToAssLineBreaks,
    StripOverrideTags,
)
from PySubInterchange.Helpers.Timecode import FormatAssTimecode, ParseAssTimecode
from PySubInterchange.SubtitleCue import Cue
from PySubInterchange.SubtitleData import SkippedBlock, SubtitleData
from PySubInterchange.SubtitleError import SubtitleParseError
from PySubInterchange.SubtitleFileHandler import SubtitleFileHandler
from PySubInterchange.SubtitleFormatDetector import ASS_FORMAT

_EVENTS_SECTION_PATTERN = regex.compile(r'^\[Events\][^\n]*(?:\n|\Z)(.*?)(?=^\[|\Z)', regex.MULTILINE | regex.DOTALL)

# Field order assumed when an [Events] section has no Format line
_DEFAULT_EVENT_FIELDS = ['Layer', 'Start', 'End', 'Style', 'Name', 'MarginL', 'MarginR', 'MarginV', 'Effect', 'Text']

_STYLE_FIELDS = [
    'Name', 'Fontname', 'Fontsize', 'PrimaryColour', 'SecondaryColour', 'OutlineColour', 'BackColour',
    'Bold', 'Italic', 'Underline', 'StrikeOut', 'ScaleX', 'ScaleY', 'Spacing', 'Angle',
    'BorderStyle', 'Outline', 'Shadow', 'Alignment', 'MarginL', 'MarginR', 'MarginV', 'Encoding'
]

class AssFileHandler(SubtitleFileHandler):
    """
    File handler for Advanced SubStation Alpha (ASS/SSA) subtitles.

    Only Dialogue events are read. Columns are located through the [Events] Format line,
    so files with a nonstandard field order parse correctly. Override tags are stripped.

    Output uses a fixed header with a single Default style. A cue whose style has a non-white
    colour gets an inline {\\c&HBBGGRR&} tag.
    """

    FORMAT = ASS_FORMAT
    MIME_TYPE = 'text/x-ssa'
    SUPPORTED_EXTENSIONS = {'.ass': 10, '.ssa': 10}

    def parse_string(self, content: str) -> SubtitleData:
        """
        Parse string content and return SubtitleData with cues and metadata.
        """
        text = NormaliseLineEndings(content)
        skipped : list[SkippedBlock] = []

        section = _EVENTS_SECTION_PATTERN.search(text)
        if not section:
            self._skip_block(skipped, 1, text, "no [Events] section")
            return self._build_data([], skipped)

        event_lines = section.group(1).split('\n')
        columns = self._get_column_map(event_lines)

        if not all(field in columns for field in ('Start', 'End', 'Text')):
            self._skip_block(skipped, 1, section.group(0), "Format line does not declare Start, End and Text")
            return self._build_data([], skipped)

        cues : list[Cue] = []
        number = 0
        for line in event_lines:
            line = line.lstrip()
            if not line.startswith('Dialogue:'):
                continue

            number += 1
            try:
                cue = self._parse_dialogue(line, columns)
            except SubtitleParseError as e:
                self._skip_block(skipped, number, line, str(e))
                continue

            cues.append(cue)

        return self._build_data(cues, skipped)

    def compose(self, data: SubtitleData) -> str:
        """
        Compose cues into ASS format.

        The play resolution comes from data.metadata ('video_width', 'video_height') when present,
        otherwise from the options.
        """
        width = data.metadata.get('video_width') or self.options.play_res_x
        height = data.metadata.get('video_height') or self.options.play_res_y

        output_lines = self._build_header(width, height)

        for cue in data.sorted_cues():
            output_lines.append(self._compose_dialogue(cue))

        return '\n'.join(output_lines) + '\n'

    def _get_column_map(self, event_lines : list[str]) -> dict[str, int]:
        """
        Map event field names to column indices using the section's Format line
        """
        for line in event_lines:
            line = line.strip()
            if line.startswith('Format:'):
                fields = [field.strip() for field in line[len('Format:'):].split(',')]
                return { field: index for index, field in enumerate(fields) }

        logging.debug("No Format line in [Events] section, assuming the standard field order")
        return { field: index for index, field in enumerate(_DEFAULT_EVENT_FIELDS) }

    def _parse_dialogue(self, line : str, columns : dict[str, int]) -> Cue:
        """
        Convert a Dialogue line to a cue.
        Text is everything from the Text column onward since it may contain commas.
        """
        parts = line[len('Dialogue:'):].lstrip().split(',')
        text_index = columns['Text']
        if len(parts) <= max(columns['Start'], columns['End'], text_index):
            raise SubtitleParseError("too few fields")

        start = ParseAssTimecode(parts[columns['Start']])
        end = ParseAssTimecode(parts[columns['End']])

        text = AssToPlainLineBreaks(StripOverrideTags(','.join(parts[text_index:])))
        if not text.strip():
            raise SubtitleParseError("empty text")

        if end <= start:
            raise SubtitleParseError("non-positive duration")

        return self.defaults.CreateCue(start, end, text)

    def _build_header(self, width : int, height : int) -> list[str]:
        default_style = [
            'Default',
            self.defaults.style.font_family or 'Arial',
            self._format_number(self.defaults.style.font_size or 48),
            Color(255, 255, 255).to_ass_style(),
            Color(255, 0, 0).to_ass_style(),
            Color(0, 0, 0).to_ass_style(),
            Color(0, 0, 0).to_ass_style(alpha=0x80),
            '0', '0', '0', '0', '100', '100', '0', '0', '1', '2', '0', '2', '10', '10', '10', '1'
        ]

        return [
            "[Script Info]",
            f"Title: {self.options.script_title}",
            "ScriptType: v4.00+",
            f"PlayResX: {width}",
            f"PlayResY: {height}",
            "WrapStyle: 0",
            "ScaledBorderAndShadow: yes",
            "",
            "[V4+ Styles]",
            f"Format: {', '.join(_STYLE_FIELDS)}",
            f"Style: {','.join(default_style)}",
            "",
            "[Events]",
            f"Format: {', '.join(_DEFAULT_EVENT_FIELDS)}",
        ]

    def _compose_dialogue(self, cue : Cue) -> str:
        start = FormatAssTimecode(cue.start_time)
        end = FormatAssTimecode(cue.end_time)
        alignment = GetAlignmentBucket(cue.position)
        text = self._override_tags(cue, alignment) + PlainToAssLineBreaks(cue.text)
        return f"Dialogue: 0,{start},{end},Default,,0,0,0,,{text}"

    def _override_tags(self, cue : Cue, alignment : int) -> str:
        """
        Inline tags prefixed to the cue text.

        The alignment bucket is computed for every cue but is not written out yet, so cues
        use the Default style's bottom-centre alignment.
        """
        color = cue.style.color if cue.style else None
        if not color:
            return ""

        if not Color.is_hex(color):
            if color.strip().lower() != 'white':
                logging.warning(f"Cannot convert colour '{color}' to an ASS colour tag")
            return ""

        rgb = Color.from_hex(color)
        if rgb.is_white:
            return ""

        return f"{{\\c{rgb.to_ass()}}}"

    @staticmethod
    def _format_number(value : int|float) -> str:
        return str(int(value)) if float(value).is_integer() else str(value)
