import unittest

from PySubInterchange.Formats.AssFileHandler import AssFileHandler
from PySubInterchange.Helpers.TestCases import CueTestCase
from PySubInterchange.Options import Options
from PySubInterchange.SubtitleCue import Cue, CuePosition, CueStyle
from PySubInterchange.SubtitleData import SubtitleData


class TestAssFileHandler(CueTestCase):
    """Test cases for ASS file handler."""

    sample_ass_content = """[Script Info]
Title: Test Subtitles
ScriptType: v4.00+
PlayDepth: 0
ScaledBorderAndShadow: Yes
WrapStyle: 0

[V4+ Styles]
Format: Name, Fontname, Fontsize, PrimaryColour, SecondaryColour, OutlineColour, BackColour, Bold, Italic, Underline, StrikeOut, ScaleX, ScaleY, Spacing, Angle, BorderStyle, Outline, Shadow, Alignment, MarginL, MarginR, MarginV, Encoding
Style: Default,Arial,50,&H00FFFFFF,&H0000FFFF,&H00000000,&H00000000,0,0,0,0,100,100,0,0,1,2,0,2,30,30,30,1

[Events]
Format: Layer, Start, End, Style, Name, MarginL, MarginR, MarginV, Effect, Text
Dialogue: 0,0:00:01.50,0:00:03.00,Default,,0,0,0,,First subtitle line
Dialogue: 0,0:00:04.00,0:00:06.50,Default,,0,0,0,,Second subtitle line\\Nwith line break
Dialogue: 0,0:00:07.00,0:00:09.00,Default,,0,0,0,,Third subtitle line
"""

    def setUp(self) -> None:
        super().setUp()
        self.handler = AssFileHandler()

    def _events(self, format_line : str, *dialogue_lines : str) -> str:
        return "[Script Info]\nTitle: Test\n\n[Events]\n" + format_line + "\n" + "\n".join(dialogue_lines) + "\n"

    def test_get_file_extensions(self):
        self.assertLoggedEqual("extensions", ['.ass', '.ssa'], self.handler.get_file_extensions())

    def test_parse_string_basic(self):
        data = self.handler.parse_string(self.sample_ass_content)

        self.assertLoggedEqual("cue count", 3, len(data.cues))
        self.assertLoggedEqual("detected format", 'ass', data.detected_format)
        self.assertCueMatches(data.cues[0], 1.5, 3.0, "First subtitle line")
        self.assertCueMatches(data.cues[1], 4.0, 6.5, "Second subtitle line\nwith line break")
        self.assertCueMatches(data.cues[2], 7.0, 9.0, "Third subtitle line")

    def test_strip_override_tags(self):
        content = self._events(
            "Format: Layer, Start, End, Style, Name, MarginL, MarginR, MarginV, Effect, Text",
            "Dialogue: 0,0:00:01.00,0:00:02.00,Default,,0,0,0,,{\\i1}Italic{\\i0} text",
            "Dialogue: 0,0:00:03.00,0:00:04.00,Default,,0,0,0,,{\\an8\\c&H0000ff&}Red  and {\\b1}bold{\\b0}",
        )
        cues = self.handler.parse_cues(content)
        self.assertLoggedEqual("italic tags removed", "Italic text", cues[0].text)
        self.assertLoggedEqual("spacing preserved", "Red  and bold", cues[1].text)

    def test_surrounding_whitespace_preserved(self):
        content = self._events(
            "Format: Layer, Start, End, Style, Name, MarginL, MarginR, MarginV, Effect, Text",
            "  Dialogue: 0,0:00:01.00,0:00:02.00,Default,,0,0,0,, padded text  ",
        )
        cues = self.handler.parse_cues(content)
        self.assertLoggedEqual("cue count", 1, len(cues))
        self.assertLoggedEqual("text verbatim", " padded text  ", cues[0].text)

    def test_text_with_commas(self):
        content = self._events(
            "Format: Layer, Start, End, Style, Name, MarginL, MarginR, MarginV, Effect, Text",
            "Dialogue: 0,0:00:01.00,0:00:02.00,Default,,0,0,0,,Well, well, well",
        )
        cues = self.handler.parse_cues(content)
        self.assertLoggedEqual("commas kept", "Well, well, well", cues[0].text)

    def test_nonstandard_field_order(self):
        content = self._events(
            "Format: Layer, Style, End, Start, Name, MarginL, MarginR, MarginV, Effect, Text",
            "Dialogue: 0,Default,0:00:05.00,0:00:02.00,,0,0,0,,Reordered, with comma",
        )
        cues = self.handler.parse_cues(content)
        self.assertLoggedEqual("cue count", 1, len(cues))
        self.assertCueMatches(cues[0], 2.0, 5.0, "Reordered, with comma")

    def test_missing_format_line_uses_standard_order(self):
        content = "[Events]\nDialogue: 0,0:00:01.00,0:00:02.00,Default,,0,0,0,,No format line\n"
        cues = self.handler.parse_cues(content)
        self.assertLoggedEqual("cue count", 1, len(cues))
        self.assertLoggedEqual("text", "No format line", cues[0].text)

    def test_comments_and_later_sections_ignored(self):
        content = self._events(
            "Format: Layer, Start, End, Style, Name, MarginL, MarginR, MarginV, Effect, Text",
            "Comment: 0,0:00:01.00,0:00:02.00,Default,,0,0,0,,Not shown",
            "Dialogue: 0,0:00:03.00,0:00:04.00,Default,,0,0,0,,Shown",
        ) + "\n[Fonts]\nDialogue: 0,0:00:05.00,0:00:06.00,Default,,0,0,0,,Outside events\n"
        cues = self.handler.parse_cues(content)
        self.assertLoggedEqual("cue count", 1, len(cues))
        self.assertLoggedEqual("text", "Shown", cues[0].text)

    def test_malformed_dialogue_is_skipped(self):
        content = self._events(
            "Format: Layer, Start, End, Style, Name, MarginL, MarginR, MarginV, Effect, Text",
            "Dialogue: 0,0:00:01.5,0:00:02.00,Default,,0,0,0,,Bad start",
            "Dialogue: 0,0:00:03.00",
            "Dialogue: 0,0:00:05.00,0:00:06.00,Default,,0,0,0,,Good",
        )
        data = self.handler.parse_string(content)
        self.assertLoggedEqual("cue count", 1, len(data.cues))
        self.assertLoggedEqual("skipped", 2, len(data.skipped))
        self.assertLoggedIn("timecode in reason", "0:00:01.5", data.skipped[0].reason)
        self.assertLoggedEqual("second reason", "too few fields", data.skipped[1].reason)

    def test_no_events_section(self):
        data = self.handler.parse_string("[Script Info]\nTitle: Empty\n")
        self.assertLoggedEqual("cue count", 0, len(data.cues))
        self.assertLoggedEqual("skipped", 1, len(data.skipped))

    def test_format_without_text_column(self):
        content = self._events("Format: Layer, Start, End", "Dialogue: 0,0:00:01.00,0:00:02.00")
        data = self.handler.parse_string(content)
        self.assertLoggedEqual("cue count", 0, len(data.cues))
        self.assertLoggedEqual("skipped", 1, len(data.skipped))

    def test_compose_sections_in_order(self):
        result = self.handler.compose_cues([Cue(0, 1, "Hello")])

        script_info = result.index("[Script Info]")
        styles = result.index("[V4+ Styles]")
        events = result.index("[Events]")
        self.assertLoggedTrue("section order", script_info < styles < events, result)
        self.assertLoggedEqual("one style", 1, result.count("\nStyle: "))
        self.assertLoggedIn("default style", "Style: Default,Arial,48,", result)
        self.assertLoggedIn("play res x", "PlayResX: 1920\n", result)
        self.assertLoggedIn("play res y", "PlayResY: 1080\n", result)
        self.assertLoggedIn("events format", "Format: Layer, Start, End, Style, Name, MarginL, MarginR, MarginV, Effect, Text\n", result)

    def test_compose_dialogue_lines(self):
        cues = [
            Cue(4, 2.5, "Second\nline two"),
            Cue(1.5, 1.5, "First"),
        ]
        lines = self.handler.compose_cues(cues).splitlines()

        self.assertLoggedEqual("first dialogue", "Dialogue: 0,0:00:01.50,0:00:03.00,Default,,0,0,0,,First", lines[-2])
        self.assertLoggedEqual("second dialogue", "Dialogue: 0,0:00:04.00,0:00:06.50,Default,,0,0,0,,Second\\Nline two", lines[-1])

    def test_compose_video_size(self):
        result = self.handler.compose(SubtitleData(cues=[Cue(0, 1, "Hi")], metadata={'video_width': 1280, 'video_height': 720}))
        self.assertLoggedIn("play res x", "PlayResX: 1280\n", result)
        self.assertLoggedIn("play res y", "PlayResY: 720\n", result)

    def test_compose_options_play_res(self):
        handler = AssFileHandler(options=Options(play_res_x=640, play_res_y=480, script_title="Custom"))
        result = handler.compose_cues([])
        self.assertLoggedIn("play res x", "PlayResX: 640\n", result)
        self.assertLoggedIn("title", "Title: Custom\n", result)
        self.assertLoggedTrue("ends after events format", result.endswith("Effect, Text\n"), result)

    def test_compose_color_tags(self):
        cases = [
            (CueStyle(color="#FF0000"), "{\\c&H0000ff&}Text"),
            (CueStyle(color="#00ff80"), "{\\c&H80ff00&}Text"),
            (CueStyle(color="#ffffff"), "Text"),
            (CueStyle(color="#FFF"), "Text"),
            (CueStyle(color="white"), "Text"),
            (CueStyle(color="rebeccapurple"), "Text"),
            (CueStyle(font_family="Arial"), "Text"),
            (None, "Text"),
        ]
        for style, expected_text in cases:
            with self.subTest(style=style):
                line = self.handler.compose_cues([Cue(0, 1, "Text", style=style)]).splitlines()[-1]
                self.assertLoggedEqual(str(style), f"Dialogue: 0,0:00:00.00,0:00:01.00,Default,,0,0,0,,{expected_text}", line)

    def test_alignment_not_written(self):
        top_left = CuePosition(x=0.0, y=0.0, width=0.2, height=0.1)
        result = self.handler.compose_cues([Cue(0, 1, "Top left", position=top_left)])
        self.assertLoggedNotIn("no alignment tag", "\\an", result)

    def test_parsed_cues_export_without_tags(self):
        cues = self.handler.parse_cues(self.sample_ass_content)
        result = self.handler.compose_cues(cues)
        self.assertLoggedNotIn("no colour tag for default white", "{\\c", result)

    def test_round_trip(self):
        original = self.handler.parse_cues(self.sample_ass_content)
        reparsed = self.handler.parse_cues(self.handler.compose_cues(original))

        self.assertLoggedEqual("cue count", len(original), len(reparsed))
        for before, after in zip(original, reparsed):
            self.assertCueMatches(after, before.start_time, before.end_time, before.text)


if __name__ == '__main__':
    unittest.main()
