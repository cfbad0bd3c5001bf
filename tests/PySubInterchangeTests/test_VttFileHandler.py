import unittest

from PySubInterchange.Formats.VttFileHandler import VttFileHandler
from PySubInterchange.Helpers.TestCases import CueTestCase
from PySubInterchange.SubtitleCue import Cue
from PySubInterchange.SubtitleData import SubtitleData


class TestVttFileHandler(CueTestCase):
    """Test cases for WebVTT file handler."""

    sample_vtt_content = """WEBVTT

00:00:01.500 --> 00:00:03.000
First subtitle line

00:00:04.000 --> 00:00:06.500
Second subtitle line
with line break

00:00:07.000 --> 00:00:09.000
Third subtitle line with <i>formatting</i>
"""

    def setUp(self) -> None:
        super().setUp()
        self.handler = VttFileHandler()

    def test_get_file_extensions(self):
        self.assertLoggedEqual("extensions", ['.vtt'], self.handler.get_file_extensions())

    def test_parse_string_basic(self):
        data = self.handler.parse_string(self.sample_vtt_content)

        self.assertLoggedEqual("cue count", 3, len(data.cues))
        self.assertLoggedEqual("detected format", 'vtt', data.detected_format)
        self.assertCueMatches(data.cues[0], 1.5, 3.0, "First subtitle line")
        self.assertCueMatches(data.cues[1], 4.0, 6.5, "Second subtitle line\nwith line break")
        self.assertCueMatches(data.cues[2], 7.0, 9.0, "Third subtitle line with <i>formatting</i>")

    def test_parse_cue_identifiers_and_settings(self):
        content = """WEBVTT

intro
00:00:01.000 --> 00:00:02.000 align:start position:10%
With identifier

2
00:03.000 --> 00:04.500
Short timestamps
"""
        data = self.handler.parse_string(content)
        self.assertLoggedEqual("cue count", 2, len(data.cues))
        self.assertCueMatches(data.cues[0], 1.0, 2.0, "With identifier")
        self.assertCueMatches(data.cues[1], 3.0, 4.5, "Short timestamps")

    def test_parse_header_metadata_and_notes(self):
        content = """WEBVTT - Example
Kind: captions
Language: en

NOTE This is a comment
spanning lines

STYLE
::cue { color: yellow; }

00:00:01.000 --> 00:00:02.000
Only cue
"""
        data = self.handler.parse_string(content)
        self.assertLoggedEqual("cue count", 1, len(data.cues))
        self.assertLoggedEqual("skipped", 0, len(data.skipped))
        self.assertLoggedEqual("text", "Only cue", data.cues[0].text)

    def test_parse_identifier_named_like_metadata(self):
        content = "WEBVTT\n\n01:02.5 --> 01:03.000 align:start\nShort\n\n" \
                  "NOTE\n00:00:01.000 --> 00:00:02.000\nafter note text\n\n" \
                  "STYLE intro\n00:00:03.000 --> 00:00:04.000\nstyled identifier\n\n" \
                  "NOTE just a comment\n"
        data = self.handler.parse_string(content)
        self.assertLoggedEqual("cue count", 3, len(data.cues))
        self.assertLoggedEqual("skipped", 0, len(data.skipped))
        self.assertCueMatches(data.cues[0], 62.5, 63.0, "Short")
        self.assertCueMatches(data.cues[1], 1.0, 2.0, "after note text")
        self.assertCueMatches(data.cues[2], 3.0, 4.0, "styled identifier")

    def test_parse_without_header(self):
        content = "00:00:01.000 --> 00:00:02.000\nNo header"
        cues = self.handler.parse_cues(content)
        self.assertLoggedEqual("cue count", 1, len(cues))

    def test_malformed_block_is_skipped(self):
        content = "WEBVTT\n\n00:00:bad --> 00:00:02.000\nBroken\n\n00:00:03.000 --> 00:00:04.000\nFine"
        data = self.handler.parse_string(content)
        self.assertLoggedEqual("cue count", 1, len(data.cues))
        self.assertLoggedEqual("skipped", 1, len(data.skipped))
        self.assertLoggedEqual("remaining text", "Fine", data.cues[0].text)

    def test_compose(self):
        cues = [
            Cue(3, 2, "Second"),
            Cue(0, 2.5, "Hello world"),
        ]
        expected = "WEBVTT\n\n00:00:00.000 --> 00:00:02.500\nHello world\n\n00:00:03.000 --> 00:00:05.000\nSecond"
        self.assertLoggedEqual("composed VTT", expected, self.handler.compose_cues(cues))

    def test_compose_empty(self):
        self.assertLoggedEqual("empty list", "WEBVTT\n\n", self.handler.compose(SubtitleData()))

    def test_round_trip(self):
        original = self.handler.parse_cues(self.sample_vtt_content)
        reparsed = self.handler.parse_cues(self.handler.compose_cues(original))

        self.assertLoggedEqual("cue count", len(original), len(reparsed))
        for before, after in zip(original, reparsed):
            self.assertCueMatches(after, before.start_time, before.end_time, before.text)


if __name__ == '__main__':
    unittest.main()
