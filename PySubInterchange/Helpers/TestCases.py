import unittest
from typing import Any

from PySubInterchange.Helpers.Tests import log_input_expected_result, log_test_name
from PySubInterchange.SubtitleCue import Cue

class LoggedTestCase(unittest.TestCase):
    """
    TestCase that logs the test name and the input, expected and actual value of each assertion
    """
    @classmethod
    def setUpClass(cls) -> None:
        super().setUpClass()
        log_test_name(f"{cls.__name__}")

    def setUp(self) -> None:
        super().setUp()
        log_test_name(self._testMethodName)

    def assertLoggedEqual(self, name : str, expected : Any, actual : Any, input_value : Any = None) -> None:
        log_input_expected_result(input_value if input_value is not None else name, expected, actual)
        self.assertEqual(expected, actual, name)

    def assertLoggedAlmostEqual(self, name : str, expected : float, actual : float, places : int = 3) -> None:
        log_input_expected_result(name, expected, actual)
        self.assertAlmostEqual(expected, actual, places=places, msg=name)

    def assertLoggedTrue(self, name : str, actual : Any, input_value : Any = None) -> None:
        log_input_expected_result(input_value if input_value is not None else name, True, actual)
        self.assertTrue(actual, name)

    def assertLoggedFalse(self, name : str, actual : Any, input_value : Any = None) -> None:
        log_input_expected_result(input_value if input_value is not None else name, False, actual)
        self.assertFalse(actual, name)

    def assertLoggedIn(self, name : str, member : Any, container : Any) -> None:
        log_input_expected_result(name, f"contains {member!r}", container)
        self.assertIn(member, container, name)

    def assertLoggedNotIn(self, name : str, member : Any, container : Any) -> None:
        log_input_expected_result(name, f"does not contain {member!r}", container)
        self.assertNotIn(member, container, name)

    def assertLoggedIs(self, name : str, expected : Any, actual : Any) -> None:
        log_input_expected_result(name, expected, actual)
        self.assertIs(actual, expected, name)

    def assertLoggedIsInstance(self, name : str, obj : Any, cls : type) -> None:
        log_input_expected_result(name, cls.__name__, type(obj).__name__)
        self.assertIsInstance(obj, cls, name)

    def assertLoggedIsNone(self, name : str, actual : Any) -> None:
        log_input_expected_result(name, None, actual)
        self.assertIsNone(actual, name)

    def assertLoggedIsNotNone(self, name : str, actual : Any) -> None:
        log_input_expected_result(name, "not None", actual)
        self.assertIsNotNone(actual, name)

    def assertLoggedGreater(self, name : str, actual : Any, minimum : Any) -> None:
        log_input_expected_result(name, f"> {minimum!r}", actual)
        self.assertGreater(actual, minimum, name)

    def assertLoggedSequenceEqual(self, name : str, expected : Any, actual : Any) -> None:
        log_input_expected_result(name, expected, actual)
        self.assertSequenceEqual(expected, actual, name)


class CueTestCase(LoggedTestCase):
    """
    Helpers for comparing parsed cues with expected timings and text
    """
    def assertCueMatches(self, cue : Cue, start_time : float, end_time : float, text : str) -> None:
        self.assertLoggedAlmostEqual("start_time", start_time, cue.start_time)
        self.assertLoggedAlmostEqual("end_time", end_time, cue.end_time)
        self.assertLoggedEqual("text", text, cue.text)
