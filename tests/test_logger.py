# tests/test_logger.py
import unittest

from tests.fixtures import PROJECT_ROOT  # noqa: F401
from homestead.utils.logger import Logger, LogLevel


class TestLogger(unittest.TestCase):

    def setUp(self):
        Logger.set_level(LogLevel.INFO)
        Logger.clear_history()

    def tearDown(self):
        Logger.set_level(LogLevel.CRITICAL)
        Logger.clear_history()

    def test_level_filters_history(self):
        Logger.debug("Clock", "hidden")
        Logger.info("Clock", "shown")
        messages = [entry["message"] for entry in Logger.get_history()]
        self.assertEqual(messages, ["shown"])

    def test_history_by_source(self):
        Logger.warning("Clock", "late")
        Logger.error("SaveManager", "disk full")
        history = Logger.get_history("SaveManager")
        self.assertEqual(len(history), 1)
        self.assertEqual(history[0]["level"], "ERROR")

    def test_singleton(self):
        self.assertIs(Logger(), Logger())


if __name__ == '__main__':
    unittest.main()
