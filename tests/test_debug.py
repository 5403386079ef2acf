# tests/test_debug.py

import logging
import os
import tempfile
import unittest

from connect4.debug import DebugLevel, DebugManager


class TestDebugManager(unittest.TestCase):
    def setUp(self):
        self.manager = DebugManager("connect4.test")
        self.manager.configure(level=DebugLevel.INFO)

    def tearDown(self):
        self.manager.configure(log_file="")

    def test_level_filtering(self):
        with self.assertLogs("connect4.test", level=logging.DEBUG) as logs:
            self.manager.info("shown", "engine")
            self.manager.debug("hidden", "engine")
        self.assertEqual(len(logs.output), 1)
        self.assertIn("[engine] shown", logs.output[0])

    def test_component_filtering(self):
        self.manager.configure(components=["board"])
        with self.assertLogs("connect4.test", level=logging.INFO) as logs:
            self.manager.info("kept", "board")
            self.manager.info("dropped", "engine")
        self.assertEqual(len(logs.output), 1)
        self.assertIn("kept", logs.output[0])

    def test_messages_are_not_repeated_by_parent_logger(self):
        logger = logging.getLogger("connect4.test")
        self.assertFalse(logger.propagate)
        self.assertEqual(len([h for h in logger.handlers if not isinstance(h, logging.FileHandler)]), 1)

    def test_set_from_string(self):
        self.assertTrue(self.manager.set_from_string("debug"))
        self.assertEqual(self.manager.level, DebugLevel.DEBUG)
        self.assertFalse(self.manager.set_from_string("loud"))
        self.assertEqual(self.manager.level, DebugLevel.DEBUG)

    def test_timer(self):
        self.manager.start_timer("t")
        elapsed = self.manager.end_timer("t")
        self.assertGreaterEqual(elapsed, 0.0)
        self.assertIsNone(self.manager.end_timer("t"))

    def test_log_file(self):
        with tempfile.TemporaryDirectory() as tmp:
            path = os.path.join(tmp, "game.log")
            self.manager.configure(log_file=path)
            self.manager.warning("written to file", "cli")
            self.manager.configure(log_file="")

            with open(path) as f:
                self.assertIn("[cli] written to file", f.read())


if __name__ == '__main__':
    unittest.main()
