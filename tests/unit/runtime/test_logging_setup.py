"""Tests for package logger handler installation."""

from __future__ import annotations

import logging
import tempfile
import unittest
from pathlib import Path

from filelisting.logging_setup import LOGGER_NAME, get_logger


class LoggingSetupTests(unittest.TestCase):
    def tearDown(self) -> None:
        logger = logging.getLogger(LOGGER_NAME)
        for handler in list(logger.handlers):
            if isinstance(handler, logging.FileHandler):
                logger.removeHandler(handler)
                handler.close()
        logger.setLevel(logging.WARNING)

    def test_repeated_calls_install_one_handler_per_target(self) -> None:
        with tempfile.TemporaryDirectory() as tmp:
            log_path = Path(tmp) / "listing.log"
            get_logger(verbose=True, logfile=log_path)
            logger = get_logger(verbose=True, logfile=log_path)

            file_handlers = [h for h in logger.handlers if isinstance(h, logging.FileHandler)]
            stream_handlers = [h for h in logger.handlers if type(h) is logging.StreamHandler]
            self.assertEqual(len(file_handlers), 1)
            self.assertEqual(len(stream_handlers), 1)
            self.assertEqual(logger.level, logging.DEBUG)

            logging.getLogger(f"{LOGGER_NAME}.child").debug("hello from child")
            file_handlers[0].flush()
            self.assertIn("hello from child", log_path.read_text(encoding="utf-8"))

    def test_quiet_mode_uses_warning_level(self) -> None:
        self.assertEqual(get_logger(verbose=False).level, logging.WARNING)


if __name__ == "__main__":
    unittest.main()
