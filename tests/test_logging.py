"""Tests for microbench.logging — logging setup."""

from __future__ import annotations

import logging
import tempfile
import unittest
from pathlib import Path

from microbench.logging import setup_logging


class TestSetupLogging(unittest.TestCase):
    def tearDown(self) -> None:
        logger = logging.getLogger("microbench")
        for handler in list(logger.handlers):
            handler.close()
        logger.handlers.clear()

    def _console(self, logger: logging.Logger) -> logging.Handler:
        return next(h for h in logger.handlers if not isinstance(h, logging.FileHandler))

    def test_default_level_info(self) -> None:
        logger = setup_logging()
        self.assertEqual(logger.name, "microbench")
        self.assertEqual(self._console(logger).level, logging.INFO)

    def test_verbose(self) -> None:
        self.assertEqual(self._console(setup_logging(verbose=True)).level, logging.DEBUG)

    def test_quiet(self) -> None:
        self.assertEqual(self._console(setup_logging(quiet=True)).level, logging.WARNING)

    def test_verbose_wins_over_quiet(self) -> None:
        logger = setup_logging(verbose=True, quiet=True)
        self.assertEqual(self._console(logger).level, logging.DEBUG)

    def test_reconfigure_replaces_handlers(self) -> None:
        setup_logging()
        logger = setup_logging()
        self.assertEqual(len(logger.handlers), 1)

    def test_file_handler_logs_debug(self) -> None:
        with tempfile.TemporaryDirectory() as tmpdir:
            path = Path(tmpdir) / "out.log"
            logger = setup_logging(quiet=True, log_file=path)
            logger.debug("debug detail")
            self.tearDown()
            self.assertIn("debug detail", path.read_text(encoding="utf-8"))


if __name__ == "__main__":
    unittest.main()
