# tests/test_logging_config.py

"""Tests for the per-run logging configuration."""

import logging
import unittest
from unittest.mock import patch

from shopsearch.config.logging_config import ROOT_LOGGER_NAME, setup_logging
from shopsearch.config.settings import Settings


class TestLoggingConfig(unittest.TestCase):
    """Verify logging setup behaviour."""

    def setUp(self) -> None:
        """Start every test from a handler-free shopsearch logger."""
        self.root_logger = logging.getLogger(ROOT_LOGGER_NAME)
        self._clear_handlers()
        self.addCleanup(self._clear_handlers)

    def _clear_handlers(self) -> None:
        for name in Settings.SERVER_LOGGERS:
            server_logger = logging.getLogger(name)
            for handler in list(server_logger.handlers):
                if isinstance(handler, logging.FileHandler):
                    server_logger.removeHandler(handler)
        for handler in list(self.root_logger.handlers):
            handler.close()
            self.root_logger.removeHandler(handler)

    def test_setup_creates_log_file(self) -> None:
        """setup_logging returns a path that exists on disk."""
        log_path = setup_logging()
        self.assertTrue(log_path.exists())

    def test_log_file_naming_convention(self) -> None:
        """Log file name matches run_YYYYMMDD_HHMMSS.log format."""
        log_path = setup_logging()
        self.assertRegex(log_path.name, r"^run_\d{8}_\d{6}\.log$")

    def test_log_file_inside_logs_dir(self) -> None:
        """Log file is created inside the logs/ directory."""
        log_path = setup_logging()
        self.assertEqual(log_path.parent.name, "logs")

    def test_file_handler_debug_console_warning(self) -> None:
        """File handler captures DEBUG, stderr only WARNING and up."""
        setup_logging()
        file_handlers = [
            h
            for h in self.root_logger.handlers
            if isinstance(h, logging.FileHandler)
        ]
        stream_handlers = [
            h
            for h in self.root_logger.handlers
            if isinstance(h, logging.StreamHandler)
            and not isinstance(h, logging.FileHandler)
        ]
        self.assertEqual(len(file_handlers), 1)
        self.assertEqual(file_handlers[0].level, logging.DEBUG)
        self.assertEqual(len(stream_handlers), 1)
        self.assertEqual(stream_handlers[0].level, logging.WARNING)

    def test_repeated_calls_no_duplicate_handlers(self) -> None:
        """Calling setup_logging twice does not duplicate handlers."""
        setup_logging()
        count_before = len(self.root_logger.handlers)
        setup_logging()
        self.assertEqual(len(self.root_logger.handlers), count_before)

    def test_module_loggers_reach_the_run_file(self) -> None:
        """Records from shopsearch.* children land in the per-run file."""
        log_path = setup_logging()
        logging.getLogger("shopsearch.view").warning("detail fetch failed")
        for handler in self.root_logger.handlers:
            handler.flush()
        self.assertIn(
            "detail fetch failed", log_path.read_text(encoding="utf-8")
        )

    def test_console_level_from_settings(self) -> None:
        """CONSOLE_LOG_LEVEL controls what reaches stderr."""
        with patch.object(Settings, "CONSOLE_LOG_LEVEL", "info"):
            setup_logging()
        levels = [
            h.level
            for h in self.root_logger.handlers
            if not isinstance(h, logging.FileHandler)
        ]
        self.assertEqual(levels, [logging.INFO])

    def test_unknown_console_level_falls_back(self) -> None:
        """An unrecognised level name keeps stderr at WARNING."""
        with patch.object(Settings, "CONSOLE_LOG_LEVEL", "chatty"):
            setup_logging()
        levels = [
            h.level
            for h in self.root_logger.handlers
            if not isinstance(h, logging.FileHandler)
        ]
        self.assertEqual(levels, [logging.WARNING])

    def test_server_logs_share_the_run_file(self) -> None:
        """With include_server, uvicorn records land in the run file."""
        log_path = setup_logging(include_server=True)
        logging.getLogger("uvicorn.error").error("bind failed")
        for handler in self.root_logger.handlers:
            handler.flush()
        self.assertIn("bind failed", log_path.read_text(encoding="utf-8"))

    def test_server_logs_not_routed_by_default(self) -> None:
        """Without include_server, uvicorn keeps its own handlers."""
        setup_logging()
        handlers = logging.getLogger("uvicorn.access").handlers
        self.assertFalse(
            any(isinstance(h, logging.FileHandler) for h in handlers)
        )


if __name__ == "__main__":
    unittest.main()
