"""
Unit tests for Insert Batcher configuration.
"""
import logging
import os
import unittest
from unittest.mock import patch

import pytest

from insert_batcher.config import LOG_LEVEL_ENV_VAR, get_log_level, setup_logging

pytestmark = pytest.mark.core


class TestLogLevel(unittest.TestCase):
    """Test cases for resolving the log level."""

    def test_verbose_forces_debug(self):
        """Test that verbose mode wins over the environment."""
        with patch.dict(os.environ, {LOG_LEVEL_ENV_VAR: "ERROR"}):
            self.assertEqual(get_log_level(verbose=True), logging.DEBUG)

    def test_level_from_environment(self):
        """Test reading the level name from the environment."""
        with patch.dict(os.environ, {LOG_LEVEL_ENV_VAR: "warning"}):
            self.assertEqual(get_log_level(), logging.WARNING)

    def test_unknown_level_falls_back(self):
        """Test that an unknown level name falls back to INFO."""
        with patch.dict(os.environ, {LOG_LEVEL_ENV_VAR: "chatty"}):
            self.assertEqual(get_log_level(), logging.INFO)

    def test_default_level(self):
        """Test the default when nothing is configured."""
        with patch.dict(os.environ, {}, clear=True):
            self.assertEqual(get_log_level(), logging.INFO)

    def test_setup_logging_returns_package_logger(self):
        """Test that setup_logging hands back the package logger."""
        logger = setup_logging()
        self.assertEqual(logger.name, "insert_batcher")


if __name__ == '__main__':
    unittest.main()
