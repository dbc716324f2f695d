"""
Configuration settings for Insert Batcher.

This module contains default settings and the logging setup used by the
command-line interface. The library modules only create their own loggers and
never configure logging on import.
"""
import os
import logging

# SQL defaults
DEFAULT_DELIMITER = ";"
PLACEHOLDER = "?"

# Logging
LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
LOG_DATE_FORMAT = "%Y-%m-%d %H:%M:%S"
LOG_LEVEL_ENV_VAR = "INSERT_BATCHER_LOG_LEVEL"
DEFAULT_LOG_LEVEL = logging.INFO


def get_log_level(verbose: bool = False) -> int:
    """
    Resolve the log level to use.

    Args:
        verbose: Force DEBUG level when True

    Returns:
        A ``logging`` level constant
    """
    if verbose:
        return logging.DEBUG

    name = os.environ.get(LOG_LEVEL_ENV_VAR, "").strip().upper()
    level = logging.getLevelName(name) if name else DEFAULT_LOG_LEVEL
    # getLevelName returns a "Level X" string for unknown names
    if not isinstance(level, int):
        return DEFAULT_LOG_LEVEL
    return level


def setup_logging(verbose: bool = False) -> logging.Logger:
    """Set up logging configuration."""
    logging.basicConfig(
        level=get_log_level(verbose),
        format=LOG_FORMAT,
        datefmt=LOG_DATE_FORMAT,
    )
    return logging.getLogger("insert_batcher")
