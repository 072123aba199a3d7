"""Logging configuration for assertion reports."""

from __future__ import annotations

import logging
import sys
from pathlib import Path

DEFAULT_LOGGER_NAME = "multiassert"


def setup_logger(
    verbose: bool = False,
    logger_name: str = DEFAULT_LOGGER_NAME,
    debug_file: Path | None = None,
) -> logging.Logger:
    """
    Configure and return the logger used to report check outcomes.

    Report lines always go to stdout. When debug_file is given, every record,
    including DEBUG diagnostics, is also appended to that file with a timestamp.

    Args:
        verbose: If True, DEBUG diagnostics are shown on stdout as well.
        logger_name: Name of the logger instance (allows multiple independent loggers)
        debug_file: Optional path to a debug log file.

    Returns:
        Configured logger instance.
    """
    logger = logging.getLogger(logger_name)

    # Clear any existing handlers for this specific logger
    logger.handlers.clear()

    logger.disabled = False
    logger.setLevel(logging.DEBUG)

    stdout_handler = logging.StreamHandler(sys.stdout)
    stdout_handler.setLevel(logging.DEBUG if verbose else logging.INFO)
    stdout_handler.setFormatter(logging.Formatter(fmt="%(message)s"))
    logger.addHandler(stdout_handler)

    if debug_file is not None:
        debug_file.parent.mkdir(parents=True, exist_ok=True)
        file_handler = logging.FileHandler(debug_file, mode="a")
        file_handler.setLevel(logging.DEBUG)
        file_handler.setFormatter(
            logging.Formatter(fmt="[%(asctime)s] %(message)s", datefmt="%Y-%m-%dT%H:%M:%S")
        )
        logger.addHandler(file_handler)

    return logger


def get_logger(logger_name: str = DEFAULT_LOGGER_NAME) -> logging.Logger:
    """Return the named logger, configuring it on first use."""
    logger = logging.getLogger(logger_name)
    if not logger.handlers:
        setup_logger(logger_name=logger_name)
    return logger
