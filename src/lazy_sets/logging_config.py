# MIT License (see LICENSE)
"""
Logging configuration for scripts that use lazy_sets.

The library itself only creates module loggers under the ``lazy_sets``
namespace and never installs handlers; call setup_logging() from an
application, example or benchmark to see its output.
"""
from __future__ import annotations
import logging
import sys


def setup_logging(level: int = logging.INFO, log_file: str | None = None) -> logging.Logger:
    """
    Configure the ``lazy_sets`` logger.

    Args:
        level: Logging level (e.g. logging.DEBUG to trace predicate dispatch).
        log_file: Optional path; if given, records are also written there.

    Returns:
        The configured package logger.
    """
    logger = logging.getLogger("lazy_sets")
    logger.setLevel(level)

    # Drop handlers from a previous call so records are not duplicated
    for handler in list(logger.handlers):
        if not isinstance(handler, logging.NullHandler):
            logger.removeHandler(handler)
            handler.close()

    formatter = logging.Formatter(
        "%(asctime)s - %(name)s - %(levelname)s - %(message)s",
        datefmt="%H:%M:%S",
    )

    console_handler = logging.StreamHandler(sys.stdout)
    console_handler.setLevel(level)
    console_handler.setFormatter(formatter)
    logger.addHandler(console_handler)

    if log_file:
        file_handler = logging.FileHandler(log_file, mode="w", encoding="utf-8")
        file_handler.setLevel(level)
        file_handler.setFormatter(formatter)
        logger.addHandler(file_handler)

    logger.debug("Logging initialized.")
    return logger
