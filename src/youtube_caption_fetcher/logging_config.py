"""
Console logging setup for the command-line interface.

The library only creates module loggers; handlers are configured here, and
only when running as a CLI.
"""

import logging
import sys


LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
DATE_FORMAT = "%Y-%m-%d %H:%M:%S"


def setup_logging(level: str = "WARNING", verbose: bool = False) -> None:
    """
    Configure the package logger to write to stderr.

    Args:
        level: Logging level name (DEBUG, INFO, WARNING, ERROR).
        verbose: Shortcut for DEBUG.
    """
    numeric_level = logging.DEBUG if verbose else getattr(logging, level.upper(), logging.WARNING)

    logger = logging.getLogger("youtube_caption_fetcher")
    logger.setLevel(numeric_level)

    # Avoid duplicate handlers when called more than once
    for handler in list(logger.handlers):
        if getattr(handler, "_ycf_handler", False):
            logger.removeHandler(handler)

    handler = logging.StreamHandler(sys.stderr)
    handler.setLevel(numeric_level)
    handler.setFormatter(logging.Formatter(LOG_FORMAT, DATE_FORMAT))
    handler._ycf_handler = True
    logger.addHandler(handler)
