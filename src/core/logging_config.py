"""Logging configuration for the Quoridor engine and its command line."""

import logging
import sys

FORMATS = {
    "simple": "%(name)s - %(levelname)s - %(message)s",
    "detailed": "%(asctime)s - %(name)s - %(levelname)s - %(filename)s:%(lineno)d - %(message)s",
}


def setup_logging(level: str = "WARNING", format_style: str = "simple") -> None:
    """
    Set up logging configuration for the entire application.

    Args:
        level: Logging level (DEBUG, INFO, WARNING, ERROR, CRITICAL)
        format_style: Format style - "simple" or "detailed"
    """
    numeric_level = getattr(logging, level.upper(), logging.WARNING)
    log_format = FORMATS.get(format_style, FORMATS["simple"])

    logging.basicConfig(
        level=numeric_level,
        format=log_format,
        handlers=[logging.StreamHandler(sys.stdout)],
        force=True,
    )
