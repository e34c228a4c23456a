"""
Shared logging setup for the scanner and its CLI.
"""

import logging

from bindays import config

LOG_FORMAT = "[%(asctime)s] %(levelname)s %(name)s: %(message)s"


def setup_logging(level_name: str | None = None) -> None:
    """
    Configure logging once using config.LOG_LEVEL, unless level_name overrides it.
    Safe to call multiple times.

    openpyxl reports odd-but-readable workbooks ("no default style", unknown
    extensions) through the warnings module; those are routed into the log
    instead of stderr.
    """
    root_logger = logging.getLogger()
    if root_logger.handlers:
        return

    level_name = str(level_name or config.LOG_LEVEL).upper()
    level = getattr(logging, level_name, logging.INFO)
    logging.basicConfig(level=level, format=LOG_FORMAT)
    logging.captureWarnings(True)
