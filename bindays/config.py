"""
Runtime configuration, read from the environment.
"""

import os


def _env_flag(name: str, default: str = "0") -> bool:
    return os.getenv(name, default) == "1"


DEBUG = _env_flag("DEBUG")
LOG_LEVEL = os.getenv("LOG_LEVEL", "DEBUG" if DEBUG else "INFO")

# Directory holding the xlsx schedules
SEARCH_DIRECTORY = os.getenv("SEARCH_DIRECTORY", "resources")
# Also search subdirectories of SEARCH_DIRECTORY
SEARCH_RECURSIVE = _env_flag("SEARCH_RECURSIVE")
# Exact text of the street cell, e.g. "The Mall"
STREET_NAME = os.getenv("STREET_NAME")
