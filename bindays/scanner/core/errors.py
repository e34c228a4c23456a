"""
Errors raised while searching xlsx schedules
"""
from enum import Enum


class ErrorCause(Enum):
    LISTING_FAILURE = "listing_failure"
    LOAD_FAILURE = "load_failure"
    NO_ANCHOR_FOUND = "no_anchor_found"
    PARSE_FAILURE = "parse_failure"


class NextUpcomingError(Exception):
    """Raised when a search unit (directory, workbook, sheet or cell) yields no answer."""
    def __init__(self, cause: ErrorCause, message: str = ""):
        super().__init__(message or cause.value)
        self.cause = cause
        self.message = message or cause.value
