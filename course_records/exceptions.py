"""
Project-wide custom exception hierarchy.
All modules raise subclasses of CourseRecordsError, never bare Exception.
"""

from typing import Optional

__all__ = [
    "CourseRecordsError",
    "StoreError",
    "ResourceError",
    "RecordIOError",
    "RecordParseError",
    "CommandError",
]


class CourseRecordsError(Exception):
    """Root exception for all course-records errors."""


# ── Store ─────────────────────────────────────────────────────────────────────

class StoreError(CourseRecordsError):
    """Base class for record store errors."""


class ResourceError(StoreError):
    """Raised when a new record cannot be allocated; the store is unchanged."""


class RecordIOError(StoreError):
    """Raised when a CSV file cannot be opened for reading or writing."""


class RecordParseError(StoreError):
    """
    Raised when a CSV row does not have the ``int, name, int`` shape.

    line        — the raw offending line (trailing newline removed)
    line_number — 1-based line number in the file (header is line 1)
    loaded      — rows appended by the same import before this line
    """

    def __init__(self, line: str, line_number: Optional[int] = None, loaded: int = 0) -> None:
        super().__init__(f"Could not parse line: {line}")
        self.line = line
        self.line_number = line_number
        self.loaded = loaded


# ── CLI ───────────────────────────────────────────────────────────────────────

class CommandError(CourseRecordsError):
    """Raised on bad command usage or invalid user input."""
