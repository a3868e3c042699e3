"""Data models for the store module."""

from dataclasses import dataclass, field
from enum import Enum

from course_records.exceptions import RecordParseError

__all__ = ["CourseRecord", "ParseErrorPolicy", "StoreConfig", "ImportResult"]

# Longest course name accepted when reading a CSV file
MAX_NAME_LENGTH = 49


@dataclass
class CourseRecord:
    """
    One course taken by one student.

    Fields
    ──────
    roll_number — integer student identifier
    course_name — course title (no commas or newlines when persisted)
    score       — integer score, no range enforced
    """
    roll_number: int
    course_name: str
    score:       int

    def __str__(self) -> str:
        return f"({self.roll_number}). {self.course_name} {self.score}"


class ParseErrorPolicy(str, Enum):
    ABORT = "abort"   # stop at the first malformed row
    SKIP  = "skip"    # log the row and continue


@dataclass
class StoreConfig:
    """Runtime configuration for RecordStore."""
    suppress_confirmation: bool             = False
    on_parse_error:        ParseErrorPolicy = ParseErrorPolicy.ABORT
    max_name_length:       int              = MAX_NAME_LENGTH


@dataclass
class ImportResult:
    """
    Outcome of RecordStore.import_csv().

    loaded  — number of rows appended to the store
    skipped — parse errors for rows passed over (SKIP policy only)
    """
    loaded:  int
    skipped: list[RecordParseError] = field(default_factory=list)

    def __str__(self) -> str:
        if self.skipped:
            return f"ImportResult(loaded={self.loaded}, skipped={len(self.skipped)})"
        return f"ImportResult(loaded={self.loaded})"
