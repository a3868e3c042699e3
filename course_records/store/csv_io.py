"""
CSV line codec for course records.

On-disk format
──────────────
Roll Number, Course Name, Score
1, Algebra, 88
2, Biology, 75

Fields are written comma-space separated. On read, whitespace around the
numbers is ignored and only the single space after the comma is dropped from
the name. Nothing is quoted or escaped, so a course name
must not contain a comma or a newline.
"""

import re
from typing import Optional

from .models import MAX_NAME_LENGTH, CourseRecord

__all__ = ["CSV_HEADER", "format_line", "parse_line"]

CSV_HEADER = "Roll Number, Course Name, Score"

_LINE_RE = re.compile(
    r"^\s*(?P<roll>[+-]?\d+)\s*,"    # roll number
    r"(?P<name>[^,]*),"              # course name, up to the next comma
    r"\s*(?P<score>[+-]?\d+)\s*$"    # score, nothing after it
)


def format_line(record: CourseRecord) -> str:
    """Return the CSV line for *record*, without the trailing newline."""
    return f"{record.roll_number}, {record.course_name}, {record.score}"


def parse_line(line: str, max_name_length: int = MAX_NAME_LENGTH) -> Optional[CourseRecord]:
    """
    Parse one data line (newline already stripped).

    Only the single space format_line() puts after the comma is removed
    from the name; any other whitespace belongs to the name, which may be
    empty.

    Returns:
        CourseRecord, or None if the line is malformed: wrong field count,
        non-integer roll/score, or a name longer than *max_name_length*
        characters.
    """
    m = _LINE_RE.match(line)
    if not m:
        return None
    name = m.group("name")
    if name.startswith(" "):
        name = name[1:]
    if len(name) > max_name_length:
        return None
    return CourseRecord(
        roll_number=int(m.group("roll")),
        course_name=name,
        score=int(m.group("score")),
    )
