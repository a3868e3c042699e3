"""Fixed-width text table for course records."""

from typing import Iterable

from .models import CourseRecord

__all__ = ["format_table", "HEADER", "SEPARATOR"]

_WIDTHS = (15, 25, 25)

HEADER    = ("Roll Number", "Course Name", "Score")
SEPARATOR = ("------------", "----------", "---------")


def _row(cells: tuple) -> str:
    return " ".join(f"{str(cell):<{width}}" for cell, width in zip(cells, _WIDTHS))


def format_table(records: Iterable[CourseRecord]) -> str:
    """
    Render *records* as a header row, a dash separator row and one line per
    record, each column left-justified to 15 / 25 / 25 characters.
    """
    lines = [_row(HEADER), _row(SEPARATOR)]
    for rec in records:
        lines.append(_row((rec.roll_number, rec.course_name, rec.score)))
    return "\n".join(lines) + "\n"
