"""
cli — command-line interface for course-records.

Entry points
────────────
  python -m course_records   (via course_records/__main__.py)
  course-records             (via pyproject.toml [project.scripts])

Commands: add | remove | show | list | sort | find | save | load | help | exit
"""

from course_records.cli.main import build_parser, main
from course_records.cli.shell import CourseShell

__all__ = ["build_parser", "main", "CourseShell"]
