"""
Command handlers for the course shell.

Each handler is a plain function taking the RecordStore and already-split
arguments, so it can be unit-tested without the interactive loop. Handlers
print user-facing output and raise CommandError on bad input; store errors
propagate unchanged.
"""

import logging

from course_records.exceptions import CommandError
from course_records.store.models import MAX_NAME_LENGTH, ImportResult
from course_records.store.store import RecordStore
from course_records.store.table import format_table

__all__ = [
    "HELP_TEXT",
    "parse_int",
    "validate_course_name",
    "cmd_add",
    "cmd_remove",
    "cmd_show",
    "cmd_list",
    "cmd_sort",
    "cmd_find",
    "cmd_save",
    "cmd_load",
    "cmd_help",
]

logger = logging.getLogger(__name__)

HELP_TEXT = """\

NAME
    course - Manage students' courses interactively

SYNOPSIS
    course [COMMAND] [OPTIONS]

DESCRIPTION
    This program allows you to manage students' courses. You can add, remove, \
display, list, sort, and search for students' courses. The program runs in a \
loop until 'exit' is entered.

COMMANDS
    course add <roll_number>
        Add a new course for a student. You will be prompted for the course name and the score.

    course remove <roll_number> <course_name>
        Remove a course for the specified student by roll number and course name.

    course show <roll_number>
        Display all the courses and scores for the specified student by roll number.

    course list
        List all students with their courses.

    course sort asc|desc
        Sort all students and their courses by roll number in ascending or descending order.

    course find <query>
        Find a course by its name. The <query> can be any part of the course name.

    course save <filename>
        Save list of courses to a text/csv file.

    course load <filename>
        Load list of courses from a text/csv file.

    course help
        Display this help information for course commands.

EXAMPLES
    course add 1
        Prompts for a course name and score, then adds the course to the student with roll number 1.

    course show 2
        Displays all courses and their scores for the student with roll number 2.

    exit
        Exits the program.
"""


# ── Input validation ──────────────────────────────────────────────────────────


def parse_int(value: str, what: str) -> int:
    """Convert *value* to int or raise CommandError naming *what*."""
    try:
        return int(str(value).strip())
    except ValueError:
        raise CommandError(f"Invalid {what}: {value!r}") from None


def validate_course_name(name: str) -> str:
    """
    Return *name* stripped, or raise CommandError if it cannot be saved and
    loaded back unchanged (empty, contains a comma or newline, too long).
    """
    name = name.strip()
    if not name:
        raise CommandError("Course name must not be empty")
    if "," in name or "\n" in name or "\r" in name:
        raise CommandError("Course name must not contain commas or line breaks")
    if len(name) > MAX_NAME_LENGTH:
        raise CommandError(f"Course name must be at most {MAX_NAME_LENGTH} characters")
    return name


def _require_roll(store: RecordStore, roll_number: int) -> None:
    if not store.has_roll(roll_number):
        raise CommandError(f"No student with roll number {roll_number}")


# ── Command implementations ───────────────────────────────────────────────────


def cmd_add(store: RecordStore, roll_number: int, course_name: str, score: int) -> None:
    """Validate and append one course; the store prints the confirmation."""
    store.append(roll_number, validate_course_name(course_name), score, silent=False)


def cmd_remove(store: RecordStore, roll_number: int, course_name: str) -> int:
    """Remove the named course of an existing student. Returns rows removed."""
    _require_roll(store, roll_number)
    course_name = course_name.strip()
    removed = store.remove(roll_number, course_name)
    if not removed:
        raise CommandError(f"Course '{course_name}' not found for roll number {roll_number}")
    print(f"Course removed: ({roll_number}). {course_name}")
    return removed


def cmd_show(store: RecordStore, roll_number: int) -> None:
    """Print the courses of one student."""
    _require_roll(store, roll_number)
    print(format_table(store.for_roll(roll_number)), end="")


def cmd_list(store: RecordStore) -> None:
    """Print every record in store order."""
    if not len(store):
        print("No courses recorded.")
        return
    print(store.render_table(), end="")


def cmd_sort(store: RecordStore, order: str) -> None:
    """Sort the store by roll number; *order* is 'asc' or 'desc'."""
    order = order.lower()
    if order not in ("asc", "desc"):
        raise CommandError(f"Sort order must be 'asc' or 'desc', not {order!r}")
    store.sort(descending=(order == "desc"))
    label = "ascending" if order == "asc" else "descending"
    print(f"Courses sorted by roll number ({label}).")


def cmd_find(store: RecordStore, query: str) -> None:
    """Print courses whose name contains *query*."""
    matches = store.find(query)
    if not matches:
        print(f"No courses match '{query}'.")
        return
    print(format_table(matches), end="")


def cmd_save(store: RecordStore, path: str) -> None:
    store.export_csv(path)
    print(f"Saved {len(store)} course(s) to {path}")


def cmd_load(store: RecordStore, path: str) -> ImportResult:
    """Import *path* into the store and report how many rows were read."""
    result = store.import_csv(path)
    print(f"Loaded {result.loaded} course(s) from {path}")
    if result.skipped:
        print(f"Skipped {len(result.skipped)} malformed line(s)")
    return result


def cmd_help() -> None:
    print(HELP_TEXT)
