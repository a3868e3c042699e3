"""
CourseShell — interactive command loop over a RecordStore.

Lines are split with shlex, so quoted arguments keep their spaces:

    > course add 1
    Course name: Linear Algebra
    Score: 88
    Course added: (1). Linear Algebra 88
    > remove 1 "Linear Algebra"
    > exit

The leading word ``course`` is optional.
"""

import logging
import shlex
import sys
from typing import Callable, Optional

try:
    import readline  # noqa: F401  (line editing for input())
except ImportError:  # Windows without pyreadline installed
    readline = None

from course_records.exceptions import CommandError, CourseRecordsError
from course_records.store.store import RecordStore

from . import commands

__all__ = ["CourseShell"]

logger = logging.getLogger(__name__)


class CourseShell:
    """
    Reads commands, dispatches them to the cmd_* handlers and reports
    errors without leaving the loop.

    Args:
        store:    RecordStore the commands operate on.
        input_fn: Replacement for builtin input() (used by tests).
    """

    PROMPT = "> "

    def __init__(
        self,
        store: RecordStore,
        input_fn: Optional[Callable[[str], str]] = None,
    ) -> None:
        self.store = store
        self._input = input_fn or input
        self.running = True
        self._handlers: dict[str, Callable[[list[str]], None]] = {
            "add":    self._do_add,
            "remove": self._do_remove,
            "show":   self._do_show,
            "list":   self._do_list,
            "sort":   self._do_sort,
            "find":   self._do_find,
            "save":   self._do_save,
            "load":   self._do_load,
            "help":   self._do_help,
            "exit":   self._do_exit,
            "quit":   self._do_exit,
        }

    # ── Loop ──────────────────────────────────────────────────────────────

    def run(self) -> int:
        """Prompt until 'exit' or end of input. Returns exit code 0."""
        while self.running:
            try:
                line = self._input(self.PROMPT)
            except (EOFError, KeyboardInterrupt):
                print()
                break
            self.execute(line)
        return 0

    def execute(self, line: str) -> bool:
        """
        Run a single command line, printing any error to stderr.

        Returns:
            False if the command failed, True otherwise.
        """
        try:
            self.dispatch(line)
        except CourseRecordsError as exc:
            logger.debug("Command failed: %r", line, exc_info=True)
            print(f"Error: {exc}", file=sys.stderr)
            return False
        return True

    def dispatch(self, line: str) -> None:
        """Run a single command line; errors propagate to the caller."""
        try:
            words = shlex.split(line)
        except ValueError as exc:
            raise CommandError(f"Could not parse command: {exc}") from None
        if words and words[0].lower() == "course":
            words = words[1:]
        if not words:
            return

        name, args = words[0].lower(), words[1:]
        handler = self._handlers.get(name)
        if handler is None:
            raise CommandError(f"Unknown command '{name}'. Type 'help' for usage.")
        logger.debug("Dispatching %s %r", name, args)
        handler(args)

    # ── Helpers ───────────────────────────────────────────────────────────

    @staticmethod
    def _expect(args: list[str], count: int, usage: str) -> None:
        if len(args) != count:
            raise CommandError(f"Usage: course {usage}")

    def _prompt(self, label: str) -> str:
        try:
            return self._input(label)
        except (EOFError, KeyboardInterrupt):
            raise CommandError("Input cancelled") from None

    # ── Command adapters ──────────────────────────────────────────────────

    def _do_add(self, args: list[str]) -> None:
        self._expect(args, 1, "add <roll_number>")
        roll = commands.parse_int(args[0], "roll number")
        name = commands.validate_course_name(self._prompt("Course name: "))
        score = commands.parse_int(self._prompt("Score: "), "score")
        commands.cmd_add(self.store, roll, name, score)

    def _do_remove(self, args: list[str]) -> None:
        if len(args) < 2:
            raise CommandError("Usage: course remove <roll_number> <course_name>")
        roll = commands.parse_int(args[0], "roll number")
        commands.cmd_remove(self.store, roll, " ".join(args[1:]))

    def _do_show(self, args: list[str]) -> None:
        self._expect(args, 1, "show <roll_number>")
        commands.cmd_show(self.store, commands.parse_int(args[0], "roll number"))

    def _do_list(self, args: list[str]) -> None:
        self._expect(args, 0, "list")
        commands.cmd_list(self.store)

    def _do_sort(self, args: list[str]) -> None:
        self._expect(args, 1, "sort asc|desc")
        commands.cmd_sort(self.store, args[0])

    def _do_find(self, args: list[str]) -> None:
        if not args:
            raise CommandError("Usage: course find <query>")
        commands.cmd_find(self.store, " ".join(args))

    def _do_save(self, args: list[str]) -> None:
        self._expect(args, 1, "save <filename>")
        commands.cmd_save(self.store, args[0])

    def _do_load(self, args: list[str]) -> None:
        self._expect(args, 1, "load <filename>")
        commands.cmd_load(self.store, args[0])

    def _do_help(self, args: list[str]) -> None:
        commands.cmd_help()

    def _do_exit(self, args: list[str]) -> None:
        self.running = False
