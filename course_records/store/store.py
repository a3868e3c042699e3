"""
RecordStore — ordered in-memory collection of course records with CSV
export/import.

Usage::

    store = RecordStore()

    store.append(1, "Algebra", 88)            # prints "Course added: ..."
    store.append(2, "Biology", 75, silent=True)

    print(store.render_table())
    store.export_csv("courses.csv")

    other = RecordStore()
    result = other.import_csv("courses.csv")  # ImportResult(loaded=2)
"""

import logging
from operator import attrgetter
from pathlib import Path
from typing import Iterator, Optional, Union

from course_records.exceptions import RecordIOError, RecordParseError, ResourceError

from .csv_io import CSV_HEADER, format_line, parse_line
from .models import CourseRecord, ImportResult, ParseErrorPolicy, StoreConfig
from .table import format_table

__all__ = ["RecordStore"]

logger = logging.getLogger(__name__)

PathLike = Union[str, Path]


class RecordStore:
    """
    Owns an ordered list of CourseRecord objects.

    Insertion order is kept unless sort() is called. Duplicate
    (roll_number, course_name) pairs are allowed. Not thread-safe.
    """

    def __init__(self, config: Optional[StoreConfig] = None) -> None:
        self.config = config or StoreConfig()
        self._records: list[CourseRecord] = []

    def __len__(self) -> int:
        return len(self._records)

    def __iter__(self) -> Iterator[CourseRecord]:
        return self.iterate()

    # ── Internal helpers ──────────────────────────────────────────────────

    @staticmethod
    def _open(path: PathLike, mode: str):
        text_opts = {} if "b" in mode else {"encoding": "utf-8", "newline": "\n"}
        try:
            return open(Path(path).expanduser(), mode, **text_opts)
        except OSError as exc:
            raise RecordIOError(f"Could not open file: {exc.strerror or exc}") from exc

    # ── Core operations ───────────────────────────────────────────────────

    def append(
        self,
        roll_number: int,
        course_name: str,
        score: int,
        silent: Optional[bool] = None,
    ) -> None:
        """
        Add a record to the end of the store.

        Args:
            silent: Suppress the confirmation line. None falls back to
                    config.suppress_confirmation.

        Raises:
            ResourceError: The record could not be allocated. The store is
                           left unchanged.
        """
        try:
            record = CourseRecord(
                roll_number=int(roll_number),
                course_name=str(course_name),
                score=int(score),
            )
            self._records.append(record)
        except MemoryError as exc:
            raise ResourceError("Could not allocate enough memory for new course") from exc

        logger.debug("Appended %s (total %d)", record, len(self._records))
        if silent is None:
            silent = self.config.suppress_confirmation
        if not silent:
            print(f"Course added: {record}")

    def iterate(self) -> Iterator[CourseRecord]:
        """
        Yield records from the first one, reflecting the store as it is
        while the iterator advances. Each call starts over.
        """
        yield from self._records

    def render_table(self) -> str:
        """Return the whole store as a fixed-width table."""
        return format_table(self._records)

    def export_csv(self, path: PathLike) -> None:
        """
        Write the header and one line per record to *path*, replacing any
        existing content.

        Raises:
            RecordIOError: The file could not be opened, written or flushed.
        """
        fh = self._open(path, "w")
        try:
            with fh:
                fh.write(CSV_HEADER + "\n")
                for rec in self._records:
                    fh.write(format_line(rec) + "\n")
        except OSError as exc:
            raise RecordIOError(f"Could not write file: {exc.strerror or exc}") from exc
        logger.debug("Saved %d course(s) to %s", len(self._records), path)

    def import_csv(self, path: PathLike) -> ImportResult:
        """
        Append every data row of *path* to the store, in file order.

        The first line is treated as a header and discarded. Rows are
        appended silently. Each line is decoded as UTF-8 on its own; a line
        that does not decode is malformed like any other bad row.

        Under ParseErrorPolicy.ABORT the first malformed row stops the
        import; rows appended before it stay in the store. Under SKIP the
        row is logged and collected in ImportResult.skipped.

        Raises:
            RecordIOError:    The file could not be opened. Store unchanged.
            RecordParseError: A malformed row under the ABORT policy.
        """
        result = ImportResult(loaded=0)
        skip = self.config.on_parse_error == ParseErrorPolicy.SKIP

        with self._open(path, "rb") as fh:
            fh.readline()
            for line_number, raw in enumerate(fh, start=2):
                try:
                    line = raw.decode("utf-8").rstrip("\r\n")
                    record = parse_line(line, self.config.max_name_length)
                except UnicodeDecodeError:
                    line = raw.decode("utf-8", errors="replace").rstrip("\r\n")
                    record = None
                if record is None:
                    error = RecordParseError(line, line_number, loaded=result.loaded)
                    if not skip:
                        raise error
                    logger.warning("Skipping line %d: %r", line_number, line)
                    result.skipped.append(error)
                    continue
                self.append(record.roll_number, record.course_name, record.score, silent=True)
                result.loaded += 1

        logger.debug(
            "Loaded %d course(s) from %s (%d skipped)",
            result.loaded, path, len(result.skipped),
        )
        return result

    # ── Collection helpers ────────────────────────────────────────────────

    def clear(self) -> None:
        """Drop every record."""
        self._records.clear()

    def remove(self, roll_number: int, course_name: str) -> int:
        """
        Delete all records matching both *roll_number* and *course_name*.

        Returns:
            Number of records removed.
        """
        kept = [
            r for r in self._records
            if not (r.roll_number == roll_number and r.course_name == course_name)
        ]
        removed = len(self._records) - len(kept)
        self._records = kept
        logger.debug("Removed %d record(s) for (%d, %r)", removed, roll_number, course_name)
        return removed

    def sort(self, descending: bool = False) -> None:
        """Stable in-place sort by roll number."""
        self._records.sort(key=attrgetter("roll_number"), reverse=descending)

    def find(self, query: str) -> list[CourseRecord]:
        """Return records whose course name contains *query* (case-insensitive)."""
        q = query.lower()
        return [r for r in self._records if q in r.course_name.lower()]

    def for_roll(self, roll_number: int) -> list[CourseRecord]:
        """Return the records of one student, in store order."""
        return [r for r in self._records if r.roll_number == roll_number]

    def has_roll(self, roll_number: int) -> bool:
        return any(r.roll_number == roll_number for r in self._records)
