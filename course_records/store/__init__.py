"""
store — in-memory course record store with CSV persistence.

Public API
──────────
CourseRecord      — dataclass for one (roll_number, course_name, score) entry
StoreConfig       — per-store behaviour switches
ParseErrorPolicy  — ABORT or SKIP on malformed CSV rows
ImportResult      — rows loaded / skipped by import_csv()
RecordStore       — append, iterate, render_table, export_csv, import_csv, …
format_table      — fixed-width table for any sequence of records
"""

from course_records.store.models import CourseRecord, ImportResult, ParseErrorPolicy, StoreConfig
from course_records.store.store import RecordStore
from course_records.store.table import format_table

__all__ = [
    "CourseRecord",
    "ImportResult",
    "ParseErrorPolicy",
    "StoreConfig",
    "RecordStore",
    "format_table",
]
