"""
Unit tests for course_records/store/csv_io.py and table.py

Covers line formatting, tolerant parsing of whitespace, and every way a row
can be malformed.
"""

import pytest


class TestFormatLine:

    def test_comma_space_separated(self):
        from course_records.store.csv_io import format_line
        from course_records.store.models import CourseRecord
        assert format_line(CourseRecord(1, "Algebra", 88)) == "1, Algebra, 88"

    def test_header_literal(self):
        from course_records.store.csv_io import CSV_HEADER
        assert CSV_HEADER == "Roll Number, Course Name, Score"


class TestParseLine:

    @pytest.mark.parametrize("line", [
        "1, Algebra, 88",
        "1,Algebra,88",
        "  1 , Algebra,   88  ",
    ])
    def test_whitespace_around_numbers_is_tolerated(self, line):
        from course_records.store.csv_io import parse_line
        rec = parse_line(line)
        assert (rec.roll_number, rec.course_name, rec.score) == (1, "Algebra", 88)

    def test_only_separator_space_is_dropped_from_name(self):
        from course_records.store.csv_io import parse_line
        assert parse_line("1,   Algebra  , 88").course_name == "  Algebra  "

    @pytest.mark.parametrize("line", ["2, , 80", "2,, 80"])
    def test_empty_name_is_accepted(self, line):
        from course_records.store.csv_io import parse_line
        rec = parse_line(line)
        assert (rec.roll_number, rec.course_name, rec.score) == (2, "", 80)

    def test_inner_spaces_in_name_kept(self):
        from course_records.store.csv_io import parse_line
        assert parse_line("4, Linear  Algebra II, 70").course_name == "Linear  Algebra II"

    def test_negative_numbers(self):
        from course_records.store.csv_io import parse_line
        rec = parse_line("-1, Debt, -5")
        assert (rec.roll_number, rec.score) == (-1, -5)

    @pytest.mark.parametrize("line", [
        "",
        "1, Algebra",
        "1, Algebra, 88, extra",
        "x, Algebra, 88",
        "1, Algebra, high",
        "1, Algebra, 88 points",
        "1.5, Algebra, 88",
    ])
    def test_malformed_lines_return_none(self, line):
        from course_records.store.csv_io import parse_line
        assert parse_line(line) is None

    def test_name_length_limit(self):
        from course_records.store.csv_io import parse_line
        assert parse_line(f"1, {'a' * 49}, 2") is not None
        assert parse_line(f"1, {'a' * 50}, 2") is None

    def test_custom_name_limit(self):
        from course_records.store.csv_io import parse_line
        assert parse_line("1, Algebra, 2", max_name_length=3) is None


class TestFormatTable:

    def test_subset_rendering(self):
        from course_records.store.models import CourseRecord
        from course_records.store.table import format_table
        text = format_table([CourseRecord(5, "Music", 77)])
        assert text.endswith("\n")
        lines = text.splitlines()
        assert lines[0].startswith("Roll Number")
        assert lines[1].split() == ["------------", "----------", "---------"]
        assert lines[2].split() == ["5", "Music", "77"]
