"""Tests for header resolution, normalization and table queries."""

from app.tables import (
    cell,
    cross_validate,
    distinct_column_values,
    filter_by_column,
    normalize,
    resolve_column,
)


def test_normalize_trims_and_lowercases():
    assert normalize("  CS ") == "cs"
    assert normalize(None) == ""
    assert normalize("") == ""


def test_cell_tolerates_short_rows():
    assert cell(["a", "b"], 1) == "b"
    assert cell(["a"], 3) is None
    assert cell(["a"], -1) is None


def test_resolve_column_ignores_case_and_whitespace():
    assert resolve_column(["Class"], "class") == 0
    assert resolve_column(["Name", " class "], "CLASS") == 1
    assert resolve_column(["Class"], "Grade") is None


def test_resolve_column_first_match_wins():
    assert resolve_column(["Dept", "dept", "DEPT"], "dept") == 0


def test_resolve_column_empty_header():
    assert resolve_column([], "Class") is None


def test_filter_by_column_keeps_header_and_raw_values(students_sheet):
    result = filter_by_column(students_sheet, "Class", "10a")
    assert result[0] == students_sheet[0]
    assert [row[0] for row in result[1:]] == ["Asha", "Ben"]
    assert result[2][4] == "10a "


def test_filter_by_column_is_idempotent(students_sheet):
    once = filter_by_column(students_sheet, "class", "10A")
    assert filter_by_column(once, "class", "10A") == once


def test_filter_by_column_no_match_returns_header_only(students_sheet):
    assert filter_by_column(students_sheet, "Class", "12Z") == [students_sheet[0]]


def test_filter_by_column_missing_column_returns_empty(students_sheet):
    assert filter_by_column(students_sheet, "Section", "A") == []


def test_filter_by_column_empty_or_header_only():
    assert filter_by_column([], "Class", "10A") == []
    assert filter_by_column([["Class"]], "Class", "10A") == []


def test_filter_by_column_does_not_mutate_source(students_sheet):
    before = [list(row) for row in students_sheet]
    filter_by_column(students_sheet, "Class", "10A")
    assert students_sheet == before


def test_distinct_column_values_normalized(students_sheet):
    assert distinct_column_values(students_sheet, "Department") == ["cs", "ee"]


def test_distinct_column_values_raw_keeps_first_spelling(students_sheet):
    assert distinct_column_values(students_sheet, "class", raw=True) == ["10A", "11B"]


def test_distinct_column_values_no_duplicates_or_blanks():
    table = [["Dept"], ["A"], [" a"], [""], ["  "], [], ["B"]]
    values = distinct_column_values(table, "dept")
    assert values == ["a", "b"]
    assert len(values) == len(set(values))


def test_distinct_column_values_missing_column(students_sheet):
    assert distinct_column_values(students_sheet, "Section") == []
    assert distinct_column_values([], "Department") == []


def test_cross_validate(students_sheet):
    assert cross_validate(students_sheet, "Department", "CS ")
    assert cross_validate(students_sheet, "department", "Ee")
    assert not cross_validate(students_sheet, "Department", "Math")
    assert not cross_validate(students_sheet, "Department", None)
    assert not cross_validate(students_sheet, "Section", "cs")
