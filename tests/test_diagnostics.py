"""
Tests for field diagnostics.

Tests verify that analyze_fields correctly:
    - Inventories fields
    - Measures nesting, escapes and suppressed separators
    - Reports errors without raising
    - Flags likely input mistakes
"""

import pytest
from pybag.diagnostics import FieldsReport, analyze_fields
from pybag.errors import ErrorKind


def test_well_formed_input():
    """Quotes, parens and escapes in one string."""
    report = analyze_fields('a,"b,c",(d,e),f\\,g', ",")

    assert report.is_valid
    assert report.error is None
    assert report.fields == ["a", '"b,c"', "(d,e)", "f,g"]
    assert report.field_count == 4
    assert report.quoted_fields == 1
    assert report.max_paren_depth == 1
    assert report.min_paren_depth == 0
    assert report.escape_count == 1
    assert report.suppressed_separators == 2
    assert report.warnings == []


def test_empty_input():
    report = analyze_fields("", ",")

    assert report.is_valid
    assert report.fields == []
    assert report.field_count == 0
    assert report.max_paren_depth == 0
    assert report.warnings == []


def test_invalid_input_does_not_raise():
    report = analyze_fields("a,(b", ",")

    assert not report.is_valid
    assert report.error == ErrorKind.UNBALANCED_PARENS
    assert report.fields is None
    assert report.field_count == 0
    assert "Invalid input: unbalanced parentheses in string" in report.warnings


def test_too_many_closing_parens():
    """The negative depth is the error itself, so no extra warning."""
    report = analyze_fields("a,b)", ",")

    assert report.error == ErrorKind.TOO_MANY_CLOSING_PARENS
    assert report.min_paren_depth == -1
    assert len(report.warnings) == 1


def test_recovered_negative_depth_is_flagged():
    report = analyze_fields("x)(", ",")

    assert report.is_valid
    assert report.min_paren_depth == -1
    assert any("index 1" in w for w in report.warnings)


def test_empty_fields_flagged():
    report = analyze_fields("a,,b,", ",")

    assert report.fields == ["a", "", "b"]
    assert report.empty_fields == 1
    assert "Empty fields at positions: 1" in report.warnings


def test_padded_fields_flagged():
    report = analyze_fields(" a ,b, c", ",")

    assert "Fields with surrounding whitespace at positions: 0, 2" in report.warnings


def test_single_quoted_fields_counted():
    report = analyze_fields("'a','b',c", ",")

    assert report.quoted_fields == 2


def test_other_separator():
    report = analyze_fields("a|b,c", "|")

    assert report.separator == "|"
    assert report.fields == ["a", "b,c"]


def test_bad_separator_raises():
    with pytest.raises(ValueError):
        analyze_fields("a", "")


def test_add_warning_deduplicates():
    report = FieldsReport(text="", separator=",")
    report.add_warning("same")
    report.add_warning("same")

    assert report.warnings == ["same"]
