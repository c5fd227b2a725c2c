import pytest

from monthly_reports.formatting import month_labels, parse_report_month, truncate_summary


def test_valid_month_labels():
    labels = month_labels("2025-12")
    assert labels.formatted == "December 2025"
    assert labels.short == "Dec 2025"
    assert labels.numeric == "12/2025"

def test_single_digit_month_still_parses():
    assert month_labels("2025-1").formatted == "January 2025"

@pytest.mark.parametrize("value", [
    "2025-13", "2025-00", "december", "2025-12-01", "abcd-ef", "-",
    "2025-1_2", " 2025-12", "+2025-12", "2025-012", "2025-12 ", "2025-12\n",
    "\u0662\u0660\u0662\u0665-12", "0000-01", "25-12",
])
def test_malformed_month_degrades(value):
    labels = month_labels(value)
    assert labels == ("Invalid Month", "N/A", "N/A")

@pytest.mark.parametrize("value", [None, ""])
def test_missing_month(value):
    assert month_labels(value) == ("Not specified", "N/A", "N/A")

def test_parse_report_month():
    assert parse_report_month("2024-02").day == 1
    assert parse_report_month("2024") is None

def test_long_summary_is_cut_at_100_chars():
    summary = "x" * 150
    out = truncate_summary(summary)
    assert out == "x" * 100 + "..."
    assert len(out) == 103

def test_short_summary_unchanged():
    summary = "y" * 80
    assert truncate_summary(summary) == summary

def test_exactly_100_chars_unchanged():
    assert truncate_summary("z" * 100) == "z" * 100

def test_missing_summary_is_empty():
    assert truncate_summary(None) == ""
