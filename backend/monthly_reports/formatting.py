"""
Display helpers for report months and summaries.

Stored months are ``YYYY-MM`` strings. Nothing here raises on bad input;
unparsable values degrade to fixed placeholder strings.
"""
from __future__ import annotations
from datetime import date
from typing import NamedTuple, Optional

NOT_SPECIFIED = "Not specified"
INVALID_MONTH = "Invalid Month"
NOT_AVAILABLE = "N/A"

SUMMARY_DISPLAY_LENGTH = 100
ELLIPSIS = "..."


class MonthLabels(NamedTuple):
    formatted: str   # "December 2025"
    short: str       # "Dec 2025"
    numeric: str     # "12/2025"


def parse_report_month(value: str) -> Optional[date]:
    """Return the first day of the month, or None if ``value`` isn't YYYY-MM."""
    parts = value.split("-")
    if len(parts) != 2:
        return None
    year, month = parts
    # Plain ASCII digits only; int() alone would take " 12", "+12" or "1_2"
    if not all(p.isascii() and p.isdigit() for p in parts):
        return None
    if len(year) != 4 or len(month) not in (1, 2):
        return None
    try:
        return date(int(year), int(month), 1)
    except ValueError:
        return None


def month_labels(value: Optional[str]) -> MonthLabels:
    if value is None or value == "":
        return MonthLabels(NOT_SPECIFIED, NOT_AVAILABLE, NOT_AVAILABLE)
    first_day = parse_report_month(value)
    if first_day is None:
        return MonthLabels(INVALID_MONTH, NOT_AVAILABLE, NOT_AVAILABLE)
    return MonthLabels(
        formatted=first_day.strftime("%B %Y"),
        short=first_day.strftime("%b %Y"),
        numeric=first_day.strftime("%m/%Y"),
    )


def truncate_summary(summary: Optional[str], length: int = SUMMARY_DISPLAY_LENGTH) -> str:
    if summary is None:
        return ""
    if len(summary) > length:
        return summary[:length] + ELLIPSIS
    return summary
