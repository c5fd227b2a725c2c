"""
Offset/limit pagination and the per-page preference kept in the session.
"""
from __future__ import annotations

import math
from collections.abc import MutableMapping
from dataclasses import dataclass
from typing import Any, Optional

PER_PAGE_OPTIONS: tuple[int, ...] = (10, 20, 50, 100)
DEFAULT_PER_PAGE_INDEX = 1
DEFAULT_LIMIT = PER_PAGE_OPTIONS[DEFAULT_PER_PAGE_INDEX]

SESSION_KEY = "selected_per_page"


def normalize_page(page_num: int) -> int:
    return page_num if page_num > 1 else 1


def offset_for(page_num: int, limit: int) -> int:
    return (page_num - 1) * limit if page_num > 1 else 0


def total_pages(total_rows: int, limit: int) -> int:
    return math.ceil(total_rows / limit) if limit > 0 else 0


def is_valid_index(index: Any) -> bool:
    return isinstance(index, int) and not isinstance(index, bool) and 0 <= index < len(PER_PAGE_OPTIONS)


class PerPagePreference:
    """
    Rows-per-page choice for one browser session.

    Wraps the request's session mapping (``request.session``). Out-of-range
    selections fall back to the default index instead of being rejected.
    """

    def __init__(self, session: MutableMapping[str, Any]):
        self.session = session

    @property
    def selected_index(self) -> int:
        index = self.session.get(SESSION_KEY)
        return index if is_valid_index(index) else DEFAULT_PER_PAGE_INDEX

    @property
    def limit(self) -> int:
        return PER_PAGE_OPTIONS[self.selected_index]

    def select(self, index: Optional[int]) -> int:
        if not is_valid_index(index):
            index = DEFAULT_PER_PAGE_INDEX
        self.session[SESSION_KEY] = index
        return index


@dataclass(frozen=True, slots=True)
class Pagination:
    """What the list template needs to draw the pager."""

    total_rows: int
    limit: int
    page_num: int = 1
    page_num_segment: int = 3
    pagination_root: str = "monthly_reports/manage"
    record_name_plural: str = "monthly reports"
    include_showing_statement: bool = True

    @property
    def offset(self) -> int:
        return offset_for(self.page_num, self.limit)

    @property
    def total_pages(self) -> int:
        return total_pages(self.total_rows, self.limit)

    @property
    def has_prev(self) -> bool:
        return self.page_num > 1

    @property
    def has_next(self) -> bool:
        return self.page_num < self.total_pages

    @property
    def first_row(self) -> int:
        return min(self.offset + 1, self.total_rows)

    @property
    def last_row(self) -> int:
        return min(self.offset + self.limit, self.total_rows)

    @property
    def showing_statement(self) -> str:
        return (
            f"Showing {self.first_row} to {self.last_row} of "
            f"{self.total_rows} {self.record_name_plural}"
        )
