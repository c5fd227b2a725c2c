# monthly_reports/repositories/report_repo.py
from __future__ import annotations
from typing import Any, Mapping, Optional, Union

from pydantic import BaseModel

from monthly_reports.formatting import month_labels, truncate_summary
from monthly_reports.models import MonthlyReport
from monthly_reports.repositories.base import BaseRepository
from monthly_reports.schemas.monthly_report import (
    FORM_FIELDS,
    MonthlyReportDisplay,
    MonthlyReportDraft,
    MonthlyReportForm,
)

DisplaySource = Union[MonthlyReport, BaseModel, Mapping[str, Any]]


def _raw_fields(source: DisplaySource) -> dict[str, Any]:
    """Pull id + form fields out of an ORM row, a schema, or a plain mapping."""
    if isinstance(source, BaseModel):
        source = source.model_dump()
    if isinstance(source, Mapping):
        return {k: source.get(k) for k in ("id", *FORM_FIELDS)}
    return {k: getattr(source, k, None) for k in ("id", *FORM_FIELDS)}


class MonthlyReportRepository(BaseRepository[MonthlyReport]):
    model = MonthlyReport

    # READS
    def list_page(self, limit: int, offset: int) -> list[MonthlyReport]:
        return self.fetch(limit=limit, offset=offset)

    def get(self, report_id: int) -> Optional[MonthlyReport]:
        if report_id <= 0:
            return None
        return super().get(report_id)

    # WRITES
    def create(self, form: MonthlyReportForm) -> MonthlyReport:
        return self.insert(form.model_dump())

    def update_report(self, report_id: int, form: MonthlyReportForm) -> Optional[MonthlyReport]:
        return self.update(report_id, form.model_dump())

    # MAPPING (pure)
    @staticmethod
    def to_display(record: DisplaySource) -> MonthlyReportDisplay:
        """
        Attach display-ready month labels and a list-view summary.
        Works on partial drafts too; malformed months degrade, never raise.
        """
        data = _raw_fields(record)
        labels = month_labels(data.get("report_month"))
        return MonthlyReportDisplay(
            **data,
            report_month_formatted=labels.formatted,
            report_month_short=labels.short,
            report_month_numeric=labels.numeric,
            report_summary_truncated=truncate_summary(data.get("report_summary")),
        )

    @classmethod
    def to_display_many(cls, rows: list[DisplaySource]) -> list[MonthlyReportDisplay]:
        return [cls.to_display(row) for row in rows]

    @staticmethod
    def from_submission(fields: Mapping[str, Any]) -> MonthlyReportDraft:
        summary = fields.get("report_summary")
        return MonthlyReportDraft(
            employee_name=fields.get("employee_name"),
            department=fields.get("department"),
            report_month=fields.get("report_month"),
            report_summary=summary.strip() if isinstance(summary, str) else summary,
        )

    @staticmethod
    def form_defaults(source: Optional[DisplaySource] = None) -> dict[str, str]:
        """
        Values for the form inputs: the stored record when editing, the
        just-submitted draft after a failed validation, blanks otherwise.
        """
        if source is None:
            return {field: "" for field in FORM_FIELDS}
        data = _raw_fields(source)
        return {field: "" if data[field] is None else str(data[field]) for field in FORM_FIELDS}
