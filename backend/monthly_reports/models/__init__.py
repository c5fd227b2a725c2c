from monthly_reports.models.monthly_report import MonthlyReport

__all__ = ["MonthlyReport"]
