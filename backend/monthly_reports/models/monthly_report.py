from sqlalchemy.orm import Mapped, mapped_column
from sqlalchemy import Integer, String, Text
from monthly_reports.db import Base

class MonthlyReport(Base):
    __tablename__ = "monthly_reports"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, index=True)
    employee_name: Mapped[str] = mapped_column(String(50), nullable=False)
    department: Mapped[str] = mapped_column(String(50), nullable=False)
    # ISO 8601 month, e.g. "2025-12"; the HTML month input submits the same shape
    report_month: Mapped[str] = mapped_column(String(7), nullable=False)
    report_summary: Mapped[str] = mapped_column(Text, nullable=False)
