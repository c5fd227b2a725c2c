from fastapi import Depends, Request
from sqlalchemy.orm import Session

from monthly_reports.db import get_db
from monthly_reports.pagination import PerPagePreference
from monthly_reports.repositories.report_repo import MonthlyReportRepository

def get_report_repo(db: Session = Depends(get_db)) -> MonthlyReportRepository:
    return MonthlyReportRepository(db)

def get_per_page_preference(request: Request) -> PerPagePreference:
    # request.session is provided by SessionMiddleware (see main.py)
    return PerPagePreference(request.session)
