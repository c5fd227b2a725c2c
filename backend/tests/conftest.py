"""
Point the app at an in-memory SQLite database before anything imports it,
then share schema/cleanup/client fixtures across the suite.
"""
import os

os.environ["DB_URL"] = "sqlite+pysqlite:///:memory:"
os.environ["SECRET_KEY"] = "test-secret"
os.environ["AUTH_REQUIRED"] = "true"

import pytest
from fastapi.testclient import TestClient

from monthly_reports.db import Base, SessionLocal, engine
from monthly_reports.main import app
from monthly_reports.models import MonthlyReport
from monthly_reports.security import create_access_token


@pytest.fixture(scope="session", autouse=True)
def create_schema_once():
    Base.metadata.create_all(bind=engine)
    yield
    Base.metadata.drop_all(bind=engine)


@pytest.fixture(autouse=True)
def clean_data():
    """Empty every table between tests without dropping the schema."""
    with engine.begin() as connection:
        for table in reversed(Base.metadata.sorted_tables):
            connection.execute(table.delete())
    yield


@pytest.fixture
def db_session():
    db = SessionLocal()
    try:
        yield db
    finally:
        db.close()


@pytest.fixture
def report_factory(db_session):
    def _create(employee_name="Ada Lovelace", department="Engineering",
                report_month="2025-12", report_summary="Shipped the analytical engine docs."):
        report = MonthlyReport(
            employee_name=employee_name,
            department=department,
            report_month=report_month,
            report_summary=report_summary,
        )
        db_session.add(report)
        db_session.commit()
        db_session.refresh(report)
        return report
    return _create


@pytest.fixture
def token():
    return create_access_token(sub="1")


@pytest.fixture
def client(token):
    # Fresh client per test so session cookies (per-page, flash) don't leak
    c = TestClient(app)
    c.headers["Authorization"] = f"Bearer {token}"
    return c


@pytest.fixture
def anon_client():
    return TestClient(app)
