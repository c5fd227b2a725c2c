import pytest

from monthly_reports.models import MonthlyReport

FORM = {
    "employee_name": "Someone",
    "department": "Somewhere",
    "report_month": "2025-01",
    "report_summary": "Nothing much happened at all.",
}

@pytest.mark.parametrize("path", [
    "/monthly_reports/show/0",
    "/monthly_reports/show/999999",
    "/monthly_reports/show",
    "/monthly_reports/show/not-a-number",
    "/monthly_reports/delete_conf/0",
    "/monthly_reports/delete_conf/999999",
    "/monthly_reports/create/999999",
])
def test_not_found_view(client, path):
    r = client.get(path)
    assert r.status_code == 404
    assert r.template.name == "monthly_reports/not_found.html"
    assert r.context["headline"] == "Monthly Report Not Found"
    assert r.context["back_label"] == "Go Back"

def test_submit_without_token_is_abandoned(client, db_session):
    r = client.post("/monthly_reports/submit", data=FORM, follow_redirects=False)
    assert r.status_code == 303
    assert r.headers["location"].endswith("/monthly_reports/manage")
    assert db_session.query(MonthlyReport).count() == 0

def test_submit_with_wrong_token_is_abandoned(client, db_session):
    r = client.post("/monthly_reports/submit", data={**FORM, "submit": "submit"}, follow_redirects=False)
    assert r.status_code == 303
    assert db_session.query(MonthlyReport).count() == 0

@pytest.mark.parametrize("data", [{}, {"submit": "Yes"}, {"submit": "yes - delete now"}, {"submit": "Submit"}])
def test_delete_without_exact_token_keeps_record(client, report_factory, db_session, data):
    report = report_factory()
    r = client.post(f"/monthly_reports/submit_delete/{report.id}", data=data, follow_redirects=False)
    assert r.status_code == 303
    assert r.headers["location"].endswith("/monthly_reports/manage")
    assert db_session.query(MonthlyReport).count() == 1

    # no notice either
    r = client.get("/monthly_reports/manage")
    assert r.context["flashdata"] is None

@pytest.mark.parametrize("path", ["/monthly_reports/submit_delete/0", "/monthly_reports/submit_delete/999999"])
def test_delete_missing_record_redirects_silently(client, report_factory, db_session, path):
    report_factory()
    r = client.post(path, data={"submit": "Yes - Delete Now"}, follow_redirects=False)
    assert r.status_code == 303
    assert r.headers["location"].endswith("/monthly_reports/manage")
    assert db_session.query(MonthlyReport).count() == 1

def test_update_of_vanished_record_lands_on_not_found(client, db_session):
    r = client.post("/monthly_reports/submit/424242", data={**FORM, "submit": "Submit"}, follow_redirects=True)
    assert r.status_code == 404
    assert r.context["flashdata"] is None
    assert db_session.query(MonthlyReport).count() == 0

def test_page_number_below_one_is_first_page(client, report_factory):
    report_factory()
    for path in ("/monthly_reports/manage/0", "/monthly_reports/manage/-3", "/monthly_reports/manage/abc"):
        r = client.get(path)
        assert r.status_code == 200
        assert r.context["pagination"].page_num == 1
        assert len(r.context["rows"]) == 1

def test_month_with_trailing_newline_is_rejected(client, db_session):
    r = client.post("/monthly_reports/submit",
                    data={**FORM, "report_month": "2025-12\n", "submit": "Submit"}, follow_redirects=False)
    assert r.status_code == 422
    assert set(r.context["errors"]) == {"report_month"}
    assert db_session.query(MonthlyReport).count() == 0

def test_page_past_the_end_keeps_pager(client, report_factory):
    for _ in range(25):
        report_factory()
    r = client.get("/monthly_reports/manage/99")
    assert r.status_code == 200
    assert r.context["rows"] == []
    assert r.context["pagination"].total_rows == 25
    assert "There are currently no records to display." not in r.text
    assert "There are no records on this page." in r.text
    assert 'class="pagination"' in r.text
