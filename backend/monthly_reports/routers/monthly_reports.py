from __future__ import annotations
import logging
from dataclasses import replace
from typing import Any, Optional

from fastapi import APIRouter, Depends, Form, Request, status
from fastapi.responses import RedirectResponse

from monthly_reports.deps.auth import make_sure_allowed
from monthly_reports.deps.reports import get_per_page_preference, get_report_repo
from monthly_reports.flash import set_flashdata
from monthly_reports.pagination import (
    PER_PAGE_OPTIONS,
    Pagination,
    PerPagePreference,
    normalize_page,
    offset_for,
)
from monthly_reports.repositories.report_repo import MonthlyReportRepository
from monthly_reports.schemas.monthly_report import validate_submission
from monthly_reports.templating import Renderer, get_renderer

log = logging.getLogger(__name__)

MODULE = "monthly_reports"
SUBMIT_TOKEN = "Submit"
DELETE_TOKEN = "Yes - Delete Now"

router = APIRouter(prefix=f"/{MODULE}", tags=["monthly_reports"], dependencies=[Depends(make_sure_allowed)])


def _parse_int(raw: Optional[str]) -> Optional[int]:
    """Lenient URL segment parsing: anything non-numeric is None."""
    if raw is None:
        return None
    try:
        return int(raw)
    except ValueError:
        return None


def _url(request: Request, path: str) -> str:
    return f"{request.base_url}{MODULE}/{path}"


def _redirect(request: Request, path: str) -> RedirectResponse:
    return RedirectResponse(_url(request, path), status_code=status.HTTP_303_SEE_OTHER)


def _back_url(request: Request) -> str:
    # Only go "back" to the list (keeps the page number); anything else goes to page 1
    manage_url = _url(request, "manage")
    previous_url = request.headers.get("referer", "")
    if previous_url and previous_url.startswith(manage_url):
        return previous_url
    return manage_url


def _not_found(request: Request, renderer: Renderer):
    log.info("monthly report not found: %s", request.url.path)
    data = {
        "headline": "Monthly Report Not Found",
        "message": "The monthly report you're looking for doesn't exist or has been deleted.",
        "back_url": _back_url(request),
        "back_label": "Go Back",
    }
    return renderer.admin(request, MODULE, "not_found", data, status_code=status.HTTP_404_NOT_FOUND)


def _render_form(request: Request, renderer: Renderer, report_id: int, values: dict[str, str],
                 errors: Optional[dict[str, str]] = None, *, status_code: int = status.HTTP_200_OK):
    data: dict[str, Any] = dict(values)
    data["update_id"] = report_id
    data["errors"] = errors or {}
    data["headline"] = "Update Monthly Report Record" if report_id > 0 else "Create New Monthly Report Record"
    data["cancel_url"] = _url(request, f"show/{report_id}") if report_id > 0 else _url(request, "manage")
    data["form_location"] = _url(request, f"submit/{report_id}")
    return renderer.admin(request, MODULE, "create", data, status_code=status_code)


@router.get("", name="monthly_reports_index")
def index(request: Request):
    return _redirect(request, "manage")


@router.get("/manage", name="manage_monthly_reports")
@router.get("/manage/{page_num}", name="manage_monthly_reports_page")
def manage(
    request: Request,
    page_num: Optional[str] = None,
    repo: MonthlyReportRepository = Depends(get_report_repo),
    preference: PerPagePreference = Depends(get_per_page_preference),
    renderer: Renderer = Depends(get_renderer),
):
    limit = preference.limit
    page = normalize_page(_parse_int(page_num) or 1)
    rows = repo.list_page(limit, offset_for(page, limit))
    pagination = Pagination(total_rows=repo.count(), limit=limit, page_num=page)

    data = {
        "headline": "Manage Monthly Reports",
        "rows": repo.to_display_many(rows),
        "pagination": pagination,
        "pagination_bottom": replace(pagination, include_showing_statement=False),
        "per_page_options": PER_PAGE_OPTIONS,
        "selected_per_page": preference.selected_index,
    }
    return renderer.admin(request, MODULE, "manage", data)


@router.get("/create", name="create_monthly_report")
@router.get("/create/{update_id}", name="edit_monthly_report")
def create(
    request: Request,
    update_id: Optional[str] = None,
    repo: MonthlyReportRepository = Depends(get_report_repo),
    renderer: Renderer = Depends(get_renderer),
):
    report_id = _parse_int(update_id) or 0
    if report_id > 0:
        record = repo.get(report_id)
        if record is None:
            return _not_found(request, renderer)
        return _render_form(request, renderer, report_id, repo.form_defaults(record))
    return _render_form(request, renderer, report_id, repo.form_defaults())


@router.post("/submit", name="submit_monthly_report")
@router.post("/submit/{update_id}", name="submit_monthly_report_update")
def submit_report(
    request: Request,
    update_id: Optional[str] = None,
    submit: Optional[str] = Form(None),
    employee_name: Optional[str] = Form(None),
    department: Optional[str] = Form(None),
    report_month: Optional[str] = Form(None),
    report_summary: Optional[str] = Form(None),
    repo: MonthlyReportRepository = Depends(get_report_repo),
    renderer: Renderer = Depends(get_renderer),
):
    report_id = _parse_int(update_id) or 0
    if submit != SUBMIT_TOKEN:
        log.info("monthly report submission abandoned (update_id=%s)", report_id)
        return _redirect(request, "manage")

    fields = {
        "employee_name": employee_name,
        "department": department,
        "report_month": report_month,
        "report_summary": report_summary,
    }
    form, errors = validate_submission(repo.from_submission(fields))
    if form is None:
        log.info("monthly report validation failed: %s", ", ".join(errors))
        return _render_form(
            request, renderer, report_id, repo.form_defaults(fields), errors,
            status_code=status.HTTP_422_UNPROCESSABLE_ENTITY,
        )

    if report_id > 0:
        if repo.update_report(report_id, form) is None:
            # show/{id} will render the not-found page
            log.warning("monthly report %s vanished before update", report_id)
        else:
            log.info("monthly report %s updated", report_id)
            set_flashdata(request.session, "Monthly report record updated successfully")
    else:
        report_id = repo.create(form).id
        log.info("monthly report %s created", report_id)
        set_flashdata(request.session, "Monthly report record created successfully")

    return _redirect(request, f"show/{report_id}")


@router.get("/show", name="show_monthly_report_missing")
@router.get("/show/{update_id}", name="show_monthly_report")
def show(
    request: Request,
    update_id: Optional[str] = None,
    repo: MonthlyReportRepository = Depends(get_report_repo),
    renderer: Renderer = Depends(get_renderer),
):
    report_id = _parse_int(update_id) or 0
    record = repo.get(report_id)
    if record is None:
        return _not_found(request, renderer)

    data = {
        "report": repo.to_display(record),
        "update_id": report_id,
        "headline": "Monthly Report Details",
        "back_url": _back_url(request),
    }
    return renderer.admin(request, MODULE, "show", data)


@router.get("/delete_conf", name="delete_conf_monthly_report_missing")
@router.get("/delete_conf/{update_id}", name="delete_conf_monthly_report")
def delete_conf(
    request: Request,
    update_id: Optional[str] = None,
    repo: MonthlyReportRepository = Depends(get_report_repo),
    renderer: Renderer = Depends(get_renderer),
):
    report_id = _parse_int(update_id) or 0
    record = repo.get(report_id)
    if record is None:
        return _not_found(request, renderer)

    data = {
        "report": repo.to_display(record),
        "update_id": report_id,
        "headline": "Delete Monthly Report Record",
        "cancel_url": _url(request, f"show/{report_id}"),
        "form_location": _url(request, f"submit_delete/{report_id}"),
    }
    return renderer.admin(request, MODULE, "delete_conf", data)


@router.post("/submit_delete", name="submit_delete_monthly_report_missing")
@router.post("/submit_delete/{update_id}", name="submit_delete_monthly_report")
def submit_delete(
    request: Request,
    update_id: Optional[str] = None,
    submit: Optional[str] = Form(None),
    repo: MonthlyReportRepository = Depends(get_report_repo),
):
    # Wrong token, bad id or missing record: back to the list, nothing said
    if submit != DELETE_TOKEN:
        return _redirect(request, "manage")
    report_id = _parse_int(update_id) or 0
    if not repo.delete(report_id):
        return _redirect(request, "manage")

    log.info("monthly report %s deleted", report_id)
    set_flashdata(request.session, "The record was successfully deleted")
    return _redirect(request, "manage")


@router.get("/set_per_page", name="set_per_page_default")
@router.get("/set_per_page/{selected_index}", name="set_per_page")
def set_per_page(
    request: Request,
    selected_index: Optional[str] = None,
    preference: PerPagePreference = Depends(get_per_page_preference),
):
    preference.select(_parse_int(selected_index))
    return _redirect(request, "manage")
