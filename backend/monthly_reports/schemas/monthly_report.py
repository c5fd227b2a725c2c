import re
from typing import Annotated, Optional
from pydantic import BaseModel, Field, StringConstraints, ValidationError, ValidationInfo, field_validator
from pydantic_core import PydanticCustomError

# Month picker value, e.g. "2025-12"; ASCII digits only, year 0001-9999
MONTH_PATTERN = re.compile(r"(?!0000)[0-9]{4}-(0[1-9]|1[0-2])")

NameStr = Annotated[str, Field(min_length=2, max_length=50)]
# Summary is trimmed before its length is checked (and before it is stored)
SummaryStr = Annotated[str, StringConstraints(strip_whitespace=True, min_length=10)]

FIELD_LABELS = {
    "employee_name": "employee name",
    "department": "department",
    "report_month": "report month",
    "report_summary": "report summary",
}
FORM_FIELDS = tuple(FIELD_LABELS)


class MonthlyReportForm(BaseModel):
    """Validation rules for the create/update form."""
    employee_name: NameStr
    department: NameStr
    report_month: str
    report_summary: SummaryStr

    @field_validator("*", mode="before")
    @classmethod
    def required(cls, v, info: ValidationInfo):
        if v is None or (isinstance(v, str) and not v.strip()):
            raise PydanticCustomError("required", "{field} is required", {"field": info.field_name})
        return v

    @field_validator("report_month")
    @classmethod
    def valid_month(cls, v: str) -> str:
        if not MONTH_PATTERN.fullmatch(v):
            raise PydanticCustomError("valid_month", "{value} is not a valid month", {"value": v})
        return v


class MonthlyReportDraft(BaseModel):
    """Whatever the form posted. Any field may be missing."""
    id: Optional[int] = None
    employee_name: Optional[str] = None
    department: Optional[str] = None
    report_month: Optional[str] = None
    report_summary: Optional[str] = None


class MonthlyReportRead(BaseModel):
    id: int
    employee_name: str
    department: str
    report_month: str
    report_summary: str

    model_config = {"from_attributes": True}


class MonthlyReportDisplay(MonthlyReportDraft):
    """A record or draft plus the derived display fields (never persisted)."""
    report_month_formatted: str
    report_month_short: str
    report_month_numeric: str
    report_summary_truncated: str


def _message(err: dict) -> str:
    field = err["loc"][0] if err["loc"] else ""
    label = FIELD_LABELS.get(field, str(field).replace("_", " "))
    ctx = err.get("ctx") or {}
    kind = err["type"]
    if kind in ("required", "missing"):
        return f"The {label} field is required."
    if kind == "string_too_short":
        return f"The {label} field must be at least {ctx['min_length']} characters in length."
    if kind == "string_too_long":
        return f"The {label} field cannot exceed {ctx['max_length']} characters in length."
    if kind == "valid_month":
        return f"The {label} field must be a valid month."
    return f"The {label} field is invalid."


def form_errors(exc: ValidationError) -> dict[str, str]:
    """First message per field, keyed by field name, in form order."""
    errors: dict[str, str] = {}
    for err in exc.errors():
        field = str(err["loc"][0]) if err["loc"] else "__all__"
        errors.setdefault(field, _message(err))
    return {f: errors[f] for f in (*FORM_FIELDS, "__all__") if f in errors}


def validate_submission(draft: MonthlyReportDraft) -> tuple[Optional[MonthlyReportForm], dict[str, str]]:
    try:
        form = MonthlyReportForm.model_validate(draft.model_dump(include=set(FORM_FIELDS)))
    except ValidationError as exc:
        return None, form_errors(exc)
    return form, {}
