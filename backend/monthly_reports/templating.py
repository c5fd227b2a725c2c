from pathlib import Path
from typing import Any, Optional

from fastapi import Request
from fastapi.templating import Jinja2Templates

from monthly_reports.flash import pop_flashdata

TEMPLATE_DIR = Path(__file__).resolve().parent / "templates"

templates = Jinja2Templates(directory=str(TEMPLATE_DIR))


class Renderer:
    """Renders a view of one module inside the admin layout."""

    def __init__(self, engine: Jinja2Templates = templates):
        self.engine = engine

    def admin(self, request: Request, view_module: str, view_file: str,
              data: Optional[dict[str, Any]] = None, *, status_code: int = 200):
        context = dict(data or {})
        context["flashdata"] = pop_flashdata(request.session)
        context["view_module"] = view_module
        context["view_file"] = view_file
        context["base_url"] = str(request.base_url)
        return self.engine.TemplateResponse(
            request, f"{view_module}/{view_file}.html", context, status_code=status_code
        )


def get_renderer() -> Renderer:
    return Renderer()
