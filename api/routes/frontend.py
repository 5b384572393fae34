"""
Frontend HTML routes.

Serves the Jinja2 templates for the hub shell and its HTMX partials.

Routes:
    GET /                  → index.html (shell in its default state)
    GET /partials/shell    → partials/shell.html (HTMX swap target #app)
    GET /partials/search   → partials/search_modal.html (HTMX swap target #modal-root)

UI state is carried entirely by the request: every clickable element in the
shell sends the full next ``DashboardState`` as ``hx-vals``.  ``/`` ignores
its query string, so a reload always returns to the defaults.
"""

import logging
from http import HTTPStatus
from typing import Any

from fastapi import APIRouter, FastAPI, Request
from fastapi.responses import HTMLResponse, JSONResponse
from fastapi.templating import Jinja2Templates
from starlette.exceptions import HTTPException as StarletteHTTPException

from catalog.content import MENU_ITEMS
from catalog.search import SearchModalState
from catalog.sections import render_section
from catalog.state import DashboardState

router = APIRouter(tags=["frontend"])

_logger = logging.getLogger("sales_intel_hub.frontend")

# Templates instance is set by create_app() after mounting.
_templates: Jinja2Templates | None = None


def set_templates(t: Jinja2Templates) -> None:
    global _templates
    _templates = t


def _tmpl() -> Jinja2Templates:
    if _templates is None:
        raise RuntimeError("Templates not initialised; call set_templates() first")
    return _templates


def _shell_context(state: DashboardState) -> dict[str, Any]:
    """Template context for the shell: state, menu and the active section view."""
    view = render_section(state)
    return {
        "state":            state,
        "menu_items":       MENU_ITEMS,
        "section_template": view.template,
        **view.context,
    }


# ── Routes ────────────────────────────────────────────────────────────────────

@router.get("/", response_class=HTMLResponse, include_in_schema=False)
def index(request: Request) -> HTMLResponse:
    """Full page, always in the default state."""
    context = _shell_context(DashboardState())
    context["modal"] = SearchModalState()
    return _tmpl().TemplateResponse(request, "index.html", context)


@router.get("/partials/shell", response_class=HTMLResponse, include_in_schema=False)
def shell_partial(request: Request) -> HTMLResponse:
    """HTMX partial: sidebar, header and active section for the requested state."""
    state = DashboardState.from_params(request.query_params)
    return _tmpl().TemplateResponse(
        request, "partials/shell.html", _shell_context(state)
    )


@router.get("/partials/search", response_class=HTMLResponse, include_in_schema=False)
def search_partial(request: Request) -> HTMLResponse:
    """HTMX partial: the search modal, or nothing when it is closed."""
    modal = SearchModalState.from_params(request.query_params)
    return _tmpl().TemplateResponse(
        request, "partials/search_modal.html", {"modal": modal}
    )


# ── Error pages ───────────────────────────────────────────────────────────────

def register_error_handlers(app: FastAPI) -> None:
    """Render HTTP errors as HTML pages, except under /api/ where JSON is kept."""

    @app.exception_handler(StarletteHTTPException)
    async def http_exception_handler(request: Request, exc: StarletteHTTPException):
        if request.url.path.startswith("/api/"):
            return JSONResponse(
                status_code=exc.status_code,
                content={
                    "error": HTTPStatus(exc.status_code).phrase,
                    "detail": str(exc.detail),
                    "status_code": exc.status_code,
                },
                headers=getattr(exc, "headers", None),
            )
        _logger.info("error page status=%d path=%s", exc.status_code, request.url.path)
        return _tmpl().TemplateResponse(
            request,
            "errors/error.html",
            {"status_code": exc.status_code, "detail": exc.detail},
            status_code=exc.status_code,
        )
