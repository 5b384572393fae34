"""
FastAPI application factory for the Sales Intel Hub.

Usage:
    python -m api.app                    # Dev server on port 8000
    APP_PORT=9000 python -m api.app

OpenAPI docs available at http://localhost:8000/docs after starting.

Framework: FastAPI + Jinja2 templates + HTMX.  The hub is server-rendered;
HTMX swaps the shell and the search modal in place, so there is no JS build
step and a single Python process serves everything.

Cross-cutting concerns wired here:
  - Structured JSON logging when APP_LOG_FORMAT=json
  - Request logging with an X-Request-ID per request
  - CORS with configurable origins via APP_CORS_ORIGINS
  - Content-Security-Policy and related security headers
  - JSON error bodies for ValueError (400) and unhandled exceptions (500)
"""

import json
import logging
import time
import uuid
from pathlib import Path

from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from fastapi.staticfiles import StaticFiles
from fastapi.templating import Jinja2Templates

from api.models import HealthResponse
from api.routes import data
from api.routes import frontend as frontend_routes
from utils.config import AppConfig

__version__ = "1.0.0"

# ── Configuration ─────────────────────────────────────────────────────────────
_cfg = AppConfig.from_env()

# ── Structured JSON logging ───────────────────────────────────────────────────


class _JsonFormatter(logging.Formatter):
    """Emit log records as newline-delimited JSON."""

    def format(self, record: logging.LogRecord) -> str:
        data: dict = {
            "timestamp": self.formatTime(record, "%Y-%m-%dT%H:%M:%S"),
            "level": record.levelname,
            "logger": record.name,
            "message": record.getMessage(),
        }
        # Merge extra fields added via logger.info("...", extra={...})
        for key in ("method", "path", "status", "duration_ms", "request_id"):
            if hasattr(record, key):
                data[key] = getattr(record, key)
        if record.exc_info:
            data["exc_info"] = self.formatException(record.exc_info)
        return json.dumps(data)


def configure_logging(cfg: AppConfig) -> None:
    """Install a single stream handler on the root logger."""
    handler = logging.StreamHandler()
    if cfg.log_format == "json":
        handler.setFormatter(_JsonFormatter())
    else:
        handler.setFormatter(
            logging.Formatter("%(asctime)s %(levelname)s %(name)s %(message)s")
        )
    level = logging.getLevelName(cfg.log_level)
    if not isinstance(level, int):
        level = logging.INFO
    logging.basicConfig(handlers=[handler], level=level, force=True)


configure_logging(_cfg)
_logger = logging.getLogger("sales_intel_hub")


def create_app(cfg: AppConfig | None = None) -> FastAPI:
    """Create and configure the FastAPI application.

    Args:
        cfg: Override the environment-derived configuration (useful for testing).

    Returns:
        Configured FastAPI application instance.
    """
    cfg = cfg or _cfg

    app = FastAPI(
        title=cfg.title,
        summary="Sales-enablement catalogue: personas, pain points, wins and competitive intel.",
        description=(
            "## Sales Intel Hub\n\n"
            "A single-page dashboard of sales-enablement content.  All content "
            "is static; the HTML shell is rendered server-side and updated with "
            "HTMX partials.\n\n"
            "### Data endpoint\n"
            "`/api/data` is a placeholder for a future CMS or database "
            "integration.  `GET` always returns an empty list and `POST` "
            "acknowledges any valid JSON body without storing it."
        ),
        version=__version__,
        docs_url="/docs",
        redoc_url="/redoc",
        openapi_tags=[
            {
                "name": "data",
                "description": "Placeholder data endpoint awaiting integration.",
            },
            {
                "name": "meta",
                "description": "Health check.",
            },
        ],
    )

    # ── CORS middleware ───────────────────────────────────────────────────────
    app.add_middleware(
        CORSMiddleware,
        allow_origins=cfg.cors_origins,
        allow_credentials=False,
        allow_methods=["GET", "POST", "HEAD", "OPTIONS"],
        allow_headers=["*"],
    )

    # ── Request logging middleware ────────────────────────────────────────────

    @app.middleware("http")
    async def log_requests(request: Request, call_next):
        """Log each request and tag the response with a request ID."""
        request_id = str(uuid.uuid4())[:8]
        start = time.monotonic()
        path = request.url.path

        response = await call_next(request)
        duration_ms = (time.monotonic() - start) * 1000
        response.headers["X-Request-ID"] = request_id

        if cfg.log_format == "json":
            _logger.info(
                "request",
                extra={
                    "method": request.method,
                    "path": path,
                    "status": response.status_code,
                    "duration_ms": round(duration_ms, 1),
                    "request_id": request_id,
                },
            )
        else:
            _logger.info(
                "method=%s path=%s status=%d duration_ms=%.1f rid=%s",
                request.method, path, response.status_code, duration_ms,
                request_id,
            )
        return response

    # ── Content Security Policy + security headers ────────────────────────────

    @app.middleware("http")
    async def security_headers(request: Request, call_next):
        """Add Content-Security-Policy, X-Content-Type-Options, and X-Frame-Options."""
        response = await call_next(request)
        # HTMX is loaded from unpkg; hx-* attributes need no inline script.
        response.headers["Content-Security-Policy"] = (
            "default-src 'self'; "
            "script-src 'self' unpkg.com; "
            "style-src 'self' 'unsafe-inline'; "
            "img-src 'self' data:; "
            "font-src 'self'; "
            "connect-src 'self';"
        )
        response.headers["X-Content-Type-Options"] = "nosniff"
        response.headers["X-Frame-Options"] = "DENY"
        return response

    # ── Error handling ────────────────────────────────────────────────────────

    @app.exception_handler(Exception)
    async def generic_exception_handler(request: Request, exc: Exception):
        """Catch unhandled exceptions and return JSON instead of HTML traceback."""
        _logger.exception("unhandled error path=%s", request.url.path)
        return JSONResponse(
            status_code=500,
            content={
                "error": "Internal server error",
                "detail": str(exc),
                "status_code": 500,
            },
        )

    @app.exception_handler(ValueError)
    async def value_error_handler(request: Request, exc: ValueError):
        return JSONResponse(
            status_code=400,
            content={"error": "Bad request", "detail": str(exc), "status_code": 400},
        )

    # ── Health check ──────────────────────────────────────────────────────────

    @app.get("/health", tags=["meta"], summary="Health check",
             response_model=HealthResponse)
    def health() -> HealthResponse:
        """Return 200 OK while the app is running."""
        return HealthResponse(status="ok", version=__version__)

    # ── Register routers ──────────────────────────────────────────────────────

    app.include_router(data.router, prefix="/api")

    # ── Static files + Jinja2 templates ───────────────────────────────────────
    _here = Path(__file__).parent.parent  # project root

    static_dir = _here / "static"
    templates_dir = _here / "templates"

    if static_dir.exists():
        app.mount("/static", StaticFiles(directory=str(static_dir)), name="static")

    if templates_dir.exists():
        templates = Jinja2Templates(directory=str(templates_dir))

        def severity_tone(severity: str) -> str:
            """Jinja filter: colour token for a problem severity."""
            return "red" if severity == "critical" else "yellow"

        templates.env.filters["severity_tone"] = severity_tone
        templates.env.globals["app_title"] = cfg.title

        # Wire templates into the frontend router
        frontend_routes.set_templates(templates)
        app.include_router(frontend_routes.router)

        frontend_routes.register_error_handlers(app)

    return app


# Singleton instance for uvicorn
app = create_app()


if __name__ == "__main__":
    import uvicorn
    uvicorn.run(
        "api.app:app",
        host=_cfg.api_host,
        port=_cfg.api_port,
        reload=True,
        log_level="info",
    )
