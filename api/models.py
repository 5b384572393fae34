"""
Pydantic request/response models for the API.

The data endpoint is a placeholder for a future CMS/database integration, so
its envelopes are fixed: ``data`` is always an empty list and ``message`` is
a constant string.  Field() descriptions and examples feed the OpenAPI docs.
"""

from __future__ import annotations

from typing import Any

from pydantic import BaseModel, Field

DATA_READY_MESSAGE = "API endpoint ready for integration"
DATA_UPDATED_MESSAGE = "Data updated successfully"


# ── Data endpoint envelopes ───────────────────────────────────────────────────

class DataResponse(BaseModel):
    """Response body for GET /api/data."""
    success: bool = Field(True, description="Always true for the placeholder endpoint")
    data: list[Any] = Field(default_factory=list, description="Always empty until integration")
    message: str = Field(DATA_READY_MESSAGE, description="Status message",
                         examples=[DATA_READY_MESSAGE])


class UpdateResponse(BaseModel):
    """Response body for POST /api/data.  Never reflects the request body."""
    success: bool = Field(True, description="Always true for the placeholder endpoint")
    message: str = Field(DATA_UPDATED_MESSAGE, description="Acknowledgement message",
                         examples=[DATA_UPDATED_MESSAGE])


# ── Meta ──────────────────────────────────────────────────────────────────────

class HealthResponse(BaseModel):
    status: str = Field(..., description="Service status", examples=["ok"])
    version: str = Field(..., description="Application version", examples=["1.0.0"])


# ── Error model ───────────────────────────────────────────────────────────────

class ErrorResponse(BaseModel):
    """Standard error response body."""
    error: str = Field(..., description="Short error category", examples=["Bad request"])
    detail: str | None = Field(None, description="Extended error detail")
    status_code: int = Field(..., ge=400, le=599, description="HTTP status code", examples=[400])
