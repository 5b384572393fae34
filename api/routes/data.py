"""
Data endpoint stub.

GET  /api/data?type=<string>  → empty-data envelope, whatever ``type`` is
POST /api/data                → acknowledgement for any valid JSON body

This is where a database or CMS would be wired in.  Until then every call
succeeds identically: ``type`` is ignored and POST bodies are parsed and
discarded.  A body that is not valid JSON (or not decodable text) raises a
``ValueError``, which the app factory maps to a 400 response.
"""

import json
import logging

from fastapi import APIRouter, Query, Request

from api.models import DataResponse, ErrorResponse, UpdateResponse

router = APIRouter(prefix="/data", tags=["data"])

_logger = logging.getLogger("sales_intel_hub.data")


@router.get(
    "",
    response_model=DataResponse,
    summary="Fetch catalogue data (placeholder)",
    description="Returns an empty data list for every `type`. "
                "Ready for integration with a real data source.",
)
def get_data(
    type: str | None = Query(None, description="Content type requested (ignored)"),
) -> DataResponse:
    """Return the empty-data envelope."""
    _logger.debug("data requested type=%r (ignored)", type)
    return DataResponse()


@router.post(
    "",
    response_model=UpdateResponse,
    responses={
        200: {"description": "Body accepted and discarded"},
        400: {"model": ErrorResponse, "description": "Body is not valid JSON"},
    },
    summary="Submit catalogue data (placeholder)",
    description="Accepts any JSON body and acknowledges it. Nothing is stored.",
)
async def post_data(request: Request) -> UpdateResponse:
    """Parse the JSON body, discard it, and acknowledge."""
    raw = await request.body()
    try:
        json.loads(raw)
    except RecursionError:
        # Valid but nested deeper than the decoder can recurse; still discarded.
        _logger.debug("data update nested too deeply to decode (%d bytes)", len(raw))
    except ValueError:
        _logger.warning("rejected data update: body is not valid JSON (%d bytes)", len(raw))
        raise
    _logger.debug("data update accepted and discarded (%d bytes)", len(raw))
    return UpdateResponse()
