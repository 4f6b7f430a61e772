"""FastAPI router for the property brief JSON API."""

from __future__ import annotations

import logging

from fastapi import APIRouter, Request
from fastapi.responses import JSONResponse

from propbrief.aggregation.address import parse_address
from propbrief.aggregation.models import PropertyBrief, PropertySnapshot
from propbrief.repositories import resolve

logger = logging.getLogger(__name__)

router = APIRouter()


def _address_required() -> JSONResponse:
    return JSONResponse(status_code=400, content={"error": "Address parameter is required"})


@router.get(
    "/api/property",
    response_model=PropertyBrief,
    response_model_exclude_none=True,
)
async def get_property(
    request: Request,
    address: str | None = None,
    summary: bool = False,
):
    """Aggregate every data source for an address.

    With ``summary=true`` the response also carries ``aiSummary``.
    """
    if not address or not address.strip():
        return _address_required()

    aggregator = request.app.state.aggregator
    summary_generator = request.app.state.summary_generator
    try:
        record = await aggregator.aggregate(address)
        ai_summary = await summary_generator.summarize(record) if summary else None
    except Exception:
        logger.exception("Error fetching property data for %r", address)
        return JSONResponse(status_code=500, content={"error": "Failed to fetch property data"})

    return PropertyBrief.model_validate({**record.model_dump(), "ai_summary": ai_summary})


@router.get(
    "/api/property/history",
    response_model=list[PropertySnapshot],
    response_model_exclude_none=True,
)
async def get_property_history(request: Request, address: str | None = None):
    """Stored snapshots for an address, newest first."""
    if not address or not address.strip():
        return _address_required()

    store = request.app.state.property_store
    try:
        return await resolve(store.list_snapshots(parse_address(address).address))
    except Exception:
        logger.exception("Error loading snapshot history for %r", address)
        return JSONResponse(status_code=500, content={"error": "Failed to load property history"})
