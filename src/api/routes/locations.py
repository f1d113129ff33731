"""
Location endpoints
==================

GET /api/v1/locations          -- autocomplete over commune labels
GET /api/v1/locations/resolve  -- resolve a free-text name to one commune
GET /api/v1/stations           -- railway station markers
"""

import logging

from fastapi import APIRouter, Depends, HTTPException, Query, Request

from src.api.dependencies import get_location_index, get_stations
from src.api.middleware import limiter
from src.api.schemas import ErrorResponse, LocationResponse
from src.config import settings
from src.domain.entities import Location
from src.domain.lookup import LocationIndex

logger = logging.getLogger(__name__)

router = APIRouter(tags=["locations"])


@router.get(
    "/locations",
    response_model=list[LocationResponse],
    summary="Search communes by name",
)
@limiter.limit(settings.rate_limit)
async def search_locations(
    request: Request,
    q: str = Query(..., min_length=1, description="Case / accent insensitive"),
    limit: int = Query(settings.search_limit, ge=1, le=100),
    index: LocationIndex = Depends(get_location_index),
):
    return [LocationResponse.from_domain(loc) for loc in index.search(q, limit)]


@router.get(
    "/locations/resolve",
    response_model=LocationResponse,
    summary="Resolve a name to the first matching commune",
    responses={404: {"model": ErrorResponse}},
)
@limiter.limit(settings.rate_limit)
async def resolve_location(
    request: Request,
    name: str = Query(..., description="Free-text commune name"),
    index: LocationIndex = Depends(get_location_index),
):
    loc = index.find_by_name(name)
    if loc is None:
        logger.warning("Location not found: %r", name)
        raise HTTPException(status_code=404, detail=f"Unknown commune: {name!r}")
    return LocationResponse.from_domain(loc)


@router.get(
    "/stations",
    response_model=list[LocationResponse],
    summary="Railway station markers",
)
@limiter.limit(settings.rate_limit)
async def list_stations(
    request: Request,
    limit: int = Query(settings.station_marker_limit, ge=1, le=5000),
    stations: list[Location] = Depends(get_stations),
):
    return [LocationResponse.from_domain(s) for s in stations[:limit]]
