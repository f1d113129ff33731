"""
Trip endpoints
==============

GET /api/v1/trips/distance          -- great-circle distance between two communes
GET /api/v1/trips/compare           -- distance + per-mode cost / CO2 / duration
GET /api/v1/trips/compare-distance  -- per-mode comparison for a raw distance

Both names are resolved with ``LocationIndex.find_by_name``; an unknown
name is a user-input problem and answers 404 naming the offending side.
Records are returned in ``DISPLAY_ORDER``, not engine table order.
"""

import logging

from fastapi import APIRouter, Depends, HTTPException, Query, Request

from src.api.dependencies import get_engine, get_location_index
from src.api.middleware import limiter
from src.api.schemas import (
    ComparisonRecordResponse,
    DistanceComparisonResponse,
    DistanceResponse,
    ErrorResponse,
    LocationResponse,
    PriceRecordResponse,
    TripComparisonResponse,
)
from src.config import settings
from src.domain.comparison import ComparisonEngine, sort_by_display_order
from src.domain.distance import distance_between
from src.domain.entities import Location
from src.domain.lookup import LocationIndex

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/trips", tags=["trips"])


def _resolve_pair(
    index: LocationIndex, origin: str, destination: str
) -> tuple[Location, Location]:
    start = index.find_by_name(origin)
    end = index.find_by_name(destination)
    if start is None or end is None:
        missing = [
            label
            for label, loc in (("origin", start), ("destination", end))
            if loc is None
        ]
        logger.warning(
            "Location not found (origin=%r, destination=%r)", origin, destination
        )
        raise HTTPException(
            status_code=404,
            detail="Please enter two valid communes; not found: "
            + ", ".join(missing),
        )
    return start, end


@router.get(
    "/distance",
    response_model=DistanceResponse,
    summary="Great-circle distance between two communes",
    responses={404: {"model": ErrorResponse}},
)
@limiter.limit(settings.rate_limit)
async def trip_distance(
    request: Request,
    origin: str = Query(...),
    destination: str = Query(...),
    index: LocationIndex = Depends(get_location_index),
):
    start, end = _resolve_pair(index, origin, destination)
    return DistanceResponse(
        origin=LocationResponse.from_domain(start),
        destination=LocationResponse.from_domain(end),
        distance_km=distance_between(start, end),
    )


@router.get(
    "/compare",
    response_model=TripComparisonResponse,
    summary="Compare transport modes between two communes",
    responses={404: {"model": ErrorResponse}},
)
@limiter.limit(settings.rate_limit)
async def compare_trip(
    request: Request,
    origin: str = Query(...),
    destination: str = Query(...),
    index: LocationIndex = Depends(get_location_index),
    engine: ComparisonEngine = Depends(get_engine),
):
    start, end = _resolve_pair(index, origin, destination)
    distance = distance_between(start, end)

    comparison = sort_by_display_order(engine.compare(distance))
    prices = sort_by_display_order(engine.compare_cost_only(distance))
    logger.debug(
        "Trip %s -> %s: %.1f km, %d modes",
        start.display_name, end.display_name, distance, len(comparison),
    )

    return TripComparisonResponse(
        origin=LocationResponse.from_domain(start),
        destination=LocationResponse.from_domain(end),
        distance_km=distance,
        route=[start.coordinates, end.coordinates],
        summary=(
            f"Distance: {distance:.1f} km, "
            f"calculations ready for {len(comparison)} modes."
        ),
        comparison=[ComparisonRecordResponse.model_validate(r) for r in comparison],
        prices=[PriceRecordResponse.model_validate(p) for p in prices],
    )


@router.get(
    "/compare-distance",
    response_model=DistanceComparisonResponse,
    summary="Compare transport modes for a given distance",
)
@limiter.limit(settings.rate_limit)
async def compare_distance(
    request: Request,
    distance_km: float = Query(..., ge=0, description="Distance in km"),
    engine: ComparisonEngine = Depends(get_engine),
):
    return DistanceComparisonResponse.build(
        distance_km,
        sort_by_display_order(engine.compare(distance_km)),
        sort_by_display_order(engine.compare_cost_only(distance_km)),
    )
