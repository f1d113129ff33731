"""
Admin / observability endpoints
===============================

GET /api/v1/admin/health -- health check with loaded dataset sizes
"""

from fastapi import APIRouter, Depends

from src.api.dependencies import get_location_index, get_stations
from src.api.schemas import HealthResponse
from src.domain.entities import Location
from src.domain.lookup import LocationIndex

router = APIRouter(prefix="/admin", tags=["admin"])


@router.get("/health", response_model=HealthResponse, summary="Health check")
async def health(
    index: LocationIndex = Depends(get_location_index),
    stations: list[Location] = Depends(get_stations),
):
    return HealthResponse(communes=len(index), stations=len(stations))
