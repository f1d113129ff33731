"""
FastAPI application factory.

* Registers routes for locations, trips and admin.
* Loads the commune / station datasets once via lifespan events, unless
  already-built collaborators are handed to ``create_app``.
* Applies rate-limiting middleware.
* Swagger / OpenAPI UI available at ``/docs``.
"""

from __future__ import annotations

from contextlib import asynccontextmanager
import logging
from typing import Optional

from fastapi import FastAPI
from slowapi import _rate_limit_exceeded_handler
from slowapi.errors import RateLimitExceeded

from src.api.middleware import limiter
from src.api.routes import admin, locations, trips
from src.config import settings
from src.domain.comparison import ComparisonEngine
from src.domain.entities import Location
from src.domain.lookup import LocationIndex
from src.infrastructure.datasets import load_communes, load_stations

logging.basicConfig(level=settings.log_level)
logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Load reference datasets on startup if none were injected."""
    if app.state.location_index is None:
        app.state.location_index = LocationIndex(load_communes(settings.communes_path))
    if app.state.stations is None:
        app.state.stations = load_stations(settings.stations_path)
    logger.info(
        "Loaded: %d stations, %d communes",
        len(app.state.stations), len(app.state.location_index),
    )
    yield


def create_app(
    location_index: Optional[LocationIndex] = None,
    stations: Optional[list[Location]] = None,
    engine: Optional[ComparisonEngine] = None,
) -> FastAPI:
    app = FastAPI(
        title="Travel Mode Comparator API",
        description=(
            "Compares train, car, plane and coach trips between two "
            "communes by distance, estimated cost, CO2 emissions and "
            "travel time."
        ),
        version="1.0.0",
        lifespan=lifespan,
    )

    app.state.location_index = location_index
    app.state.stations = stations
    app.state.engine = engine or ComparisonEngine(
        default_speed_kmh=settings.default_speed_kmh
    )

    # Rate limiter
    app.state.limiter = limiter
    app.add_exception_handler(RateLimitExceeded, _rate_limit_exceeded_handler)

    # Routers
    app.include_router(locations.router, prefix="/api/v1")
    app.include_router(trips.router, prefix="/api/v1")
    app.include_router(admin.router, prefix="/api/v1")

    return app
