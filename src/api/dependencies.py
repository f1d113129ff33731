"""FastAPI dependency injection helpers."""

from fastapi import Request

from src.domain.comparison import ComparisonEngine
from src.domain.entities import Location
from src.domain.lookup import LocationIndex


def get_location_index(request: Request) -> LocationIndex:
    return request.app.state.location_index


def get_stations(request: Request) -> list[Location]:
    return request.app.state.stations


def get_engine(request: Request) -> ComparisonEngine:
    return request.app.state.engine
