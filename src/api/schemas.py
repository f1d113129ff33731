"""Pydantic response schemas for the REST API."""

from __future__ import annotations

from typing import Optional

from pydantic import BaseModel

from src.domain.entities import ComparisonRecord, Location, PriceRecord


class LocationResponse(BaseModel):
    name: str
    latitude: float
    longitude: float
    alt_name: Optional[str] = None

    @classmethod
    def from_domain(cls, loc: Location) -> "LocationResponse":
        return cls(
            name=loc.display_name,
            latitude=loc.latitude,
            longitude=loc.longitude,
            alt_name=loc.alt_name,
        )


class ComparisonRecordResponse(BaseModel):
    mode: str
    cost: float
    co2_kg: float
    duration_hours: float

    model_config = {"from_attributes": True}


class PriceRecordResponse(BaseModel):
    mode: str
    cost: float

    model_config = {"from_attributes": True}


class DistanceResponse(BaseModel):
    origin: LocationResponse
    destination: LocationResponse
    distance_km: float


class TripComparisonResponse(DistanceResponse):
    route: list[tuple[float, float]]
    summary: str
    comparison: list[ComparisonRecordResponse] = []
    prices: list[PriceRecordResponse] = []


class DistanceComparisonResponse(BaseModel):
    distance_km: float
    comparison: list[ComparisonRecordResponse] = []
    prices: list[PriceRecordResponse] = []

    @classmethod
    def build(
        cls,
        distance_km: float,
        comparison: list[ComparisonRecord],
        prices: list[PriceRecord],
    ) -> "DistanceComparisonResponse":
        return cls(
            distance_km=distance_km,
            comparison=[ComparisonRecordResponse.model_validate(r) for r in comparison],
            prices=[PriceRecordResponse.model_validate(p) for p in prices],
        )


class HealthResponse(BaseModel):
    status: str = "ok"
    communes: int = 0
    stations: int = 0


class ErrorResponse(BaseModel):
    detail: str
