"""
Domain value objects.

All of them are frozen dataclasses: locations are loaded once from the
reference datasets and comparison records are produced fresh per query,
so nothing here is ever mutated after construction.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Optional


# ── Locations ─────────────────────────────────────────────────────────


@dataclass(frozen=True)
class Location:
    """
    A named point (commune or railway station).

    Upstream datasets are heterogeneous: some records carry the primary
    label (``libelle_geographique``), some only the short one (``Nom``),
    some both.  ``alt_name`` holds the latter.
    """

    name: Optional[str]
    latitude: float
    longitude: float
    alt_name: Optional[str] = None

    @property
    def display_name(self) -> str:
        return self.name or self.alt_name or ""

    @property
    def coordinates(self) -> tuple[float, float]:
        return (self.latitude, self.longitude)


# ── Mode profiles ─────────────────────────────────────────────────────


@dataclass(frozen=True)
class TransportModeProfile:
    mode: str
    cost_per_km: Optional[float] = None
    emissions_per_km: Optional[float] = None  # grams CO2
    average_speed_kmh: Optional[float] = None


# ── Results ───────────────────────────────────────────────────────────


@dataclass(frozen=True)
class ComparisonRecord:
    mode: str
    cost: float
    co2_kg: float
    duration_hours: float


@dataclass(frozen=True)
class PriceRecord:
    mode: str
    cost: float
