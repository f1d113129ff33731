"""
Shared test fixtures.

Everything is built in memory from hand-written ``Location`` rows, so
tests never touch the dataset files configured in ``src.config``.
"""

import pytest

from src.domain.comparison import ComparisonEngine
from src.domain.entities import Location
from src.domain.lookup import LocationIndex


# ── Sample rows ───────────────────────────────────────────────────────

PARIS = Location("Paris", 48.8566, 2.3522, alt_name="Paris")
LYON = Location("Lyon", 45.7640, 4.8357, alt_name="Lyon")
SAINT_ETIENNE = Location("Saint-Étienne", 45.4397, 4.3872, alt_name="Saint-Étienne")
NIMES = Location("Nîmes", 43.8367, 4.3601, alt_name="Nîmes")
EVRY = Location(None, 48.6290, 2.4410, alt_name="Évry-Courcouronnes")
PARTHENAY = Location("Parthenay", 46.6486, -0.2469, alt_name="Parthenay")
# Fallback label mentions Lyon, but the primary scan must still win
ALPHA = Location("Alpha", 45.0, 5.0, alt_name="Lyonnais")

COMMUNES = [SAINT_ETIENNE, ALPHA, PARIS, PARTHENAY, LYON, NIMES, EVRY]

STATIONS = [
    Location("Paris Gare de Lyon", 48.8443, 2.3733),
    Location("Lyon Part-Dieu", 45.7606, 4.8593),
    Location("Marseille Saint-Charles", 43.3026, 5.3806),
]


# ── Fixtures ──────────────────────────────────────────────────────────


@pytest.fixture
def communes() -> list[Location]:
    return list(COMMUNES)


@pytest.fixture
def location_index(communes) -> LocationIndex:
    return LocationIndex(communes)


@pytest.fixture
def stations() -> list[Location]:
    return list(STATIONS)


@pytest.fixture
def engine() -> ComparisonEngine:
    return ComparisonEngine()
