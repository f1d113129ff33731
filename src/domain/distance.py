"""
Distance calculation using the Haversine formula.

Assumption
----------
We use great-circle (Haversine) distance instead of a real routing engine
(road / rail network) so comparisons work from a pair of coordinates alone.
Every mode is compared over the same straight-line distance.

Inputs are decimal degrees and are **not** range-checked: a latitude of 120
yields a number, not an error.  NaN inputs propagate to a NaN distance.

Complexity: O(1) per call.
"""

from __future__ import annotations

import math
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from .entities import Location

EARTH_RADIUS_KM = 6_371.0


def haversine_km(
    lat1: float, lng1: float, lat2: float, lng2: float
) -> float:
    """Return the great-circle distance in **km** between two points."""
    phi1, phi2 = math.radians(lat1), math.radians(lat2)
    dphi = math.radians(lat2 - lat1)
    dlambda = math.radians(lng2 - lng1)

    h = (
        math.sin(dphi / 2) ** 2
        + math.cos(phi1) * math.cos(phi2) * math.sin(dlambda / 2) ** 2
    )
    # rounding can push h just outside [0, 1] near the antipodes;
    # NaN fails both tests and propagates
    if h > 1.0:
        h = 1.0
    elif h < 0.0:
        h = 0.0
    return EARTH_RADIUS_KM * 2 * math.atan2(math.sqrt(h), math.sqrt(1 - h))


def distance_between(origin: Location, destination: Location) -> float:
    return haversine_km(
        origin.latitude, origin.longitude,
        destination.latitude, destination.longitude,
    )
