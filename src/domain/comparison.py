"""
Mode Comparison Engine
======================

Formulas (per mode, distance ``d`` in km)
-----------------------------------------
* **cost**           = round(d x cost_per_km, 2)
* **co2_kg**         = round(d x emissions_per_km / 1000, 2)
* **duration_hours** = round(d / (average_speed_kmh or 90), 1)

Rounding is half away from zero on the decimal value of the float
(``0.125 -> 0.13``), never truncation.

A falsy distance (``0``, ``None``) short-circuits to an empty result.
NaN is *not* falsy and propagates into every field, as does a cost or
emission figure missing from the mode table.

Complexity: O(M) per call, M = number of configured modes.
"""

from __future__ import annotations

import logging
import math
from decimal import ROUND_HALF_UP, Decimal
from typing import Iterable, Optional, Sequence, TypeVar

from .entities import ComparisonRecord, PriceRecord
from .enums import DISPLAY_ORDER
from .profiles import DEFAULT_MODE_TABLE, ModeTable

logger = logging.getLogger(__name__)

DEFAULT_SPEED_KMH = 90.0

_R = TypeVar("_R", ComparisonRecord, PriceRecord)


def round_half_away(value: float, ndigits: int) -> float:
    """Round *value* to *ndigits* decimals, ties away from zero."""
    if not math.isfinite(value):
        return value
    exact = Decimal(repr(value))
    # already coarser than the quantum (e.g. 1e+30): nothing to round, and
    # quantizing would overflow the default 28-digit context
    if exact.as_tuple().exponent >= -ndigits:
        return value
    quantum = Decimal(1).scaleb(-ndigits)
    return float(exact.quantize(quantum, rounding=ROUND_HALF_UP))


def _scaled(distance_km: float, factor: Optional[float]) -> float:
    if factor is None:
        return math.nan
    return distance_km * factor


# ── Engine facade ─────────────────────────────────────────────────────


class ComparisonEngine:
    """High-level API used by the trip endpoints."""

    def __init__(
        self,
        table: ModeTable = DEFAULT_MODE_TABLE,
        default_speed_kmh: float = DEFAULT_SPEED_KMH,
    ):
        self.table = table
        self.default_speed_kmh = default_speed_kmh

    def compare(self, distance_km: Optional[float]) -> list[ComparisonRecord]:
        if not distance_km:
            return []

        records = []
        for profile in self.table:
            speed = profile.average_speed_kmh or self.default_speed_kmh
            records.append(
                ComparisonRecord(
                    mode=profile.mode,
                    cost=round_half_away(
                        _scaled(distance_km, profile.cost_per_km), 2
                    ),
                    co2_kg=round_half_away(
                        _scaled(distance_km, profile.emissions_per_km) / 1000, 2
                    ),
                    duration_hours=round_half_away(distance_km / speed, 1),
                )
            )
        logger.debug("Compared %d modes over %.1f km", len(records), distance_km)
        return records

    def compare_cost_only(self, distance_km: Optional[float]) -> list[PriceRecord]:
        """
        Price-only variant, in cost-table order.

        Modes without a configured cost are left out.
        """
        if not distance_km:
            return []

        prices = []
        for mode in self.table.cost_modes:
            profile = self.table.get(mode)
            prices.append(
                PriceRecord(
                    mode=mode,
                    cost=round_half_away(distance_km * profile.cost_per_km, 2),
                )
            )
        return prices


# ── Presentation helper ───────────────────────────────────────────────


def sort_by_display_order(
    records: Iterable[_R], order: Sequence[str] = DISPLAY_ORDER
) -> list[_R]:
    """
    Re-sort engine output into a fixed reference order.

    Modes not present in *order* go last, keeping their relative order.
    """
    rank = {mode: i for i, mode in enumerate(order)}
    return sorted(records, key=lambda r: rank.get(r.mode, len(rank)))
