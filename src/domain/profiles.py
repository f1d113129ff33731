"""
Transport mode configuration.

The three per-mode tables (cost, emissions, average speed) are merged
once into an immutable ``ModeTable`` that is handed to the comparison
engine.  Membership is the union of the cost and emissions keys; a mode
absent from one of them keeps ``None`` for that figure.  The speed table
is only a per-mode lookup and never adds a mode.

Iteration order is first-seen insertion order: emissions keys, then
cost keys.  ``cost_modes`` keeps the cost table's own order for
price-only listings.
"""

from __future__ import annotations

from types import MappingProxyType
from typing import Iterator, Mapping, Optional

from .entities import TransportModeProfile
from .enums import TransportMode

# €/km
COST_PER_KM: Mapping[str, float] = MappingProxyType({
    TransportMode.TRAIN.value: 0.11,
    TransportMode.COMBUSTION_CAR.value: 0.12,
    TransportMode.ELECTRIC_CAR.value: 0.06,
    TransportMode.COACH.value: 0.07,
    TransportMode.PLANE.value: 0.15,
})

# g CO2/km
EMISSIONS_PER_KM: Mapping[str, float] = MappingProxyType({
    TransportMode.TRAIN.value: 2.5,
    TransportMode.COMBUSTION_CAR.value: 193,
    TransportMode.ELECTRIC_CAR.value: 42,
    TransportMode.PLANE.value: 285,
    TransportMode.COACH.value: 35,
})

# km/h
AVERAGE_SPEED_KMH: Mapping[str, float] = MappingProxyType({
    TransportMode.TRAIN.value: 120,
    TransportMode.COMBUSTION_CAR.value: 90,
    TransportMode.ELECTRIC_CAR.value: 90,
    TransportMode.PLANE.value: 500,
    TransportMode.COACH.value: 80,
})


class ModeTable:
    """Ordered, read-only collection of ``TransportModeProfile``."""

    __slots__ = ("_profiles", "_cost_modes")

    def __init__(
        self,
        profiles: tuple[TransportModeProfile, ...],
        cost_modes: Optional[tuple[str, ...]] = None,
    ):
        self._profiles = tuple(profiles)
        if cost_modes is None:
            cost_modes = tuple(
                p.mode for p in self._profiles if p.cost_per_km is not None
            )
        self._cost_modes = tuple(cost_modes)

    @classmethod
    def from_tables(
        cls,
        cost_per_km: Optional[Mapping[str, float]] = None,
        emissions_per_km: Optional[Mapping[str, float]] = None,
        average_speed_kmh: Optional[Mapping[str, float]] = None,
    ) -> "ModeTable":
        cost_per_km = cost_per_km or {}
        emissions_per_km = emissions_per_km or {}
        average_speed_kmh = average_speed_kmh or {}

        modes: dict[str, None] = {}
        for table in (emissions_per_km, cost_per_km):
            for mode in table:
                modes.setdefault(mode, None)

        return cls(
            tuple(
                TransportModeProfile(
                    mode=mode,
                    cost_per_km=cost_per_km.get(mode),
                    emissions_per_km=emissions_per_km.get(mode),
                    average_speed_kmh=average_speed_kmh.get(mode),
                )
                for mode in modes
            ),
            cost_modes=tuple(cost_per_km),
        )

    @property
    def modes(self) -> tuple[str, ...]:
        return tuple(p.mode for p in self._profiles)

    @property
    def cost_modes(self) -> tuple[str, ...]:
        """Modes with a configured cost, in cost-table order."""
        return self._cost_modes

    def get(self, mode: str) -> Optional[TransportModeProfile]:
        for profile in self._profiles:
            if profile.mode == mode:
                return profile
        return None

    def __iter__(self) -> Iterator[TransportModeProfile]:
        return iter(self._profiles)

    def __len__(self) -> int:
        return len(self._profiles)

    def __repr__(self) -> str:
        return f"ModeTable({list(self.modes)!r})"


DEFAULT_MODE_TABLE = ModeTable.from_tables(
    cost_per_km=COST_PER_KM,
    emissions_per_km=EMISSIONS_PER_KM,
    average_speed_kmh=AVERAGE_SPEED_KMH,
)
