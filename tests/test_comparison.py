"""Unit tests for the mode comparison engine."""

import math

import pytest

from src.domain.comparison import (
    ComparisonEngine,
    round_half_away,
    sort_by_display_order,
)
from src.domain.entities import ComparisonRecord, PriceRecord
from src.domain.enums import DISPLAY_ORDER, TransportMode
from src.domain.profiles import COST_PER_KM, DEFAULT_MODE_TABLE, ModeTable


class TestRoundHalfAway:
    @pytest.mark.parametrize(
        "value, ndigits, expected",
        [
            (0.125, 2, 0.13),
            (-0.125, 2, -0.13),
            (1.25, 1, 1.3),
            (2.5, 0, 3.0),
            (1.005, 2, 1.01),
            (0.8333333, 1, 0.8),
            (11.000000000000002, 2, 11.0),
        ],
    )
    def test_ties_go_away_from_zero(self, value, ndigits, expected):
        assert round_half_away(value, ndigits) == expected

    @pytest.mark.parametrize("value", [math.inf, -math.inf])
    def test_infinities_pass_through(self, value):
        assert round_half_away(value, 2) == value

    def test_nan_passes_through(self):
        assert math.isnan(round_half_away(math.nan, 2))

    @pytest.mark.parametrize("value", [1e30, -1e30, 1.2345678901234567e25, 1e300])
    def test_large_values_are_returned_unchanged(self, value):
        assert round_half_away(value, 2) == value

    def test_many_integer_digits_still_rounded(self):
        assert round_half_away(1234567890123.455, 2) == 1234567890123.46


class TestCompare:
    @pytest.mark.parametrize("distance", [0, 0.0, None])
    def test_degenerate_distance_is_empty(self, engine, distance):
        assert engine.compare(distance) == []

    def test_one_record_per_mode(self, engine):
        records = engine.compare(100)
        assert [r.mode for r in records] == list(DEFAULT_MODE_TABLE.modes)
        assert len(records) == len(DEFAULT_MODE_TABLE)

    def test_records_are_finite_and_non_negative(self, engine):
        for r in engine.compare(100):
            for value in (r.cost, r.co2_kg, r.duration_hours):
                assert math.isfinite(value)
                assert value >= 0

    def test_known_values_at_100_km(self, engine):
        by_mode = {r.mode: r for r in engine.compare(100)}
        assert by_mode[TransportMode.TRAIN.value] == ComparisonRecord("Train", 11.0, 0.25, 0.8)
        assert by_mode[TransportMode.COMBUSTION_CAR.value] == ComparisonRecord(
            "Voiture thermique", 12.0, 19.3, 1.1
        )
        assert by_mode[TransportMode.ELECTRIC_CAR.value] == ComparisonRecord(
            "Voiture électrique", 6.0, 4.2, 1.1
        )
        assert by_mode[TransportMode.PLANE.value] == ComparisonRecord("Avion", 15.0, 28.5, 0.2)
        # 100 / 80 = 1.25 exactly: the tie rounds up, not to even
        assert by_mode[TransportMode.COACH.value] == ComparisonRecord("Autocar", 7.0, 3.5, 1.3)

    @pytest.mark.parametrize("distance", [1.0, 37.5, 391.6, 1234.567])
    def test_cost_rounding_law(self, engine, distance):
        for r in engine.compare(distance):
            assert r.cost == round_half_away(distance * COST_PER_KM[r.mode], 2)

    def test_idempotent(self, engine):
        assert engine.compare(391.6) == engine.compare(391.6)

    def test_huge_distance(self, engine):
        records = engine.compare(1e30)
        assert len(records) == len(DEFAULT_MODE_TABLE)
        for r in records:
            assert r.cost == 1e30 * COST_PER_KM[r.mode]
            assert math.isfinite(r.co2_kg)
            assert math.isfinite(r.duration_hours)

    def test_nan_distance_propagates(self, engine):
        records = engine.compare(math.nan)
        assert len(records) == len(DEFAULT_MODE_TABLE)
        assert all(math.isnan(r.cost) for r in records)
        assert all(math.isnan(r.duration_hours) for r in records)


class TestCustomTable:
    def setup_method(self):
        self.table = ModeTable.from_tables(
            cost_per_km={"Bike": 0.0, "Train": 0.1},
            emissions_per_km={"Train": 3.0, "Ferry": 20.0},
            average_speed_kmh={"Bike": 15.0, "Walk": 5.0},
        )
        self.engine = ComparisonEngine(self.table, default_speed_kmh=90.0)

    def test_union_of_cost_and_emissions_in_first_seen_order(self):
        assert self.table.modes == ("Train", "Ferry", "Bike")

    def test_speed_table_does_not_add_modes(self):
        records = self.engine.compare(10)
        assert len(records) == 3
        assert "Walk" not in [r.mode for r in records]

    def test_speed_only_mode_is_ignored(self):
        table = ModeTable.from_tables(
            cost_per_km={"Train": 0.1},
            emissions_per_km={"Train": 3.0},
            average_speed_kmh={"Train": 100.0, "Walk": 5.0},
        )
        records = ComparisonEngine(table).compare(10)
        assert [r.mode for r in records] == ["Train"]
        assert records[0].duration_hours == 0.1

    def test_missing_speed_falls_back_to_default(self):
        train = self.engine.compare(45)[0]
        assert train.duration_hours == 0.5

    def test_custom_default_speed(self):
        engine = ComparisonEngine(self.table, default_speed_kmh=50.0)
        assert engine.compare(100)[0].duration_hours == 2.0

    def test_missing_emissions_yield_nan(self):
        bike = self.engine.compare(10)[2]
        assert bike.cost == 0.0
        assert math.isnan(bike.co2_kg)
        assert bike.duration_hours == 0.7

    def test_missing_cost_yields_nan(self):
        ferry = self.engine.compare(10)[1]
        assert math.isnan(ferry.cost)
        assert ferry.co2_kg == 0.2

    def test_cost_only_follows_cost_table(self):
        prices = self.engine.compare_cost_only(10)
        assert prices == [PriceRecord("Bike", 0.0), PriceRecord("Train", 1.0)]


class TestCompareCostOnly:
    @pytest.mark.parametrize("distance", [0, None])
    def test_degenerate_distance_is_empty(self, engine, distance):
        assert engine.compare_cost_only(distance) == []

    def test_follows_cost_table_order(self, engine):
        assert [p.mode for p in engine.compare_cost_only(100)] == list(COST_PER_KM)

    def test_huge_distance(self, engine):
        prices = engine.compare_cost_only(1e30)
        assert [p.cost for p in prices] == [1e30 * c for c in COST_PER_KM.values()]

    def test_matches_full_comparison(self, engine):
        full = {r.mode: r.cost for r in engine.compare(250.4)}
        prices = {p.mode: p.cost for p in engine.compare_cost_only(250.4)}
        assert prices == full


class TestSortByDisplayOrder:
    def test_reorders_to_reference(self):
        table = ModeTable.from_tables(
            cost_per_km={m: 0.1 for m in reversed(DISPLAY_ORDER)}
        )
        records = ComparisonEngine(table).compare_cost_only(10)
        assert [p.mode for p in records] == list(reversed(DISPLAY_ORDER))
        assert [p.mode for p in sort_by_display_order(records)] == list(DISPLAY_ORDER)

    def test_unknown_modes_go_last(self):
        records = [PriceRecord("Bike", 0.0), PriceRecord("Avion", 1.0), PriceRecord("Ferry", 2.0)]
        assert [r.mode for r in sort_by_display_order(records)] == ["Avion", "Bike", "Ferry"]

    def test_does_not_mutate_input(self, engine):
        records = engine.compare(10)
        snapshot = list(records)
        sort_by_display_order(records)
        assert records == snapshot
