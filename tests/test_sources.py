"""Tests for the deterministic random source and simulated fetchers."""

from __future__ import annotations

import asyncio
import math

import pytest

from propbrief.core.types import DataSource
from propbrief.sources.randomness import (
    AddressHashRandom,
    FixedRandom,
    address_hash,
    address_random,
)
from propbrief.sources.service import MockPropertySources, crime_level_for

from conftest import ALL_MISSING, CRIME_BOUNDARY, MAIN_ST


def _fixed(value: float) -> MockPropertySources:
    return MockPropertySources(random_source=FixedRandom(default=value), simulate_latency=False)


# ---------------------------------------------------------------------------
# Randomness
# ---------------------------------------------------------------------------


class TestAddressRandom:
    def test_hash_is_sum_of_char_codes(self):
        assert address_hash("AB") == 65 + 66

    def test_hash_uses_utf16_code_units(self):
        # U+1F600 is encoded as the surrogate pair D83D DE00
        assert address_hash("\U0001F600") == 0xD83D + 0xDE00

    def test_random_value(self):
        assert address_random(MAIN_ST) == 0.34
        assert address_random(ALL_MISSING) == 0.0
        assert address_random(CRIME_BOUNDARY) == 0.15

    def test_random_in_unit_interval(self):
        for n in range(300):
            r = address_random(f"{n} Test Rd")
            assert 0.0 <= r < 1.0

    def test_default_source_ignores_category(self):
        random_source = AddressHashRandom()
        values = {random_source.value(MAIN_ST, s) for s in DataSource}
        assert values == {0.34}

    def test_fixed_random_per_source(self):
        random_source = FixedRandom({DataSource.CRIME: 0.1}, default=0.9)
        assert random_source.value("x", DataSource.CRIME) == 0.1
        assert random_source.value("x", DataSource.SCHOOLS) == 0.9


# ---------------------------------------------------------------------------
# Fetchers
# ---------------------------------------------------------------------------


class TestBasicInfo:
    async def test_values_for_known_address(self, sources):
        info = await sources.fetch_basic_info(MAIN_ST)
        assert info is not None
        assert info.bedrooms == 3
        assert info.bathrooms == 2
        assert info.square_feet == 2020
        assert info.year_built == 1975
        assert info.property_type == "Condo"
        assert info.estimated_value == 472000
        assert info.confidence == pytest.approx(0.802)

    async def test_absent_below_threshold(self):
        assert await _fixed(0.09).fetch_basic_info("x") is None

    async def test_present_at_threshold(self):
        assert await _fixed(0.10).fetch_basic_info("x") is not None

    async def test_property_type_covers_all_categories(self):
        types = [
            (await _fixed(r).fetch_basic_info("x")).property_type
            for r in (0.10, 0.30, 0.60, 0.99)
        ]
        assert types == ["Single Family", "Condo", "Townhouse", "Multi-Family"]


class TestSchools:
    async def test_names_from_first_word(self, sources):
        data = await sources.fetch_schools(MAIN_ST)
        assert data.elementary_school == "123 Elementary"
        assert data.middle_school == "123 Middle School"
        assert data.high_school == "123 High School"

    async def test_ratings_and_confidence(self, sources):
        data = await sources.fetch_schools(MAIN_ST)
        assert data.elementary_rating == pytest.approx(6.7)
        assert data.middle_rating == pytest.approx(6.04)
        assert data.high_rating == pytest.approx(7.36)
        assert data.confidence == pytest.approx(0.702)

    async def test_absent_below_threshold(self):
        assert await _fixed(0.149).fetch_schools("x") is None
        assert await _fixed(0.15).fetch_schools("x") is not None


class TestCrime:
    async def test_values_for_known_address(self, sources):
        data = await sources.fetch_crime(MAIN_ST)
        assert data.crime_rate == pytest.approx(34.0)
        assert data.crime_level == "Low"
        assert data.confidence == pytest.approx(0.636)

    async def test_absent_below_threshold(self):
        assert await _fixed(0.19).fetch_crime("x") is None
        assert await _fixed(0.20).fetch_crime("x") is not None

    @pytest.mark.parametrize(
        "rate,level",
        [(0, "Very Low"), (24.9, "Very Low"), (25, "Low"), (49.9, "Low"),
         (50, "Moderate"), (74.9, "Moderate"), (75, "High"), (99, "High")],
    )
    def test_crime_level_bands(self, rate, level):
        assert crime_level_for(rate) == level


class TestAmenities:
    async def test_values_for_known_address(self, sources):
        data = await sources.fetch_amenities(MAIN_ST)
        assert data.nearby_parks == 3
        assert data.transit_score == 47
        assert data.walk_score == 40
        assert data.confidence == pytest.approx(0.769)

    async def test_absent_below_threshold(self):
        assert await _fixed(0.11).fetch_amenities("x") is None
        assert await _fixed(0.12).fetch_amenities("x") is not None


class TestDeterminism:
    async def test_same_address_same_results(self, sources):
        for address in (MAIN_ST, ALL_MISSING, CRIME_BOUNDARY, "1 Oak St"):
            first = await asyncio.gather(
                sources.fetch_basic_info(address),
                sources.fetch_schools(address),
                sources.fetch_crime(address),
                sources.fetch_amenities(address),
            )
            second = await asyncio.gather(
                sources.fetch_basic_info(address),
                sources.fetch_schools(address),
                sources.fetch_crime(address),
                sources.fetch_amenities(address),
            )
            assert first == second

    async def test_fields_follow_formulas(self, sources):
        for n in range(50):
            address = f"{n} Harbor Way"
            r = address_random(address)
            info = await sources.fetch_basic_info(address)
            if r < 0.10:
                assert info is None
                continue
            assert info.bedrooms == 2 + math.floor(r * 5)
            assert info.estimated_value == 200000 + math.floor(r * 800000)
            assert 0.0 <= info.confidence <= 1.0


class TestLatency:
    async def test_latency_is_simulated(self, monkeypatch):
        delays: list[float] = []

        async def fake_sleep(delay):
            delays.append(delay)

        monkeypatch.setattr("propbrief.sources.service.asyncio.sleep", fake_sleep)
        sources = MockPropertySources()
        await sources.fetch_basic_info(MAIN_ST)
        await sources.fetch_schools(MAIN_ST)
        assert len(delays) == 2
        assert 0.30 <= delays[0] <= 0.50
        assert 0.40 <= delays[1] <= 0.70

    async def test_latency_can_be_disabled(self, monkeypatch):
        delays: list[float] = []

        async def fake_sleep(delay):
            delays.append(delay)

        monkeypatch.setattr("propbrief.sources.service.asyncio.sleep", fake_sleep)
        await MockPropertySources(simulate_latency=False).fetch_crime(MAIN_ST)
        assert delays == []
