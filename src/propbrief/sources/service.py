"""Property data source protocol and simulated implementation."""

from __future__ import annotations

import asyncio
import logging
import math
import random
from typing import Protocol

from propbrief.core.types import DataSource
from propbrief.sources.models import AmenitiesData, BasicInfo, CrimeData, SchoolData
from propbrief.sources.randomness import AddressHashRandom, RandomSource

logger = logging.getLogger(__name__)

PROPERTY_TYPES = ("Single Family", "Condo", "Townhouse", "Multi-Family")

# Below these values a source reports no data for the address.
ABSENCE_THRESHOLDS: dict[DataSource, float] = {
    DataSource.BASIC_INFO: 0.10,
    DataSource.SCHOOLS: 0.15,
    DataSource.CRIME: 0.20,
    DataSource.AMENITIES: 0.12,
}

# (minimum, jitter) in seconds
LATENCY_RANGES: dict[DataSource, tuple[float, float]] = {
    DataSource.BASIC_INFO: (0.30, 0.20),
    DataSource.SCHOOLS: (0.40, 0.30),
    DataSource.CRIME: (0.25, 0.25),
    DataSource.AMENITIES: (0.35, 0.20),
}


class PropertySources(Protocol):
    """Protocol for the four property data sources.

    Each fetch returns ``None`` when the source has no data for the address;
    a missing result is never signalled by raising.
    """

    async def fetch_basic_info(self, address: str) -> BasicInfo | None: ...
    async def fetch_schools(self, address: str) -> SchoolData | None: ...
    async def fetch_crime(self, address: str) -> CrimeData | None: ...
    async def fetch_amenities(self, address: str) -> AmenitiesData | None: ...


def crime_level_for(crime_rate: float) -> str:
    if crime_rate < 25:
        return "Very Low"
    if crime_rate < 50:
        return "Low"
    if crime_rate < 75:
        return "Moderate"
    return "High"


class MockPropertySources:
    """Simulated sources standing in for public records, school, crime and
    amenity APIs.

    Field values are linear functions of the per-address random value, so
    results are reproducible. Latency is simulated with a jittered sleep
    unless *simulate_latency* is False.
    """

    def __init__(
        self,
        random_source: RandomSource | None = None,
        simulate_latency: bool = True,
        jitter: random.Random | None = None,
    ) -> None:
        self._random = random_source or AddressHashRandom()
        self._simulate_latency = simulate_latency
        self._jitter = jitter or random.Random()

    async def fetch_basic_info(self, address: str) -> BasicInfo | None:
        r = await self._draw(address, DataSource.BASIC_INFO)
        if r is None:
            return None
        return BasicInfo(
            bedrooms=2 + math.floor(r * 5),
            bathrooms=1 + math.floor(r * 3.5),
            square_feet=1000 + math.floor(r * 3000),
            year_built=1950 + math.floor(r * 74),
            property_type=PROPERTY_TYPES[math.floor(r * 4)],
            estimated_value=200000 + math.floor(r * 800000),
            confidence=0.7 + r * 0.3,
        )

    async def fetch_schools(self, address: str) -> SchoolData | None:
        r = await self._draw(address, DataSource.SCHOOLS)
        if r is None:
            return None
        prefix = address.split(" ")[0]
        return SchoolData(
            elementary_school=f"{prefix} Elementary",
            elementary_rating=5 + r * 5,
            middle_school=f"{prefix} Middle School",
            middle_rating=4 + r * 6,
            high_school=f"{prefix} High School",
            high_rating=6 + r * 4,
            confidence=0.6 + r * 0.3,
        )

    async def fetch_crime(self, address: str) -> CrimeData | None:
        r = await self._draw(address, DataSource.CRIME)
        if r is None:
            return None
        crime_rate = r * 100
        return CrimeData(
            crime_rate=crime_rate,
            crime_level=crime_level_for(crime_rate),
            confidence=0.5 + r * 0.4,
        )

    async def fetch_amenities(self, address: str) -> AmenitiesData | None:
        r = await self._draw(address, DataSource.AMENITIES)
        if r is None:
            return None
        return AmenitiesData(
            nearby_parks=math.floor(r * 10),
            transit_score=math.floor(20 + r * 80),
            walk_score=math.floor(10 + r * 90),
            confidence=0.65 + r * 0.35,
        )

    # -- internal ------------------------------------------------------------

    async def _draw(self, address: str, source: DataSource) -> float | None:
        """Wait out the simulated latency and return the random value, or
        None when the source has no data for this address."""
        if self._simulate_latency:
            minimum, jitter = LATENCY_RANGES[source]
            await asyncio.sleep(minimum + self._jitter.random() * jitter)

        r = self._random.value(address, source)
        if r < ABSENCE_THRESHOLDS[source]:
            logger.debug("No %s data for %r", source.value, address)
            return None
        return r
