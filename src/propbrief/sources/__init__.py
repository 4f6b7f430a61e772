"""Property data sources (simulated)."""

from propbrief.sources.models import AmenitiesData, BasicInfo, CrimeData, SchoolData
from propbrief.sources.randomness import AddressHashRandom, FixedRandom, RandomSource
from propbrief.sources.service import MockPropertySources, PropertySources

__all__ = [
    "AddressHashRandom",
    "AmenitiesData",
    "BasicInfo",
    "CrimeData",
    "FixedRandom",
    "MockPropertySources",
    "PropertySources",
    "RandomSource",
    "SchoolData",
]
