"""Aggregated property record and persistence models."""

from __future__ import annotations

import uuid
from datetime import datetime, timezone

from pydantic import Field

from propbrief.core.types import CamelModel


def _utcnow() -> datetime:
    return datetime.now(timezone.utc)


class PropertyAddress(CamelModel):
    """Parsed address parts. ``address`` is the street line."""

    address: str
    city: str
    state: str
    zip_code: str


class BasicInfoSection(CamelModel):
    bedrooms: int | None = None
    bathrooms: int | None = None
    square_feet: int | None = None
    year_built: int | None = None
    property_type: str | None = None
    estimated_value: int | None = None


class SchoolsSection(CamelModel):
    elementary_school: str | None = None
    elementary_rating: float | None = None
    middle_school: str | None = None
    middle_rating: float | None = None
    high_school: str | None = None
    high_rating: float | None = None


class CrimeSection(CamelModel):
    crime_rate: float | None = None
    crime_level: str | None = None


class AmenitiesSection(CamelModel):
    nearby_parks: int | None = None
    transit_score: int | None = None
    walk_score: int | None = None


class DataQuality(CamelModel):
    """Per-source confidences and the combined score.

    ``overall_confidence`` averages over all four sources, so a missing source
    counts as zero.
    """

    overall_confidence: float
    basic_info_confidence: float | None = None
    schools_confidence: float | None = None
    crime_confidence: float | None = None
    amenities_confidence: float | None = None
    missing_data_sources: tuple[str, ...] = ()


class AggregatedRecord(CamelModel):
    """One merged view of every source for a single address."""

    property: PropertyAddress
    basic_info: BasicInfoSection = Field(default_factory=BasicInfoSection)
    schools: SchoolsSection = Field(default_factory=SchoolsSection)
    crime: CrimeSection = Field(default_factory=CrimeSection)
    amenities: AmenitiesSection = Field(default_factory=AmenitiesSection)
    data_quality: DataQuality
    last_updated: datetime = Field(default_factory=_utcnow)


class PropertyBrief(AggregatedRecord):
    """API response: the aggregated record plus an optional AI summary."""

    ai_summary: str | None = None


# ---------------------------------------------------------------------------
# Persistence
# ---------------------------------------------------------------------------


class Property(CamelModel):
    """A tracked property, unique by street address."""

    id: str = Field(default_factory=lambda: str(uuid.uuid4()))
    address: str
    city: str
    state: str
    zip_code: str
    created_at: datetime = Field(default_factory=_utcnow)
    updated_at: datetime = Field(default_factory=_utcnow)


class PropertySnapshot(CamelModel):
    """Immutable point-in-time copy of an aggregated record."""

    id: str = Field(default_factory=lambda: str(uuid.uuid4()))
    property_id: str
    created_at: datetime = Field(default_factory=_utcnow)

    bedrooms: int | None = None
    bathrooms: int | None = None
    square_feet: int | None = None
    year_built: int | None = None
    property_type: str | None = None
    estimated_value: int | None = None

    elementary_school: str | None = None
    elementary_rating: float | None = None
    middle_school: str | None = None
    middle_rating: float | None = None
    high_school: str | None = None
    high_rating: float | None = None

    crime_rate: float | None = None
    crime_level: str | None = None

    nearby_parks: int | None = None
    transit_score: int | None = None
    walk_score: int | None = None

    data_confidence: float

    @classmethod
    def from_record(cls, property_id: str, record: AggregatedRecord) -> PropertySnapshot:
        return cls(
            property_id=property_id,
            **record.basic_info.model_dump(),
            **record.schools.model_dump(),
            **record.crime.model_dump(),
            **record.amenities.model_dump(),
            data_confidence=record.data_quality.overall_confidence,
        )
