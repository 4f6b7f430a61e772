"""Payload models returned by the property data sources."""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field


class SourcePayload(BaseModel):
    """Base for every source result: the data plus a reliability score."""

    model_config = ConfigDict(frozen=True)

    confidence: float = Field(ge=0.0, le=1.0)


class BasicInfo(SourcePayload):
    """Public-records property details."""

    bedrooms: int
    bathrooms: int
    square_feet: int
    year_built: int
    property_type: str
    estimated_value: int


class SchoolData(SourcePayload):
    """Assigned schools and their ratings out of 10."""

    elementary_school: str
    elementary_rating: float
    middle_school: str
    middle_rating: float
    high_school: str
    high_rating: float


class CrimeData(SourcePayload):
    """Crime statistics per 100k residents."""

    crime_rate: float
    crime_level: str


class AmenitiesData(SourcePayload):
    """Nearby amenities and mobility scores out of 100."""

    nearby_parks: int
    transit_score: int
    walk_score: int
