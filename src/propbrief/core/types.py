"""Core type definitions shared across all Property Brief modules."""

from __future__ import annotations

from enum import StrEnum
from typing import Any

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel


class DataSource(StrEnum):
    """The four independent data categories, in canonical order."""

    BASIC_INFO = "basic_info"
    SCHOOLS = "schools"
    CRIME = "crime"
    AMENITIES = "amenities"

    @property
    def label(self) -> str:
        """Human-readable source name reported in missing-source lists."""
        return _SOURCE_LABELS[self]


_SOURCE_LABELS: dict[DataSource, str] = {
    DataSource.BASIC_INFO: "Property Records",
    DataSource.SCHOOLS: "School Ratings",
    DataSource.CRIME: "Crime Statistics",
    DataSource.AMENITIES: "Amenities Data",
}


class CamelModel(BaseModel):
    """Immutable model serialized with camelCase keys on the wire."""

    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        frozen=True,
    )


class HealthStatus(BaseModel):
    """Health check response for any service."""

    service: str
    healthy: bool
    latency_ms: float | None = None
    details: dict[str, Any] = Field(default_factory=dict)
