"""Fan-out/fan-in aggregation of the four property data sources.

Every request fetches all sources concurrently, merges whatever came back into
one immutable record, scores the result and hands a snapshot to the store.
A source with no data is a normal outcome and never aborts the join.
"""

from __future__ import annotations

import asyncio
import logging
from typing import TYPE_CHECKING

from propbrief.aggregation.address import parse_address
from propbrief.aggregation.models import (
    AggregatedRecord,
    AmenitiesSection,
    BasicInfoSection,
    CrimeSection,
    DataQuality,
    PropertySnapshot,
    SchoolsSection,
)
from propbrief.core.types import DataSource
from propbrief.repositories import resolve
from propbrief.sources.models import (
    AmenitiesData,
    BasicInfo,
    CrimeData,
    SchoolData,
    SourcePayload,
)

if TYPE_CHECKING:
    from propbrief.repositories.protocols import PropertyRepository
    from propbrief.sources.service import PropertySources

logger = logging.getLogger(__name__)


def compute_data_quality(
    basic_info: BasicInfo | None,
    schools: SchoolData | None,
    crime: CrimeData | None,
    amenities: AmenitiesData | None,
) -> DataQuality:
    """Score a set of source results.

    The overall confidence is the mean over all four sources: an absent
    source contributes zero instead of being left out of the average.
    """
    results: dict[DataSource, SourcePayload | None] = {
        DataSource.BASIC_INFO: basic_info,
        DataSource.SCHOOLS: schools,
        DataSource.CRIME: crime,
        DataSource.AMENITIES: amenities,
    }

    missing = [source.label for source, payload in results.items() if payload is None]
    confidences = [payload.confidence for payload in results.values() if payload is not None]

    return DataQuality(
        overall_confidence=sum(confidences) / len(results),
        basic_info_confidence=basic_info.confidence if basic_info else None,
        schools_confidence=schools.confidence if schools else None,
        crime_confidence=crime.confidence if crime else None,
        amenities_confidence=amenities.confidence if amenities else None,
        missing_data_sources=tuple(missing),
    )


def _section(section_cls, payload: SourcePayload | None):
    if payload is None:
        return section_cls()
    return section_cls(**payload.model_dump(exclude={"confidence"}))


class PropertyAggregator:
    """Builds an AggregatedRecord for an address.

    Args:
        sources: The data sources to fan out to.
        store: Optional property store. Write failures are logged and
            suppressed; the record is returned regardless.
    """

    def __init__(
        self,
        sources: PropertySources,
        store: PropertyRepository | None = None,
    ) -> None:
        self._sources = sources
        self._store = store

    async def aggregate(self, full_address: str) -> AggregatedRecord:
        """Fetch, merge and score every source for *full_address*."""
        parsed = parse_address(full_address)

        basic_info, schools, crime, amenities = await asyncio.gather(
            self._sources.fetch_basic_info(full_address),
            self._sources.fetch_schools(full_address),
            self._sources.fetch_crime(full_address),
            self._sources.fetch_amenities(full_address),
        )

        record = AggregatedRecord(
            property=parsed,
            basic_info=_section(BasicInfoSection, basic_info),
            schools=_section(SchoolsSection, schools),
            crime=_section(CrimeSection, crime),
            amenities=_section(AmenitiesSection, amenities),
            data_quality=compute_data_quality(basic_info, schools, crime, amenities),
        )

        logger.info(
            "Aggregated %r: confidence=%.2f missing=%d",
            parsed.address,
            record.data_quality.overall_confidence,
            len(record.data_quality.missing_data_sources),
        )

        await self._persist(record)
        return record

    async def _persist(self, record: AggregatedRecord) -> None:
        if self._store is None:
            return
        try:
            prop = await resolve(self._store.upsert_property(record.property))
            await resolve(
                self._store.add_snapshot(PropertySnapshot.from_record(prop.id, record))
            )
        except Exception:
            logger.exception("Error saving snapshot for %r", record.property.address)
