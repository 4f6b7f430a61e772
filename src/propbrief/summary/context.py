"""Plain-text rendering of an aggregated record for the summary prompt."""

from __future__ import annotations

import math
import textwrap

from propbrief.aggregation.models import AggregatedRecord

NA = "N/A"


def confidence_percent(confidence: float) -> int:
    """Confidence as a whole percentage, rounding halves up."""
    return math.floor(confidence * 100 + 0.5)


def full_address(record: AggregatedRecord) -> str:
    p = record.property
    return f"{p.address}, {p.city}, {p.state} {p.zip_code}"


def _value(value: object, placeholder: str = NA) -> str:
    return placeholder if value is None else str(value)


def _thousands(value: int | None) -> str:
    return NA if value is None else f"{value:,}"


def _money(value: int | None) -> str:
    return NA if value is None else f"${value:,}"


def _one_decimal(value: float | None) -> str:
    return NA if value is None else f"{value:.1f}"


def build_context(record: AggregatedRecord) -> str:
    """Render every field of *record*, with placeholders for unset ones."""
    info = record.basic_info
    schools = record.schools
    crime = record.crime
    amenities = record.amenities
    quality = record.data_quality
    missing = ", ".join(quality.missing_data_sources) or "None"

    return textwrap.dedent(
        f"""\
        Property Address: {full_address(record)}

        PROPERTY DETAILS:
        - Type: {_value(info.property_type, "Unknown")}
        - Bedrooms: {_value(info.bedrooms)}
        - Bathrooms: {_value(info.bathrooms)}
        - Square Feet: {_thousands(info.square_feet)}
        - Year Built: {_value(info.year_built)}
        - Estimated Value: {_money(info.estimated_value)}

        SCHOOLS:
        - Elementary: {_value(schools.elementary_school)} (Rating: {_one_decimal(schools.elementary_rating)}/10)
        - Middle: {_value(schools.middle_school)} (Rating: {_one_decimal(schools.middle_rating)}/10)
        - High: {_value(schools.high_school)} (Rating: {_one_decimal(schools.high_rating)}/10)

        SAFETY:
        - Crime Level: {_value(crime.crime_level)}
        - Crime Rate: {_one_decimal(crime.crime_rate)} per 100k

        WALKABILITY & AMENITIES:
        - Walk Score: {_value(amenities.walk_score)}/100
        - Transit Score: {_value(amenities.transit_score)}/100
        - Nearby Parks: {_value(amenities.nearby_parks)}

        DATA QUALITY:
        - Overall Confidence: {confidence_percent(quality.overall_confidence)}%
        - Missing Data: {missing}
        """
    )
