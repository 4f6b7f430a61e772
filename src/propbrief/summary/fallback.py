"""Rule-based property summary used when the language model is unavailable.

Each paragraph picks a phrase from a fixed band of the underlying score, so
the output is deterministic for a given record.
"""

from __future__ import annotations

from statistics import mean

from propbrief.aggregation.models import AggregatedRecord
from propbrief.summary.context import confidence_percent, full_address

FALLBACK_NOTICE = (
    "(Automated summary generated without AI analysis; "
    "the AI summary service is currently unavailable.)"
)


def _count(value: int | None, noun: str) -> str:
    if value is None:
        return f"an unknown number of {noun}"
    return f"{value} {noun}"


def highlights_paragraph(record: AggregatedRecord) -> str:
    info = record.basic_info
    address = full_address(record)
    if info.bedrooms is None and info.estimated_value is None:
        return (
            f"Property records were unavailable for {address}, so size and "
            "value details could not be confirmed."
        )

    kind = (info.property_type or "residential").lower()
    text = (
        f"This {kind} property at {address} offers {_count(info.bedrooms, 'bedrooms')} "
        f"and {_count(info.bathrooms, 'bathrooms')}"
    )
    if info.square_feet is not None:
        text += f" across {info.square_feet:,} square feet"
    text += "."
    if info.year_built is not None:
        text += f" It was built in {info.year_built}."
    if info.estimated_value is not None:
        text += f" The estimated value is ${info.estimated_value:,}."
    return text


def schools_paragraph(record: AggregatedRecord) -> str:
    schools = record.schools
    ratings = [
        r for r in (schools.elementary_rating, schools.middle_rating, schools.high_rating)
        if r is not None
    ]
    if not ratings:
        return "School ratings were not available for this address."

    average = mean(ratings)
    if average >= 8:
        note = "Local schools are highly rated, a strong draw for families."
    elif average >= 6:
        note = "Local schools are solidly rated and should suit most families."
    else:
        note = "Local school ratings are below average; families may want to research alternatives."

    text = f"{note} The average school rating is {average:.1f}/10"
    if schools.elementary_school:
        text += f", with {schools.elementary_school} as the assigned elementary school"
    return text + "."


def safety_paragraph(record: AggregatedRecord) -> str:
    crime = record.crime
    if crime.crime_level is None:
        return "Crime statistics were not available, so neighborhood safety could not be assessed."

    rate = "" if crime.crime_rate is None else f" ({crime.crime_rate:.1f} per 100k residents)"
    level = crime.crime_level
    if level in ("Very Low", "Low"):
        text = f"The area reports {level.lower()} crime{rate}, a reassuring sign for safety."
    elif level == "Moderate":
        text = (
            f"The area reports moderate crime{rate}; it is worth visiting at "
            "different times of day."
        )
    else:
        text = f"The area reports high crime{rate}; buyers should review local safety trends closely."

    crime_confidence = record.data_quality.crime_confidence
    if crime_confidence is not None and crime_confidence < 0.7:
        text += " Crime data confidence is limited, so treat this as indicative."
    return text


def walkability_paragraph(record: AggregatedRecord) -> str:
    amenities = record.amenities
    if amenities.walk_score is None:
        return "Walkability and amenity data were not available for this address."

    score = amenities.walk_score
    if score >= 70:
        note = f"With a walk score of {score}/100, daily errands can be done on foot."
    elif score >= 50:
        note = f"With a walk score of {score}/100, the neighborhood is somewhat walkable."
    else:
        note = f"With a walk score of {score}/100, the neighborhood is car-dependent."

    extras = []
    if amenities.transit_score is not None:
        extras.append(f"a transit score of {amenities.transit_score}/100")
    if amenities.nearby_parks is not None:
        extras.append(f"{amenities.nearby_parks} nearby parks")
    if extras:
        note += " The area also has " + " and ".join(extras) + "."
    return note


def data_quality_paragraph(record: AggregatedRecord) -> str:
    quality = record.data_quality
    percent = confidence_percent(quality.overall_confidence)
    if quality.overall_confidence >= 0.8:
        band = "high"
    elif quality.overall_confidence >= 0.5:
        band = "moderate"
    else:
        band = "low"

    text = f"Data confidence for this property is {percent}% ({band})."
    if quality.missing_data_sources:
        text += " Missing data from: " + ", ".join(quality.missing_data_sources) + "."
    else:
        text += " All data sources responded."
    return text


def fallback_summary(record: AggregatedRecord) -> str:
    """Multi-paragraph summary built from *record* alone."""
    paragraphs = [
        highlights_paragraph(record),
        schools_paragraph(record),
        safety_paragraph(record),
        walkability_paragraph(record),
        data_quality_paragraph(record),
        FALLBACK_NOTICE,
    ]
    return "\n\n".join(paragraphs)
