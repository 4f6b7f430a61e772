"""Best-effort free-text address parsing."""

from __future__ import annotations

from propbrief.aggregation.models import PropertyAddress

UNKNOWN_CITY = "Unknown City"
UNKNOWN_STATE = "XX"
UNKNOWN_ZIP = "00000"


def parse_address(full_address: str) -> PropertyAddress:
    """Split ``"street, city, STATE ZIP"`` into its parts.

    No validation is performed and parsing never fails; missing parts get
    placeholder values.
    """
    parts = [p.strip() for p in full_address.split(",")]
    street = parts[0] or full_address
    city = parts[1] if len(parts) > 1 and parts[1] else UNKNOWN_CITY
    state_zip = parts[2] if len(parts) > 2 and parts[2] else f"{UNKNOWN_STATE} {UNKNOWN_ZIP}"
    tokens = [t for t in state_zip.split(" ") if t]

    return PropertyAddress(
        address=street,
        city=city,
        state=tokens[0] if tokens else UNKNOWN_STATE,
        zip_code=tokens[1] if len(tokens) > 1 else UNKNOWN_ZIP,
    )
