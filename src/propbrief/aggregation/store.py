"""In-memory store for properties and their snapshots."""

from __future__ import annotations

from datetime import datetime, timezone

from propbrief.aggregation.models import Property, PropertyAddress, PropertySnapshot


class PropertyStore:
    """In-memory dict store keyed by street address.

    Suitable for single-instance deployment and tests.
    """

    def __init__(self) -> None:
        self._properties: dict[str, Property] = {}
        self._snapshots: list[PropertySnapshot] = []

    def upsert_property(self, address: PropertyAddress) -> Property:
        existing = self._properties.get(address.address)
        if existing is not None:
            updated = existing.model_copy(update={"updated_at": datetime.now(timezone.utc)})
            self._properties[address.address] = updated
            return updated

        prop = Property(
            address=address.address,
            city=address.city,
            state=address.state,
            zip_code=address.zip_code,
        )
        self._properties[address.address] = prop
        return prop

    def get_property(self, address: str) -> Property | None:
        return self._properties.get(address)

    def add_snapshot(self, snapshot: PropertySnapshot) -> PropertySnapshot:
        self._snapshots.append(snapshot)
        return snapshot

    def list_snapshots(self, address: str) -> list[PropertySnapshot]:
        prop = self._properties.get(address)
        if prop is None:
            return []
        return [s for s in reversed(self._snapshots) if s.property_id == prop.id]

    @property
    def snapshot_count(self) -> int:
        return len(self._snapshots)
