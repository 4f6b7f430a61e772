"""Protocol definitions for repository interfaces.

The protocol mirrors the public methods of the in-memory store exactly, so
both the sync (in-memory) and async (SQLAlchemy) implementations satisfy the
same interface.
"""

from __future__ import annotations

from typing import Protocol, runtime_checkable

from propbrief.aggregation.models import Property, PropertyAddress, PropertySnapshot


@runtime_checkable
class PropertyRepository(Protocol):
    """Protocol for property and snapshot storage."""

    def upsert_property(self, address: PropertyAddress) -> Property: ...

    def get_property(self, address: str) -> Property | None: ...

    def add_snapshot(self, snapshot: PropertySnapshot) -> PropertySnapshot: ...

    def list_snapshots(self, address: str) -> list[PropertySnapshot]: ...
