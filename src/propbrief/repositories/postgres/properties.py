"""PostgreSQL property and snapshot repository."""

from __future__ import annotations

from datetime import datetime, timezone

from sqlalchemy import select

from propbrief.aggregation.models import Property, PropertyAddress, PropertySnapshot
from propbrief.db.engine import DatabaseManager
from propbrief.db.models import PropertyRow, PropertySnapshotRow

_SNAPSHOT_FIELDS = tuple(
    name for name in PropertySnapshot.model_fields if name not in {"id", "property_id", "created_at"}
)


class PostgresPropertyRepository:
    """SQLAlchemy-backed property storage. Works with any async driver."""

    def __init__(self, db: DatabaseManager) -> None:
        self._db = db

    async def upsert_property(self, address: PropertyAddress) -> Property:
        async with self._db.session() as db:
            result = await db.execute(
                select(PropertyRow).where(PropertyRow.address == address.address)
            )
            row = result.scalar_one_or_none()
            if row is None:
                prop = Property(
                    address=address.address,
                    city=address.city,
                    state=address.state,
                    zip_code=address.zip_code,
                )
                row = PropertyRow(
                    id=prop.id,
                    address=prop.address,
                    city=prop.city,
                    state=prop.state,
                    zip_code=prop.zip_code,
                    created_at=prop.created_at,
                    updated_at=prop.updated_at,
                )
                db.add(row)
            else:
                row.updated_at = datetime.now(timezone.utc)
            await db.commit()
            return self._row_to_property(row)

    async def get_property(self, address: str) -> Property | None:
        async with self._db.session() as db:
            result = await db.execute(
                select(PropertyRow).where(PropertyRow.address == address)
            )
            row = result.scalar_one_or_none()
            if row is None:
                return None
            return self._row_to_property(row)

    async def add_snapshot(self, snapshot: PropertySnapshot) -> PropertySnapshot:
        async with self._db.session() as db:
            row = PropertySnapshotRow(
                id=snapshot.id,
                property_id=snapshot.property_id,
                created_at=snapshot.created_at,
                **{name: getattr(snapshot, name) for name in _SNAPSHOT_FIELDS},
            )
            db.add(row)
            await db.commit()
        return snapshot

    async def list_snapshots(self, address: str) -> list[PropertySnapshot]:
        async with self._db.session() as db:
            result = await db.execute(
                select(PropertySnapshotRow)
                .join(PropertyRow, PropertySnapshotRow.property_id == PropertyRow.id)
                .where(PropertyRow.address == address)
                .order_by(PropertySnapshotRow.created_at.desc())
            )
            return [self._row_to_snapshot(r) for r in result.scalars().all()]

    @staticmethod
    def _row_to_property(row: PropertyRow) -> Property:
        return Property(
            id=row.id,
            address=row.address,
            city=row.city,
            state=row.state,
            zip_code=row.zip_code,
            created_at=row.created_at,
            updated_at=row.updated_at,
        )

    @staticmethod
    def _row_to_snapshot(row: PropertySnapshotRow) -> PropertySnapshot:
        return PropertySnapshot(
            id=row.id,
            property_id=row.property_id,
            created_at=row.created_at,
            **{name: getattr(row, name) for name in _SNAPSHOT_FIELDS},
        )
