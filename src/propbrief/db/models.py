"""SQLAlchemy ORM models for all persistent tables."""

from __future__ import annotations

from datetime import datetime, timezone

from sqlalchemy import DateTime, Float, ForeignKey, Index, Integer, String, Text
from sqlalchemy.orm import Mapped, mapped_column, relationship

from propbrief.db.base import Base


def _utcnow() -> datetime:
    return datetime.now(timezone.utc)


class PropertyRow(Base):
    __tablename__ = "properties"

    id: Mapped[str] = mapped_column(String(64), primary_key=True)
    address: Mapped[str] = mapped_column(String(512), unique=True)
    city: Mapped[str] = mapped_column(String(128))
    state: Mapped[str] = mapped_column(String(32))
    zip_code: Mapped[str] = mapped_column(String(16))
    created_at: Mapped[datetime] = mapped_column(DateTime(timezone=True), default=_utcnow)
    updated_at: Mapped[datetime] = mapped_column(DateTime(timezone=True), default=_utcnow)

    snapshots: Mapped[list[PropertySnapshotRow]] = relationship(
        back_populates="parent", cascade="all, delete-orphan"
    )


class PropertySnapshotRow(Base):
    __tablename__ = "property_snapshots"

    id: Mapped[str] = mapped_column(String(64), primary_key=True)
    property_id: Mapped[str] = mapped_column(
        String(64), ForeignKey("properties.id", ondelete="CASCADE")
    )
    created_at: Mapped[datetime] = mapped_column(DateTime(timezone=True), default=_utcnow)

    bedrooms: Mapped[int | None] = mapped_column(Integer, nullable=True)
    bathrooms: Mapped[int | None] = mapped_column(Integer, nullable=True)
    square_feet: Mapped[int | None] = mapped_column(Integer, nullable=True)
    year_built: Mapped[int | None] = mapped_column(Integer, nullable=True)
    property_type: Mapped[str | None] = mapped_column(String(64), nullable=True)
    estimated_value: Mapped[int | None] = mapped_column(Integer, nullable=True)

    elementary_school: Mapped[str | None] = mapped_column(Text, nullable=True)
    elementary_rating: Mapped[float | None] = mapped_column(Float, nullable=True)
    middle_school: Mapped[str | None] = mapped_column(Text, nullable=True)
    middle_rating: Mapped[float | None] = mapped_column(Float, nullable=True)
    high_school: Mapped[str | None] = mapped_column(Text, nullable=True)
    high_rating: Mapped[float | None] = mapped_column(Float, nullable=True)

    crime_rate: Mapped[float | None] = mapped_column(Float, nullable=True)
    crime_level: Mapped[str | None] = mapped_column(String(32), nullable=True)

    nearby_parks: Mapped[int | None] = mapped_column(Integer, nullable=True)
    transit_score: Mapped[int | None] = mapped_column(Integer, nullable=True)
    walk_score: Mapped[int | None] = mapped_column(Integer, nullable=True)

    data_confidence: Mapped[float] = mapped_column(Float)

    parent: Mapped[PropertyRow] = relationship(back_populates="snapshots")

    __table_args__ = (
        Index("ix_property_snapshots_property_id", "property_id"),
        Index("ix_property_snapshots_created_at", "created_at"),
    )
