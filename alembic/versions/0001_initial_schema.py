"""Initial schema: properties and property snapshots.

Revision ID: 0001
Revises:
Create Date: 2026-10-19

"""
from __future__ import annotations

from typing import Sequence, Union

from alembic import op
import sqlalchemy as sa

revision: str = "0001"
down_revision: Union[str, None] = None
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None


def upgrade() -> None:
    # -- Properties --
    op.create_table(
        "properties",
        sa.Column("id", sa.String(64), primary_key=True),
        sa.Column("address", sa.String(512), nullable=False, unique=True),
        sa.Column("city", sa.String(128), nullable=False),
        sa.Column("state", sa.String(32), nullable=False),
        sa.Column("zip_code", sa.String(16), nullable=False),
        sa.Column("created_at", sa.DateTime(timezone=True), nullable=False),
        sa.Column("updated_at", sa.DateTime(timezone=True), nullable=False),
    )

    # -- Snapshots --
    op.create_table(
        "property_snapshots",
        sa.Column("id", sa.String(64), primary_key=True),
        sa.Column(
            "property_id",
            sa.String(64),
            sa.ForeignKey("properties.id", ondelete="CASCADE"),
            nullable=False,
        ),
        sa.Column("created_at", sa.DateTime(timezone=True), nullable=False),
        sa.Column("bedrooms", sa.Integer, nullable=True),
        sa.Column("bathrooms", sa.Integer, nullable=True),
        sa.Column("square_feet", sa.Integer, nullable=True),
        sa.Column("year_built", sa.Integer, nullable=True),
        sa.Column("property_type", sa.String(64), nullable=True),
        sa.Column("estimated_value", sa.Integer, nullable=True),
        sa.Column("elementary_school", sa.Text, nullable=True),
        sa.Column("elementary_rating", sa.Float, nullable=True),
        sa.Column("middle_school", sa.Text, nullable=True),
        sa.Column("middle_rating", sa.Float, nullable=True),
        sa.Column("high_school", sa.Text, nullable=True),
        sa.Column("high_rating", sa.Float, nullable=True),
        sa.Column("crime_rate", sa.Float, nullable=True),
        sa.Column("crime_level", sa.String(32), nullable=True),
        sa.Column("nearby_parks", sa.Integer, nullable=True),
        sa.Column("transit_score", sa.Integer, nullable=True),
        sa.Column("walk_score", sa.Integer, nullable=True),
        sa.Column("data_confidence", sa.Float, nullable=False),
    )
    op.create_index(
        "ix_property_snapshots_property_id", "property_snapshots", ["property_id"]
    )
    op.create_index(
        "ix_property_snapshots_created_at", "property_snapshots", ["created_at"]
    )


def downgrade() -> None:
    op.drop_index("ix_property_snapshots_created_at", table_name="property_snapshots")
    op.drop_index("ix_property_snapshots_property_id", table_name="property_snapshots")
    op.drop_table("property_snapshots")
    op.drop_table("properties")
