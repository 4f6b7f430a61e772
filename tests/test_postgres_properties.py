"""Tests for DatabaseManager and PostgresPropertyRepository with SQLite async."""

from __future__ import annotations

import pytest
from sqlalchemy import select

from propbrief.aggregation.address import parse_address
from propbrief.aggregation.aggregator import PropertyAggregator
from propbrief.aggregation.models import PropertySnapshot
from propbrief.core.config import DatabaseConfig
from propbrief.db.engine import DatabaseManager
from propbrief.db.models import PropertyRow
from propbrief.repositories.postgres.properties import PostgresPropertyRepository

from conftest import ALL_MISSING, MAIN_ST


@pytest.fixture
async def db():
    manager = DatabaseManager("sqlite+aiosqlite:///:memory:")
    await manager.create_all()
    yield manager
    await manager.close()


@pytest.fixture
def repo(db):
    return PostgresPropertyRepository(db)


class TestDatabaseManager:
    def test_from_config(self):
        manager = DatabaseManager.from_config(
            DatabaseConfig(database_url="sqlite+aiosqlite:///:memory:")
        )
        assert manager.engine is not None

    def test_from_config_requires_url(self):
        with pytest.raises(ValueError, match="database_url"):
            DatabaseManager.from_config(DatabaseConfig())

    async def test_session_round_trip(self, db):
        async with db.session() as session:
            session.add(PropertyRow(id="p1", address="1 Elm St", city="Salem", state="OR", zip_code="97301"))
            await session.commit()

        async with db.session() as session:
            result = await session.execute(select(PropertyRow).where(PropertyRow.id == "p1"))
            found = result.scalar_one_or_none()
            assert found is not None
            assert found.address == "1 Elm St"


class TestPostgresPropertyRepository:
    async def test_upsert_creates_property(self, repo):
        prop = await repo.upsert_property(parse_address(MAIN_ST))
        assert prop.address == "123 Main St"
        assert prop.zip_code == "62701"

        found = await repo.get_property("123 Main St")
        assert found is not None
        assert found.id == prop.id

    async def test_upsert_existing_keeps_identity(self, repo):
        first = await repo.upsert_property(parse_address(MAIN_ST))
        second = await repo.upsert_property(parse_address("123 Main St, Other City, CA 90001"))
        assert second.id == first.id
        # only the timestamp changes on update
        assert second.city == "Springfield"

    async def test_get_missing_property(self, repo):
        assert await repo.get_property("nowhere") is None

    async def test_add_and_list_snapshots(self, repo):
        prop = await repo.upsert_property(parse_address(MAIN_ST))
        snapshot = PropertySnapshot(property_id=prop.id, bedrooms=3, crime_level="Low", data_confidence=0.7)
        await repo.add_snapshot(snapshot)

        snapshots = await repo.list_snapshots("123 Main St")
        assert len(snapshots) == 1
        assert snapshots[0].id == snapshot.id
        assert snapshots[0].bedrooms == 3
        assert snapshots[0].crime_level == "Low"
        assert snapshots[0].walk_score is None
        assert snapshots[0].data_confidence == 0.7

    async def test_list_snapshots_unknown_address(self, repo):
        assert await repo.list_snapshots("nowhere") == []

    async def test_aggregator_persists_through_repository(self, repo, sources):
        aggregator = PropertyAggregator(sources, store=repo)
        record = await aggregator.aggregate(MAIN_ST)
        await aggregator.aggregate(MAIN_ST)
        await aggregator.aggregate(ALL_MISSING)

        snapshots = await repo.list_snapshots("123 Main St")
        assert len(snapshots) == 2
        assert snapshots[0].estimated_value == 472000
        assert snapshots[0].data_confidence == pytest.approx(record.data_quality.overall_confidence)

        empty = await repo.list_snapshots("1 w")
        assert len(empty) == 1
        assert empty[0].bedrooms is None
