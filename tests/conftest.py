"""Shared test fixtures and helpers."""

from __future__ import annotations

import pytest

from propbrief.aggregation.aggregator import PropertyAggregator
from propbrief.aggregation.store import PropertyStore
from propbrief.core.config import LLMConfig
from propbrief.llm.client import LLMClient
from propbrief.sources.service import MockPropertySources

MAIN_ST = "123 Main St, Springfield, IL 62701"  # address hash -> 0.34
ALL_MISSING = "1 w"  # address hash -> 0.00
CRIME_BOUNDARY = "10 V"  # address hash -> 0.15


class StubLLMClient(LLMClient):
    """LLM client returning a canned reply, or raising *error*."""

    def __init__(self, reply: str = "", error: Exception | None = None) -> None:
        super().__init__(LLMConfig(provider="openai", api_key="test"))
        self.reply = reply
        self.error = error
        self.calls: list[list[dict]] = []
        self.closed = False

    async def chat(self, messages: list[dict], *, temperature: float | None = None) -> str:
        self.calls.append(messages)
        if self.error is not None:
            raise self.error
        return self.reply

    async def is_available(self) -> bool:
        return self.error is None

    async def close(self) -> None:
        self.closed = True


class FailingStore:
    """Property store whose writes always fail."""

    def upsert_property(self, address):
        raise RuntimeError("database unavailable")

    def get_property(self, address):
        return None

    def add_snapshot(self, snapshot):
        raise RuntimeError("database unavailable")

    def list_snapshots(self, address):
        return []


@pytest.fixture
def sources():
    return MockPropertySources(simulate_latency=False)


@pytest.fixture
def store():
    return PropertyStore()


@pytest.fixture
def aggregator(sources, store):
    return PropertyAggregator(sources=sources, store=store)
