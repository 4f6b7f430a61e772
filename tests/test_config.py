"""Tests for environment-driven settings."""

from __future__ import annotations

from propbrief.core.config import DatabaseConfig, LLMConfig, Settings, SourcesConfig


def test_defaults(monkeypatch):
    for name in ("PROPBRIEF_LLM_API_KEY", "PROPBRIEF_DB_DATABASE_URL", "PROPBRIEF_LOG_LEVEL"):
        monkeypatch.delenv(name, raising=False)

    settings = Settings()
    assert settings.log_level == "INFO"
    assert settings.llm.provider == "openai"
    assert settings.llm.model == "gpt-4o-mini"
    assert settings.llm.max_tokens == 300
    assert settings.llm.api_key is None
    assert settings.db.database_url is None
    assert settings.sources.simulate_latency is True


def test_llm_env_overrides(monkeypatch):
    monkeypatch.setenv("PROPBRIEF_LLM_PROVIDER", "ollama")
    monkeypatch.setenv("PROPBRIEF_LLM_BASE_URL", "http://localhost:11434")
    monkeypatch.setenv("PROPBRIEF_LLM_TEMPERATURE", "0.2")

    config = LLMConfig()
    assert config.provider == "ollama"
    assert config.base_url == "http://localhost:11434"
    assert config.temperature == 0.2


def test_db_and_sources_env(monkeypatch):
    monkeypatch.setenv("PROPBRIEF_DB_DATABASE_URL", "sqlite+aiosqlite:///briefs.db")
    monkeypatch.setenv("PROPBRIEF_SOURCES_SIMULATE_LATENCY", "false")

    assert DatabaseConfig().database_url == "sqlite+aiosqlite:///briefs.db"
    assert SourcesConfig().simulate_latency is False
