"""Application configuration loaded from environment and config files."""

from __future__ import annotations

from pydantic import Field
from pydantic_settings import BaseSettings


class LLMConfig(BaseSettings):
    """LLM provider configuration."""

    model_config = {"env_prefix": "PROPBRIEF_LLM_"}

    enabled: bool = True
    provider: str = "openai"
    base_url: str = "https://api.openai.com"
    model: str = "gpt-4o-mini"
    api_key: str | None = None
    timeout_seconds: int = 30
    temperature: float = 0.7
    max_tokens: int = 300


class DatabaseConfig(BaseSettings):
    """Persistence configuration. No URL means the in-memory store."""

    model_config = {"env_prefix": "PROPBRIEF_DB_"}

    database_url: str | None = None
    echo: bool = False
    pool_size: int = 5


class SourcesConfig(BaseSettings):
    """Simulated data source configuration."""

    model_config = {"env_prefix": "PROPBRIEF_SOURCES_"}

    simulate_latency: bool = True


class Settings(BaseSettings):
    """Root application settings."""

    model_config = {"env_prefix": "PROPBRIEF_"}

    environment: str = "development"
    debug: bool = False
    log_level: str = "INFO"

    llm: LLMConfig = Field(default_factory=LLMConfig)
    db: DatabaseConfig = Field(default_factory=DatabaseConfig)
    sources: SourcesConfig = Field(default_factory=SourcesConfig)
