"""Provider registry for LLM backends."""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from propbrief.llm.client import LLMClient

from propbrief.llm.providers.ollama import OllamaClient
from propbrief.llm.providers.openai_compat import OpenAICompatClient

PROVIDER_REGISTRY: dict[str, type[LLMClient]] = {
    "ollama": OllamaClient,
    "openai": OpenAICompatClient,
}

__all__ = ["PROVIDER_REGISTRY", "OllamaClient", "OpenAICompatClient"]
