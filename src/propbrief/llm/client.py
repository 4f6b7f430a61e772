"""Abstract LLM client interface and factory function."""

from __future__ import annotations

import abc

from propbrief.core.config import LLMConfig


class LLMClient(abc.ABC):
    """Abstract base class for chat-completion providers."""

    def __init__(self, config: LLMConfig) -> None:
        self.config = config

    @abc.abstractmethod
    async def chat(
        self,
        messages: list[dict],
        *,
        temperature: float | None = None,
    ) -> str:
        """Return the text of the first completion for *messages*.

        *temperature* defaults to ``config.temperature``.
        """

    async def generate(
        self,
        prompt: str,
        *,
        system_prompt: str | None = None,
        temperature: float | None = None,
    ) -> str:
        """Single-turn completion: optional system prompt plus one user message."""
        messages: list[dict] = []
        if system_prompt is not None:
            messages.append({"role": "system", "content": system_prompt})
        messages.append({"role": "user", "content": prompt})
        return await self.chat(messages, temperature=temperature)

    @abc.abstractmethod
    async def is_available(self) -> bool:
        """Return True if the provider is reachable."""

    async def close(self) -> None:
        """Clean up resources. Override if the provider holds connections."""

    def _temperature(self, temperature: float | None) -> float:
        return self.config.temperature if temperature is None else temperature


def create_llm_client(config: LLMConfig) -> LLMClient:
    """Factory: select and instantiate an LLM provider based on config.provider."""

    from propbrief.llm.providers import PROVIDER_REGISTRY

    provider = config.provider.lower()
    if provider not in PROVIDER_REGISTRY:
        available = ", ".join(sorted(PROVIDER_REGISTRY))
        raise ValueError(
            f"Unknown LLM provider {config.provider!r}. "
            f"Available: {available}"
        )

    cls = PROVIDER_REGISTRY[provider]
    return cls(config)
