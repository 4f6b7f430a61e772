"""Ollama chat provider using the Ollama REST API."""

from __future__ import annotations

import httpx

from propbrief.core.config import LLMConfig
from propbrief.llm.client import LLMClient


class OllamaClient(LLMClient):
    """Talks to a local Ollama instance."""

    def __init__(self, config: LLMConfig) -> None:
        super().__init__(config)
        self._http = httpx.AsyncClient(
            base_url=config.base_url,
            timeout=httpx.Timeout(config.timeout_seconds),
        )

    async def chat(
        self,
        messages: list[dict],
        *,
        temperature: float | None = None,
    ) -> str:
        payload = {
            "model": self.config.model,
            "messages": messages,
            "stream": False,
            "options": {
                "temperature": self._temperature(temperature),
                "num_predict": self.config.max_tokens,
            },
        }
        resp = await self._http.post("/api/chat", json=payload)
        resp.raise_for_status()
        return resp.json().get("message", {}).get("content") or ""

    async def is_available(self) -> bool:
        try:
            r = await self._http.get("/api/tags")
            return r.status_code == 200
        except httpx.HTTPError:
            return False

    async def close(self) -> None:
        await self._http.aclose()
