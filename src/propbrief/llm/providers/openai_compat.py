"""OpenAI-compatible chat completion provider (OpenAI, vLLM, llama-cpp, ...)."""

from __future__ import annotations

from typing import Any

import httpx

from propbrief.core.config import LLMConfig
from propbrief.llm.client import LLMClient


class OpenAICompatClient(LLMClient):
    """Talks to any server that exposes the OpenAI /v1/chat/completions API."""

    def __init__(self, config: LLMConfig) -> None:
        super().__init__(config)
        headers: dict[str, str] = {}
        if config.api_key:
            headers["Authorization"] = f"Bearer {config.api_key}"
        self._http = httpx.AsyncClient(
            base_url=config.base_url,
            timeout=httpx.Timeout(config.timeout_seconds),
            headers=headers,
        )

    async def chat(
        self,
        messages: list[dict],
        *,
        temperature: float | None = None,
    ) -> str:
        payload: dict[str, Any] = {
            "model": self.config.model,
            "messages": messages,
            "temperature": self._temperature(temperature),
            "max_tokens": self.config.max_tokens,
            "stream": False,
        }
        resp = await self._http.post("/v1/chat/completions", json=payload)
        resp.raise_for_status()
        choices = resp.json().get("choices") or []
        if not choices:
            return ""
        return choices[0].get("message", {}).get("content") or ""

    async def is_available(self) -> bool:
        try:
            r = await self._http.get("/v1/models")
            return r.status_code == 200
        except httpx.HTTPError:
            return False

    async def close(self) -> None:
        await self._http.aclose()
