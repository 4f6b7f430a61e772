"""Natural-language property summaries.

The summary is requested from the configured LLM provider. When no provider
is configured, the call fails, or it comes back blank, a rule-based summary
is returned instead, so callers always get non-empty text.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from propbrief.aggregation.models import AggregatedRecord
from propbrief.summary.context import build_context
from propbrief.summary.fallback import fallback_summary

if TYPE_CHECKING:
    from propbrief.llm.client import LLMClient

logger = logging.getLogger(__name__)

SYSTEM_PROMPT = """\
You are a real estate analyst helping potential home buyers. Generate a concise, \
insightful 3-4 paragraph summary of the property data provided. Focus on:
1. Key property highlights and value proposition
2. School quality and family-friendliness
3. Safety and neighborhood character
4. Walkability and lifestyle factors

Be honest about data gaps and mention the overall data confidence score. \
Write in a professional but friendly tone. Keep it under 200 words."""


class SummaryGenerator:
    """Summarizes aggregated records.

    Args:
        llm_client: Chat-completion client. None always uses the fallback.
    """

    def __init__(self, llm_client: LLMClient | None = None) -> None:
        self._llm = llm_client

    async def summarize(self, record: AggregatedRecord) -> str:
        """Return a summary of *record*. Never raises for provider errors."""
        if self._llm is None:
            return fallback_summary(record)

        try:
            text = await self._llm.generate(
                build_context(record),
                system_prompt=SYSTEM_PROMPT,
            )
        except Exception:
            logger.exception("Error generating AI summary for %r", record.property.address)
            return fallback_summary(record)

        if not text or not text.strip():
            logger.warning("Empty AI summary for %r; using fallback", record.property.address)
            return fallback_summary(record)
        return text.strip()
