"""Property summaries (LLM-backed with a rule-based fallback)."""

from propbrief.summary.fallback import FALLBACK_NOTICE, fallback_summary
from propbrief.summary.generator import SYSTEM_PROMPT, SummaryGenerator

__all__ = ["FALLBACK_NOTICE", "SYSTEM_PROMPT", "SummaryGenerator", "fallback_summary"]
