#!/usr/bin/env python3
"""CLI script to aggregate and print a property brief for one address."""

from __future__ import annotations

import argparse
import asyncio
import logging
import sys
from pathlib import Path

# Ensure the project source is importable when running the script directly.
_project_root = Path(__file__).resolve().parent.parent
_src = _project_root / "src"
if str(_src) not in sys.path:
    sys.path.insert(0, str(_src))

from propbrief.aggregation.aggregator import PropertyAggregator  # noqa: E402
from propbrief.aggregation.models import PropertyBrief  # noqa: E402
from propbrief.aggregation.store import PropertyStore  # noqa: E402
from propbrief.core.config import Settings  # noqa: E402
from propbrief.db.engine import DatabaseManager  # noqa: E402
from propbrief.repositories.postgres.properties import PostgresPropertyRepository  # noqa: E402
from propbrief.sources.service import MockPropertySources  # noqa: E402
from propbrief.summary.context import build_context  # noqa: E402
from propbrief.summary.generator import SummaryGenerator  # noqa: E402
from propbrief.web.app import build_llm_client  # noqa: E402


def parse_args() -> argparse.Namespace:
    parser = argparse.ArgumentParser(
        description="Aggregate property data for an address and print the brief."
    )
    parser.add_argument("address", help='Full address, e.g. "123 Main St, Springfield, IL 62701".')
    parser.add_argument(
        "--no-summary",
        action="store_true",
        help="Skip the AI summary.",
    )
    parser.add_argument(
        "--json",
        action="store_true",
        help="Print the brief as JSON instead of text.",
    )
    parser.add_argument(
        "--no-latency",
        action="store_true",
        help="Disable the simulated source latency.",
    )
    return parser.parse_args()


async def main() -> None:
    args = parse_args()

    # Load settings from environment.
    settings = Settings()
    logging.basicConfig(level=settings.log_level.upper())

    db_manager: DatabaseManager | None = None
    if settings.db.database_url:
        db_manager = DatabaseManager.from_config(settings.db)
        await db_manager.create_all()
        store = PostgresPropertyRepository(db_manager)
    else:
        store = PropertyStore()

    sources = MockPropertySources(
        simulate_latency=settings.sources.simulate_latency and not args.no_latency,
    )
    aggregator = PropertyAggregator(sources=sources, store=store)
    llm_client = None if args.no_summary else build_llm_client(settings)

    try:
        record = await aggregator.aggregate(args.address)
        ai_summary = None
        if not args.no_summary:
            ai_summary = await SummaryGenerator(llm_client).summarize(record)
    finally:
        if llm_client is not None:
            await llm_client.close()
        if db_manager is not None:
            await db_manager.close()

    if args.json:
        brief = PropertyBrief.model_validate({**record.model_dump(), "ai_summary": ai_summary})
        print(brief.model_dump_json(by_alias=True, exclude_none=True, indent=2))
        return

    print(build_context(record))
    if ai_summary:
        print("SUMMARY:")
        print(ai_summary)


if __name__ == "__main__":
    asyncio.run(main())
