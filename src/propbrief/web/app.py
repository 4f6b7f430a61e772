"""FastAPI application for Property Brief.

Provides the property JSON API and health checks, plus serves the
browser-based brief page.
"""

from __future__ import annotations

import logging
from contextlib import asynccontextmanager
from pathlib import Path
from typing import AsyncIterator

from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import HTMLResponse
from fastapi.templating import Jinja2Templates
from pydantic import BaseModel

from propbrief import __version__
from propbrief.aggregation.aggregator import PropertyAggregator
from propbrief.aggregation.store import PropertyStore
from propbrief.core.config import Settings
from propbrief.core.types import HealthStatus
from propbrief.db.engine import DatabaseManager
from propbrief.llm.client import LLMClient, create_llm_client
from propbrief.llm.health import check_llm_health
from propbrief.repositories.postgres.properties import PostgresPropertyRepository
from propbrief.repositories.protocols import PropertyRepository
from propbrief.sources.service import MockPropertySources, PropertySources
from propbrief.summary.context import confidence_percent
from propbrief.summary.generator import SummaryGenerator
from propbrief.web.property_router import router as property_router

logger = logging.getLogger(__name__)

_WEB_DIR = Path(__file__).parent
_TEMPLATES_DIR = _WEB_DIR / "templates"


class HealthResponse(BaseModel):
    """Health check response."""

    status: str
    service: str
    version: str = __version__


def build_llm_client(settings: Settings) -> LLMClient | None:
    """Create the configured LLM client, or None when summaries should
    always use the rule-based fallback."""
    config = settings.llm
    if not config.enabled:
        return None
    if config.provider.lower() == "openai" and not config.api_key:
        logger.warning("No LLM API key configured; summaries will use the fallback")
        return None
    return create_llm_client(config)


# --- Application factory ---


def create_app(
    settings: Settings | None = None,
    sources: PropertySources | None = None,
    store: PropertyRepository | None = None,
    llm_client: LLMClient | None = None,
) -> FastAPI:
    """Create and configure the FastAPI application.

    Uses the factory pattern so tests can create isolated app instances
    with mock dependencies. Clients built here are closed on shutdown;
    injected ones are left to the caller.

    Args:
        settings: Application settings. Defaults to Settings().
        sources: Data sources. Defaults to the simulated sources.
        store: Property store. Defaults to a database repository when
            ``settings.db.database_url`` is set, otherwise in-memory.
        llm_client: Chat-completion client for summaries.

    Returns:
        A configured FastAPI instance.
    """
    if settings is None:
        settings = Settings()

    logging.getLogger("propbrief").setLevel(settings.log_level.upper())

    db_manager: DatabaseManager | None = None
    if store is None:
        if settings.db.database_url:
            db_manager = DatabaseManager.from_config(settings.db)
            store = PostgresPropertyRepository(db_manager)
        else:
            store = PropertyStore()

    owns_llm_client = llm_client is None
    if llm_client is None:
        llm_client = build_llm_client(settings)

    if sources is None:
        sources = MockPropertySources(simulate_latency=settings.sources.simulate_latency)

    @asynccontextmanager
    async def lifespan(app: FastAPI) -> AsyncIterator[None]:
        if db_manager is not None and "sqlite" in str(db_manager.engine.url):
            await db_manager.create_all()
        yield
        if owns_llm_client and llm_client is not None:
            await llm_client.close()
        if db_manager is not None:
            await db_manager.close()

    app = FastAPI(
        title="Property Brief",
        description="Multi-source property data with AI summaries",
        version=__version__,
        lifespan=lifespan,
    )

    app.add_middleware(
        CORSMiddleware,
        allow_origins=["*"],
        allow_methods=["GET"],
        allow_headers=["*"],
    )

    aggregator = PropertyAggregator(sources=sources, store=store)
    summary_generator = SummaryGenerator(llm_client=llm_client)

    # Store on app state for access in route handlers
    app.state.settings = settings
    app.state.property_store = store
    app.state.aggregator = aggregator
    app.state.summary_generator = summary_generator
    app.state.llm_client = llm_client
    if db_manager is not None:
        app.state.db_manager = db_manager

    app.include_router(property_router)

    templates = Jinja2Templates(directory=str(_TEMPLATES_DIR))
    templates.env.filters["percent"] = confidence_percent

    # --- Routes ---

    @app.get("/", response_class=HTMLResponse)
    async def serve_search_page(request: Request) -> HTMLResponse:
        """Serve the address search page."""
        return templates.TemplateResponse(request, "index.html")

    @app.get("/brief", response_class=HTMLResponse)
    async def serve_brief_page(request: Request, address: str | None = None) -> HTMLResponse:
        """Render the property brief for an address."""
        if not address or not address.strip():
            return templates.TemplateResponse(
                request,
                "index.html",
                {"error": "Please enter an address."},
                status_code=400,
            )
        try:
            record = await aggregator.aggregate(address)
            ai_summary = await summary_generator.summarize(record)
        except Exception:
            logger.exception("Error rendering brief for %r", address)
            return templates.TemplateResponse(
                request,
                "index.html",
                {"error": "Failed to fetch property data.", "address": address},
                status_code=500,
            )
        return templates.TemplateResponse(
            request,
            "brief.html",
            {"record": record, "ai_summary": ai_summary, "address": address},
        )

    @app.get("/api/health", response_model=HealthResponse)
    async def health_check() -> HealthResponse:
        """Health check endpoint."""
        return HealthResponse(status="healthy", service="property-brief")

    @app.get("/api/health/llm", response_model=HealthStatus)
    async def llm_health_check() -> HealthStatus:
        """Probe the configured LLM provider."""
        if llm_client is None:
            return HealthStatus(
                service="llm:disabled",
                healthy=False,
                details={"reason": "No LLM client configured; using fallback summaries"},
            )
        return await check_llm_health(llm_client)

    return app
