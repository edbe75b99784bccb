"""
FastAPI application entry point.

Configures middleware, lifespan events, and mounts all routers.
Run locally: uvicorn tenx.main:app --reload
"""

from __future__ import annotations

import time
from contextlib import asynccontextmanager

from asgi_correlation_id import CorrelationIdMiddleware
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from slowapi import _rate_limit_exceeded_handler
from slowapi.errors import RateLimitExceeded

from tenx.api.routes import auth, documents, health, news, progress, quotes
from tenx.core.config import Settings, get_settings
from tenx.core.logging import get_logger, setup_logging
from tenx.core.security import limiter
from tenx.models.database import build_engine, build_session_factory, init_models
from tenx.services.news_cache import DailyNewsCacheManager, NewsCacheRepository
from tenx.services.news_source import GNewsSource
from tenx.services.quote_service import QuoteService

logger = get_logger(__name__)

VERSION = "1.0.0"


def create_app(settings: Settings | None = None) -> FastAPI:
    settings = settings or get_settings()

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        """Startup / shutdown events."""
        setup_logging(settings)
        engine = build_engine(settings)
        await init_models(engine)
        session_factory = build_session_factory(engine)

        app.state.settings = settings
        app.state.started_at = time.monotonic()
        app.state.session_factory = session_factory
        app.state.news_cache = DailyNewsCacheManager(
            source=GNewsSource(settings),
            repository=NewsCacheRepository(session_factory),
            settings=settings,
        )
        app.state.quotes = QuoteService(settings)

        logger.info(
            "app_starting",
            environment=settings.app_env,
            database=settings.database_url[:30] + "...",
            gnews=settings.gnews_enabled,
            groq=settings.groq_enabled,
        )

        yield

        await engine.dispose()
        logger.info("app_shutting_down")

    app = FastAPI(
        title="TenX Learning Tracker API",
        description="Daily AI/ML news, quotes, streaks and per-user learning documents",
        version=VERSION,
        lifespan=lifespan,
        docs_url="/docs" if settings.app_env != "production" else None,
        redoc_url="/redoc" if settings.app_env != "production" else None,
    )

    # ── Middleware ──────────────────────────────────────────────
    app.add_middleware(CorrelationIdMiddleware)
    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    # ── Rate limiting ──────────────────────────────────────────
    limiter.enabled = settings.rate_limit_enabled
    news.configure_limits(settings)
    app.state.limiter = limiter
    app.add_exception_handler(RateLimitExceeded, _rate_limit_exceeded_handler)

    # ── Routes ─────────────────────────────────────────────────
    app.include_router(health.router, prefix="/api")
    app.include_router(news.router, prefix="/api")
    app.include_router(quotes.router, prefix="/api")
    app.include_router(auth.router, prefix="/api")
    app.include_router(progress.router, prefix="/api")
    for router in documents.routers:
        app.include_router(router, prefix="/api")

    @app.get("/")
    async def root():
        return {
            "service": "TenX Learning Tracker API",
            "version": VERSION,
            "docs": "/docs",
            "health": "/api/health",
        }

    return app


app = create_app()
