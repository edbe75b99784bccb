"""Health check endpoint, used by the host's healthcheck and monitoring."""

from __future__ import annotations

import time

from fastapi import APIRouter, Request
from sqlalchemy import text
from sqlalchemy.exc import SQLAlchemyError

from tenx.api.deps import AppSettings
from tenx.schemas.schemas import HealthResponse

router = APIRouter(tags=["health"])


@router.get("/health", response_model=HealthResponse)
async def health_check(request: Request, settings: AppSettings) -> HealthResponse:
    try:
        async with request.app.state.session_factory() as session:
            await session.execute(text("SELECT 1"))
        database = "connected"
    except SQLAlchemyError:
        database = "unavailable"

    return HealthResponse(
        status="healthy" if database == "connected" else "degraded",
        environment=settings.app_env,
        database=database,
        integrations={"gnews": settings.gnews_enabled, "groq": settings.groq_enabled},
        uptime_seconds=int(time.monotonic() - request.app.state.started_at),
    )
