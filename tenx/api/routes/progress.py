"""
Streak and activity endpoints, computed from the user's stored documents.

POST /api/streak/{user_id}/recompute - re-evaluate today and persist the streak
POST /api/activity/{user_id}/log     - bump one of today's activity counters
GET  /api/activity/{user_id}/heatmap - month grid of activity levels
"""

from __future__ import annotations

from datetime import UTC, datetime
from typing import TypeVar

from fastapi import APIRouter, Query
from pydantic import BaseModel, ValidationError

from tenx.api.deps import AuthorizedUser, DbSession
from tenx.core.logging import get_logger
from tenx.schemas.schemas import (
    ActivityLogEntry,
    ActivityLogRequest,
    ActivityLogResponse,
    Course,
    HeatmapResponse,
    ResearchPaper,
    StreakResponse,
    StreakState,
    Task,
)
from tenx.services.activity import heatmap_month, log_activity
from tenx.services.documents import DocumentStore
from tenx.services.streak import recompute_streak

router = APIRouter(tags=["progress"])
logger = get_logger(__name__)

M = TypeVar("M", bound=BaseModel)


async def _load_items(
    store: DocumentStore, user_id: str, resource: str, model: type[M]
) -> list[M]:
    """Parse a list document item by item, skipping entries that don't fit the model."""
    raw = await store.get(user_id, resource)
    if not isinstance(raw, list):
        return []

    items: list[M] = []
    for item in raw:
        try:
            items.append(model.model_validate(item))
        except ValidationError:
            logger.warning("document_item_skipped", user_id=user_id, resource=resource)
    return items


@router.post("/streak/{user_id}/recompute", response_model=StreakResponse)
async def recompute(owner: AuthorizedUser, db: DbSession) -> StreakResponse:
    store = DocumentStore(db)
    tasks = await _load_items(store, owner, "tasks", Task)
    courses = await _load_items(store, owner, "courses", Course)
    papers = await _load_items(store, owner, "papers", ResearchPaper)
    news_read = await store.get(owner, "news_read")

    try:
        current = StreakState.model_validate(await store.get(owner, "streak"))
    except ValidationError:
        logger.warning("streak_document_invalid", user_id=owner)
        current = StreakState()

    updated = recompute_streak(
        tasks,
        current,
        courses,
        papers,
        news_read if isinstance(news_read, list) else [],
    )
    await store.set(owner, "streak", updated.model_dump(by_alias=True))
    await db.commit()
    return StreakResponse(streak=updated)


@router.post("/activity/{user_id}/log", response_model=ActivityLogResponse)
async def record_activity(owner: AuthorizedUser, body: ActivityLogRequest, db: DbSession) -> ActivityLogResponse:
    store = DocumentStore(db)
    log = await _load_items(store, owner, "activity", ActivityLogEntry)

    updated = log_activity(log, body.category, body.delta)
    await store.set(owner, "activity", [e.model_dump(by_alias=True) for e in updated])
    await db.commit()
    return ActivityLogResponse(log=updated)


@router.get("/activity/{user_id}/heatmap", response_model=HeatmapResponse)
async def heatmap(
    owner: AuthorizedUser,
    db: DbSession,
    year: int | None = Query(default=None, ge=1970, le=9999),
    month: int | None = Query(default=None, ge=1, le=12),
) -> HeatmapResponse:
    now = datetime.now(UTC)
    year = year or now.year
    month = month or now.month

    store = DocumentStore(db)
    weeks = heatmap_month(
        year,
        month,
        await _load_items(store, owner, "activity", ActivityLogEntry),
        await _load_items(store, owner, "tasks", Task),
        await _load_items(store, owner, "courses", Course),
        await _load_items(store, owner, "papers", ResearchPaper),
    )
    return HeatmapResponse(year=year, month=month, weeks=weeks)
