"""
Daily news endpoints.

GET /api/news          - today's pool, spends one upstream fetch if quota remains
GET /api/news/refresh  - explicit refresh, same quota; storage errors surface as 503
"""

from fastapi import APIRouter, HTTPException, Query, Request, status

from tenx.api.deps import NewsCache
from tenx.core.config import Settings, get_settings
from tenx.core.exceptions import PersistenceFailure
from tenx.core.logging import get_logger
from tenx.core.security import limiter
from tenx.schemas.schemas import NewsFeedResponse
from tenx.services.news_cache import parse_bookmark_ids

router = APIRouter(prefix="/news", tags=["news"])
logger = get_logger(__name__)

# Bound by create_app to the settings the app was built with.
_limits: dict[str, str] = {}


def configure_limits(settings: Settings) -> None:
    _limits["refresh"] = settings.news_refresh_rate_limit


def _refresh_limit() -> str:
    return _limits.get("refresh") or get_settings().news_refresh_rate_limit


_BOOKMARKED = Query(default=None, description="Comma-separated ids of bookmarked articles")


@router.get("", response_model=NewsFeedResponse)
async def get_news(news_cache: NewsCache, bookmarked: str | None = _BOOKMARKED) -> NewsFeedResponse:
    """Serve today's articles. Always answers, degrading to curated content."""
    try:
        return await news_cache.get_articles(parse_bookmark_ids(bookmarked))
    except Exception as e:
        logger.error("news_serve_failed", error=str(e))
        return news_cache.curated_feed()


@router.get("/refresh", response_model=NewsFeedResponse)
@limiter.limit(_refresh_limit)
async def refresh_news(
    request: Request,
    news_cache: NewsCache,
    bookmarked: str | None = _BOOKMARKED,
) -> NewsFeedResponse:
    """Attempt one more upstream fetch (counts toward the daily cap)."""
    try:
        return await news_cache.refresh(parse_bookmark_ids(bookmarked))
    except PersistenceFailure as e:
        logger.error("news_refresh_persist_failed", error=e.message)
        raise HTTPException(
            status_code=status.HTTP_503_SERVICE_UNAVAILABLE,
            detail="Failed to refresh news",
        ) from e
