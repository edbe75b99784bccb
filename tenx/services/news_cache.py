"""
Daily news cache: one day-scoped pool of articles per process.

Per UTC day the manager may call the news source at most ``news_max_fetches``
times, cycling through ROTATING_QUERIES. New articles are appended only when
their normalized title is not already present. On date rollover everything
except caller-bookmarked articles is dropped, and an under-sized pool is
topped up from the curated list.

All bucket mutation happens under one asyncio.Lock, held across the upstream
call, so two requests can never both pass the quota check for the same slot.
"""

from __future__ import annotations

import asyncio
import json
import random
from collections.abc import Iterable
from dataclasses import dataclass, field
from datetime import UTC, datetime
from typing import Protocol

from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker

from tenx.core.config import Settings
from tenx.core.dates import Clock, utc_now
from tenx.core.exceptions import PersistenceFailure, UpstreamUnavailable
from tenx.core.logging import get_logger
from tenx.models.models import NewsCacheModel
from tenx.schemas.schemas import NewsArticle, NewsFeedResponse
from tenx.services.curated import curated_articles

logger = get_logger(__name__)

# Fetch N of the day uses ROTATING_QUERIES[N % len]; 10 fetches cover 10 topics.
ROTATING_QUERIES = [
    "artificial intelligence breakthrough",
    "machine learning research",
    "deep learning neural network",
    "data science analytics",
    "AI technology innovation",
    "natural language processing",
    "computer vision AI",
    "reinforcement learning robotics",
    "generative AI model",
    "AI ethics regulation",
]


def parse_bookmark_ids(raw: str | None) -> set[str]:
    """``"a, b,,c"`` -> ``{"a", "b", "c"}``. Anything unusable is an empty set."""
    if not raw or not isinstance(raw, str):
        return set()
    return {part.strip() for part in raw.split(",") if part.strip()}


class NewsSource(Protocol):
    @property
    def enabled(self) -> bool: ...

    async def search(self, query: str) -> list[NewsArticle]: ...


@dataclass
class DayNewsBucket:
    date: str | None = None
    articles: list[NewsArticle] = field(default_factory=list)
    fetch_count: int = 0
    bookmarked_ids: set[str] = field(default_factory=set)

    def titles(self) -> set[str]:
        return {a.title_key for a in self.articles}

    def append_unique(self, candidates: Iterable[NewsArticle]) -> int:
        """Append candidates whose title is new (also within the batch). Returns count appended."""
        seen = self.titles()
        appended = 0
        for article in candidates:
            if article.title_key in seen:
                continue
            seen.add(article.title_key)
            self.articles.append(article)
            appended += 1
        return appended


@dataclass(frozen=True)
class PersistedBucket:
    date: str
    articles: list[NewsArticle]
    fetch_count: int


class NewsCacheRepository:
    """Single-row upsert store for restart recovery."""

    ROW_ID = 1

    def __init__(self, session_factory: async_sessionmaker[AsyncSession]) -> None:
        self._session_factory = session_factory

    async def load(self) -> PersistedBucket | None:
        try:
            async with self._session_factory() as session:
                row = await session.get(NewsCacheModel, self.ROW_ID)
        except SQLAlchemyError as e:
            raise PersistenceFailure(f"Could not read news cache: {e}") from e

        if row is None:
            return None
        try:
            articles = [NewsArticle.model_validate(a) for a in json.loads(row.data)]
        except (TypeError, ValueError) as e:
            raise PersistenceFailure(f"Stored news cache is corrupt: {e}") from e
        return PersistedBucket(date=row.cache_date, articles=articles, fetch_count=row.fetch_count or 0)

    async def save(self, bucket: DayNewsBucket) -> None:
        payload = json.dumps([a.model_dump(by_alias=True) for a in bucket.articles])
        try:
            async with self._session_factory() as session:
                await session.merge(
                    NewsCacheModel(
                        id=self.ROW_ID,
                        data=payload,
                        cache_date=bucket.date,
                        fetch_count=bucket.fetch_count,
                        updated_at=datetime.now(UTC),
                    )
                )
                await session.commit()
        except SQLAlchemyError as e:
            raise PersistenceFailure(f"Could not write news cache: {e}") from e


class DailyNewsCacheManager:
    def __init__(
        self,
        source: NewsSource,
        repository: NewsCacheRepository,
        settings: Settings,
        clock: Clock = utc_now,
        rng: random.Random | None = None,
    ) -> None:
        self._source = source
        self._repository = repository
        self._clock = clock
        self._rng = rng or random.Random()
        self._lock = asyncio.Lock()
        self._bucket = DayNewsBucket()

        self.max_fetches = settings.news_max_fetches
        self.min_articles = settings.news_min_articles
        self.target_articles = settings.news_target_articles

    @property
    def bucket(self) -> DayNewsBucket:
        return self._bucket

    async def get_articles(self, bookmarked_ids: Iterable[str] = ()) -> NewsFeedResponse:
        """Serve today's pool, spending one fetch if quota remains. Never raises on storage errors."""
        return await self._serve(set(bookmarked_ids), strict=False)

    async def refresh(self, bookmarked_ids: Iterable[str] = ()) -> NewsFeedResponse:
        """Same as get_articles, but a failed persist raises PersistenceFailure."""
        return await self._serve(set(bookmarked_ids), strict=True)

    def curated_feed(self) -> NewsFeedResponse:
        """Last-resort response: today's pool as it stands, topped up from curated content."""
        now = self._clock()
        today = now.date().isoformat()
        bucket = self._bucket
        current = bucket.date == today

        articles = list(bucket.articles) if current else []
        present = {a.title_key for a in articles}
        extra = [a for a in curated_articles(now) if a.title_key not in present]
        articles.extend(extra[: max(self.target_articles - len(articles), 0)])

        return NewsFeedResponse(
            articles=articles,
            fetch_count=bucket.fetch_count if current else 0,
            max_fetches=self.max_fetches,
            date=today,
            total=len(articles),
        )

    async def _serve(self, bookmarked_ids: set[str], strict: bool) -> NewsFeedResponse:
        async with self._lock:
            now = self._clock()
            today = now.date().isoformat()

            if self._bucket.date != today:
                await self._roll_over(today, bookmarked_ids)

            self._bucket.bookmarked_ids |= bookmarked_ids

            await self._fetch_next()
            self._backfill(now)
            await self._persist(strict)

            bucket = self._bucket
            return NewsFeedResponse(
                articles=list(bucket.articles),
                fetch_count=bucket.fetch_count,
                max_fetches=self.max_fetches,
                date=today,
                total=len(bucket.articles),
            )

    async def _roll_over(self, today: str, bookmarked_ids: set[str]) -> None:
        previous = self._bucket
        try:
            persisted = await self._repository.load()
        except PersistenceFailure as e:
            logger.warning("news_cache_load_failed", error=e.message)
            persisted = None

        if persisted is not None and persisted.date == today:
            self._bucket = DayNewsBucket(
                date=today,
                articles=list(persisted.articles),
                fetch_count=min(persisted.fetch_count, self.max_fetches),
                bookmarked_ids=set(bookmarked_ids),
            )
            logger.info(
                "news_cache_restored",
                date=today,
                articles=len(persisted.articles),
                fetch_count=self._bucket.fetch_count,
            )
            return

        # Fresh process: the persisted bucket from an earlier day is the previous bucket.
        carried_from = previous.articles
        if previous.date is None and persisted is not None:
            carried_from = persisted.articles

        kept = [a for a in carried_from if a.id in bookmarked_ids]
        self._bucket = DayNewsBucket(date=today, articles=kept, bookmarked_ids=set(bookmarked_ids))
        logger.info(
            "news_cache_rolled_over",
            previous_date=previous.date or (persisted.date if persisted else None),
            date=today,
            kept_bookmarked=len(kept),
        )

    async def _fetch_next(self) -> None:
        bucket = self._bucket
        if bucket.fetch_count >= self.max_fetches:
            logger.debug("news_quota_exhausted", date=bucket.date, fetch_count=bucket.fetch_count)
            return
        if not self._source.enabled:
            return

        query = ROTATING_QUERIES[bucket.fetch_count % len(ROTATING_QUERIES)]
        try:
            fetched = await self._source.search(query)
        except UpstreamUnavailable as e:
            logger.warning("news_fetch_failed", query=query, error=e.message)
            return

        appended = bucket.append_unique(fetched)
        bucket.fetch_count += 1
        logger.info(
            "news_fetch_appended",
            query=query,
            returned=len(fetched),
            appended=appended,
            fetch_count=bucket.fetch_count,
        )

    def _backfill(self, now: datetime) -> None:
        bucket = self._bucket
        if len(bucket.articles) >= self.min_articles:
            return

        pool = curated_articles(now)
        self._rng.shuffle(pool)
        present = bucket.titles()
        added = 0
        for article in pool:
            if len(bucket.articles) >= self.target_articles:
                break
            if article.title_key in present:
                continue
            present.add(article.title_key)
            bucket.articles.append(article)
            added += 1

        logger.debug("news_backfilled", added=added, total=len(bucket.articles))

    async def _persist(self, strict: bool) -> None:
        try:
            await self._repository.save(self._bucket)
        except PersistenceFailure as e:
            if strict:
                raise
            logger.warning("news_persist_failed", error=e.message)
