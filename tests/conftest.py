"""
Shared pytest fixtures for unit and API tests.

Upstream news and storage are replaced by in-memory fakes so the cache manager
can be driven deterministically (fixed clock, seeded shuffle).
"""

from __future__ import annotations

import asyncio
import random
from collections.abc import Callable
from datetime import UTC, datetime, timedelta

import pytest
from fastapi.testclient import TestClient

from tenx.core.config import Settings
from tenx.core.exceptions import PersistenceFailure, UpstreamUnavailable
from tenx.main import create_app
from tenx.schemas.schemas import NewsArticle
from tenx.services.news_cache import DailyNewsCacheManager, DayNewsBucket, PersistedBucket


class FakeClock:
    def __init__(self, start: datetime) -> None:
        self.now = start

    def __call__(self) -> datetime:
        return self.now

    def advance(self, days: int = 1) -> None:
        self.now += timedelta(days=days)


class FakeNewsSource:
    """Returns queued batches in order, then empty lists. Records every query."""

    def __init__(self, batches: list[list[NewsArticle]] | None = None, enabled: bool = True) -> None:
        self.enabled = enabled
        self.batches = list(batches or [])
        self.queries: list[str] = []
        self.fail = False
        self.delay = 0.0

    async def search(self, query: str) -> list[NewsArticle]:
        self.queries.append(query)
        if self.delay:
            await asyncio.sleep(self.delay)
        if self.fail:
            raise UpstreamUnavailable("upstream down")
        return self.batches.pop(0) if self.batches else []


class InMemoryRepository:
    def __init__(self, persisted: PersistedBucket | None = None) -> None:
        self.persisted = persisted
        self.saves = 0
        self.fail_saves = False

    async def load(self) -> PersistedBucket | None:
        return self.persisted

    async def save(self, bucket: DayNewsBucket) -> None:
        if self.fail_saves:
            raise PersistenceFailure("disk full")
        self.saves += 1
        self.persisted = PersistedBucket(
            date=bucket.date, articles=list(bucket.articles), fetch_count=bucket.fetch_count
        )


def make_article(title: str, article_id: str | None = None, day: str = "2024-01-01") -> NewsArticle:
    return NewsArticle(
        id=article_id or f"gnews_{title.strip().lower().replace(' ', '_')}",
        title=title,
        description=f"About {title}",
        content=f"Body of {title}",
        image="https://example.com/img.png",
        source="Example Wire",
        url=f"https://example.com/{title.strip().lower().replace(' ', '-')}",
        published_at=f"{day}T08:00:00Z",
        date=day,
        category="AI",
        fetched_at=f"{day}T09:00:00+00:00",
    )


def make_batch(prefix: str, size: int = 10) -> list[NewsArticle]:
    return [make_article(f"{prefix} story {i}") for i in range(size)]


@pytest.fixture
def clock() -> FakeClock:
    return FakeClock(datetime(2024, 1, 1, 9, 0, tzinfo=UTC))


@pytest.fixture
def make_manager(clock: FakeClock) -> Callable[..., DailyNewsCacheManager]:
    """Build a manager over fakes; keyword overrides go to Settings."""

    def _make(
        source: FakeNewsSource | None = None,
        repository: InMemoryRepository | None = None,
        **overrides,
    ) -> DailyNewsCacheManager:
        return DailyNewsCacheManager(
            source=source or FakeNewsSource(enabled=False),
            repository=repository or InMemoryRepository(),
            settings=Settings(_env_file=None, **overrides),
            clock=clock,
            rng=random.Random(42),
        )

    return _make


@pytest.fixture
def settings(tmp_path) -> Settings:
    return Settings(
        _env_file=None,
        database_url=f"sqlite+aiosqlite:///{tmp_path / 'test.db'}",
        gnews_api_key="",
        groq_api_key="",
        jwt_secret="test-secret",
        rate_limit_enabled=False,
    )


@pytest.fixture
def client(settings: Settings):
    with TestClient(create_app(settings)) as c:
        yield c


def _register(client: TestClient, username: str) -> dict:
    resp = client.post("/api/auth/register", json={"username": username, "password": "s3cret!"})
    assert resp.status_code == 201
    data = resp.json()
    return {
        "id": str(data["id"]),
        "token": data["token"],
        "headers": {"Authorization": f"Bearer {data['token']}"},
    }


@pytest.fixture
def user(client: TestClient) -> dict:
    return _register(client, "ada")


@pytest.fixture
def other_user(client: TestClient) -> dict:
    return _register(client, "grace")


@pytest.fixture
def today() -> str:
    return datetime.now(UTC).date().isoformat()
