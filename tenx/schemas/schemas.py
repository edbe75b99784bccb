"""
Pydantic v2 schemas for API request/response validation.

Wire format is camelCase (the frontend's JSON documents), attributes are snake_case.
"""

from __future__ import annotations

from typing import Any, Literal

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel

Category = Literal["AI", "ML", "DL", "DS"]
ActivityCategory = Literal["tasks", "curriculum", "papers", "resources", "articlesRead"]


class CamelModel(BaseModel):
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


def normalize_title(title: str) -> str:
    """Dedup identity of an article."""
    return title.strip().lower()


# ── News ────────────────────────────────────────────────────
class NewsArticle(CamelModel):
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True, frozen=True)

    id: str
    title: str
    description: str = ""
    content: str = ""
    image: str = ""
    source: str = "Unknown"
    url: str = ""
    published_at: str
    date: str
    category: Category = "AI"
    fetched_at: str

    @property
    def title_key(self) -> str:
        return normalize_title(self.title)


class NewsFeedResponse(CamelModel):
    articles: list[NewsArticle]
    fetch_count: int
    max_fetches: int
    date: str
    total: int


# ── Quotes ──────────────────────────────────────────────────
class Quote(BaseModel):
    text: str
    author: str
    category: Category = "AI"
    type: Literal["quote", "fact"] = "quote"
    source: str = "fallback"


class QuoteListResponse(BaseModel):
    total: int
    quotes: list[Quote]


# ── Streak & activity ───────────────────────────────────────
class StreakState(CamelModel):
    count: int = Field(default=0, ge=0)
    last_date: str | None = None


class ActivityLogEntry(CamelModel):
    date: str
    tasks: int = 0
    curriculum: int = 0
    papers: int = 0
    resources: int = 0
    articles_read: int = 0


class ActivityLogRequest(BaseModel):
    category: ActivityCategory
    delta: int = Field(default=1, ge=1)


class StreakResponse(BaseModel):
    streak: StreakState


class ActivityLogResponse(BaseModel):
    log: list[ActivityLogEntry]


class DayActivity(CamelModel):
    total: int = 0
    tasks: int = 0
    curriculum: int = 0
    papers: int = 0
    resources: int = 0
    articles_read: int = 0


class HeatmapCell(CamelModel):
    date: str
    day: int
    level: int
    activity: DayActivity
    is_today: bool = False


class HeatmapResponse(BaseModel):
    year: int
    month: int
    weeks: list[list[HeatmapCell | None]]


# ── Obligation documents (parsed leniently, unknown keys kept) ─
class _Document(CamelModel):
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True, extra="allow")


class Task(_Document):
    id: str | int = ""
    name: str = ""
    date: str | None = None
    completed: bool = False


class Subtopic(_Document):
    id: str | int = ""
    name: str = ""
    date: str | None = None
    completed: bool = False
    completed_date: str | None = None


class Topic(Subtopic):
    subtopics: list[Subtopic] = []


class Course(_Document):
    id: str | int = ""
    name: str = ""
    topics: list[Topic] = []


class ResearchPaper(_Document):
    id: str | int = ""
    title: str = ""
    start_date: str | None = None
    end_date: str | None = None
    last_updated: str | None = None
    completion_percentage: float = 0


# ── Auth ────────────────────────────────────────────────────
class Credentials(BaseModel):
    username: str = ""
    password: str = ""


class AuthResponse(BaseModel):
    id: int
    username: str
    token: str
    message: str


# ── Generic documents ───────────────────────────────────────
class SaveResponse(BaseModel):
    success: bool = True
    message: str


DocumentBody = dict[str, Any]


# ── Health check ────────────────────────────────────────────
class HealthResponse(BaseModel):
    status: str = "healthy"
    version: str = "1.0.0"
    environment: str
    database: str
    integrations: dict[str, bool]
    uptime_seconds: int
