"""
Centralised configuration via Pydantic Settings.

Reads from .env in dev and from the process environment in production.
"""

from __future__ import annotations

from functools import lru_cache
from typing import Literal

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    # ── Application ─────────────────────────────────────────
    app_env: Literal["development", "staging", "production"] = "development"
    log_level: str = "INFO"
    cors_origins: list[str] = ["http://localhost:5173", "http://localhost:3000"]

    # ── Database ────────────────────────────────────────────
    database_url: str = "sqlite+aiosqlite:///./tenx.db"

    @field_validator("database_url", mode="before")
    @classmethod
    def assemble_db_url(cls, v: str) -> str:
        """Hosted Postgres hands out postgres:// but SQLAlchemy needs postgresql+asyncpg://."""
        if v.startswith("postgres://"):
            v = v.replace("postgres://", "postgresql+asyncpg://", 1)
        elif v.startswith("postgresql://"):
            v = v.replace("postgresql://", "postgresql+asyncpg://", 1)
        return v

    @property
    def is_sqlite(self) -> bool:
        return "sqlite" in self.database_url

    # ── News: GNews ────────────────────────────────────────
    gnews_api_key: str = ""
    gnews_url: str = "https://gnews.io/api/v4/search"

    # ── Quotes: Groq (OpenAI-compatible) ───────────────────
    groq_api_key: str = ""
    groq_model: str = "llama-3.1-70b-versatile"
    groq_url: str = "https://api.groq.com/openai/v1/chat/completions"

    upstream_timeout_seconds: float = Field(
        default=10.0, description="Per-call budget for every external HTTP request"
    )

    # ── News cache tunables ────────────────────────────────
    news_max_fetches: int = Field(default=10, description="External fetches allowed per UTC day")
    news_min_articles: int = Field(default=15, description="Backfill below this many articles")
    news_target_articles: int = Field(default=20, description="Backfill up to this many articles")

    # ── Security ────────────────────────────────────────────
    jwt_secret: str = "change-me"  # noqa: S105
    jwt_algorithm: str = "HS256"
    session_token_expiry_hours: int = 24 * 7
    rate_limit_enabled: bool = True
    news_refresh_rate_limit: str = "30/minute"

    @property
    def gnews_enabled(self) -> bool:
        return bool(self.gnews_api_key)

    @property
    def groq_enabled(self) -> bool:
        return bool(self.groq_api_key)


@lru_cache
def get_settings() -> Settings:
    return Settings()
