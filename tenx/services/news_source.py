"""
GNews search client.

One call = one query = at most 10 articles. Every failure mode (transport,
timeout, non-2xx, unparsable body) surfaces as UpstreamUnavailable so the
cache manager has a single thing to catch. Badly typed items are skipped; a
batch made only of them counts as unparsable.
"""

from __future__ import annotations

from typing import Any

import httpx
from pydantic import ValidationError

from tenx.core.config import Settings
from tenx.core.dates import Clock, date_from_timestamp, utc_now
from tenx.core.exceptions import UpstreamUnavailable
from tenx.core.logging import get_logger
from tenx.core.security import hash_content
from tenx.schemas.schemas import Category, NewsArticle

logger = get_logger(__name__)

PLACEHOLDER_IMAGE = "https://images.unsplash.com/photo-1677442136019-21780ecad995?w=600&h=340&fit=crop"

# Checked in order; first match wins, everything else is "AI".
_CATEGORY_KEYWORDS: list[tuple[Category, tuple[str, ...]]] = [
    ("DL", ("deep learning", "neural net", "transformer", "diffusion", "cnn", "rnn")),
    ("DS", ("data science", "analytics", "dataset", "visualization", "pandas")),
    ("ML", ("machine learning", "reinforcement", "supervised", "federated", "gradient")),
]


def categorize_article(text: str) -> Category:
    lower = text.lower()
    for category, keywords in _CATEGORY_KEYWORDS:
        if any(k in lower for k in keywords):
            return category
    return "AI"


class GNewsSource:
    def __init__(
        self,
        settings: Settings,
        transport: httpx.AsyncBaseTransport | None = None,
        clock: Clock = utc_now,
    ) -> None:
        self.api_key = settings.gnews_api_key
        self.url = settings.gnews_url
        self.timeout = settings.upstream_timeout_seconds
        self._transport = transport
        self._clock = clock

    @property
    def enabled(self) -> bool:
        return bool(self.api_key)

    async def search(self, query: str) -> list[NewsArticle]:
        """Run one search. Raises UpstreamUnavailable on any failure."""
        if not self.enabled:
            raise UpstreamUnavailable("GNews API key not configured")

        params = {
            "q": query,
            "lang": "en",
            "max": 10,
            "sortby": "publishedAt",
            "apikey": self.api_key,
        }
        try:
            async with httpx.AsyncClient(timeout=self.timeout, transport=self._transport) as client:
                resp = await client.get(self.url, params=params)
                resp.raise_for_status()
                data = resp.json()
        except httpx.TimeoutException as e:
            raise UpstreamUnavailable("GNews request timed out", {"query": query}) from e
        except httpx.HTTPStatusError as e:
            raise UpstreamUnavailable(
                f"GNews returned {e.response.status_code}", {"query": query}
            ) from e
        except (httpx.HTTPError, ValueError) as e:
            raise UpstreamUnavailable(f"GNews request failed: {e}", {"query": query}) from e

        raw = data.get("articles") if isinstance(data, dict) else None
        if not isinstance(raw, list):
            raise UpstreamUnavailable("GNews payload has no article list", {"query": query})

        articles: list[NewsArticle] = []
        malformed = 0
        for item in raw:
            try:
                article = self._to_article(item)
            except (ValidationError, TypeError, ValueError) as e:
                malformed += 1
                logger.warning("gnews_item_skipped", query=query, error=str(e))
                continue
            if article is not None:
                articles.append(article)

        if malformed and not articles:
            raise UpstreamUnavailable("GNews payload has no usable articles", {"query": query})

        logger.debug("gnews_search_complete", query=query, returned=len(raw), usable=len(articles))
        return articles

    def _to_article(self, item: Any) -> NewsArticle | None:
        if not isinstance(item, dict) or not item.get("title"):
            return None

        now = self._clock()
        title = str(item["title"])
        description = item.get("description") or ""
        url = item.get("url") or ""
        published_at = item.get("publishedAt") or now.isoformat()
        source = item.get("source")
        source_name = source.get("name") if isinstance(source, dict) else None

        return NewsArticle(
            id=f"gnews_{hash_content(url + title)}",
            title=title,
            description=description,
            content=item.get("content") or description,
            image=item.get("image") or PLACEHOLDER_IMAGE,
            source=source_name or "Unknown",
            url=url,
            published_at=published_at,
            date=date_from_timestamp(published_at, now.date().isoformat()),
            category=categorize_article(f"{title} {description}"),
            fetched_at=now.isoformat(),
        )
