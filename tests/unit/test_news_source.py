"""Unit tests for the GNews client, driven through httpx.MockTransport."""

from __future__ import annotations

from datetime import UTC, datetime

import httpx
import pytest

from tenx.core.config import Settings
from tenx.core.exceptions import UpstreamUnavailable
from tenx.services.news_source import PLACEHOLDER_IMAGE, GNewsSource, categorize_article

NOW = datetime(2024, 1, 1, 9, 0, tzinfo=UTC)


def _source(handler, api_key: str = "k3y") -> GNewsSource:
    settings = Settings(_env_file=None, gnews_api_key=api_key)
    return GNewsSource(settings, transport=httpx.MockTransport(handler), clock=lambda: NOW)


def _payload(*articles: dict) -> dict:
    return {"totalArticles": len(articles), "articles": list(articles)}


@pytest.mark.asyncio
class TestSearch:
    async def test_maps_articles(self):
        item = {
            "title": "New deep learning model beats benchmarks",
            "description": "A transformer variant",
            "content": "Full text",
            "url": "https://news.example.com/a",
            "image": "https://news.example.com/a.png",
            "publishedAt": "2023-12-31T22:15:00Z",
            "source": {"name": "Example News", "url": "https://news.example.com"},
        }
        source = _source(lambda request: httpx.Response(200, json=_payload(item)))

        [article] = await source.search("deep learning neural network")

        assert article.id.startswith("gnews_")
        assert article.title == item["title"]
        assert article.content == "Full text"
        assert article.source == "Example News"
        assert article.date == "2023-12-31"
        assert article.category == "DL"
        assert article.fetched_at == NOW.isoformat()

    async def test_same_article_gets_same_id(self):
        item = {"title": "Stable", "url": "https://x.example/1", "publishedAt": "2024-01-01T00:00:00Z"}
        source = _source(lambda request: httpx.Response(200, json=_payload(item)))

        first = await source.search("q")
        second = await source.search("q")

        assert first[0].id == second[0].id

    async def test_fills_missing_fields(self):
        item = {"title": "Bare", "description": "Only a description"}
        source = _source(lambda request: httpx.Response(200, json=_payload(item)))

        [article] = await source.search("q")

        assert article.content == "Only a description"
        assert article.image == PLACEHOLDER_IMAGE
        assert article.source == "Unknown"
        assert article.date == "2024-01-01"

    async def test_drops_items_without_title(self):
        payload = _payload({"title": ""}, {"description": "no title"}, "junk", {"title": "Kept"})
        source = _source(lambda request: httpx.Response(200, json=payload))

        articles = await source.search("q")

        assert [a.title for a in articles] == ["Kept"]

    async def test_sends_query_parameters(self):
        seen: list[httpx.Request] = []

        def handler(request: httpx.Request) -> httpx.Response:
            seen.append(request)
            return httpx.Response(200, json=_payload())

        await _source(handler).search("machine learning research")

        params = seen[0].url.params
        assert params["q"] == "machine learning research"
        assert params["lang"] == "en"
        assert params["max"] == "10"
        assert params["sortby"] == "publishedAt"
        assert params["apikey"] == "k3y"

    @pytest.mark.parametrize("status", [401, 429, 500, 503])
    async def test_non_2xx_is_unavailable(self, status):
        source = _source(lambda request: httpx.Response(status, json={"errors": ["nope"]}))

        with pytest.raises(UpstreamUnavailable, match=str(status)):
            await source.search("q")

    async def test_malformed_json_is_unavailable(self):
        source = _source(lambda request: httpx.Response(200, text="<html>oops</html>"))

        with pytest.raises(UpstreamUnavailable):
            await source.search("q")

    async def test_missing_article_list_is_unavailable(self):
        source = _source(lambda request: httpx.Response(200, json={"errors": "quota"}))

        with pytest.raises(UpstreamUnavailable, match="no article list"):
            await source.search("q")

    @pytest.mark.parametrize(
        "item",
        [
            {"title": "x", "description": 5},
            {"title": "x", "publishedAt": 12345},
            {"title": "x", "url": 7},
            {"title": "x", "source": {"name": 5}},
        ],
    )
    async def test_batch_of_badly_typed_items_is_unavailable(self, item):
        source = _source(lambda request: httpx.Response(200, json=_payload(item)))

        with pytest.raises(UpstreamUnavailable, match="no usable articles"):
            await source.search("q")

    async def test_badly_typed_item_is_skipped_next_to_good_ones(self):
        payload = _payload({"title": "Broken", "url": 7}, {"title": "Fine", "url": "https://x.example/f"})
        source = _source(lambda request: httpx.Response(200, json=payload))

        articles = await source.search("q")

        assert [a.title for a in articles] == ["Fine"]

    async def test_timeout_is_unavailable(self):
        def handler(request: httpx.Request) -> httpx.Response:
            raise httpx.ReadTimeout("slow", request=request)

        with pytest.raises(UpstreamUnavailable, match="timed out"):
            await _source(handler).search("q")

    async def test_connection_error_is_unavailable(self):
        def handler(request: httpx.Request) -> httpx.Response:
            raise httpx.ConnectError("refused", request=request)

        with pytest.raises(UpstreamUnavailable):
            await _source(handler).search("q")

    async def test_disabled_without_key(self):
        source = _source(lambda request: httpx.Response(200, json=_payload()), api_key="")

        assert source.enabled is False
        with pytest.raises(UpstreamUnavailable):
            await source.search("q")


class TestCategorize:
    @pytest.mark.parametrize(
        ("text", "category"),
        [
            ("New Transformer architecture", "DL"),
            ("Deep learning for proteins", "DL"),
            ("Pandas 3.0 speeds up data science", "DS"),
            ("Reinforcement learning agents", "ML"),
            ("Machine learning in finance", "ML"),
            ("OpenAI announces new policy", "AI"),
        ],
    )
    def test_keywords(self, text, category):
        assert categorize_article(text) == category
