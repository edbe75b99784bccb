"""Unit tests for the quote service."""

from __future__ import annotations

import json
import random

import httpx
import pytest

from tenx.core.config import Settings
from tenx.services.curated import FALLBACK_QUOTES
from tenx.services.quote_service import QuoteService


def _completion(content: str) -> dict:
    return {"choices": [{"message": {"role": "assistant", "content": content}}]}


def _service(handler, api_key: str = "groq-key") -> QuoteService:
    settings = Settings(_env_file=None, groq_api_key=api_key)
    return QuoteService(settings, transport=httpx.MockTransport(handler), rng=random.Random(7))


@pytest.mark.asyncio
class TestRandomQuote:
    async def test_generated_quote(self):
        seen: list[httpx.Request] = []

        def handler(request: httpx.Request) -> httpx.Response:
            seen.append(request)
            body = {"text": "Data beats opinions.", "author": "AI/ML Fact", "category": "DS", "type": "fact"}
            return httpx.Response(200, json=_completion(json.dumps(body)))

        quote = await _service(handler).random_quote()

        assert quote.text == "Data beats opinions."
        assert quote.category == "DS"
        assert quote.type == "fact"
        assert quote.source == "groq_ai"
        assert seen[0].headers["Authorization"] == "Bearer groq-key"
        assert json.loads(seen[0].content)["response_format"] == {"type": "json_object"}

    async def test_unknown_category_and_type_are_normalized(self):
        body = {"text": "Keep going.", "author": "Someone", "category": "ROBOTICS", "type": "poem"}
        service = _service(lambda request: httpx.Response(200, json=_completion(json.dumps(body))))

        quote = await service.random_quote()

        assert quote.category == "AI"
        assert quote.type == "quote"

    @pytest.mark.parametrize(
        "response",
        [
            httpx.Response(500, json={"error": "boom"}),
            httpx.Response(200, json=_completion("not json at all")),
            httpx.Response(200, json={"choices": []}),
            httpx.Response(200, json=_completion(json.dumps({"text": "No author"}))),
        ],
    )
    async def test_failures_fall_back(self, response):
        quote = await _service(lambda request: response).random_quote()

        assert quote.source == "fallback"
        assert quote.text in {q.text for q in FALLBACK_QUOTES}

    async def test_no_key_never_calls_upstream(self):
        calls: list[httpx.Request] = []

        def handler(request: httpx.Request) -> httpx.Response:
            calls.append(request)
            return httpx.Response(500)

        quote = await _service(handler, api_key="").random_quote()

        assert calls == []
        assert quote.source == "fallback"
