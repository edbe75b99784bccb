"""
Quote service: one AI-generated quote per dashboard load, static fallback otherwise.

Talks to Groq's OpenAI-compatible chat completions endpoint over httpx.
"""

from __future__ import annotations

import json
import random

import httpx

from tenx.core.config import Settings
from tenx.core.logging import get_logger
from tenx.schemas.schemas import Quote
from tenx.services.curated import FALLBACK_QUOTES

logger = get_logger(__name__)

_SYSTEM_PROMPT = (
    "You are a motivational AI/ML knowledge assistant. "
    "Return ONLY valid JSON, no markdown, no explanation."
)
_USER_PROMPT = (
    "Generate a unique, inspiring quote or fact about one of these topics: Artificial Intelligence, "
    "Machine Learning, Deep Learning, Data Science, Neural Networks, Computer Vision, NLP, "
    "Reinforcement Learning, or AI Ethics.\n\n"
    "Return EXACTLY this JSON format:\n"
    '{"text": "the quote or fact text here", "author": "Author Name or \'AI/ML Fact\'", '
    '"category": "AI|ML|DL|DS", "type": "quote|fact"}\n\n'
    "Make it thought-provoking, educational, and motivating for an AI/ML learner."
)


class QuoteService:
    def __init__(
        self,
        settings: Settings,
        transport: httpx.AsyncBaseTransport | None = None,
        rng: random.Random | None = None,
    ) -> None:
        self.api_key = settings.groq_api_key
        self.model = settings.groq_model
        self.url = settings.groq_url
        self.timeout = settings.upstream_timeout_seconds
        self._transport = transport
        self._rng = rng or random.Random()

    async def random_quote(self) -> Quote:
        quote = await self._generate()
        if quote is not None:
            return quote
        return self._rng.choice(FALLBACK_QUOTES).model_copy(update={"source": "fallback"})

    async def _generate(self) -> Quote | None:
        if not self.api_key:
            return None

        body = {
            "model": self.model,
            "messages": [
                {"role": "system", "content": _SYSTEM_PROMPT},
                {"role": "user", "content": _USER_PROMPT},
            ],
            "temperature": 0.9,
            "max_tokens": 300,
            "response_format": {"type": "json_object"},
        }
        try:
            async with httpx.AsyncClient(timeout=self.timeout, transport=self._transport) as client:
                resp = await client.post(
                    self.url,
                    headers={"Authorization": f"Bearer {self.api_key}"},
                    json=body,
                )
                resp.raise_for_status()
                content = resp.json()["choices"][0]["message"]["content"]
            parsed = json.loads(content)
        except (httpx.HTTPError, ValueError, KeyError, IndexError, TypeError) as e:
            logger.warning("quote_generation_failed", error=str(e))
            return None

        if not isinstance(parsed, dict) or not parsed.get("text") or not parsed.get("author"):
            logger.warning("quote_generation_incomplete")
            return None

        category = parsed.get("category")
        kind = parsed.get("type")
        return Quote(
            text=str(parsed["text"]),
            author=str(parsed["author"]),
            category=category if category in ("AI", "ML", "DL", "DS") else "AI",
            type=kind if kind in ("quote", "fact") else "quote",
            source="groq_ai",
        )
