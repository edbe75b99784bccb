"""Quote endpoints, AI-generated with a static fallback."""

from __future__ import annotations

from fastapi import APIRouter

from tenx.api.deps import Quotes
from tenx.schemas.schemas import Quote, QuoteListResponse
from tenx.services.curated import FALLBACK_QUOTES

router = APIRouter(prefix="/quotes", tags=["quotes"])


@router.get("/random", response_model=Quote)
async def random_quote(quotes: Quotes) -> Quote:
    return await quotes.random_quote()


@router.get("", response_model=QuoteListResponse)
async def list_quotes() -> QuoteListResponse:
    return QuoteListResponse(total=len(FALLBACK_QUOTES), quotes=FALLBACK_QUOTES)
