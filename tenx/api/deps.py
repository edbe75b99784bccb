"""
Shared FastAPI dependencies for API routes.
"""

from __future__ import annotations

from typing import Annotated

from fastapi import Depends, HTTPException, Request, Security, status
from fastapi.security import HTTPAuthorizationCredentials, HTTPBearer
from sqlalchemy.ext.asyncio import AsyncSession

from tenx.core.config import Settings
from tenx.core.security import verify_session_token
from tenx.models.database import get_db
from tenx.services.news_cache import DailyNewsCacheManager
from tenx.services.quote_service import QuoteService

_bearer = HTTPBearer(auto_error=False)


def get_app_settings(request: Request) -> Settings:
    return request.app.state.settings


def get_news_cache(request: Request) -> DailyNewsCacheManager:
    return request.app.state.news_cache


def get_quote_service(request: Request) -> QuoteService:
    return request.app.state.quotes


AppSettings = Annotated[Settings, Depends(get_app_settings)]
DbSession = Annotated[AsyncSession, Depends(get_db)]
NewsCache = Annotated[DailyNewsCacheManager, Depends(get_news_cache)]
Quotes = Annotated[QuoteService, Depends(get_quote_service)]


async def verify_user_access(
    user_id: str,
    settings: AppSettings,
    credentials: Annotated[HTTPAuthorizationCredentials | None, Security(_bearer)],
) -> str:
    """The bearer token must belong to the user named in the path."""
    if credentials is None:
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="Missing session token",
        )
    if verify_session_token(credentials.credentials, settings) != user_id:
        raise HTTPException(
            status_code=status.HTTP_403_FORBIDDEN,
            detail="Token does not grant access to this user's data",
        )
    return user_id


AuthorizedUser = Annotated[str, Depends(verify_user_access)]
