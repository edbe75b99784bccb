"""
Per-user JSON document store.

Each (user_id, resource) pair maps to one opaque JSON document; writes replace
the whole document (last write wins).
"""

from __future__ import annotations

import copy
import json
from dataclasses import dataclass
from datetime import UTC, datetime
from typing import Any

from sqlalchemy.ext.asyncio import AsyncSession

from tenx.core.logging import get_logger
from tenx.models.models import UserDocumentModel

logger = get_logger(__name__)


@dataclass(frozen=True)
class DocumentKind:
    path: str  # URL segment
    resource: str  # storage key
    data_key: str  # JSON envelope key
    default: Any


DOCUMENT_KINDS: list[DocumentKind] = [
    DocumentKind("tasks", "tasks", "tasks", []),
    DocumentKind("courses", "courses", "courses", []),
    DocumentKind("papers", "papers", "papers", []),
    DocumentKind("sessions", "sessions", "sessions", []),
    DocumentKind("bookmarks", "bookmarks", "bookmarks", []),
    DocumentKind("activity", "activity", "log", []),
    DocumentKind("streak", "streak", "streak", {"count": 0, "lastDate": None}),
    DocumentKind("profile", "profile", "profile", {}),
    DocumentKind("newsread", "news_read", "newsRead", []),
]

KINDS_BY_RESOURCE = {k.resource: k for k in DOCUMENT_KINDS}


class DocumentStore:
    def __init__(self, session: AsyncSession) -> None:
        self.session = session

    async def get(self, user_id: str, resource: str) -> Any:
        """Stored document, or a fresh copy of the resource default."""
        default = KINDS_BY_RESOURCE[resource].default
        row = await self.session.get(UserDocumentModel, (user_id, resource))
        if row is None:
            return copy.deepcopy(default)
        try:
            return json.loads(row.data)
        except ValueError:
            logger.warning("document_corrupt", user_id=user_id, resource=resource)
            return copy.deepcopy(default)

    async def set(self, user_id: str, resource: str, data: Any) -> None:
        await self.session.merge(
            UserDocumentModel(
                user_id=user_id,
                resource=resource,
                data=json.dumps(data),
                updated_at=datetime.now(UTC),
            )
        )
        await self.session.flush()
        logger.debug("document_saved", user_id=user_id, resource=resource)
