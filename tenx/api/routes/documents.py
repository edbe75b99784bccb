"""
Generic per-user document routes, one pair per DocumentKind:

GET  /api/{path}/{user_id} - { <data key>: document }
POST /api/{path}/{user_id} - body { <data key>: document } or { data: document }
"""

from __future__ import annotations

from fastapi import APIRouter, HTTPException, status

from tenx.api.deps import AuthorizedUser, DbSession
from tenx.schemas.schemas import DocumentBody, SaveResponse
from tenx.services.documents import DOCUMENT_KINDS, DocumentKind, DocumentStore


def make_document_router(kind: DocumentKind) -> APIRouter:
    router = APIRouter(prefix=f"/{kind.path}", tags=["documents"])

    @router.get("/{user_id}", name=f"read_{kind.path}")
    async def read_document(owner: AuthorizedUser, db: DbSession) -> dict:
        return {kind.data_key: await DocumentStore(db).get(owner, kind.resource)}

    @router.post("/{user_id}", response_model=SaveResponse, name=f"write_{kind.path}")
    async def write_document(owner: AuthorizedUser, body: DocumentBody, db: DbSession) -> SaveResponse:
        if kind.data_key in body:
            data = body[kind.data_key]
        elif "data" in body:
            data = body["data"]
        else:
            raise HTTPException(
                status_code=status.HTTP_422_UNPROCESSABLE_ENTITY,
                detail=f"Body must contain '{kind.data_key}'",
            )

        await DocumentStore(db).set(owner, kind.resource, data)
        await db.commit()
        return SaveResponse(message=f"{kind.data_key} saved")

    return router


routers = [make_document_router(kind) for kind in DOCUMENT_KINDS]
