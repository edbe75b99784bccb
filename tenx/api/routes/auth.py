"""
Credential endpoints.

POST /api/auth/register - create a user, returns a session token
POST /api/auth/login    - check credentials, returns a session token
"""

from __future__ import annotations

from fastapi import APIRouter, HTTPException, status
from sqlalchemy import select

from tenx.api.deps import AppSettings, DbSession
from tenx.core.logging import get_logger
from tenx.core.security import create_session_token, hash_password, verify_password
from tenx.models.models import UserModel
from tenx.schemas.schemas import AuthResponse, Credentials

router = APIRouter(prefix="/auth", tags=["auth"])
logger = get_logger(__name__)


def _require(body: Credentials) -> str:
    username = body.username.strip()
    if not username or not body.password:
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail="Username and password required",
        )
    return username


@router.post("/register", response_model=AuthResponse, status_code=status.HTTP_201_CREATED)
async def register(body: Credentials, db: DbSession, settings: AppSettings) -> AuthResponse:
    username = _require(body)

    existing = await db.scalar(select(UserModel).where(UserModel.username == username))
    if existing is not None:
        raise HTTPException(status_code=status.HTTP_409_CONFLICT, detail="Username already exists")

    user = UserModel(username=username, password_hash=hash_password(body.password))
    db.add(user)
    await db.commit()

    logger.info("user_registered", user_id=user.id)
    return AuthResponse(
        id=user.id,
        username=user.username,
        token=create_session_token(user.id, settings),
        message="Registration successful",
    )


@router.post("/login", response_model=AuthResponse)
async def login(body: Credentials, db: DbSession, settings: AppSettings) -> AuthResponse:
    username = _require(body)

    user = await db.scalar(select(UserModel).where(UserModel.username == username))
    if user is None or not verify_password(body.password, user.password_hash):
        logger.info("login_rejected", username=username)
        raise HTTPException(status_code=status.HTTP_401_UNAUTHORIZED, detail="Invalid credentials")

    return AuthResponse(
        id=user.id,
        username=user.username,
        token=create_session_token(user.id, settings),
        message="Login successful",
    )
