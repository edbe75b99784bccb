"""
Security utilities: password hashing, signed session tokens, rate limiting.
"""

from __future__ import annotations

import hashlib
import secrets
from datetime import UTC, datetime, timedelta

from fastapi import HTTPException, status
from jose import JWTError, jwt
from slowapi import Limiter
from slowapi.util import get_remote_address

from tenx.core.config import Settings

# ── Rate limiter (attached to FastAPI app in main.py) ───────
limiter = Limiter(key_func=get_remote_address)

_PBKDF2_ITERATIONS = 240_000


# ── Passwords ───────────────────────────────────────────────
def hash_password(password: str, salt: str | None = None) -> str:
    """Salted PBKDF2-SHA256, stored as ``salt$hexdigest``."""
    salt = salt or secrets.token_hex(16)
    digest = hashlib.pbkdf2_hmac(
        "sha256", password.encode("utf-8"), salt.encode("utf-8"), _PBKDF2_ITERATIONS
    )
    return f"{salt}${digest.hex()}"


def verify_password(password: str, stored: str) -> bool:
    salt, _, _digest = stored.partition("$")
    if not salt:
        return False
    return secrets.compare_digest(hash_password(password, salt), stored)


# ── Session tokens ──────────────────────────────────────────
def create_session_token(user_id: int, settings: Settings) -> str:
    """Short-lived JWT identifying the user that owns a set of documents."""
    payload = {
        "sub": str(user_id),
        "exp": datetime.now(UTC) + timedelta(hours=settings.session_token_expiry_hours),
        "jti": secrets.token_hex(8),
    }
    return jwt.encode(payload, settings.jwt_secret, algorithm=settings.jwt_algorithm)


def verify_session_token(token: str, settings: Settings) -> str:
    """Decode a session token and return its subject. Raises 401 on expiry / tampering."""
    try:
        payload = jwt.decode(token, settings.jwt_secret, algorithms=[settings.jwt_algorithm])
    except JWTError as e:
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail=f"Invalid or expired session token: {e}",
        ) from e

    subject = payload.get("sub")
    if not subject:
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="Session token has no subject",
        )
    return subject


def hash_content(content: str) -> str:
    """Deterministic content hash, used for stable article ids."""
    return hashlib.sha256(content.encode("utf-8")).hexdigest()[:16]
