"""Domain exceptions shared by the news and progress services."""

from __future__ import annotations


class TenXError(Exception):
    """Base exception for the service."""

    def __init__(self, message: str, details: dict | None = None) -> None:
        super().__init__(message)
        self.message = message
        self.details = details or {}


class UpstreamUnavailable(TenXError):
    """External source unreachable, timed out, non-2xx or returned garbage."""


class PersistenceFailure(TenXError):
    """Underlying store rejected a read or write."""
