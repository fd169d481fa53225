"""Exceptions raised by marvelfetch."""

from __future__ import annotations

from typing import Optional


class MarvelFetchError(Exception):
    """Base class for every error raised by this package."""


class TransportError(MarvelFetchError):
    """Raised when a request fails to produce a successful HTTP response.

    Covers connection failures, expired deadlines and non-success status
    codes. ``status_code`` is ``None`` when no response was received.
    """

    def __init__(
        self, message: str, status_code: Optional[int] = None, body: str = ""
    ):
        super().__init__(message)
        self.status_code = status_code
        self.body = body

    @property
    def is_transient(self) -> bool:
        """True for failures worth another attempt (no response, 429 or 5xx)."""
        return (
            self.status_code is None
            or self.status_code == 429
            or self.status_code >= 500
        )


class ProtocolError(MarvelFetchError):
    """Raised when a response does not honour the expected envelope."""


class LoginStrategyUnavailable(MarvelFetchError):
    """Raised when a credential loading strategy cannot supply keys."""
