"""Request signing for the Marvel gateway.

Every request carries ``ts``, ``apikey`` and ``hash`` query parameters where
``hash = md5(ts + private_key + public_key)``. The gateway rejects a request
whose hash does not match, so the concatenation order is fixed.
"""

from __future__ import annotations

import hashlib
import threading
import time
from typing import TYPE_CHECKING, Dict, Optional

if TYPE_CHECKING:
    from marvelfetch.auth.credentials import Credentials

__all__ = ["NonceFactory", "sign", "signed_params"]


def sign(nonce: str, private_key: str, public_key: str) -> str:
    """Return the lowercase hex md5 digest of ``nonce + private_key + public_key``.

    Deterministic: equal inputs always give an equal token, so a nonce must
    never be reused by the caller.
    """
    raw = f"{nonce}{private_key}{public_key}"
    return hashlib.md5(raw.encode("utf-8")).hexdigest()


class NonceFactory:
    """Thread-safe source of unique, increasing nonces.

    Values are nanosecond timestamps. When the clock has not moved since the
    previous call the last value is bumped by one instead of being repeated.
    """

    def __init__(self) -> None:
        self._lock = threading.Lock()
        self._last: Optional[int] = None

    def __call__(self) -> str:
        with self._lock:
            now = time.time_ns()
            if self._last is not None and now <= self._last:
                now = self._last + 1
            self._last = now
            return str(now)


def signed_params(credentials: "Credentials", nonce: str) -> Dict[str, str]:
    """Return the authentication query parameters for one request."""
    return {
        "ts": nonce,
        "apikey": credentials.public_key,
        "hash": sign(nonce, credentials.private_key, credentials.public_key),
    }
