"""Simple data models shared across the package."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Dict, List, Mapping

from marvelfetch._core._validators import is_count
from marvelfetch.exceptions import ProtocolError


@dataclass(frozen=True)
class Page:
    """One page of a paginated response envelope.

    Attributes:
        total: Number of records available for the whole collection.
        count: Number of records carried by this page.
        results: Records in the order the server returned them.
        offset: Offset this page was requested with.
    """

    total: int
    count: int
    results: List[Dict[str, Any]]
    offset: int = 0

    @classmethod
    def from_json(cls, payload: Any, offset: int = 0) -> "Page":
        """Build a ``Page`` from a decoded response body.

        Raises:
            ProtocolError: if ``data.total``, ``data.count`` or
                ``data.results`` is missing or malformed.
        """
        if not isinstance(payload, Mapping):
            raise ProtocolError("Response body is not a JSON object")

        data = payload.get("data")
        if not isinstance(data, Mapping):
            raise ProtocolError("Response envelope has no 'data' object")

        missing = [key for key in ("total", "count", "results") if key not in data]
        if missing:
            raise ProtocolError(
                f"Response envelope is missing data.{', data.'.join(missing)}"
            )

        total, count, results = data["total"], data["count"], data["results"]
        if not is_count(total):
            raise ProtocolError(f"data.total must be a non-negative integer: {total!r}")
        if not is_count(count):
            raise ProtocolError(f"data.count must be a non-negative integer: {count!r}")
        if not isinstance(results, list):
            raise ProtocolError("data.results must be an array")

        return cls(total=total, count=count, results=results, offset=offset)

    @property
    def next_offset(self) -> int:
        return self.offset + self.count
