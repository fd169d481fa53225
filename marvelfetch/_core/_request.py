"""Core HTTP request wrapper used by the client."""

from __future__ import annotations

import json
import logging
from dataclasses import dataclass, field
from typing import Any, Mapping

import requests

from marvelfetch.exceptions import ProtocolError, TransportError

log = logging.getLogger(__name__)

# Keep error bodies readable in tracebacks.
MAX_BODY_IN_MESSAGE = 200


@dataclass
class RequestConfig:
    """Configuration for a single request."""

    url: str = ""
    params: Mapping[str, Any] = field(default_factory=dict)
    timeout: float = 30


def request(session: requests.Session, config: RequestConfig) -> Any:
    """Perform one GET and return the decoded JSON body.

    No retries happen here; callers decide whether a failure is worth
    another attempt.

    Args:
        session: Session used to send the request.
        config: Fully populated ``RequestConfig`` instance.

    Returns:
        The decoded JSON body.

    Raises:
        TransportError: on connection failure, timeout or non-2xx status.
        ProtocolError: if the body of a successful response is not JSON.
    """
    # requests/urllib3 error text carries the full URL with the signed query
    # string, so only the exception type goes into the message.
    try:
        resp = session.get(config.url, params=config.params, timeout=config.timeout)
    except requests.Timeout as exc:
        raise TransportError(
            f"Request to {config.url} timed out after {config.timeout}s "
            f"({type(exc).__name__})"
        ) from exc
    except requests.RequestException as exc:
        raise TransportError(
            f"Request to {config.url} failed ({type(exc).__name__})"
        ) from exc

    if not resp.ok:
        body = resp.text
        log.debug("Non-success response %s from %s", resp.status_code, config.url)
        raise TransportError(
            f"GET {config.url} returned HTTP {resp.status_code}: "
            f"{body[:MAX_BODY_IN_MESSAGE]}",
            status_code=resp.status_code,
            body=body,
        )

    try:
        return resp.json()
    except (json.JSONDecodeError, ValueError) as exc:
        raise ProtocolError(f"Response from {config.url} is not valid JSON") from exc
