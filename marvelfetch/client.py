"""Paginated, signed access to the Marvel catalog.

``MarvelClient`` drains a collection endpoint one page at a time. Each page
is requested with a fresh nonce and signature, the first page fixes the
total number of records, and the offset advances by the page's ``count``
until it reaches that total.

Failures are fail-fast: a transport or protocol error aborts the drain and
nothing collected so far is returned.
"""

from __future__ import annotations

import logging
from typing import Any, Dict, Iterator, List, Optional

import requests
from tenacity import (
    Retrying,
    before_sleep_log,
    retry_if_exception,
    stop_after_attempt,
    wait_exponential,
)

from marvelfetch._core._models import Page
from marvelfetch._core._request import RequestConfig, request
from marvelfetch.auth.credentials import ClientConfig, Credentials
from marvelfetch.auth.signer import NonceFactory, signed_params
from marvelfetch.exceptions import ProtocolError, TransportError

logger = logging.getLogger(__name__)

CHARACTERS_ENDPOINT = "/v1/public/characters"
COMICS_ENDPOINT = "/v1/public/comics"

__all__ = ["MarvelClient", "CHARACTERS_ENDPOINT", "COMICS_ENDPOINT"]


def _is_transient(exc: BaseException) -> bool:
    return isinstance(exc, TransportError) and exc.is_transient


class MarvelClient:
    """Client that retrieves complete result sets from the Marvel API.

    Parameters:
        credentials: Public/private key pair used to sign every request.
        config: Gateway, page size, deadline and retry settings.
        session: Optional ``requests.Session`` to reuse. When omitted the
            client creates one and closes it in ``close()``.

    Examples:
        >>> from marvelfetch import Credentials, MarvelClient
        >>> with MarvelClient(Credentials("pub", "priv")) as client:  # doctest: +SKIP
        ...     characters = client.fetch_characters()
    """

    def __init__(
        self,
        credentials: Credentials,
        config: Optional[ClientConfig] = None,
        session: Optional[requests.Session] = None,
    ) -> None:
        self.credentials = credentials
        self.config = config or ClientConfig()
        self._owns_session = session is None
        self.session = session or requests.Session()
        self._nonce = NonceFactory()

    def __repr__(self) -> str:
        return (
            f"MarvelClient(api_prefix={self.config.api_prefix!r}, "
            f"credentials={self.credentials!r})"
        )

    def __enter__(self) -> "MarvelClient":
        return self

    def __exit__(self, *exc_info: Any) -> None:
        self.close()

    def close(self) -> None:
        """Close the underlying session if this client created it."""
        if self._owns_session:
            self.session.close()

    # ------------------------------------------------------------------
    # Public
    # ------------------------------------------------------------------

    def fetch_characters(self) -> List[Dict[str, Any]]:
        """Return every character record."""
        return self.fetch_all(CHARACTERS_ENDPOINT)

    def fetch_comics(self) -> List[Dict[str, Any]]:
        """Return every comic record."""
        return self.fetch_all(COMICS_ENDPOINT)

    def fetch_all(self, endpoint: str) -> List[Dict[str, Any]]:
        """Drain ``endpoint`` and return all of its records.

        Records keep page order, then the server's order within each page.
        Every call starts again from offset 0.

        Parameters:
            endpoint: Path below the API prefix, e.g. ``/v1/public/comics``.

        Returns:
            The concatenated records of every page.

        Raises:
            TransportError: if any page request fails.
            ProtocolError: if any page has a malformed envelope, or an empty
                page arrives before the reported total is reached.
        """
        results: List[Dict[str, Any]] = []
        n_pages = 0
        for page in self.pages(endpoint):
            results.extend(page.results)
            n_pages += 1

        logger.info(
            "Fetched %d records from %s in %d request(s)",
            len(results),
            endpoint,
            n_pages,
        )
        return results

    def pages(self, endpoint: str) -> Iterator[Page]:
        """Iterate through ``endpoint`` page by page.

        Pages are fetched lazily, one request per page.

        Yields:
            ``Page`` objects in offset order.
        """
        offset = 0
        total: Optional[int] = None

        while total is None or offset < total:
            page = self._fetch_page(endpoint, offset)

            if total is None:
                total = page.total
                logger.debug("%s reports %d records", endpoint, total)
            elif page.total != total:
                logger.warning(
                    "%s reported total %d at offset %d; keeping %d from the first page",
                    endpoint,
                    page.total,
                    offset,
                    total,
                )

            if page.count != len(page.results):
                logger.warning(
                    "%s page at offset %d has count %d but %d results",
                    endpoint,
                    offset,
                    page.count,
                    len(page.results),
                )

            if page.count == 0 and offset < total:
                raise ProtocolError(
                    f"{endpoint} returned an empty page at offset {offset} "
                    f"before reaching total {total}"
                )

            yield page
            offset = page.next_offset

    # ------------------------------------------------------------------
    # Private
    # ------------------------------------------------------------------

    def _fetch_page(self, endpoint: str, offset: int) -> Page:
        """Request one page, retrying transient failures if configured."""
        retrying = Retrying(
            reraise=True,
            stop=stop_after_attempt(self.config.max_retries + 1),
            wait=wait_exponential(multiplier=self.config.backoff_factor, max=30),
            retry=retry_if_exception(_is_transient),
            before_sleep=before_sleep_log(logger, logging.WARNING),
        )
        for attempt in retrying:
            with attempt:
                payload = request(self.session, self._request_config(endpoint, offset))
        return Page.from_json(payload, offset=offset)

    def _request_config(self, endpoint: str, offset: int) -> RequestConfig:
        # A fresh nonce per attempt so no signature is ever sent twice.
        params: Dict[str, Any] = signed_params(self.credentials, self._nonce())
        params["limit"] = self.config.page_size
        params["offset"] = offset
        logger.debug(
            "GET %s offset=%d limit=%d", endpoint, offset, self.config.page_size
        )
        return RequestConfig(
            url=f"{self.config.api_prefix}{endpoint}",
            params=params,
            timeout=self.config.timeout,
        )
