"""Federal Register API client.

The API is public and needs no key. Requests are issued once: failures are
raised to the caller without retry or backoff.
"""

from __future__ import annotations

from typing import Any

import requests

from FederalRegisterMCP.core.constants import BASE_URL
from FederalRegisterMCP.core.query import DocumentQuery
from FederalRegisterMCP.sources.federal_register.query import build_url
from FederalRegisterMCP.utils.log import log

DEFAULT_TIMEOUT = 30.0
USER_AGENT = "federal-register-mcp/1.0"


class FederalRegisterApiError(RuntimeError):
    """Raised when the API or a linked text/HTML resource answers non-success."""

    def __init__(self, message: str, *, status_code: int, url: str) -> None:
        super().__init__(message)
        self.status_code = status_code
        self.url = url


class FederalRegisterApiClient:
    """Low-level HTTP client for the Federal Register REST API v1.

    Responsible only for building URLs, making network requests and decoding
    JSON. Composition of endpoints lives in the service layer.
    """

    def __init__(
        self,
        *,
        base_url: str = BASE_URL,
        timeout: float = DEFAULT_TIMEOUT,
        user_agent: str = USER_AGENT,
    ) -> None:
        """Initialize the client with a reusable HTTP session.

        Args:
            base_url: API root, e.g. ``https://www.federalregister.gov/api/v1``.
            timeout: Per-request timeout in seconds.
            user_agent: ``User-Agent`` header sent with every request.
        """
        self.base_url = base_url.rstrip("/")
        self.timeout = timeout
        self._session = requests.Session()
        self._session.headers.update({"User-Agent": user_agent})

    def close(self) -> None:
        """Close the underlying HTTP session and release pooled connections.
        """
        self._session.close()

    def __enter__(self) -> FederalRegisterApiClient:
        """Enter context manager."""
        return self

    def __exit__(self, exc_type, exc_val, exc_tb) -> None:
        """Exit context manager and close session."""
        self.close()

    def get_json(self, endpoint: str, query: DocumentQuery | None = None) -> Any:
        """GET an API endpoint and decode its JSON body.

        Args:
            endpoint: Path below the base URL, e.g. ``/documents.json``.
            query: Optional filter/paging controls compiled into the query string.

        Returns:
            Decoded JSON payload.

        Raises:
            FederalRegisterApiError: On a non-success HTTP status.
        """
        url = build_url(self.base_url, endpoint, query)
        log.debug("Federal Register request: %s", url)
        response = self._session.get(url, headers={"Accept": "application/json"}, timeout=self.timeout)
        if not response.ok:
            raise FederalRegisterApiError(
                f"Federal Register API error: {response.status_code} {response.reason}",
                status_code=response.status_code,
                url=url,
            )
        log.debug("Federal Register response ok: status=%s bytes=%s", response.status_code, len(response.content))
        return response.json()

    def fetch_text(self, url: str) -> str:
        """Fetch a document's raw text body from its ``raw_text_url``.

        Raises:
            FederalRegisterApiError: On a non-success HTTP status.
        """
        return self._fetch_body(url, kind="text")

    def fetch_html(self, url: str) -> str:
        """Fetch a document's HTML body from its ``body_html_url``.

        Raises:
            FederalRegisterApiError: On a non-success HTTP status.
        """
        return self._fetch_body(url, kind="HTML")

    def _fetch_body(self, url: str, *, kind: str) -> str:
        log.debug("Fetching document %s: %s", kind, url)
        response = self._session.get(url, timeout=self.timeout)
        if not response.ok:
            raise FederalRegisterApiError(
                f"Failed to fetch document {kind}: {response.status_code}",
                status_code=response.status_code,
                url=url,
            )
        return response.text
