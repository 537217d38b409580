"""
httpx adapter for ``HttpPostClient``.

The adapter owns an ``httpx.AsyncClient`` configured from ``Config`` and
must be used as an async context manager so the connection pool is closed:

    async with HttpxPostClient(config) as client:
        response = await client.post("/login", {"email": "...", "password": "..."})

Every HTTP reply, whatever its status, comes back as an ``HttpResponse``;
interpreting status codes is the use case's job. Only transport failures
(connection refused, timeouts, protocol errors) are raised, as
``UnexpectedError``.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import Any

import httpx

from login_form.api.protocols import HttpResponse
from login_form.auth.errors import UnexpectedError
from login_form.config import Config

logger = logging.getLogger(__name__)


@dataclass
class HttpxPostClient:
    """
    Async JSON POST client backed by httpx.

    Attributes:
        config: Supplies the server base URL and the request timeout.
    """

    config: Config

    _http_client: httpx.AsyncClient | None = field(default=None, repr=False)

    # -------------------------------------------------------------------------
    # Context Manager Protocol
    # -------------------------------------------------------------------------

    async def __aenter__(self) -> HttpxPostClient:
        self._http_client = httpx.AsyncClient(
            base_url=self.config.server_url,
            timeout=self.config.timeout,
        )
        return self

    async def __aexit__(self, exc_type: Any, exc_val: Any, exc_tb: Any) -> None:
        if self._http_client:
            await self._http_client.aclose()
            self._http_client = None

    @property
    def http_client(self) -> httpx.AsyncClient:
        """
        Get the underlying client.

        Raises:
            RuntimeError: If accessed outside of the async context manager.
        """
        if self._http_client is None:
            raise RuntimeError(
                "HttpxPostClient must be used as an async context manager. "
                "Use 'async with HttpxPostClient(config) as client:'"
            )
        return self._http_client

    # -------------------------------------------------------------------------
    # Requests
    # -------------------------------------------------------------------------

    async def post(self, url: str, body: dict[str, Any] | None = None) -> HttpResponse:
        """
        POST *body* as JSON to *url* (relative to the configured server).

        Args:
            url: Path or absolute URL to post to.
            body: JSON-serialisable payload.

        Returns:
            HttpResponse with the status code and the decoded JSON body
            (None if the body is empty or not JSON).

        Raises:
            UnexpectedError: If the request could not be completed.
        """
        try:
            response = await self.http_client.post(url, json=body)
        except httpx.HTTPError as e:
            logger.warning("POST %s failed: %s", url, e)
            raise UnexpectedError(
                detail=f"Cannot connect to server at {self.config.server_url}: {e}",
            ) from e

        # Empty bodies and HTML error pages are not worth failing over here
        try:
            data = response.json()
        except ValueError:
            data = None

        logger.debug("POST %s -> %s", url, response.status_code)
        return HttpResponse(status_code=response.status_code, body=data)
