"""
Transport-neutral HTTP types used by the use cases.

The use cases only ever see ``HttpResponse`` values; which library performs
the request is an adapter detail (see ``login_form.api.client``).
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import IntEnum
from typing import Any, Protocol


class HttpStatusCode(IntEnum):
    """Status codes the use cases distinguish."""

    OK = 200
    NO_CONTENT = 204
    BAD_REQUEST = 400
    UNAUTHORIZED = 401
    NOT_FOUND = 404
    SERVER_ERROR = 500


@dataclass(frozen=True)
class HttpResponse:
    """
    A completed HTTP exchange.

    Attributes:
        status_code: Raw status code from the server.
        body: Decoded JSON body, or None when there was none (or it was
            not JSON).
    """

    status_code: int
    body: Any = None


class HttpPostClient(Protocol):
    """Sends a JSON POST and returns whatever the server answered."""

    async def post(self, url: str, body: dict[str, Any] | None = None) -> HttpResponse: ...
