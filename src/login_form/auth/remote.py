"""
Remote authentication over HTTP.

Posts ``{"email": ..., "password": ...}`` to the login endpoint and maps the
reply:

    200 with an "accessToken"  -> AccountModel
    401                        -> InvalidCredentialsError
    anything else              -> UnexpectedError
"""

from __future__ import annotations

import logging

from login_form.api.protocols import HttpPostClient, HttpStatusCode
from login_form.auth.errors import InvalidCredentialsError, UnexpectedError
from login_form.auth.models import AccountModel, AuthenticationParams

logger = logging.getLogger(__name__)


class RemoteAuthentication:
    """
    ``Authentication`` implementation backed by an ``HttpPostClient``.

    Attributes:
        url: Login endpoint (path relative to the client's base URL, or an
            absolute URL).
        http_client: Transport used for the request.
    """

    def __init__(self, url: str, http_client: HttpPostClient) -> None:
        self.url = url
        self.http_client = http_client

    async def auth(self, params: AuthenticationParams) -> AccountModel:
        response = await self.http_client.post(self.url, params.to_dict())

        if response.status_code == HttpStatusCode.OK:
            body = response.body if isinstance(response.body, dict) else {}
            access_token = body.get("accessToken")
            if not isinstance(access_token, str) or not access_token:
                raise UnexpectedError(detail="Login response did not include an access token")
            return AccountModel(access_token=access_token)

        if response.status_code == HttpStatusCode.UNAUTHORIZED:
            logger.info("Server rejected credentials")
            raise InvalidCredentialsError(detail=f"{self.url} returned 401")

        logger.warning("Unexpected login response status %s", response.status_code)
        raise UnexpectedError(detail=f"{self.url} returned {response.status_code}")
