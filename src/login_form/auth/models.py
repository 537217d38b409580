"""Domain models exchanged with the authentication use case."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Protocol


@dataclass(frozen=True)
class AuthenticationParams:
    """Credentials submitted by the login form."""

    email: str
    password: str

    def to_dict(self) -> dict[str, str]:
        return {"email": self.email, "password": self.password}


@dataclass(frozen=True)
class AccountModel:
    """
    Result of a successful authentication.

    Attributes:
        access_token: Session token issued by the server. The login form
            hands it straight to the persistence layer.
    """

    access_token: str


class Authentication(Protocol):
    """
    Authenticates a user against some backend.

    Implementations settle exactly once per call: they return an
    ``AccountModel`` or raise an ``AuthenticationError`` whose message is
    fit to show the user.
    """

    async def auth(self, params: AuthenticationParams) -> AccountModel: ...
