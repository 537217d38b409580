"""
Authentication failures.

Every failure an ``Authentication`` implementation reports is an
``AuthenticationError``. The login form displays ``str(error)`` verbatim,
so messages here are written for the end user.
"""

from __future__ import annotations

from dataclasses import dataclass


@dataclass
class AuthenticationError(Exception):
    """
    Base class for authentication failures.

    Attributes:
        message: User-facing message.
        detail: Extra context for logs (never displayed).
    """

    message: str = "Authentication failed"
    detail: str = ""

    def __str__(self) -> str:
        return self.message


@dataclass
class InvalidCredentialsError(AuthenticationError):
    """The server rejected the email/password pair (HTTP 401)."""

    message: str = "Invalid credentials"


@dataclass
class UnexpectedError(AuthenticationError):
    """Anything else: server errors, bad responses, unreachable server."""

    message: str = "Something went wrong. Please try again soon."
