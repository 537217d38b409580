"""
Authentication use case.

``RemoteAuthentication`` posts credentials to the server through an
``HttpPostClient`` and maps the response to an ``AccountModel`` or to one of
the ``AuthenticationError`` subclasses.
"""

from login_form.auth.errors import AuthenticationError, InvalidCredentialsError, UnexpectedError
from login_form.auth.models import AccountModel, Authentication, AuthenticationParams
from login_form.auth.remote import RemoteAuthentication

__all__ = [
    "AccountModel",
    "Authentication",
    "AuthenticationError",
    "AuthenticationParams",
    "InvalidCredentialsError",
    "RemoteAuthentication",
    "UnexpectedError",
]
