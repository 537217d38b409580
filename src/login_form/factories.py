"""
Composition root.

Wires the validation rules, the remote authentication use case, storage and
navigation into a ``LoginForm``. Nothing else in the package constructs
concrete collaborators.
"""

from __future__ import annotations

from login_form.api.protocols import HttpPostClient
from login_form.auth.models import Authentication
from login_form.auth.remote import RemoteAuthentication
from login_form.config import Config
from login_form.presentation.form import LoginForm
from login_form.presentation.navigation import Navigator
from login_form.storage import SetStorage
from login_form.validation.builder import ValidationBuilder
from login_form.validation.composite import ValidationComposite

# Shortest password the form will submit.
PASSWORD_MIN_LENGTH = 5


def make_login_validation() -> ValidationComposite:
    """Rules for the login form: a required email and a 5+ char password."""
    return ValidationComposite.build(
        [
            *ValidationBuilder.field("email").required().email().build(),
            *ValidationBuilder.field("password").required().min(PASSWORD_MIN_LENGTH).build(),
        ]
    )


def make_remote_authentication(http_client: HttpPostClient, config: Config) -> RemoteAuthentication:
    return RemoteAuthentication(config.login_path, http_client)


def make_login_form(
    authentication: Authentication,
    storage: SetStorage,
    navigator: Navigator,
) -> LoginForm:
    return LoginForm(
        validation=make_login_validation(),
        authentication=authentication,
        storage=storage,
        navigator=navigator,
    )
