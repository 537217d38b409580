"""
Shared pytest fixtures for the login-form test suite.

Provides a test configuration, the collaborator spies from ``tests.mocks``
and a ``LoginForm`` wired to them with the real login validation rules.
"""

from pathlib import Path

import pytest

from login_form.config import Config
from login_form.factories import make_login_validation
from login_form.presentation.form import LoginForm
from tests.mocks import AuthenticationSpy, NavigatorSpy, StorageSpy


@pytest.fixture
def config(tmp_path: Path) -> Config:
    """Create a test configuration that stores tokens under tmp_path."""
    return Config(
        server_url="http://test-server:8000",
        timeout=10.0,
        token_path=tmp_path / "storage.json",
    )


@pytest.fixture
def authentication() -> AuthenticationSpy:
    return AuthenticationSpy()


@pytest.fixture
def storage() -> StorageSpy:
    return StorageSpy()


@pytest.fixture
def navigator() -> NavigatorSpy:
    return NavigatorSpy()


@pytest.fixture
def form(
    authentication: AuthenticationSpy,
    storage: StorageSpy,
    navigator: NavigatorSpy,
) -> LoginForm:
    """A login form using the production validation rules."""
    return LoginForm(
        validation=make_login_validation(),
        authentication=authentication,
        storage=storage,
        navigator=navigator,
    )
