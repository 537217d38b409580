"""
Tests for LoginApp and the CLI entry point.
"""

from __future__ import annotations

from unittest.mock import MagicMock, patch

from textual.widgets import Button, Input

from login_form.api.client import HttpxPostClient
from login_form.app import LoginApp, main
from login_form.config import Config
from login_form.presentation.navigation import LANDING_ROUTE, LOGIN_ROUTE, SIGNUP_ROUTE
from login_form.presentation.screen import LoginScreen
from login_form.storage import JsonFileStorage
from tests.constants import TEST_ACCESS_TOKEN, TEST_EMAIL, TEST_PASSWORD
from tests.mocks import AuthenticationSpy, StorageSpy

# =============================================================================
# APP
# =============================================================================


class TestLoginApp:
    """Tests for app wiring and navigation."""

    async def test_default_storage_uses_token_path(self, config: Config):
        app = LoginApp(config)

        assert isinstance(app.storage, JsonFileStorage)
        assert app.storage.path == config.token_path
        assert app.history.location == LOGIN_ROUTE

    async def test_mount_opens_http_client(self, config: Config):
        app = LoginApp(config, storage=StorageSpy())

        async with app.run_test() as pilot:
            assert isinstance(pilot.app.screen, LoginScreen)
            assert isinstance(app.http_client, HttpxPostClient)
            assert app.http_client.http_client is not None

    async def test_injected_authentication_skips_http_client(self, config: Config):
        app = LoginApp(config, authentication=AuthenticationSpy(), storage=StorageSpy())

        async with app.run_test():
            assert app.http_client is None

    async def test_successful_login_exits_to_landing(self, config: Config):
        storage = StorageSpy()
        app = LoginApp(config, authentication=AuthenticationSpy(), storage=storage)

        async with app.run_test() as pilot:
            screen = pilot.app.screen
            screen.query_one("#email", Input).value = TEST_EMAIL
            screen.query_one("#password", Input).value = TEST_PASSWORD
            await pilot.pause()

            screen.query_one("#submit", Button).press()
            await pilot.pause()
            await pilot.app.workers.wait_for_complete()

        assert app.return_value == LANDING_ROUTE
        assert storage.calls == [("accessToken", TEST_ACCESS_TOKEN)]
        assert app.history.entries == [LANDING_ROUTE]

    async def test_signup_exits_to_signup(self, config: Config):
        app = LoginApp(config, authentication=AuthenticationSpy(), storage=StorageSpy())

        async with app.run_test() as pilot:
            pilot.app.screen.query_one("#signup", Button).press()
            await pilot.pause()

        assert app.return_value == SIGNUP_ROUTE
        assert app.history.length == 2


# =============================================================================
# MAIN
# =============================================================================


class TestMain:
    """Tests for the console entry point."""

    def _patched_app(self, route: str | None = None, error: BaseException | None = None):
        app_class = MagicMock()
        if error is not None:
            app_class.return_value.run.side_effect = error
        else:
            app_class.return_value.run.return_value = route
        return patch("login_form.app.LoginApp", app_class)

    def test_landing_reports_token_location(self, tmp_path, capsys):
        token_path = tmp_path / "storage.json"

        with self._patched_app(LANDING_ROUTE), patch("login_form.app.logging.basicConfig"):
            exit_code = main(["--token-path", str(token_path)])

        assert exit_code == 0
        assert str(token_path) in capsys.readouterr().out

    def test_signup_reports_signup_url(self, capsys):
        with self._patched_app(SIGNUP_ROUTE), patch("login_form.app.logging.basicConfig"):
            exit_code = main(["--server", "http://auth.example.com"])

        assert exit_code == 0
        assert "http://auth.example.com/signup" in capsys.readouterr().out

    def test_quit_without_route(self, capsys):
        with self._patched_app(None), patch("login_form.app.logging.basicConfig"):
            exit_code = main([])

        assert exit_code == 0
        assert capsys.readouterr().out == ""

    def test_keyboard_interrupt(self):
        with (
            self._patched_app(error=KeyboardInterrupt()),
            patch("login_form.app.logging.basicConfig"),
        ):
            assert main([]) == 130

    def test_invalid_config_returns_error(self, capsys):
        exit_code = main(["--timeout", "0"])

        assert exit_code == 1
        assert "timeout must be a positive number" in capsys.readouterr().err
