"""
Main application module for the login client.

This module defines LoginApp, the Textual application hosting the login
screen. It manages:
- The HTTP client lifecycle
- Wiring of the login form (via ``login_form.factories``)
- Navigation: leaving the login screen ends the app, and the route it
  left for is the app's return value

Entry Point:
    The main() function serves as the CLI entry point, configured in
    pyproject.toml as the "login-form" console script.

Example:
    # Run from command line
    login-form --server http://localhost:8000

    # Or programmatically
    from login_form import Config, LoginApp

    route = LoginApp(Config.from_args()).run()
"""

from __future__ import annotations

import logging
import sys
from collections.abc import Sequence

from textual.app import App
from textual.binding import Binding
from textual.logging import TextualHandler

from login_form.api.client import HttpxPostClient
from login_form.auth.models import Authentication
from login_form.config import Config
from login_form.factories import make_login_form, make_remote_authentication
from login_form.presentation.navigation import LANDING_ROUTE, SIGNUP_ROUTE, MemoryHistory
from login_form.presentation.screen import LoginScreen
from login_form.storage import JsonFileStorage, SetStorage

logger = logging.getLogger(__name__)


class LoginApp(App[str]):
    """
    Textual application for signing in.

    Attributes:
        config: Application configuration (server URL, timeout, token path).
        storage: Where the access token is persisted.
        authentication: Authentication collaborator. When not injected, a
            RemoteAuthentication over httpx is created on mount.
        history: Navigation history; the login form navigates through it.

    Lifecycle:
        1. on_mount: Opens the HTTP client, pushes LoginScreen
        2. Login succeeds or the user picks "Create account": the form
           navigates, and the app exits with the target route
        3. on_unmount: Closes the HTTP client
    """

    TITLE = "Login"

    BINDINGS = [
        Binding("ctrl+c", "quit", "Quit", priority=True, show=False),
        Binding("ctrl+q", "quit", "Quit", priority=True, show=False),
    ]

    CSS = """
    Screen {
        background: $surface;
    }
    """

    def __init__(
        self,
        config: Config,
        authentication: Authentication | None = None,
        storage: SetStorage | None = None,
    ) -> None:
        super().__init__()
        self.config = config
        self.authentication = authentication
        self.storage = storage if storage is not None else JsonFileStorage(config.token_path)
        self.history = MemoryHistory(on_change=self.handle_route_change)
        self.http_client: HttpxPostClient | None = None

    async def on_mount(self) -> None:
        if self.authentication is None:
            self.http_client = HttpxPostClient(self.config)
            await self.http_client.__aenter__()
            self.authentication = make_remote_authentication(self.http_client, self.config)

        form = make_login_form(self.authentication, self.storage, self.history)
        await self.push_screen(LoginScreen(form))

    async def on_unmount(self) -> None:
        if self.http_client:
            await self.http_client.__aexit__(None, None, None)
            self.http_client = None

    def handle_route_change(self, path: str) -> None:
        """Leave the app for any route other than the login screen."""
        logger.info("Navigating to %s", path)
        self.exit(path)


def main(args: Sequence[str] | None = None) -> int:
    """
    Main entry point for the login client.

    Args:
        args: Command-line arguments. If None, uses sys.argv[1:].

    Returns:
        Exit code (0 for success, non-zero for errors).
    """
    try:
        config = Config.from_args(args)

        logging.basicConfig(level=config.log_level, handlers=[TextualHandler()])

        route = LoginApp(config).run()

        if route == LANDING_ROUTE:
            print(f"Signed in. Access token stored in {config.token_path}")
        elif route == SIGNUP_ROUTE:
            print(f"Create an account at {config.signup_url}")

        return 0

    except KeyboardInterrupt:
        return 130

    except Exception as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1


if __name__ == "__main__":
    sys.exit(main())
