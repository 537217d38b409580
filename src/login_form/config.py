"""
Configuration management for the login client.

This module handles configuration from multiple sources with the following
precedence (highest to lowest):

1. Command-line arguments (--server, --timeout, --token-path, --log-level)
2. Environment variables (LOGIN_FORM_SERVER_URL, LOGIN_FORM_TIMEOUT, ...)
3. Default values

The configuration is immutable once created, ensuring consistent behavior
throughout the application lifecycle.

Example:
    # Create config from CLI args
    config = Config.from_args(["--server", "http://localhost:8000"])

    # Access configuration
    print(config.server_url)  # "http://localhost:8000"
    print(config.timeout)     # 30.0 (default)
"""

from __future__ import annotations

import argparse
import os
from collections.abc import Sequence
from dataclasses import dataclass, field
from pathlib import Path

# =============================================================================
# DEFAULT CONFIGURATION VALUES
# =============================================================================

DEFAULT_SERVER_URL = "http://localhost:8000"

# Default HTTP request timeout in seconds. The form itself never times out;
# this is the only bound on how long a submit can stay in the loading state.
DEFAULT_TIMEOUT = 30.0

DEFAULT_LOGIN_PATH = "/login"

# Where the session token is persisted after a successful login.
DEFAULT_TOKEN_PATH = Path.home() / ".config" / "login-form" / "storage.json"

DEFAULT_LOG_LEVEL = "WARNING"

LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")

ENV_SERVER_URL = "LOGIN_FORM_SERVER_URL"
ENV_TIMEOUT = "LOGIN_FORM_TIMEOUT"
ENV_TOKEN_PATH = "LOGIN_FORM_TOKEN_PATH"
ENV_LOG_LEVEL = "LOGIN_FORM_LOG_LEVEL"


# =============================================================================
# CONFIGURATION DATACLASS
# =============================================================================


@dataclass(frozen=True)
class Config:
    """
    Immutable configuration container for the login client.

    Attributes:
        server_url: Base URL of the authentication API. No trailing slash.
        timeout: HTTP request timeout in seconds.
        login_path: Path of the login endpoint, relative to server_url.
        token_path: JSON file the access token is stored in.
        log_level: Name of the root logging level.

    Example:
        config = Config(server_url="http://localhost:8000", timeout=30.0)
    """

    server_url: str
    timeout: float
    login_path: str = DEFAULT_LOGIN_PATH
    token_path: Path = field(default=DEFAULT_TOKEN_PATH)
    log_level: str = DEFAULT_LOG_LEVEL

    def __post_init__(self) -> None:
        """
        Validate configuration values after initialization.

        Raises:
            ValueError: If any value is out of range.
        """
        if not self.server_url:
            raise ValueError("server_url cannot be empty")

        if self.timeout <= 0:
            raise ValueError("timeout must be a positive number")

        if not self.login_path.startswith("/"):
            raise ValueError("login_path must start with '/'")

        if self.log_level not in LOG_LEVELS:
            raise ValueError(f"log_level must be one of {', '.join(LOG_LEVELS)}")

    @property
    def signup_url(self) -> str:
        """Where new users are sent to create an account."""
        return f"{self.server_url}/signup"

    @classmethod
    def from_args(cls, args: Sequence[str] | None = None) -> Config:
        """
        Create a Config instance from command-line arguments.

        Unspecified options fall back to environment variables and then to
        the defaults above.

        Args:
            args: Command-line arguments to parse. If None, uses sys.argv[1:].

        Returns:
            Config: A fully populated configuration object.
        """
        parser = argparse.ArgumentParser(
            prog="login-form",
            description="Terminal login form for a token-issuing HTTP API",
            formatter_class=argparse.RawDescriptionHelpFormatter,
            epilog="""
Examples:
  login-form                                   # Authenticate against localhost:8000
  login-form --server https://auth.example.com
  LOGIN_FORM_SERVER_URL=https://auth.example.com login-form

Environment Variables:
  LOGIN_FORM_SERVER_URL   Server URL (default: http://localhost:8000)
  LOGIN_FORM_TIMEOUT      Request timeout in seconds (default: 30)
  LOGIN_FORM_TOKEN_PATH   Token storage file
  LOGIN_FORM_LOG_LEVEL    Logging level (default: WARNING)
            """,
        )

        parser.add_argument(
            "--server",
            "-s",
            dest="server_url",
            default=None,  # None means "check env var, then use default"
            help=f"Authentication server URL (default: {DEFAULT_SERVER_URL})",
        )
        parser.add_argument(
            "--timeout",
            "-t",
            type=float,
            default=None,
            help=f"Request timeout in seconds (default: {DEFAULT_TIMEOUT})",
        )
        parser.add_argument(
            "--login-path",
            default=DEFAULT_LOGIN_PATH,
            help=f"Login endpoint path (default: {DEFAULT_LOGIN_PATH})",
        )
        parser.add_argument(
            "--token-path",
            type=Path,
            default=None,
            help=f"File the access token is stored in (default: {DEFAULT_TOKEN_PATH})",
        )
        parser.add_argument(
            "--log-level",
            type=str.upper,
            choices=LOG_LEVELS,
            default=None,
            help=f"Logging level (default: {DEFAULT_LOG_LEVEL})",
        )

        parsed = parser.parse_args(args)

        # Resolve each value with precedence: CLI > ENV > DEFAULT
        server_url = parsed.server_url or os.environ.get(ENV_SERVER_URL) or DEFAULT_SERVER_URL
        server_url = server_url.rstrip("/")

        if parsed.timeout is not None:
            timeout = parsed.timeout
        elif ENV_TIMEOUT in os.environ:
            timeout = float(os.environ[ENV_TIMEOUT])
        else:
            timeout = DEFAULT_TIMEOUT

        if parsed.token_path is not None:
            token_path = parsed.token_path
        elif ENV_TOKEN_PATH in os.environ:
            token_path = Path(os.environ[ENV_TOKEN_PATH])
        else:
            token_path = DEFAULT_TOKEN_PATH

        log_level = (
            parsed.log_level or os.environ.get(ENV_LOG_LEVEL, "").upper() or DEFAULT_LOG_LEVEL
        )

        return cls(
            server_url=server_url,
            timeout=timeout,
            login_path=parsed.login_path,
            token_path=token_path,
            log_level=log_level,
        )
