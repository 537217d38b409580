"""
login-form: a terminal login client.

Collects an email and password, validates them field by field as they are
typed, and submits them to a token-issuing HTTP API. On success the access
token is stored locally.

Version Management
------------------
``__version__`` is read from the installed package metadata at import time;
the single source of truth is the ``version`` field in ``pyproject.toml``.
"""

from __future__ import annotations

from importlib.metadata import PackageNotFoundError, version

try:
    __version__: str = version("login-form")
except PackageNotFoundError:
    __version__ = "0.1.0"

from login_form.app import LoginApp, main  # noqa: E402
from login_form.config import Config  # noqa: E402

__all__ = [
    "Config",
    "LoginApp",
    "__version__",
    "main",
]
