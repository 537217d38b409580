"""
Route names and the navigator interface used by the login form.

The form never decides *how* a route is shown; it only asks a ``Navigator``
to go somewhere. ``MemoryHistory`` is the in-process implementation: it
records visited paths and notifies an optional callback, which is how the
Textual app learns it should leave the login screen.
"""

from __future__ import annotations

from collections.abc import Callable
from typing import Protocol

LANDING_ROUTE = "/"
SIGNUP_ROUTE = "/signup"
LOGIN_ROUTE = "/login"


class Navigator(Protocol):
    """Moves the user to another route."""

    def replace_route(self, path: str) -> None:
        """Go to *path*, replacing the current entry (no way back)."""
        ...

    def push_route(self, path: str) -> None:
        """Go to *path*, keeping the current entry in history."""
        ...


class MemoryHistory:
    """
    In-memory navigation history.

    Attributes:
        entries: Visited paths, oldest first. The last entry is the current
            location.
        on_change: Called with the new path after every navigation.
    """

    def __init__(
        self,
        initial: str = LOGIN_ROUTE,
        on_change: Callable[[str], None] | None = None,
    ) -> None:
        self.entries: list[str] = [initial]
        self.on_change = on_change

    @property
    def location(self) -> str:
        return self.entries[-1]

    @property
    def length(self) -> int:
        return len(self.entries)

    def push_route(self, path: str) -> None:
        self.entries.append(path)
        self._notify(path)

    def replace_route(self, path: str) -> None:
        self.entries[-1] = path
        self._notify(path)

    def _notify(self, path: str) -> None:
        if self.on_change is not None:
            self.on_change(path)
