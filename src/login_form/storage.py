"""
Local persistence for the session token.

The login form only needs ``set(key, value)``. ``JsonFileStorage`` keeps a
small JSON object on disk (one file, many keys) so other tools can read the
token back with ``get``.

A missing file is an empty store. A file that cannot be parsed, or that
holds something other than a JSON object, is logged and treated as empty;
the next ``set`` overwrites it.
"""

from __future__ import annotations

import json
import logging
from pathlib import Path
from typing import Any, Protocol

logger = logging.getLogger(__name__)

# Key the access token is stored under after a successful login.
ACCESS_TOKEN_KEY = "accessToken"


class SetStorage(Protocol):
    """Write-only view of a key/value store."""

    def set(self, key: str, value: str) -> None: ...


class JsonFileStorage:
    """
    Key/value store backed by a single JSON file.

    Attributes:
        path: Location of the JSON file. Parent directories are created on
            first write.
    """

    def __init__(self, path: Path) -> None:
        self.path = path

    def get(self, key: str) -> Any:
        """Return the stored value for *key*, or None."""
        return self._load().get(key)

    def set(self, key: str, value: str) -> None:
        data = self._load()
        data[key] = value
        self.path.parent.mkdir(parents=True, exist_ok=True)
        with self.path.open("w", encoding="utf-8") as handle:
            json.dump(data, handle, indent=2)
        logger.debug("Stored %r in %s", key, self.path)

    def _load(self) -> dict[str, Any]:
        if not self.path.exists():
            return {}

        try:
            with self.path.open("r", encoding="utf-8") as handle:
                raw = json.load(handle)
        except (OSError, ValueError) as exc:
            logger.warning("Failed to read storage file %s: %s", self.path, exc)
            return {}

        if not isinstance(raw, dict):
            logger.warning("Ignoring storage file %s: expected a JSON object", self.path)
            return {}
        return raw
