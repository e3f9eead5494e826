# SPDX-FileCopyrightText: 2025 Theori Inc.
# SPDX-License-Identifier: AGPL-3.0-or-later

"""Persistence of the endpoint URL and API key between sessions."""

from __future__ import annotations

import json
import logging
import os
from dataclasses import dataclass
from pathlib import Path

from .config import DEFAULT_ENDPOINT

logger = logging.getLogger(__name__)

ENDPOINT_KEY = "api_url"
CREDENTIAL_KEY = "api_key"


@dataclass(frozen=True)
class StoredConfig:
    endpoint: str
    credential: str


class ConfigStore:
    """Two string entries in a small JSON file. Only explicit save/clear write to it."""

    def __init__(self, path: str | os.PathLike[str], default_endpoint: str = DEFAULT_ENDPOINT):
        self.path = Path(path).expanduser()
        self.default_endpoint = default_endpoint

    def load(self) -> StoredConfig:
        """Read the stored pair; a missing or unreadable file yields the defaults."""
        if not self.path.exists():
            return StoredConfig(self.default_endpoint, "")
        try:
            data = json.loads(self.path.read_text(encoding="utf-8"))
        except (OSError, ValueError) as exc:
            logger.warning("Ignoring unreadable config file %s: %s", self.path, exc)
            return StoredConfig(self.default_endpoint, "")
        if not isinstance(data, dict):
            return StoredConfig(self.default_endpoint, "")
        endpoint = data.get(ENDPOINT_KEY)
        credential = data.get(CREDENTIAL_KEY)
        return StoredConfig(
            endpoint if isinstance(endpoint, str) and endpoint else self.default_endpoint,
            credential if isinstance(credential, str) else "",
        )

    def save(self, endpoint: str, credential: str) -> StoredConfig:
        stored = StoredConfig(endpoint, credential)
        self._write(stored)
        return stored

    def clear(self) -> StoredConfig:
        """Reset the endpoint to the default and forget the API key."""
        return self.save(self.default_endpoint, "")

    def _write(self, stored: StoredConfig) -> None:
        self.path.parent.mkdir(parents=True, exist_ok=True)
        text = json.dumps({ENDPOINT_KEY: stored.endpoint, CREDENTIAL_KEY: stored.credential}, indent=2)
        # Owner-only from creation; the file holds a bearer token.
        tmp = self.path.with_name(self.path.name + ".tmp")
        tmp.unlink(missing_ok=True)
        fd = os.open(tmp, os.O_WRONLY | os.O_CREAT | os.O_EXCL | os.O_TRUNC, 0o600)
        try:
            with os.fdopen(fd, "w", encoding="utf-8") as handle:
                handle.write(text)
            os.chmod(tmp, 0o600)
            os.replace(tmp, self.path)
        except BaseException:
            tmp.unlink(missing_ok=True)
            raise


__all__ = ["ConfigStore", "StoredConfig"]
