# SPDX-FileCopyrightText: 2025 Theori Inc.
# SPDX-License-Identifier: AGPL-3.0-or-later

"""Configuration helpers for TiveSender."""

import os
from dataclasses import dataclass

from .version import __version__

DEFAULT_USER_AGENT = f"TiveSender/{__version__} (mock Tive webhook sender)"
DEFAULT_ENDPOINT = "http://localhost:3000/api/webhook/tive"
DEFAULT_CONFIG_PATH = os.path.join("~", ".tivesender", "config.json")


def _float_env(name: str, default: float) -> float:
    try:
        value = os.getenv(name)
        return float(value) if value is not None else default
    except ValueError:
        return default


def _int_env(name: str, default: int) -> int:
    try:
        value = os.getenv(name)
        return int(value) if value is not None else default
    except ValueError:
        return default


def _bool_env(name: str, default: bool) -> bool:
    value = os.getenv(name)
    if value is None:
        return default
    return value.strip().lower() in {"1", "true", "yes", "on"}


def _optional_int_env(name: str, default: int | None) -> int | None:
    try:
        value = os.getenv(name)
        if value is None:
            return default
        parsed = int(value)
        return parsed if parsed > 0 else None
    except ValueError:
        return default


@dataclass
class SenderSettings:
    """Transport, probe scheduling and persistence defaults."""

    timeout: float = 10.0
    user_agent: str = DEFAULT_USER_AGENT
    allow_redirects: bool = True
    verify_ssl: bool = True
    max_body_bytes: int = 16 * 1024 * 1024
    debounce_seconds: float = 0.5
    history_limit: int | None = None
    default_endpoint: str = DEFAULT_ENDPOINT
    config_path: str = DEFAULT_CONFIG_PATH

    @classmethod
    def from_env(cls) -> "SenderSettings":
        """Create settings from environment variables (evaluated at call time)."""
        max_body_bytes = _int_env("TIVESENDER_HTTP_MAX_BODY_BYTES", cls.max_body_bytes)
        if max_body_bytes <= 0:
            max_body_bytes = cls.max_body_bytes
        debounce_seconds = _float_env("TIVESENDER_DEBOUNCE_SECONDS", cls.debounce_seconds)
        if debounce_seconds < 0:
            debounce_seconds = cls.debounce_seconds
        return cls(
            timeout=_float_env("TIVESENDER_HTTP_TIMEOUT", cls.timeout),
            user_agent=os.getenv("TIVESENDER_USER_AGENT", cls.user_agent),
            allow_redirects=_bool_env("TIVESENDER_HTTP_REDIRECTS", cls.allow_redirects),
            verify_ssl=_bool_env("TIVESENDER_HTTP_VERIFY_SSL", cls.verify_ssl),
            max_body_bytes=max_body_bytes,
            debounce_seconds=debounce_seconds,
            history_limit=_optional_int_env("TIVESENDER_HISTORY_LIMIT", cls.history_limit),
            default_endpoint=os.getenv("TIVESENDER_DEFAULT_ENDPOINT", cls.default_endpoint),
            config_path=os.getenv("TIVESENDER_CONFIG_PATH", cls.config_path),
        )


def load_settings() -> SenderSettings:
    """Load settings from environment with sensible defaults."""
    return SenderSettings.from_env()
