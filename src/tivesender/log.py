# SPDX-FileCopyrightText: 2025 Theori Inc.
# SPDX-License-Identifier: AGPL-3.0-or-later

"""Logging setup for the sender CLI, with API keys kept out of log output."""

from __future__ import annotations

import logging
import os
import re

DEFAULT_LOG_LEVEL = os.getenv("TIVESENDER_LOG_LEVEL", "WARNING").upper()

# Transport libraries log every request line at INFO/DEBUG.
NOISY_LOGGERS = ("httpx", "httpcore")

_BEARER_RE = re.compile(r"(Bearer\s+)[^\s'\",}]+", re.IGNORECASE)


def redact_credentials(text: str) -> str:
    """Replace the token of every ``Bearer <token>`` occurrence."""
    return _BEARER_RE.sub(r"\1***", text)


class CredentialRedactingFilter(logging.Filter):
    """Rewrites records so bearer tokens never reach a handler."""

    def filter(self, record: logging.LogRecord) -> bool:
        message = record.getMessage()
        redacted = redact_credentials(message)
        if redacted != message:
            record.msg = redacted
            record.args = None
        return True


def setup_logging(level: str | None = None) -> None:
    """Configure root logging for the CLI; transport chatter stays hidden unless DEBUG."""
    effective_level = getattr(logging, (level or DEFAULT_LOG_LEVEL).upper(), logging.WARNING)
    logging.basicConfig(
        level=effective_level,
        format="%(levelname)s %(name)s: %(message)s",
    )
    for handler in logging.getLogger().handlers:
        if not any(isinstance(f, CredentialRedactingFilter) for f in handler.filters):
            handler.addFilter(CredentialRedactingFilter())

    transport_level = logging.DEBUG if effective_level <= logging.DEBUG else logging.WARNING
    for name in NOISY_LOGGERS:
        logging.getLogger(name).setLevel(transport_level)


__all__ = ["CredentialRedactingFilter", "redact_credentials", "setup_logging"]
