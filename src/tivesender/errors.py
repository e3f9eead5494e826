# SPDX-FileCopyrightText: 2025 Theori Inc.
# SPDX-License-Identifier: AGPL-3.0-or-later

"""Error taxonomy and exception helpers."""

from __future__ import annotations

import socket
import ssl
from enum import Enum
from typing import Any

import httpx


class ErrorCategory(str, Enum):
    TIMEOUT = "TIMEOUT"
    CONNECTION_ERROR = "CONNECTION_ERROR"
    DNS_ERROR = "DNS_ERROR"
    SSL_ERROR = "SSL_ERROR"
    UNKNOWN_ERROR = "UNKNOWN_ERROR"


class TiveSenderError(Exception):
    """Base class for errors raised at the engine boundary."""


class ConfigurationError(TiveSenderError):
    """Endpoint or credential missing; no request was attempted."""


class PayloadParseError(TiveSenderError):
    """Record text is not valid JSON; no request was attempted."""


class TransportError(TiveSenderError):
    """No response was obtained from the endpoint."""

    def __init__(self, message: str, *, error_type: str | None = None, category: ErrorCategory | None = None):
        super().__init__(message)
        self.message = message
        self.error_type = error_type
        self.category = category or ErrorCategory.UNKNOWN_ERROR


class RemoteRejection(TiveSenderError):
    """A response was obtained but its status indicates failure."""

    def __init__(self, status_code: int, reason_phrase: str = "", body: dict[str, Any] | None = None):
        super().__init__(f"{status_code} {reason_phrase}".strip())
        self.status_code = status_code
        self.reason_phrase = reason_phrase
        self.body = body if body is not None else {}


def categorize_exception(exc: BaseException) -> ErrorCategory:
    """
    Map Python/httpx exceptions to ErrorCategory.
    """
    if isinstance(exc, httpx.TimeoutException):
        return ErrorCategory.TIMEOUT

    if isinstance(exc, (httpx.ConnectError, httpx.RemoteProtocolError, httpx.NetworkError, httpx.ProxyError)):
        cause = exc.__cause__ or exc.__context__
        if isinstance(cause, (socket.gaierror, socket.herror)):
            return ErrorCategory.DNS_ERROR
        if isinstance(cause, (ssl.SSLError, ssl.CertificateError)):
            return ErrorCategory.SSL_ERROR
        return ErrorCategory.CONNECTION_ERROR

    if isinstance(exc, (ssl.SSLError, ssl.CertificateError)):
        return ErrorCategory.SSL_ERROR

    if isinstance(exc, (socket.gaierror, socket.herror)):
        return ErrorCategory.DNS_ERROR

    if isinstance(exc, ConnectionError):
        return ErrorCategory.CONNECTION_ERROR

    return ErrorCategory.UNKNOWN_ERROR


_CONNECTIVITY_PHRASES = ("failed to fetch", "network")
_CONNECTIVITY_CATEGORIES = {
    ErrorCategory.TIMEOUT,
    ErrorCategory.CONNECTION_ERROR,
    ErrorCategory.DNS_ERROR,
}


def is_connectivity_error(message: str | None, category: ErrorCategory | str | None = None) -> bool:
    """
    Best-effort guess whether a transport failure is a connectivity problem.

    Matches browser-style fetch failure phrasing or generic "network" wording in the
    message, or a connectivity-related category. Anything else (TLS failures, malformed
    URLs, unexpected client errors) is not treated as connectivity. This is a heuristic:
    callers must not treat a False result as proof the credential was rejected.
    """
    lowered = (message or "").lower()
    if any(phrase in lowered for phrase in _CONNECTIVITY_PHRASES):
        return True
    if category is None:
        return False
    try:
        return ErrorCategory(category) in _CONNECTIVITY_CATEGORIES
    except ValueError:
        return False


__all__ = [
    "ConfigurationError",
    "ErrorCategory",
    "PayloadParseError",
    "RemoteRejection",
    "TiveSenderError",
    "TransportError",
    "categorize_exception",
    "is_connectivity_error",
]
