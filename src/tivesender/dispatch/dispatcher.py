# SPDX-FileCopyrightText: 2025 Theori Inc.
# SPDX-License-Identifier: AGPL-3.0-or-later

"""Single-attempt submission of one telemetry record."""

from __future__ import annotations

import logging
from collections.abc import Mapping
from typing import Any

from ..errors import (
    ConfigurationError,
    ErrorCategory,
    RemoteRejection,
    TransportError,
    categorize_exception,
)
from ..http.builders import submission_request
from ..http.client import HttpClient
from ..http.models import HttpResponse
from ..models.dispatch import DispatchResult
from ..payloads.synthesizer import parse_record
from .history import History

logger = logging.getLogger(__name__)


def _rejection_message(response: HttpResponse, body: Any) -> str:
    message = body.get("message") if isinstance(body, Mapping) else None
    if message:
        return str(message)
    return f"Error: {response.status_code} {response.reason_phrase}".rstrip()


def result_from_response(response: HttpResponse, record: Any) -> DispatchResult:
    """Reduce a transport outcome to a DispatchResult."""
    if not response.ok:
        message = response.error_message or "Network error"
        try:
            category = ErrorCategory(response.meta.get("error_category", ErrorCategory.UNKNOWN_ERROR))
        except ValueError:
            category = ErrorCategory.UNKNOWN_ERROR
        return DispatchResult(
            succeeded=False,
            request_body=record,
            error_message=message,
            error=TransportError(message, error_type=response.error_type, category=category),
        )

    body = response.json_value()
    if response.is_success:
        return DispatchResult(
            succeeded=True,
            request_body=record,
            response_body=body,
            status_code=response.status_code,
        )
    return DispatchResult(
        succeeded=False,
        request_body=record,
        response_body=body,
        status_code=response.status_code,
        error_message=_rejection_message(response, body),
        error=RemoteRejection(
            response.status_code or 0,
            response.reason_phrase,
            body if isinstance(body, dict) else {},
        ),
    )


class Dispatcher:
    """
    Posts records to the webhook and appends every outcome to ``history``.

    Missing configuration and malformed JSON raise before any I/O. Everything that
    happens after the request is issued, including transport failures, ends up in
    the returned DispatchResult. There are no retries.
    """

    def __init__(self, client: HttpClient, history: History | None = None):
        self.client = client
        self.history = history if history is not None else History()

    async def dispatch(self, endpoint: str | None, credential: str | None, record_text: str) -> DispatchResult:
        if not endpoint or not credential:
            raise ConfigurationError("Please provide both API URL and API Key")
        record = parse_record(record_text)
        return await self._send(endpoint, credential, record)

    async def dispatch_record(self, endpoint: str | None, credential: str | None, record: Any) -> DispatchResult:
        """Like ``dispatch`` for an already-parsed record."""
        if not endpoint or not credential:
            raise ConfigurationError("Please provide both API URL and API Key")
        return await self._send(endpoint, credential, record)

    async def _send(self, endpoint: str, credential: str, record: Any) -> DispatchResult:
        logger.debug("POST %s", endpoint)
        try:
            response = await self.client.request(submission_request(endpoint, credential, record))
        except Exception as exc:  # noqa: BLE001
            response = HttpResponse(
                ok=False,
                url=endpoint,
                error_message=str(exc) or type(exc).__name__,
                error_type=type(exc).__name__,
                meta={"error_category": categorize_exception(exc).value},
            )

        result = result_from_response(response, record)
        if result.succeeded:
            logger.info("Payload accepted by %s (%s)", endpoint, result.status_code)
        else:
            logger.warning("Payload to %s failed: %s", endpoint, result.error_message)
        self.history.append(result)
        return result


__all__ = ["Dispatcher", "result_from_response"]
