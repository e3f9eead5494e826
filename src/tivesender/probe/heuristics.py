# SPDX-FileCopyrightText: 2025 Theori Inc.
# SPDX-License-Identifier: AGPL-3.0-or-later

"""
Response heuristics for API key validation.

The webhook has no auth-check endpoint and answers both "bad key" and "bad payload"
with overlapping status codes, so a 400 has to be read for an auth-specific signal.
The signal shape below is an assumption about the receiving service's error bodies;
a service with different conventions will be misclassified.
"""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any

from ..errors import is_connectivity_error
from ..http.models import HttpResponse
from ..models.probe import CredentialStatus

# Deliberately incomplete record: carries identifiers only, so it cannot be ingested.
VALIDATION_PROBE_RECORD = {
    "DeviceName": "API_KEY_VALIDATION_TEST",
    "DeviceId": "TEST_VALIDATION_ONLY",
}

UNAUTHORIZED_ERROR_VALUE = "Unauthorized"
UNAUTHORIZED_MESSAGE_PHRASES = ("api key", "unauthorized")
ACCEPTED_STATUSES = frozenset({200, 201})


def has_unauthorized_signal(body: Mapping[str, Any] | None) -> bool:
    """Return True when an error body says the key itself was rejected."""
    if not body:
        return False
    if body.get("error") == UNAUTHORIZED_ERROR_VALUE:
        return True
    message = body.get("message")
    if not isinstance(message, str):
        return False
    lowered = message.lower()
    return any(phrase in lowered for phrase in UNAUTHORIZED_MESSAGE_PHRASES)


def classify_credential_response(response: HttpResponse) -> CredentialStatus:
    """
    Map the validation probe's response to a CredentialStatus.

    Priority order: connectivity failure, other transport failure, 401, 200/201, 400
    (body inspected), anything else.
    """
    if not response.ok:
        detail = response.error_message or response.error_type or "unknown error"
        if is_connectivity_error(detail, response.meta.get("error_category")):
            return CredentialStatus.unknown("Cannot validate - check connection")
        return CredentialStatus.invalid(f"Validation error: {detail}")

    status = response.status_code
    if status == 401:
        return CredentialStatus.invalid("Invalid API key - Authentication failed")
    if status in ACCEPTED_STATUSES:
        return CredentialStatus.valid("API key is valid")
    if status == 400:
        # Got past auth and failed on content unless the body says otherwise.
        if has_unauthorized_signal(response.json_body()):
            return CredentialStatus.invalid("Invalid API key")
        return CredentialStatus.valid("API key is valid")
    return CredentialStatus.invalid(f"Unexpected response: {status}")


__all__ = [
    "ACCEPTED_STATUSES",
    "VALIDATION_PROBE_RECORD",
    "classify_credential_response",
    "has_unauthorized_signal",
]
