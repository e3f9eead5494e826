# SPDX-FileCopyrightText: 2025 Theori Inc.
# SPDX-License-Identifier: AGPL-3.0-or-later

"""API key validation probe."""

from __future__ import annotations

import logging

from ..http.builders import submission_request
from ..http.client import HttpClient
from ..models.probe import CredentialState, CredentialStatus
from .heuristics import VALIDATION_PROBE_RECORD, classify_credential_response

logger = logging.getLogger(__name__)


async def probe_credential(client: HttpClient, endpoint: str | None, credential: str | None) -> CredentialStatus:
    """
    Infer API key validity from one authenticated submission of an unusable record.

    The verdict is best-effort: see ``classify_credential_response`` for the rules and
    their assumptions about the receiving service.
    """
    if not endpoint or not credential:
        return CredentialStatus.unknown("API Key not provided")

    logger.debug("Validating API key against %s", endpoint)
    response = await client.request(submission_request(endpoint, credential, VALIDATION_PROBE_RECORD))
    status = classify_credential_response(response)
    if status.state is CredentialState.INVALID:
        logger.warning("API key check against %s: %s", endpoint, status.message)
    else:
        logger.info("API key check against %s: %s", endpoint, status.message)
    return status


__all__ = ["probe_credential"]
