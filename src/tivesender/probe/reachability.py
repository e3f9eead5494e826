# SPDX-FileCopyrightText: 2025 Theori Inc.
# SPDX-License-Identifier: AGPL-3.0-or-later

"""Endpoint reachability probe."""

from __future__ import annotations

import logging

from ..http.builders import reachability_request
from ..http.client import HttpClient
from ..http.models import HttpResponse
from ..models.probe import ProbeResult

logger = logging.getLogger(__name__)


def classify_reachability_response(response: HttpResponse) -> ProbeResult:
    if not response.ok:
        detail = response.error_message or response.error_type or "unknown error"
        return ProbeResult.disconnected(f"Connection failed: {detail}")
    if not response.is_success:
        return ProbeResult.disconnected(f"API returned {response.status_code} {response.reason_phrase}".rstrip())
    service = response.json_body().get("service")
    if service:
        return ProbeResult.connected(f"{service} - Running")
    return ProbeResult.connected("API is running")


async def probe_reachability(client: HttpClient, endpoint: str | None) -> ProbeResult:
    """Issue a side-effect-free GET and report whether the endpoint answers with 2xx."""
    if not endpoint:
        return ProbeResult.disconnected("API URL not set")

    logger.debug("Probing reachability of %s", endpoint)
    response = await client.request(reachability_request(endpoint))
    result = classify_reachability_response(response)
    logger.info("Reachability %s: %s", result.state.value, result.message)
    return result


__all__ = ["classify_reachability_response", "probe_reachability"]
