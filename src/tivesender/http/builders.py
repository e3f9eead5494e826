# SPDX-FileCopyrightText: 2025 Theori Inc.
# SPDX-License-Identifier: AGPL-3.0-or-later

"""Request shapes for the webhook endpoint."""

from __future__ import annotations

import json
from typing import Any

from .models import HttpRequest

JSON_CONTENT_TYPE = "application/json"


def submission_request(endpoint: str, credential: str, record: Any) -> HttpRequest:
    """Authenticated POST carrying one JSON-encoded record."""
    return HttpRequest(
        url=endpoint,
        method="POST",
        headers={
            "Content-Type": JSON_CONTENT_TYPE,
            "Authorization": f"Bearer {credential}",
        },
        body=json.dumps(record),
    )


def reachability_request(endpoint: str) -> HttpRequest:
    """Unauthenticated GET with no body."""
    return HttpRequest(url=endpoint, method="GET", headers={"Content-Type": JSON_CONTENT_TYPE})


__all__ = ["JSON_CONTENT_TYPE", "reachability_request", "submission_request"]
