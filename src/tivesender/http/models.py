# SPDX-FileCopyrightText: 2025 Theori Inc.
# SPDX-License-Identifier: AGPL-3.0-or-later

"""HTTP request/response data models used by the probes and the dispatcher."""

from __future__ import annotations

import json
from dataclasses import dataclass, field
from typing import Any

Headers = dict[str, str]


@dataclass
class HttpRequest:
    """Normalized request representation consumed by HttpClient implementations."""

    url: str
    method: str = "GET"
    headers: Headers | None = None
    body: bytes | str | None = None
    timeout: float | None = None


@dataclass
class HttpResponse:
    """
    Normalized HTTP response.

    ``ok`` means a response was received at all; ``is_success`` means its status was 2xx.
    Transport failures come back as ``ok=False`` with ``error_message``/``error_type`` set.
    """

    ok: bool
    status_code: int | None = None
    reason_phrase: str = ""
    headers: Headers = field(default_factory=dict)
    text: str = ""
    content: bytes = b""
    url: str | None = None
    error_message: str | None = None
    error_type: str | None = None
    meta: dict[str, Any] = field(default_factory=dict)

    @property
    def is_success(self) -> bool:
        return self.ok and self.status_code is not None and 200 <= self.status_code < 300

    def json_value(self) -> Any:
        """Parse the body as any JSON value; an empty mapping if it does not parse."""
        if not self.text:
            return {}
        try:
            return json.loads(self.text)
        except ValueError:
            return {}

    def json_body(self) -> dict[str, Any]:
        """Parse the body as a JSON object; anything else yields an empty mapping."""
        data = self.json_value()
        return data if isinstance(data, dict) else {}
