# SPDX-FileCopyrightText: 2025 Theori Inc.
# SPDX-License-Identifier: AGPL-3.0-or-later

"""Dispatch outcome model."""

from __future__ import annotations

import uuid
from dataclasses import dataclass, field
from datetime import datetime, timezone
from typing import Any

from ..errors import RemoteRejection, TransportError
from .telemetry import TelemetryRecord


def _utcnow() -> datetime:
    return datetime.now(timezone.utc)


@dataclass(frozen=True)
class DispatchResult:
    """
    Normalized outcome of one submission.

    ``response_body`` holds whatever JSON the endpoint answered with. It is None
    when no response was received at all, or when the body was a JSON null.
    """

    succeeded: bool
    request_body: TelemetryRecord
    response_body: Any = None
    error_message: str | None = None
    status_code: int | None = None
    error: TransportError | RemoteRejection | None = None
    issued_at: datetime = field(default_factory=_utcnow)
    id: str = field(default_factory=lambda: uuid.uuid4().hex)

    def to_dict(self) -> dict[str, Any]:
        data: dict[str, Any] = {
            "id": self.id,
            "succeeded": self.succeeded,
            "issued_at": self.issued_at.isoformat(),
            "status_code": self.status_code,
            "request_body": self.request_body,
        }
        if self.response_body is not None:
            data["response_body"] = self.response_body
        if self.error_message is not None:
            data["error_message"] = self.error_message
        return data
