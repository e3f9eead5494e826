# SPDX-FileCopyrightText: 2025 Theori Inc.
# SPDX-License-Identifier: AGPL-3.0-or-later

"""Dataclass exports for TiveSender."""

from ..http.models import Headers, HttpRequest, HttpResponse
from .dispatch import DispatchResult
from .probe import CredentialState, CredentialStatus, ProbeResult, ProbeState
from .telemetry import SamplePayload, TelemetryRecord

__all__ = [
    "CredentialState",
    "CredentialStatus",
    "DispatchResult",
    "Headers",
    "HttpRequest",
    "HttpResponse",
    "ProbeResult",
    "ProbeState",
    "SamplePayload",
    "TelemetryRecord",
]
