# SPDX-FileCopyrightText: 2025 Theori Inc.
# SPDX-License-Identifier: AGPL-3.0-or-later

"""
TiveSender package entrypoint.

This package exercises a Tive-style webhook ingestion API with synthetic telemetry.
It provides a payload synthesizer, probes that infer endpoint reachability and API
key validity from ordinary webhook responses, and a single-attempt dispatcher.
HTTP behavior is abstracted behind an injectable async client interface, and domain
objects are modeled with typed dataclasses.
"""

from .config import SenderSettings, load_settings
from .dispatch import Dispatcher, History
from .errors import (
    ConfigurationError,
    PayloadParseError,
    RemoteRejection,
    TiveSenderError,
    TransportError,
)
from .http import (
    HttpClient,
    HttpRequest,
    HttpResponse,
    HttpxClient,
    StubHttpClient,
    create_default_http_client,
)
from .log import setup_logging
from .models import (
    CredentialState,
    CredentialStatus,
    DispatchResult,
    ProbeResult,
    ProbeState,
    SamplePayload,
    TelemetryRecord,
)
from .payloads import get_invalid_payloads, get_sample_payloads, synthesize
from .probe import ProbeMonitor, probe_credential, probe_reachability
from .runtime import TiveSender
from .store import ConfigStore
from .version import __version__

__all__ = [
    "ConfigStore",
    "ConfigurationError",
    "CredentialState",
    "CredentialStatus",
    "DispatchResult",
    "Dispatcher",
    "History",
    "HttpClient",
    "HttpRequest",
    "HttpResponse",
    "HttpxClient",
    "PayloadParseError",
    "ProbeMonitor",
    "ProbeResult",
    "ProbeState",
    "RemoteRejection",
    "SamplePayload",
    "SenderSettings",
    "StubHttpClient",
    "TelemetryRecord",
    "TiveSender",
    "TiveSenderError",
    "TransportError",
    "create_default_http_client",
    "get_invalid_payloads",
    "get_sample_payloads",
    "load_settings",
    "probe_credential",
    "probe_reachability",
    "setup_logging",
    "synthesize",
    "__version__",
]
