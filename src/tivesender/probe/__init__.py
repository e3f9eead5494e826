# SPDX-FileCopyrightText: 2025 Theori Inc.
# SPDX-License-Identifier: AGPL-3.0-or-later

"""Reachability and API key probes, inferred from ordinary webhook requests."""

from .credential import probe_credential
from .debounce import Debouncer
from .heuristics import VALIDATION_PROBE_RECORD, classify_credential_response, has_unauthorized_signal
from .monitor import ProbeMonitor
from .reachability import classify_reachability_response, probe_reachability

__all__ = [
    "Debouncer",
    "ProbeMonitor",
    "VALIDATION_PROBE_RECORD",
    "classify_credential_response",
    "classify_reachability_response",
    "has_unauthorized_signal",
    "probe_credential",
    "probe_reachability",
]
