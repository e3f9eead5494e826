# SPDX-FileCopyrightText: 2025 Theori Inc.
# SPDX-License-Identifier: AGPL-3.0-or-later

"""Telemetry record and sample catalog models."""

from dataclasses import dataclass
from typing import Any

# One device reading, as posted to the webhook. Open-ended and nested.
TelemetryRecord = dict[str, Any]


@dataclass(frozen=True)
class SamplePayload:
    name: str
    description: str
    payload: TelemetryRecord
