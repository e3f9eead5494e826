# SPDX-FileCopyrightText: 2025 Theori Inc.
# SPDX-License-Identifier: AGPL-3.0-or-later

"""
Random telemetry synthesis.

A new reading is derived from a template by re-rolling the timestamp, temperature,
humidity, battery and location fields. Every other top-level key of the template is
carried over as-is, and so are the non-coordinate keys of ``Location``.
"""

from __future__ import annotations

import copy
import json
import random
from collections.abc import Mapping
from datetime import datetime, timedelta, timezone
from typing import Any

from ..errors import PayloadParseError
from ..models.telemetry import TelemetryRecord
from .catalog import get_sample_payloads

WINDOW_MS = 24 * 60 * 60 * 1000
BATTERY_ESTIMATIONS = ("N/A", "Days", "Weeks", "Months")
CHARGING_THRESHOLD = 0.8

_EPOCH = datetime(1970, 1, 1, tzinfo=timezone.utc)


def default_template() -> TelemetryRecord:
    return copy.deepcopy(get_sample_payloads()[0].payload)


def epoch_ms_to_iso(epoch_ms: int) -> str:
    """Render epoch milliseconds as ``YYYY-MM-DDTHH:MM:SS.sssZ``."""
    instant = _EPOCH + timedelta(milliseconds=epoch_ms)
    return instant.isoformat(timespec="milliseconds").replace("+00:00", "Z")


def _now_ms(now: datetime | None) -> int:
    now = now or datetime.now(timezone.utc)
    if now.tzinfo is None:
        now = now.replace(tzinfo=timezone.utc)
    return (now - _EPOCH) // timedelta(milliseconds=1)


def synthesize(
    template: Mapping[str, Any] | None = None,
    *,
    rng: random.Random | None = None,
    now: datetime | None = None,
) -> TelemetryRecord:
    """
    Return a fresh randomized reading based on ``template``.

    The template is never modified. Fahrenheit, Kilometers and Miles are emitted as
    null; they are redundant with Celsius and Meters and left to the receiver.
    """
    rng = rng or random.Random()
    base = copy.deepcopy(dict(template)) if template is not None else default_template()

    entry_epoch = _now_ms(now) - rng.randrange(WINDOW_MS)

    location = base.get("Location")
    location = dict(location) if isinstance(location, Mapping) else {}

    record = dict(base)
    record.update(
        {
            "EntryTimeEpoch": entry_epoch,
            "EntryTimeUtc": epoch_ms_to_iso(entry_epoch),
            "Temperature": {
                "Celsius": round(rng.random() * 30 - 10, 2),
                "Fahrenheit": None,
            },
            "Humidity": {
                "Percentage": round(rng.random() * 100, 1),
            },
            "Battery": {
                "Percentage": rng.randrange(100),
                "Estimation": rng.choice(BATTERY_ESTIMATIONS),
                "IsCharging": rng.random() > CHARGING_THRESHOLD,
            },
            "Location": {
                **location,
                "Latitude": rng.random() * 180 - 90,
                "Longitude": rng.random() * 360 - 180,
                "Accuracy": {
                    "Meters": rng.randrange(500),
                    "Kilometers": None,
                    "Miles": None,
                },
            },
        }
    )
    return record


def parse_record(text: str) -> Any:
    try:
        return json.loads(text)
    except ValueError as exc:
        raise PayloadParseError("Invalid JSON payload") from exc


def synthesize_from_text(text: str | None, **kwargs: Any) -> TelemetryRecord:
    """
    Editor entry point: randomize whatever JSON the user currently has.

    Blank text or a JSON value that is not an object falls back to the default
    template. Malformed JSON raises PayloadParseError.
    """
    template: Any = None
    if text and text.strip():
        try:
            template = json.loads(text)
        except ValueError as exc:
            raise PayloadParseError("Invalid JSON in payload editor") from exc
    if not isinstance(template, Mapping):
        template = None
    return synthesize(template, **kwargs)


def format_payload(record: Any) -> str:
    return json.dumps(record, indent=2, ensure_ascii=False)


__all__ = [
    "BATTERY_ESTIMATIONS",
    "default_template",
    "epoch_ms_to_iso",
    "format_payload",
    "parse_record",
    "synthesize",
    "synthesize_from_text",
]
