# SPDX-FileCopyrightText: 2025 Theori Inc.
# SPDX-License-Identifier: AGPL-3.0-or-later

"""Sample catalog and random payload synthesis."""

from .catalog import get_invalid_payloads, get_sample, get_sample_payloads
from .synthesizer import (
    BATTERY_ESTIMATIONS,
    default_template,
    epoch_ms_to_iso,
    format_payload,
    parse_record,
    synthesize,
    synthesize_from_text,
)

__all__ = [
    "BATTERY_ESTIMATIONS",
    "default_template",
    "epoch_ms_to_iso",
    "format_payload",
    "get_invalid_payloads",
    "get_sample",
    "get_sample_payloads",
    "parse_record",
    "synthesize",
    "synthesize_from_text",
]
