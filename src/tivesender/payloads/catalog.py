# SPDX-FileCopyrightText: 2025 Theori Inc.
# SPDX-License-Identifier: AGPL-3.0-or-later

"""Static catalog of sample Tive payloads bundled with the package."""

from __future__ import annotations

import json
from functools import lru_cache
from importlib import resources

from ..models.telemetry import SamplePayload

_CATALOG_RESOURCE = "data/sample_payloads.json"


@lru_cache(maxsize=1)
def _load_catalog() -> dict[str, tuple[SamplePayload, ...]]:
    raw = resources.files("tivesender").joinpath(_CATALOG_RESOURCE).read_text(encoding="utf-8")
    data = json.loads(raw)
    return {
        section: tuple(
            SamplePayload(name=item["name"], description=item.get("description", ""), payload=item["payload"])
            for item in data.get(section, [])
        )
        for section in ("payloads", "invalid_payloads")
    }


def get_sample_payloads() -> list[SamplePayload]:
    """Named templates that a receiving service should accept."""
    return list(_load_catalog()["payloads"])


def get_invalid_payloads() -> list[SamplePayload]:
    """Named templates meant for negative testing of the receiving service."""
    return list(_load_catalog()["invalid_payloads"])


def get_sample(name: str, *, include_invalid: bool = False) -> SamplePayload | None:
    """Case-insensitive lookup by sample name."""
    wanted = name.strip().lower()
    candidates = get_sample_payloads()
    if include_invalid:
        candidates += get_invalid_payloads()
    for sample in candidates:
        if sample.name.lower() == wanted:
            return sample
    return None


__all__ = ["get_invalid_payloads", "get_sample", "get_sample_payloads"]
