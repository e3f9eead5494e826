# SPDX-FileCopyrightText: 2025 Theori Inc.
# SPDX-License-Identifier: AGPL-3.0-or-later

import copy
import random
from datetime import datetime, timedelta, timezone

import pytest

from tivesender.errors import PayloadParseError
from tivesender.payloads import (
    BATTERY_ESTIMATIONS,
    epoch_ms_to_iso,
    format_payload,
    get_sample_payloads,
    synthesize,
    synthesize_from_text,
)

NOW = datetime(2025, 2, 10, 19, 27, 26, 123000, tzinfo=timezone.utc)
NOW_MS = 1739215646123


def _template():
    return get_sample_payloads()[0].payload


def test_epoch_ms_to_iso_matches_javascript_format():
    assert epoch_ms_to_iso(0) == "1970-01-01T00:00:00.000Z"
    assert epoch_ms_to_iso(NOW_MS) == "2025-02-10T19:27:26.123Z"


def test_entry_time_fields_denote_same_instant():
    rng = random.Random(7)
    for _ in range(200):
        record = synthesize(_template(), rng=rng)
        assert epoch_ms_to_iso(record["EntryTimeEpoch"]) == record["EntryTimeUtc"]
        parsed = datetime.fromisoformat(record["EntryTimeUtc"].replace("Z", "+00:00"))
        assert (parsed - datetime(1970, 1, 1, tzinfo=timezone.utc)) // timedelta(milliseconds=1) == record["EntryTimeEpoch"]


def test_entry_time_falls_in_trailing_24_hours():
    rng = random.Random(11)
    for _ in range(500):
        epoch = synthesize(_template(), rng=rng, now=NOW)["EntryTimeEpoch"]
        assert isinstance(epoch, int)
        assert NOW_MS - 24 * 60 * 60 * 1000 < epoch <= NOW_MS


def test_sampled_fields_stay_in_range():
    rng = random.Random(1234)
    for _ in range(1000):
        record = synthesize(_template(), rng=rng)
        celsius = record["Temperature"]["Celsius"]
        assert -10 <= celsius <= 20
        assert round(celsius, 2) == celsius
        assert record["Temperature"]["Fahrenheit"] is None

        humidity = record["Humidity"]["Percentage"]
        assert 0 <= humidity <= 100
        assert round(humidity, 1) == humidity

        battery = record["Battery"]
        assert type(battery["Percentage"]) is int
        assert 0 <= battery["Percentage"] <= 99
        assert battery["Estimation"] in BATTERY_ESTIMATIONS
        assert isinstance(battery["IsCharging"], bool)

        location = record["Location"]
        assert -90 <= location["Latitude"] <= 90
        assert -180 <= location["Longitude"] <= 180
        assert type(location["Accuracy"]["Meters"]) is int
        assert 0 <= location["Accuracy"]["Meters"] <= 499
        assert location["Accuracy"]["Kilometers"] is None
        assert location["Accuracy"]["Miles"] is None


def test_is_charging_about_one_in_five():
    rng = random.Random(42)
    trials = 10_000
    charging = sum(synthesize({}, rng=rng)["Battery"]["IsCharging"] for _ in range(trials))
    assert 0.17 < charging / trials < 0.23


def test_template_is_not_mutated_and_outputs_are_independent():
    template = copy.deepcopy(_template())
    snapshot = copy.deepcopy(template)

    first = synthesize(template)
    second = synthesize(template)

    assert template == snapshot
    assert first is not second
    first["Cellular"]["Rssi"] = 0
    first["Location"]["FormattedAddress"] = "changed"
    assert second["Cellular"]["Rssi"] == snapshot["Cellular"]["Rssi"]
    assert template == snapshot


def test_untouched_fields_and_location_extras_are_preserved():
    template = {
        "DeviceId": "abc",
        "Light": {"Lux": 3.0},
        "Location": {"FormattedAddress": "Chicago, IL, USA", "LocationMethod": "cell", "Latitude": 1.0},
        "Temperature": {"Celsius": 99, "Fahrenheit": 210, "Probe": "ambient"},
    }
    record = synthesize(template, rng=random.Random(3))

    assert record["DeviceId"] == "abc"
    assert record["Light"] == {"Lux": 3.0}
    assert record["Location"]["FormattedAddress"] == "Chicago, IL, USA"
    assert record["Location"]["LocationMethod"] == "cell"
    assert record["Location"]["Latitude"] != 1.0
    # Sub-structures that are re-rolled are replaced, not merged.
    assert set(record["Temperature"]) == {"Celsius", "Fahrenheit"}


def test_missing_template_uses_first_sample():
    record = synthesize()
    assert record["DeviceId"] == _template()["DeviceId"]
    assert record["Location"]["FormattedAddress"] == _template()["Location"]["FormattedAddress"]


def test_empty_template_is_used_as_is():
    record = synthesize({})
    assert set(record) == {
        "EntryTimeEpoch",
        "EntryTimeUtc",
        "Temperature",
        "Humidity",
        "Battery",
        "Location",
    }
    assert set(record["Location"]) == {"Latitude", "Longitude", "Accuracy"}


def test_synthesize_from_text_boundary():
    assert synthesize_from_text("")["DeviceId"] == _template()["DeviceId"]
    assert synthesize_from_text("   \n")["DeviceId"] == _template()["DeviceId"]
    assert synthesize_from_text("[1, 2, 3]")["DeviceId"] == _template()["DeviceId"]
    assert synthesize_from_text('{"DeviceId": "mine"}')["DeviceId"] == "mine"

    with pytest.raises(PayloadParseError, match="Invalid JSON in payload editor"):
        synthesize_from_text("{not json")


def test_format_payload_uses_two_space_indent():
    assert format_payload({"a": {"b": 1}}) == '{\n  "a": {\n    "b": 1\n  }\n}'
