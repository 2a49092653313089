"""
Tests for RFC3339Nano parsing and formatting helpers
"""

from datetime import datetime, timedelta, timezone

import pytest

from redis_trigger.coreutils.time import (
    format_duration,
    format_rfc3339_nano,
    parse_rfc3339_nano,
)
from redis_trigger.exceptions import TriggerTimeError


def test_parse_utc_without_fraction():
    parsed = parse_rfc3339_nano("2025-06-01T12:30:45Z")

    assert parsed == datetime(2025, 6, 1, 12, 30, 45, tzinfo=timezone.utc)
    assert parsed.utcoffset() == timedelta(0)


def test_parse_nanoseconds_truncated_to_microseconds():
    parsed = parse_rfc3339_nano("2025-01-02T03:04:05.123456789+09:00")

    assert parsed.microsecond == 123456
    assert parsed.utcoffset() == timedelta(hours=9)


def test_parse_short_fraction_and_negative_offset():
    parsed = parse_rfc3339_nano("2025-01-02T03:04:05.5-05:30")

    assert parsed.microsecond == 500000
    assert parsed.utcoffset() == -timedelta(hours=5, minutes=30)


@pytest.mark.parametrize(
    "value",
    [
        "",
        "2025-01-02 03:04:05Z",
        "2025-01-02T03:04:05",
        "2025-13-02T03:04:05Z",
        "2025-02-30T03:04:05Z",
        "2025-01-02T03:04:05+24:00",
        "2025-01-02T03:04:05.Z",
        "tomorrow",
    ],
)
def test_parse_rejects_invalid_values(value):
    with pytest.raises(TriggerTimeError, match="Failed to parse TRIGGER_TIME"):
        parse_rfc3339_nano(value)


def test_format_trims_fraction_zeros():
    dt = datetime(2025, 6, 1, 12, 0, 0, 120000, tzinfo=timezone.utc)
    assert format_rfc3339_nano(dt) == "2025-06-01T12:00:00.12Z"


def test_format_whole_seconds_with_offset():
    dt = datetime(2025, 6, 1, 21, 0, 0, tzinfo=timezone(timedelta(hours=9)))
    assert format_rfc3339_nano(dt) == "2025-06-01T21:00:00+09:00"


def test_format_parses_back():
    text = "2025-01-02T03:04:05.000001-07:00"
    assert format_rfc3339_nano(parse_rfc3339_nano(text)) == text


@pytest.mark.parametrize(
    "seconds, expected",
    [
        (0, "0s"),
        (0.4, "0s"),
        (45.5, "46s"),
        (125, "2m5s"),
        (3603, "1h0m3s"),
        (90061, "25h1m1s"),
    ],
)
def test_format_duration(seconds, expected):
    assert format_duration(seconds) == expected


def test_parse_comma_separator_and_long_fraction():
    parsed = parse_rfc3339_nano("2025-01-02T03:04:05,1234567890123Z")

    assert parsed.microsecond == 123456
    assert parsed.tzinfo == timezone.utc
