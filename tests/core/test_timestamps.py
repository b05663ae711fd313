"""Timestamp parsing: every accepted form becomes aware UTC; bad input becomes None."""

from datetime import date, datetime, timedelta, timezone

import pytest

from debugvault.core.timestamps import format_timestamp, parse_timestamp


def test_bare_date_string_is_midnight_utc():
    assert parse_timestamp("2024-01-31") == datetime(2024, 1, 31, tzinfo=timezone.utc)


def test_zulu_suffix_parsed():
    assert parse_timestamp("2024-01-31T10:15:00Z") == datetime(
        2024, 1, 31, 10, 15, tzinfo=timezone.utc,
    )


def test_offset_converted_to_utc():
    parsed = parse_timestamp("2024-01-31T10:00:00+02:00")
    assert parsed == datetime(2024, 1, 31, 8, 0, tzinfo=timezone.utc)
    assert parsed.utcoffset() == timedelta(0)


def test_naive_datetime_assumed_utc():
    assert parse_timestamp(datetime(2024, 5, 1, 9)).tzinfo is not None


def test_date_object_accepted():
    assert parse_timestamp(date(2024, 5, 1)) == datetime(2024, 5, 1, tzinfo=timezone.utc)


@pytest.mark.parametrize("value", ["", "   ", "yesterday", "2024-13-01", None, 42])
def test_unparseable_returns_none(value):
    assert parse_timestamp(value) is None


def test_format_timestamp_renders_utc():
    ts = datetime(2024, 1, 2, 3, 4, 5, tzinfo=timezone.utc)
    assert format_timestamp(ts) == "2024-01-02 03:04:05 UTC"
