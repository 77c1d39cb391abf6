"""Tests for the general-purpose helpers."""

import re
from datetime import date

import pytest

from medshared.utils.common import (
    cents_to_dollars,
    deep_clone,
    dollars_to_cents,
    format_currency,
    format_date,
    generate_uuid,
    get_current_date,
    get_current_datetime,
    is_future_date,
    is_past_date,
    sanitize_input,
)


def test_generate_uuid_is_v4_and_unique():
    value = generate_uuid()
    assert re.fullmatch(r"[0-9a-f]{8}-[0-9a-f]{4}-4[0-9a-f]{3}-[89ab][0-9a-f]{3}-[0-9a-f]{12}", value)
    assert generate_uuid() != value


def test_format_currency():
    assert format_currency(1234) == "$12.34"
    assert format_currency(123456789) == "$1,234,567.89"
    assert format_currency(0) == "$0.00"
    assert format_currency(-550) == "-$5.50"


def test_dollar_cent_conversion():
    assert dollars_to_cents(12.34) == 1234
    assert dollars_to_cents(0.125) == 13
    assert dollars_to_cents(19.99) == 1999
    assert cents_to_dollars(1999) == 19.99


def test_format_date():
    assert format_date("2024-01-15") == "January 15, 2024"
    assert format_date("1990-12-01") == "December 1, 1990"


def test_format_date_rejects_malformed_input():
    with pytest.raises(ValueError, match="Invalid date"):
        format_date("2024-02-30")


def test_current_date_and_datetime_shapes():
    assert re.fullmatch(r"\d{4}-\d{2}-\d{2}", get_current_date())
    assert re.fullmatch(r"\d{4}-\d{2}-\d{2}T\d{2}:\d{2}:\d{2}\.\d{3}Z", get_current_datetime())


def test_past_and_future_are_strict():
    reference = date(2024, 6, 15)
    assert is_past_date("2024-06-14", reference=reference)
    assert not is_past_date("2024-06-15", reference=reference)
    assert is_future_date("2024-06-16", reference=reference)
    assert not is_future_date("2024-06-15", reference=reference)
    assert not is_past_date("not-a-date", reference=reference)


def test_sanitize_input():
    assert sanitize_input("  Jo  ") == "Jo"
    assert sanitize_input(42) == 42
    assert sanitize_input(None) is None


def test_deep_clone_is_independent():
    original = {"address": {"city": "Springfield"}, "tags": ["a"]}
    clone = deep_clone(original)
    clone["address"]["city"] = "Shelbyville"
    clone["tags"].append("b")
    assert original == {"address": {"city": "Springfield"}, "tags": ["a"]}


def test_today_honours_configured_timezone(monkeypatch):
    from datetime import datetime
    from zoneinfo import ZoneInfo

    from medshared.config import settings
    from medshared.utils.common import today

    monkeypatch.setattr(settings, "TIMEZONE", "Pacific/Kiritimati")
    assert today() == datetime.now(ZoneInfo("Pacific/Kiritimati")).date()
