"""General-purpose helpers shared by client and server code."""

from __future__ import annotations

import copy
import math
import uuid
from datetime import date, datetime, timezone
from typing import Any
from zoneinfo import ZoneInfo

from medshared.config import settings
from medshared.services.formats import parse_date

MONTH_NAMES = [
    "January", "February", "March", "April", "May", "June",
    "July", "August", "September", "October", "November", "December",
]


def today() -> date:
    """Current calendar date, in MEDSHARED_TIMEZONE when configured."""
    if settings.TIMEZONE:
        return datetime.now(ZoneInfo(settings.TIMEZONE)).date()
    return date.today()


def generate_uuid() -> str:
    return str(uuid.uuid4())


def format_currency(cents: int | float) -> str:
    """Format minor units as US dollars, e.g. 123456 -> "$1,234.56"."""
    dollars = cents / 100
    sign = "-" if dollars < 0 else ""
    return f"{sign}${abs(dollars):,.2f}"


def dollars_to_cents(dollars: int | float) -> int:
    # half-up, so 0.005 dollars becomes 1 cent rather than banker's rounding
    return math.floor(dollars * 100 + 0.5)


def cents_to_dollars(cents: int | float) -> float:
    return cents / 100


def format_date(date_string: str) -> str:
    """Format ``YYYY-MM-DD`` as e.g. "January 15, 2024"."""
    parsed = parse_date(date_string)
    if parsed is None:
        raise ValueError(f"Invalid date: {date_string!r}")
    return f"{MONTH_NAMES[parsed.month - 1]} {parsed.day}, {parsed.year}"


def get_current_date() -> str:
    return today().isoformat()


def get_current_datetime() -> str:
    now = datetime.now(timezone.utc)
    return now.isoformat(timespec="milliseconds").replace("+00:00", "Z")


def is_past_date(date_string: str, *, reference: date | None = None) -> bool:
    """True when the date falls strictly before today (or ``reference``)."""
    parsed = parse_date(date_string)
    if parsed is None:
        return False
    return parsed < (reference or today())


def is_future_date(date_string: str, *, reference: date | None = None) -> bool:
    """True when the date falls strictly after today (or ``reference``)."""
    parsed = parse_date(date_string)
    if parsed is None:
        return False
    return parsed > (reference or today())


def sanitize_input(value: Any) -> Any:
    if not isinstance(value, str):
        return value
    return value.strip()


def deep_clone(value: Any) -> Any:
    return copy.deepcopy(value)
