"""
Primitive format checkers.

Every predicate is total: it returns ``False`` for ``None``, non-strings and
malformed text instead of raising, so record validators can call them
unconditionally.
"""

from __future__ import annotations

import re
from datetime import date
from typing import Any

EMAIL_PATTERN = re.compile(r"[^\s@]+@[^\s@]+\.[^\s@]+")
PHONE_PATTERN = re.compile(r"\+?1?[0-9]{10,14}")
DATE_PATTERN = re.compile(r"[0-9]{4}-[0-9]{2}-[0-9]{2}")
ZIP_PATTERN = re.compile(r"[0-9]{5}(-[0-9]{4})?")
RX_BIN_PATTERN = re.compile(r"[0-9]{6}")
NPI_PATTERN = re.compile(r"[0-9]{10}")
NDC_PATTERN = re.compile(r"[0-9]{5}-[0-9]{4}-[0-9]{2}")

# 50 states, DC and the five inhabited territories
US_STATE_CODES: frozenset[str] = frozenset(
    [
        "AL", "AK", "AZ", "AR", "CA", "CO", "CT", "DE", "FL", "GA",
        "HI", "ID", "IL", "IN", "IA", "KS", "KY", "LA", "ME", "MD",
        "MA", "MI", "MN", "MS", "MO", "MT", "NE", "NV", "NH", "NJ",
        "NM", "NY", "NC", "ND", "OH", "OK", "OR", "PA", "RI", "SC",
        "SD", "TN", "TX", "UT", "VT", "VA", "WA", "WV", "WI", "WY",
        "DC", "PR", "VI", "GU", "AS", "MP",
    ]
)


def _matches(pattern: re.Pattern[str], value: Any) -> bool:
    return isinstance(value, str) and pattern.fullmatch(value) is not None


def parse_date(value: Any) -> date | None:
    """Parse a strict ``YYYY-MM-DD`` string into a date, or return None."""
    if not _matches(DATE_PATTERN, value):
        return None
    try:
        return date.fromisoformat(value)
    except ValueError:
        # e.g. 2023-02-31: right shape, not a calendar date
        return None


def is_valid_email(email: Any) -> bool:
    return _matches(EMAIL_PATTERN, email)


def is_valid_phone_number(phone_number: Any) -> bool:
    """Optional ``+``, optional leading ``1``, then 10-14 digits."""
    return _matches(PHONE_PATTERN, phone_number)


def is_valid_date(value: Any) -> bool:
    return parse_date(value) is not None


def is_valid_zip_code(zip_code: Any) -> bool:
    """``12345`` or ``12345-6789``."""
    return _matches(ZIP_PATTERN, zip_code)


def is_valid_state_code(state: Any) -> bool:
    if not isinstance(state, str):
        return False
    return state.upper() in US_STATE_CODES


def is_valid_rx_bin(rx_bin: Any) -> bool:
    """RxBIN routes a pharmacy claim to the PBM: exactly 6 digits."""
    return _matches(RX_BIN_PATTERN, rx_bin)


def is_valid_npi(npi: Any) -> bool:
    return _matches(NPI_PATTERN, npi)


def is_valid_ndc(ndc: Any) -> bool:
    """National Drug Code in 5-4-2 form, e.g. ``12345-1234-12``."""
    return _matches(NDC_PATTERN, ndc)
