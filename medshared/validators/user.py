"""User record validation."""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any

from medshared.schemas.records import UserRecord, ValidationResult
from medshared.services.formats import (
    is_valid_date,
    is_valid_email,
    is_valid_phone_number,
    is_valid_state_code,
    is_valid_zip_code,
)
from medshared.validators.base import as_mapping, build_result, is_blank

NAME_MAX_LENGTH = 100


def _check_name(errors: list[str], value: Any, label: str) -> None:
    if is_blank(value):
        errors.append(f"{label} is required")
    elif len(value) > NAME_MAX_LENGTH:
        errors.append(f"{label} must be {NAME_MAX_LENGTH} characters or less")


def _check_address(errors: list[str], address: Any) -> None:
    """Each missing part of the address is reported on its own."""
    address = as_mapping(address)

    if is_blank(address.get("street")):
        errors.append("Street address is required")

    if is_blank(address.get("city")):
        errors.append("City is required")

    if not address.get("state"):
        errors.append("State is required")
    elif not is_valid_state_code(address["state"]):
        errors.append("Invalid state code (must be 2-letter code like CA, NY)")

    if not address.get("zipCode"):
        errors.append("ZIP code is required")
    elif not is_valid_zip_code(address["zipCode"]):
        errors.append("Invalid ZIP code format")


def validate_user(record: UserRecord | dict[str, Any]) -> ValidationResult:
    user = as_mapping(record)
    errors: list[str] = []

    if not user.get("email"):
        errors.append("Email is required")
    elif not is_valid_email(user["email"]):
        errors.append("Invalid email format")

    _check_name(errors, user.get("firstName"), "First name")
    _check_name(errors, user.get("lastName"), "Last name")

    if not user.get("dateOfBirth"):
        errors.append("Date of birth is required")
    elif not is_valid_date(user["dateOfBirth"]):
        errors.append("Date of birth must be in YYYY-MM-DD format")

    if not user.get("phoneNumber"):
        errors.append("Phone number is required")
    elif not is_valid_phone_number(user["phoneNumber"]):
        errors.append("Invalid phone number format")

    # an empty mapping is a present address with every part missing
    address = user.get("address")
    if address is None or (not address and not isinstance(address, Mapping)):
        errors.append("Address is required")
    else:
        _check_address(errors, address)

    return build_result("user", errors)
