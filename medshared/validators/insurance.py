"""
Insurance record validation and derived coverage status.

Amounts are integer minor units (cents). The validator checks ranges only;
no currency arithmetic happens here.
"""

from __future__ import annotations

from datetime import date
from typing import Any

from medshared.models.vocabulary import InsurancePlanType, is_valid_plan_type
from medshared.schemas.records import InsuranceRecord, ValidationResult
from medshared.services.formats import is_valid_date, is_valid_rx_bin, parse_date
from medshared.utils.common import today as current_date
from medshared.validators.base import (
    as_mapping,
    build_result,
    exceeds,
    is_blank,
    is_number,
    one_of,
)

# (field, label) in the order amounts are checked
AMOUNT_FIELDS = [
    ("deductible", "Deductible"),
    ("deductibleMet", "Deductible met"),
    ("outOfPocketMax", "Out of pocket max"),
    ("outOfPocketMet", "Out of pocket met"),
]


def is_insurance_active(
    record: InsuranceRecord | dict[str, Any], today: date | None = None
) -> bool:
    """
    Whether coverage is in force on ``today`` (defaults to the current date).

    Coverage terminating today still counts as active; only a termination
    date strictly before today ends it. An explicit ``isActive: False``
    overrides the dates.
    """
    insurance = as_mapping(record)
    today = today or current_date()

    effective = parse_date(insurance.get("effectiveDate"))
    if effective is not None and effective > today:
        return False

    termination = parse_date(insurance.get("terminationDate"))
    if termination is not None and termination < today:
        return False

    return insurance.get("isActive") is not False


def validate_insurance(record: InsuranceRecord | dict[str, Any]) -> ValidationResult:
    insurance = as_mapping(record)
    errors: list[str] = []

    if not insurance.get("userId"):
        errors.append("User ID is required")

    if is_blank(insurance.get("insuranceCompany")):
        errors.append("Insurance company name is required")

    if is_blank(insurance.get("policyNumber")):
        errors.append("Policy number is required")

    if not insurance.get("planType"):
        errors.append("Plan type is required")
    elif not is_valid_plan_type(insurance["planType"]):
        errors.append(f"Invalid plan type. Must be one of: {one_of(InsurancePlanType)}")

    if is_blank(insurance.get("planName")):
        errors.append("Plan name is required")

    if not insurance.get("rxBIN"):
        errors.append("RxBIN is required")
    elif not is_valid_rx_bin(insurance["rxBIN"]):
        errors.append("RxBIN must be exactly 6 digits")

    for field, label in AMOUNT_FIELDS:
        if field not in insurance:
            continue
        value = insurance[field]
        if not is_number(value) or value < 0:
            errors.append(f"{label} must be a non-negative number (in cents)")

    if not insurance.get("effectiveDate"):
        errors.append("Effective date is required")
    elif not is_valid_date(insurance["effectiveDate"]):
        errors.append("Effective date must be in YYYY-MM-DD format")

    if insurance.get("terminationDate") and not is_valid_date(insurance["terminationDate"]):
        errors.append("Termination date must be in YYYY-MM-DD format")

    # Cross-field checks run regardless of the per-field results above.
    effective = parse_date(insurance.get("effectiveDate"))
    termination = parse_date(insurance.get("terminationDate"))
    if effective is not None and termination is not None and termination <= effective:
        errors.append("Termination date must be after effective date")

    if exceeds(insurance.get("deductibleMet"), insurance.get("deductible")):
        errors.append("Deductible met cannot exceed total deductible")

    if exceeds(insurance.get("outOfPocketMet"), insurance.get("outOfPocketMax")):
        errors.append("Out of pocket met cannot exceed out of pocket max")

    return build_result("insurance", errors)
