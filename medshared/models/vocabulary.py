"""
Domain vocabulary shared by the client and server.

Each concept is a closed set of string codes. Members are ``str`` subclasses,
so they serialize to exactly the wire value stored by the persistence layer.
"""

from __future__ import annotations

from enum import Enum
from typing import Any


class InsurancePlanType(str, Enum):
    HMO = "HMO"  # Health Maintenance Organization
    PPO = "PPO"  # Preferred Provider Organization
    EPO = "EPO"  # Exclusive Provider Organization
    POS = "POS"  # Point of Service
    HDHP = "HDHP"  # High Deductible Health Plan


class PrescriptionStatus(str, Enum):
    """Lifecycle of a prescription from creation to pickup."""

    PENDING = "PENDING"
    SUBMITTED = "SUBMITTED"
    APPROVED = "APPROVED"
    DENIED = "DENIED"
    PRIOR_AUTH_REQUIRED = "PRIOR_AUTH_REQUIRED"
    FILLED = "FILLED"
    PICKED_UP = "PICKED_UP"
    CANCELLED = "CANCELLED"


class MedicationForm(str, Enum):
    TABLET = "TABLET"
    CAPSULE = "CAPSULE"
    LIQUID = "LIQUID"
    INJECTION = "INJECTION"
    CREAM = "CREAM"
    INHALER = "INHALER"
    PATCH = "PATCH"
    OTHER = "OTHER"


class ClaimStatus(str, Enum):
    """Adjudication outcome returned by the insurer / PBM."""

    APPROVED = "APPROVED"
    DENIED = "DENIED"
    PRIOR_AUTH_REQUIRED = "PRIOR_AUTH_REQUIRED"
    COVERAGE_LIMIT_EXCEEDED = "COVERAGE_LIMIT_EXCEEDED"
    NOT_COVERED = "NOT_COVERED"  # not on formulary
    DEDUCTIBLE_NOT_MET = "DEDUCTIBLE_NOT_MET"
    INVALID_INSURANCE = "INVALID_INSURANCE"
    PENDING = "PENDING"


class DenialReason(str, Enum):
    # Insurance
    INSURANCE_INACTIVE = "INSURANCE_INACTIVE"
    INSURANCE_EXPIRED = "INSURANCE_EXPIRED"
    INVALID_POLICY = "INVALID_POLICY"
    INVALID_RX_BIN = "INVALID_RX_BIN"

    # Coverage
    NOT_ON_FORMULARY = "NOT_ON_FORMULARY"
    PRIOR_AUTH_REQUIRED = "PRIOR_AUTH_REQUIRED"
    QUANTITY_LIMIT_EXCEEDED = "QUANTITY_LIMIT_EXCEEDED"
    REFILL_TOO_SOON = "REFILL_TOO_SOON"
    AGE_RESTRICTION = "AGE_RESTRICTION"

    # Financial
    DEDUCTIBLE_NOT_MET = "DEDUCTIBLE_NOT_MET"
    OUT_OF_POCKET_MAX_REACHED = "OUT_OF_POCKET_MAX_REACHED"
    BENEFIT_MAXIMUM_REACHED = "BENEFIT_MAXIMUM_REACHED"

    # Prescription
    INVALID_NDC = "INVALID_NDC"
    INVALID_PRESCRIBER = "INVALID_PRESCRIBER"
    EXPIRED_PRESCRIPTION = "EXPIRED_PRESCRIPTION"

    SYSTEM_ERROR = "SYSTEM_ERROR"
    NONE = "NONE"  # claim approved


class ErrorCode(str, Enum):
    # 4xx validation
    VALIDATION_ERROR = "VALIDATION_ERROR"
    NOT_FOUND = "NOT_FOUND"
    ALREADY_EXISTS = "ALREADY_EXISTS"
    UNAUTHORIZED = "UNAUTHORIZED"
    FORBIDDEN = "FORBIDDEN"

    # 4xx business rules
    INSURANCE_INACTIVE = "INSURANCE_INACTIVE"
    INSURANCE_EXPIRED = "INSURANCE_EXPIRED"
    PRESCRIPTION_INACTIVE = "PRESCRIPTION_INACTIVE"
    CLAIM_DENIED = "CLAIM_DENIED"
    PRIOR_AUTH_REQUIRED = "PRIOR_AUTH_REQUIRED"

    # 5xx
    INTERNAL_ERROR = "INTERNAL_ERROR"
    DATABASE_ERROR = "DATABASE_ERROR"
    EXTERNAL_SERVICE_ERROR = "EXTERNAL_SERVICE_ERROR"


def vocabulary_values(vocabulary: type[Enum]) -> list[str]:
    """Wire codes of a vocabulary, in declaration order."""
    return [member.value for member in vocabulary]


def is_member(vocabulary: type[Enum], value: Any) -> bool:
    """Exact, case-sensitive membership test. Non-strings are never members."""
    if not isinstance(value, str):
        return False
    return value in vocabulary_values(vocabulary)


def is_valid_plan_type(plan_type: Any) -> bool:
    return is_member(InsurancePlanType, plan_type)


def is_valid_prescription_status(status: Any) -> bool:
    return is_member(PrescriptionStatus, status)


def is_valid_medication_form(form: Any) -> bool:
    return is_member(MedicationForm, form)
