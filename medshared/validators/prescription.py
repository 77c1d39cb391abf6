"""Prescription record validation."""

from __future__ import annotations

from typing import Any

from medshared.models.vocabulary import (
    MedicationForm,
    PrescriptionStatus,
    is_valid_medication_form,
    is_valid_prescription_status,
)
from medshared.schemas.records import PrescriptionRecord, ValidationResult
from medshared.services.formats import is_valid_date, is_valid_ndc, is_valid_npi
from medshared.validators.base import (
    as_mapping,
    build_result,
    exceeds,
    is_blank,
    is_number,
    one_of,
)


def _check_count(
    errors: list[str], value: Any, label: str, minimum: int, rule: str
) -> None:
    """Required numeric field with a floor and no ceiling."""
    if value is None:
        errors.append(f"{label} is required")
    elif not is_number(value) or value < minimum:
        errors.append(f"{label} must be a {rule} number")


def validate_prescription(
    record: PrescriptionRecord | dict[str, Any],
) -> ValidationResult:
    prescription = as_mapping(record)
    errors: list[str] = []

    if not prescription.get("userId"):
        errors.append("User ID is required")

    # insuranceId is optional: cash-pay prescriptions have none

    if is_blank(prescription.get("medicationName")):
        errors.append("Medication name is required")

    if not prescription.get("medicationForm"):
        errors.append("Medication form is required")
    elif not is_valid_medication_form(prescription["medicationForm"]):
        errors.append(
            f"Invalid medication form. Must be one of: {one_of(MedicationForm)}"
        )

    if is_blank(prescription.get("strength")):
        errors.append('Medication strength is required (e.g., "500mg", "10mg/ml")')

    if prescription.get("ndc") and not is_valid_ndc(prescription["ndc"]):
        errors.append("NDC must be in format: 12345-1234-12")

    if is_blank(prescription.get("dosageInstructions")):
        errors.append("Dosage instructions are required")

    _check_count(errors, prescription.get("quantity"), "Quantity", 1, "positive")
    _check_count(errors, prescription.get("daysSupply"), "Days supply", 1, "positive")
    _check_count(
        errors, prescription.get("refillsAllowed"), "Refills allowed", 0, "non-negative"
    )

    if "refillsRemaining" in prescription:
        refills_remaining = prescription["refillsRemaining"]
        if not is_number(refills_remaining) or refills_remaining < 0:
            errors.append("Refills remaining must be a non-negative number")
        if exceeds(refills_remaining, prescription.get("refillsAllowed")):
            errors.append("Refills remaining cannot exceed refills allowed")

    if is_blank(prescription.get("prescriberName")):
        errors.append("Prescriber name is required")

    if not prescription.get("prescriberNPI"):
        errors.append("Prescriber NPI is required")
    elif not is_valid_npi(prescription["prescriberNPI"]):
        errors.append("Prescriber NPI must be exactly 10 digits")

    if not prescription.get("prescribedDate"):
        errors.append("Prescribed date is required")
    elif not is_valid_date(prescription["prescribedDate"]):
        errors.append("Prescribed date must be in YYYY-MM-DD format")

    if prescription.get("status") and not is_valid_prescription_status(
        prescription["status"]
    ):
        errors.append(
            "Invalid prescription status. Must be one of: "
            f"{one_of(PrescriptionStatus)}"
        )

    if prescription.get("pharmacyNPI") and not is_valid_npi(prescription["pharmacyNPI"]):
        errors.append("Pharmacy NPI must be exactly 10 digits")

    return build_result("prescription", errors)
