"""
Record types validated by this package.

Field names keep the camelCase wire names shared with the client and server.
Every field is optional so an incomplete record can still be built and handed
to a validator; presence rules live in ``medshared.validators``.
"""

from __future__ import annotations

from typing import Any

from pydantic import BaseModel, ConfigDict, Field

from medshared.models.vocabulary import (
    InsurancePlanType,
    MedicationForm,
    PrescriptionStatus,
)
from medshared.services.responses import (
    create_success_response,
    create_validation_error_response,
)

_RECORD_CONFIG = ConfigDict(frozen=True, extra="ignore")


class Address(BaseModel):
    model_config = _RECORD_CONFIG

    street: str | None = None
    city: str | None = None
    state: str | None = None
    zipCode: str | None = None


class UserRecord(BaseModel):
    model_config = _RECORD_CONFIG

    email: str | None = None
    firstName: str | None = None
    lastName: str | None = None
    dateOfBirth: str | None = None
    phoneNumber: str | None = None
    address: Address | None = None


class InsuranceRecord(BaseModel):
    """Amounts are integer minor currency units (cents)."""

    model_config = _RECORD_CONFIG

    userId: str | int | None = None
    insuranceCompany: str | None = None
    policyNumber: str | None = None
    planType: InsurancePlanType | str | None = None
    planName: str | None = None
    rxBIN: str | None = None
    deductible: int | None = None
    deductibleMet: int | None = None
    outOfPocketMax: int | None = None
    outOfPocketMet: int | None = None
    effectiveDate: str | None = None
    terminationDate: str | None = None
    isActive: bool | None = None


class PrescriptionRecord(BaseModel):
    model_config = _RECORD_CONFIG

    userId: str | int | None = None
    insuranceId: str | int | None = None  # absent for cash-pay
    medicationName: str | None = None
    medicationForm: MedicationForm | str | None = None
    strength: str | None = None
    ndc: str | None = None
    dosageInstructions: str | None = None
    quantity: int | float | None = None
    daysSupply: int | float | None = None
    refillsAllowed: int | float | None = None
    refillsRemaining: int | float | None = None
    prescriberName: str | None = None
    prescriberNPI: str | None = None
    prescribedDate: str | None = None
    status: PrescriptionStatus | str | None = None
    pharmacyNPI: str | None = None


class ValidationResult(BaseModel):
    """Outcome of one validator call. Errors keep the order they were found."""

    model_config = ConfigDict(frozen=True, populate_by_name=True)

    is_valid: bool = Field(alias="isValid")
    errors: list[str] = Field(default_factory=list)

    def to_dict(self) -> dict[str, Any]:
        return self.model_dump(by_alias=True)

    def to_response(self) -> dict[str, Any]:
        """Wrap the result in the transport envelope used by the server."""
        if self.is_valid:
            return create_success_response(self.to_dict())
        return create_validation_error_response(list(self.errors))
