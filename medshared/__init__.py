"""Shared vocabulary, format checks and record validators."""

from medshared.models.vocabulary import (
    ClaimStatus,
    DenialReason,
    ErrorCode,
    InsurancePlanType,
    MedicationForm,
    PrescriptionStatus,
    is_member,
    is_valid_medication_form,
    is_valid_plan_type,
    is_valid_prescription_status,
    vocabulary_values,
)
from medshared.schemas.records import (
    Address,
    InsuranceRecord,
    PrescriptionRecord,
    UserRecord,
    ValidationResult,
)
from medshared.services.formats import (
    is_valid_date,
    is_valid_email,
    is_valid_ndc,
    is_valid_npi,
    is_valid_phone_number,
    is_valid_rx_bin,
    is_valid_state_code,
    is_valid_zip_code,
)
from medshared.services.responses import (
    create_error_response,
    create_not_found_response,
    create_paginated_response,
    create_success_response,
    create_validation_error_response,
)
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
from medshared.validators.insurance import is_insurance_active, validate_insurance
from medshared.validators.prescription import validate_prescription
from medshared.validators.user import validate_user

__version__ = "1.0.0"
