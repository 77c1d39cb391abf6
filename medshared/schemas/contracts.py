"""
JSON schemas describing the wire shape of each record.

These are structural contracts for the transport layer (types, required keys,
atomic formats). Cross-field rules such as "deductible met cannot exceed the
deductible" are only enforced by ``medshared.validators``.
"""

from medshared.models.vocabulary import (
    InsurancePlanType,
    MedicationForm,
    PrescriptionStatus,
    vocabulary_values,
)

_NON_EMPTY = {"type": "string", "minLength": 1, "pattern": "\\S"}
_AMOUNT = {"type": "integer", "minimum": 0, "description": "Minor currency units (cents)."}
_DATE = {"type": "string", "format": "calendar-date", "description": "YYYY-MM-DD"}
_IDENTIFIER = {"type": ["string", "integer"]}


ADDRESS_SCHEMA: dict = {
    "type": "object",
    "required": ["street", "city", "state", "zipCode"],
    "properties": {
        "street": _NON_EMPTY,
        "city": _NON_EMPTY,
        "state": {"type": "string", "format": "us-state"},
        "zipCode": {"type": "string", "format": "us-zip"},
    },
}


USER_SCHEMA: dict = {
    "$schema": "http://json-schema.org/draft-07/schema#",
    "title": "User",
    "type": "object",
    "required": ["email", "firstName", "lastName", "dateOfBirth", "phoneNumber", "address"],
    "properties": {
        "email": {"type": "string", "format": "email-address"},
        "firstName": {**_NON_EMPTY, "maxLength": 100},
        "lastName": {**_NON_EMPTY, "maxLength": 100},
        "dateOfBirth": _DATE,
        "phoneNumber": {"type": "string", "format": "phone"},
        "address": ADDRESS_SCHEMA,
    },
}


INSURANCE_SCHEMA: dict = {
    "$schema": "http://json-schema.org/draft-07/schema#",
    "title": "Insurance",
    "type": "object",
    "required": [
        "userId",
        "insuranceCompany",
        "policyNumber",
        "planType",
        "planName",
        "rxBIN",
        "effectiveDate",
    ],
    "properties": {
        "userId": _IDENTIFIER,
        "insuranceCompany": _NON_EMPTY,
        "policyNumber": _NON_EMPTY,
        "planType": {"type": "string", "enum": vocabulary_values(InsurancePlanType)},
        "planName": _NON_EMPTY,
        "rxBIN": {
            "type": "string",
            "format": "rx-bin",
            "description": "6-digit Pharmacy Benefit Manager identifier.",
        },
        "deductible": _AMOUNT,
        "deductibleMet": _AMOUNT,
        "outOfPocketMax": _AMOUNT,
        "outOfPocketMet": _AMOUNT,
        "effectiveDate": _DATE,
        "terminationDate": _DATE,
        "isActive": {"type": "boolean"},
    },
}


PRESCRIPTION_SCHEMA: dict = {
    "$schema": "http://json-schema.org/draft-07/schema#",
    "title": "Prescription",
    "type": "object",
    "required": [
        "userId",
        "medicationName",
        "medicationForm",
        "strength",
        "dosageInstructions",
        "quantity",
        "daysSupply",
        "refillsAllowed",
        "prescriberName",
        "prescriberNPI",
        "prescribedDate",
    ],
    "properties": {
        "userId": _IDENTIFIER,
        "insuranceId": {"type": ["string", "integer", "null"], "description": "Null for cash-pay."},
        "medicationName": _NON_EMPTY,
        "medicationForm": {"type": "string", "enum": vocabulary_values(MedicationForm)},
        "strength": _NON_EMPTY,
        "ndc": {"type": "string", "format": "ndc", "description": "National Drug Code, 5-4-2."},
        "dosageInstructions": _NON_EMPTY,
        "quantity": {"type": "number", "minimum": 1},
        "daysSupply": {"type": "number", "minimum": 1},
        "refillsAllowed": {"type": "number", "minimum": 0},
        "refillsRemaining": {"type": "number", "minimum": 0},
        "prescriberName": _NON_EMPTY,
        "prescriberNPI": {"type": "string", "format": "npi"},
        "prescribedDate": _DATE,
        "status": {"type": "string", "enum": vocabulary_values(PrescriptionStatus)},
        "pharmacyNPI": {"type": "string", "format": "npi"},
    },
}
