"""
JSON Schema validation service.

Custom formats are backed by the same predicates the record validators use,
so a schema check and a record validator never disagree about an atomic
format such as an NPI or an NDC.
"""

from typing import Any

import jsonschema

from medshared.services import formats

FORMAT_CHECKER = jsonschema.FormatChecker()

for _name, _predicate in {
    "calendar-date": formats.is_valid_date,
    "email-address": formats.is_valid_email,
    "phone": formats.is_valid_phone_number,
    "us-state": formats.is_valid_state_code,
    "us-zip": formats.is_valid_zip_code,
    "rx-bin": formats.is_valid_rx_bin,
    "npi": formats.is_valid_npi,
    "ndc": formats.is_valid_ndc,
}.items():
    FORMAT_CHECKER.checks(_name)(_predicate)


def validate_against_schema(data: dict[str, Any], schema: dict[str, Any]) -> list[str]:
    """
    Validate a dict against a JSON schema.
    Returns a list of error messages (empty list = valid).
    """
    validator = jsonschema.Draft7Validator(schema, format_checker=FORMAT_CHECKER)
    return [error.message for error in validator.iter_errors(data)]
