"""Tests for transport envelope builders."""

import pytest

from medshared.models.vocabulary import ErrorCode
from medshared.schemas.records import ValidationResult
from medshared.services.responses import (
    create_error_response,
    create_not_found_response,
    create_paginated_response,
    create_success_response,
    create_validation_error_response,
)
from medshared.validators.user import validate_user


def test_success_response():
    assert create_success_response({"id": 1}) == {"success": True, "data": {"id": 1}}
    assert create_success_response([], "Saved") == {
        "success": True,
        "data": [],
        "message": "Saved",
    }


def test_success_data_is_passed_through():
    data = {"terminationDate": None}
    assert create_success_response(data)["data"] == {"terminationDate": None}


def test_error_response_without_details():
    assert create_error_response(ErrorCode.FORBIDDEN, "Nope") == {
        "success": False,
        "error": {"code": "FORBIDDEN", "message": "Nope"},
    }


def test_error_response_rejects_unknown_code():
    with pytest.raises(ValueError):
        create_error_response("TEAPOT", "I'm a teapot")


def test_validation_error_envelope():
    assert create_validation_error_response(["Email is required"]) == {
        "success": False,
        "error": {
            "code": "VALIDATION_ERROR",
            "message": "Validation failed",
            "details": {"errors": ["Email is required"]},
        },
    }


def test_not_found():
    response = create_not_found_response("Prescription")
    assert response["error"] == {"code": "NOT_FOUND", "message": "Prescription not found"}


def test_paginated_response():
    response = create_paginated_response(["a", "b"], total=21, page=3, limit=10)
    assert response == {"items": ["a", "b"], "total": 21, "page": 3, "limit": 10, "totalPages": 3}
    assert create_paginated_response([], total=0, page=1, limit=10)["totalPages"] == 0


def test_paginated_response_rejects_zero_limit():
    with pytest.raises(ValueError, match="limit must be at least 1"):
        create_paginated_response([], total=5, page=1, limit=0)


def test_validation_result_to_response():
    invalid = validate_user({})
    assert invalid.to_response()["error"]["details"]["errors"] == invalid.errors

    valid = ValidationResult(is_valid=True, errors=[])
    assert valid.to_response() == {"success": True, "data": {"isValid": True, "errors": []}}


def test_success_keeps_explicit_none_data():
    assert create_success_response(None) == {"success": True, "data": None}
