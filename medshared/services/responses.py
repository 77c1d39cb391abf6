"""
Builders for the success / error / paginated envelopes.

Each builder returns a plain dict ready for JSON encoding. Optional envelope
keys (``message``, ``details``) are omitted when empty rather than sent as null;
caller ``data`` is passed through untouched.
"""

from __future__ import annotations

import math
from typing import Any

from medshared.models.vocabulary import ErrorCode
from medshared.schemas.api import (
    ErrorBody,
    ErrorResponse,
    PaginatedResponse,
    SuccessResponse,
)


def create_success_response(data: Any, message: str | None = None) -> dict[str, Any]:
    payload = SuccessResponse(data=data, message=message or None).model_dump()
    if payload["message"] is None:
        del payload["message"]
    return payload


def create_error_response(
    code: ErrorCode | str,
    message: str,
    details: dict[str, Any] | None = None,
) -> dict[str, Any]:
    """``code`` must be an ErrorCode member or its wire value."""
    body = ErrorBody(code=ErrorCode(code).value, message=message, details=details or None)
    payload = ErrorResponse(error=body).model_dump()
    if payload["error"]["details"] is None:
        del payload["error"]["details"]
    return payload


def create_validation_error_response(errors: list[str]) -> dict[str, Any]:
    return create_error_response(
        ErrorCode.VALIDATION_ERROR, "Validation failed", {"errors": errors}
    )


def create_not_found_response(resource: str) -> dict[str, Any]:
    return create_error_response(ErrorCode.NOT_FOUND, f"{resource} not found")


def create_paginated_response(
    items: list[Any], total: int, page: int, limit: int
) -> dict[str, Any]:
    if limit < 1:
        raise ValueError(f"limit must be at least 1, got {limit}")
    return PaginatedResponse(
        items=items,
        total=total,
        page=page,
        limit=limit,
        totalPages=math.ceil(total / limit),
    ).model_dump()
