"""
Helpers shared by the record validators.

Validators accept a pydantic record or a plain mapping (a decoded JSON
payload). Both are read through ``as_mapping`` so the same presence and type
rules apply to either.
"""

from __future__ import annotations

import logging
import math
from collections.abc import Mapping
from enum import Enum
from typing import Any

from pydantic import BaseModel

from medshared.models.vocabulary import vocabulary_values
from medshared.schemas.records import ValidationResult

logger = logging.getLogger(__name__)


def as_mapping(record: Any) -> Mapping[str, Any]:
    """Read-only view of a record. Unknown input reads as an empty record."""
    if isinstance(record, BaseModel):
        return record.model_dump(exclude_none=True)
    if isinstance(record, Mapping):
        return record
    return {}


def is_blank(value: Any) -> bool:
    """Absent, not text, or empty after trimming."""
    return not isinstance(value, str) or not value.strip()


def is_number(value: Any) -> bool:
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        return False
    return not math.isnan(value)


def as_number(value: Any) -> float | None:
    """
    Numeric value for cross-field comparisons, or None when there is none.

    Numeric strings such as ``"600"`` are coerced so that an amount reported
    as badly typed still takes part in its ceiling check.
    """
    if is_number(value):
        return value
    if not isinstance(value, str):
        return None
    try:
        number = float(value)
    except ValueError:
        return None
    return None if math.isnan(number) else number


def exceeds(used: Any, ceiling: Any) -> bool:
    """``used > ceiling`` when both sides read as numbers, else False."""
    used, ceiling = as_number(used), as_number(ceiling)
    return used is not None and ceiling is not None and used > ceiling


def one_of(vocabulary: type[Enum]) -> str:
    return ", ".join(vocabulary_values(vocabulary))


def build_result(kind: str, errors: list[str]) -> ValidationResult:
    logger.debug("%s validation: %d error(s)", kind, len(errors))
    return ValidationResult(is_valid=not errors, errors=errors)
