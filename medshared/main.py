"""
Command-line entry point: validate JSON records from a file or stdin.

    medshared-validate user user.json
    cat prescriptions.json | medshared-validate prescription -

The input may be a single JSON object or an array of objects. One response
envelope per record is printed as JSON.
"""

from __future__ import annotations

import argparse
import json
import logging
import sys
from typing import Any, Callable

from medshared.config import settings
from medshared.schemas.records import ValidationResult
from medshared.validators.insurance import validate_insurance
from medshared.validators.prescription import validate_prescription
from medshared.validators.user import validate_user

logger = logging.getLogger(__name__)

VALIDATORS: dict[str, Callable[[Any], ValidationResult]] = {
    "user": validate_user,
    "insurance": validate_insurance,
    "prescription": validate_prescription,
}

EXIT_OK = 0
EXIT_INVALID = 1
EXIT_BAD_INPUT = 2


def get_validator(kind: str) -> Callable[[Any], ValidationResult]:
    try:
        return VALIDATORS[kind]
    except KeyError:
        raise ValueError(
            f"Unknown record kind: {kind!r} (expected one of {', '.join(VALIDATORS)})"
        ) from None


def validate_records(kind: str, payload: Any) -> list[ValidationResult]:
    """Run the validator for ``kind`` over one record or a list of records."""
    validator = get_validator(kind)
    records = payload if isinstance(payload, list) else [payload]
    results = [validator(record) for record in records]
    logger.info(
        "Validated %d %s record(s): %d invalid",
        len(results),
        kind,
        sum(1 for r in results if not r.is_valid),
    )
    return results


def _read_payload(source: str) -> Any:
    if source == "-":
        return json.load(sys.stdin)
    with open(source, encoding="utf-8") as fh:
        return json.load(fh)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="medshared-validate",
        description="Validate user, insurance or prescription records.",
    )
    parser.add_argument("kind", choices=sorted(VALIDATORS))
    parser.add_argument("source", help="Path to a JSON file, or '-' for stdin")
    parser.add_argument("-v", "--verbose", action="store_true", help="Enable debug logging")
    return parser


def main(argv: list[str] | None = None) -> int:
    args = build_parser().parse_args(argv)
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else settings.LOG_LEVEL,
        format="%(levelname)s | %(name)s | %(message)s",
    )

    try:
        payload = _read_payload(args.source)
    except (OSError, ValueError) as exc:
        logger.error("Could not read %s: %s", args.source, exc)
        return EXIT_BAD_INPUT

    results = validate_records(args.kind, payload)
    for result in results:
        print(json.dumps(result.to_response()))

    return EXIT_OK if all(r.is_valid for r in results) else EXIT_INVALID


if __name__ == "__main__":
    sys.exit(main())
