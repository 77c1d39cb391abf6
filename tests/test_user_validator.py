"""Tests for user record validation."""

from medshared.schemas.records import Address, UserRecord
from medshared.validators.user import validate_user


def _make_user(**overrides):
    user = {
        "email": "a@b.com",
        "firstName": "Jo",
        "lastName": "Lee",
        "dateOfBirth": "1990-05-01",
        "phoneNumber": "12025551234",
        "address": {
            "street": "1 Main St",
            "city": "Springfield",
            "state": "IL",
            "zipCode": "62701",
        },
    }
    user.update(overrides)
    return user


def test_well_formed_user_is_valid():
    result = validate_user(_make_user())
    assert result.is_valid is True
    assert result.errors == []


def test_empty_user_reports_each_required_field_in_order():
    result = validate_user({})
    assert result.is_valid is False
    assert result.errors == [
        "Email is required",
        "First name is required",
        "Last name is required",
        "Date of birth is required",
        "Phone number is required",
        "Address is required",
    ]


def test_missing_field_has_no_format_error():
    result = validate_user(_make_user(email=""))
    assert result.errors == ["Email is required"]


def test_blank_names_count_as_missing():
    result = validate_user(_make_user(firstName="   ", lastName=None))
    assert result.errors == ["First name is required", "Last name is required"]


def test_name_length_limit():
    assert validate_user(_make_user(firstName="x" * 100)).is_valid
    result = validate_user(_make_user(lastName="x" * 101))
    assert result.errors == ["Last name must be 100 characters or less"]


def test_format_errors():
    result = validate_user(
        _make_user(email="nope", dateOfBirth="2023-02-31", phoneNumber="555-1234")
    )
    assert result.errors == [
        "Invalid email format",
        "Date of birth must be in YYYY-MM-DD format",
        "Invalid phone number format",
    ]


def test_partial_address_reports_every_missing_part():
    result = validate_user(_make_user(address={"street": "1 Main St"}))
    assert result.errors == [
        "City is required",
        "State is required",
        "ZIP code is required",
    ]


def test_invalid_address_parts():
    address = {"street": "1 Main St", "city": "Springfield", "state": "ZZ", "zipCode": "627"}
    result = validate_user(_make_user(address=address))
    assert result.errors == [
        "Invalid state code (must be 2-letter code like CA, NY)",
        "Invalid ZIP code format",
    ]


def test_lowercase_state_is_accepted():
    address = {"street": "1 Main St", "city": "Springfield", "state": "il", "zipCode": "62701"}
    assert validate_user(_make_user(address=address)).is_valid


def test_accepts_record_model():
    record = UserRecord(
        email="a@b.com",
        firstName="Jo",
        lastName="Lee",
        dateOfBirth="1990-05-01",
        phoneNumber="12025551234",
        address=Address(street="1 Main St", city="Springfield", state="IL", zipCode="62701"),
    )
    assert validate_user(record).is_valid


def test_partial_record_model():
    result = validate_user(UserRecord(email="a@b.com", address=Address(city="Springfield")))
    assert "First name is required" in result.errors
    assert "Street address is required" in result.errors
    assert "Email is required" not in result.errors


def test_non_record_input_never_raises():
    result = validate_user(None)
    assert result.is_valid is False
    assert len(result.errors) == 6


def test_validation_is_idempotent_and_does_not_mutate():
    user = _make_user(email="bad", address={"street": ""})
    snapshot = {**user, "address": dict(user["address"])}
    first = validate_user(user)
    second = validate_user(user)
    assert first == second
    assert user == snapshot


def test_empty_address_reports_every_part():
    expected = [
        "Street address is required",
        "City is required",
        "State is required",
        "ZIP code is required",
    ]
    assert validate_user(_make_user(address={})).errors == expected

    fields = {k: v for k, v in _make_user().items() if k != "address"}
    assert validate_user(UserRecord(**fields, address=Address())).errors == expected


def test_absent_address_is_a_single_error():
    assert validate_user(_make_user(address=None)).errors == ["Address is required"]
    assert validate_user(_make_user(address="")).errors == ["Address is required"]
