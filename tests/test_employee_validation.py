"""Unit tests for employee request validation."""

import pytest

from garage_api.application.services.employee_validation import (
    is_valid_email,
    is_valid_phone,
    validate_employee_request,
)
from garage_api.core.exceptions import ValidationError

from tests.helpers import valid_employee


def rejection(body) -> str:
    with pytest.raises(ValidationError) as exc_info:
        validate_employee_request(body)
    assert exc_info.value.status_code == 400
    return exc_info.value.message


def test_valid_request_is_returned_verbatim():
    request = validate_employee_request(valid_employee(firstName="  John ", employeeId=" EMP-7 "))
    assert request.first_name == "  John "
    assert request.email == "john.doe@example.com"
    assert request.parent_user_uid == valid_employee()["parentUserUid"]
    assert request.employee_id == "EMP-7"


@pytest.mark.parametrize("field", ["firstName", "lastName", "userRole", "email", "phoneNumber"])
def test_missing_field(field):
    body = valid_employee()
    del body[field]
    assert rejection(body) == "All fields are required"


@pytest.mark.parametrize(
    "field, value",
    [
        ("firstName", "   "),
        ("lastName", "\t\n"),
        ("email", "   "),
        ("phoneNumber", "  \t  \n  "),
        ("firstName", 123),
        ("lastName", ["Doe"]),
        ("email", {"address": "john@example.com"}),
        ("phoneNumber", True),
        ("userRole", None),
    ],
)
def test_blank_or_non_string_field(field, value):
    assert rejection(valid_employee(**{field: value})) == "All fields are required"


@pytest.mark.parametrize("value", [None, "", "   "])
def test_parent_user_uid_required(value):
    assert rejection(valid_employee(parentUserUid=value)) == "Parent user UID is required"


def test_all_fields_missing_reports_required_fields_first():
    assert rejection({}) == "All fields are required"


def test_non_object_body():
    assert rejection(["John", "Doe"]) == "All fields are required"


def test_email_checked_before_phone():
    assert rejection(valid_employee(email="nope", phoneNumber="x")) == "Invalid email format"


@pytest.mark.parametrize(
    "email",
    [
        "john.doe@example.com",
        "first+tag@sub.example.co.uk",
        "o'neil@example.ie",
        "a@b.io",
    ],
)
def test_valid_emails(email):
    assert is_valid_email(email)


@pytest.mark.parametrize(
    "email",
    [
        "testexample.com",
        "test@@example.com",
        "test@exam@ple.com",
        "test@example",
        "test@.com",
        "test@com.",
        "test@..com",
        "test@example..com",
        "test @example.com",
        "test@example.c",
        "a" * 245 + "@example.com",
        '<script>alert("XSS")</script>@example.com',
        "'; DROP TABLE users; --@example.com",
    ],
)
def test_invalid_emails(email):
    assert not is_valid_email(email)
    assert rejection(valid_employee(email=email)) == "Invalid email format"


@pytest.mark.parametrize(
    "phone",
    ["+1234567890", "1234567890", "0001234567", "(555) 123-4567", "555-123-4567", "++++++++++"],
)
def test_valid_phones(phone):
    assert is_valid_phone(phone)


@pytest.mark.parametrize(
    "phone",
    ["123456789", "abc-def-ghi", "1234567890123456", "+1 (555) 123-4567 x89", "12345678901; rm"],
)
def test_invalid_phones(phone):
    assert not is_valid_phone(phone)
    assert rejection(valid_employee(phoneNumber=phone)) == "Invalid phone number"


def test_rejection_is_repeatable():
    body = valid_employee(email="not-an-email")
    assert rejection(body) == rejection(body) == "Invalid email format"
