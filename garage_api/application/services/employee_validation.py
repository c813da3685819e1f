"""Employee request validation — required fields, email shape and phone shape."""

import re
from typing import Any

from garage_api.core.exceptions import ValidationError
from garage_api.domain.schemas.employee import EmployeeCreate

REQUIRED_FIELDS = ("firstName", "lastName", "userRole", "email", "phoneNumber")

MAX_EMAIL_LENGTH = 254

# RFC 5322 "atext" plus dots for the local part; dot-separated labels for the domain.
_EMAIL_LOCAL = re.compile(r"[A-Za-z0-9!#$%&'*+/=?^_`{|}~.\-]+")
_EMAIL_LABEL = re.compile(r"[A-Za-z0-9](?:[A-Za-z0-9\-]*[A-Za-z0-9])?")
_PHONE = re.compile(r"[0-9\s\-+()]{10,15}")


def _is_blank(value: Any) -> bool:
    return not isinstance(value, str) or not value.strip()


def is_valid_email(email: str) -> bool:
    if len(email) > MAX_EMAIL_LENGTH or email.count("@") != 1:
        return False

    local, domain = email.split("@")
    if not _EMAIL_LOCAL.fullmatch(local):
        return False

    labels = domain.split(".")
    if len(labels) < 2 or not all(_EMAIL_LABEL.fullmatch(label) for label in labels):
        return False
    return len(labels[-1]) >= 2


def is_valid_phone(phone: str) -> bool:
    return _PHONE.fullmatch(phone) is not None


def validate_employee_request(body: Any) -> EmployeeCreate:
    """
    Check a raw creation request and return it as an EmployeeCreate.

    Checks run in a fixed order and stop at the first failure. Nothing here
    touches the store, so the same payload is always rejected the same way.
    """
    if not isinstance(body, dict):
        body = {}

    if any(_is_blank(body.get(field)) for field in REQUIRED_FIELDS):
        raise ValidationError(
            "All fields are required",
            details="firstName, lastName, userRole, email and phoneNumber must be non-empty strings",
        )

    if _is_blank(body.get("parentUserUid")):
        raise ValidationError("Parent user UID is required")

    if not is_valid_email(body["email"]):
        raise ValidationError("Invalid email format")

    if not is_valid_phone(body["phoneNumber"]):
        raise ValidationError(
            "Invalid phone number",
            details="10 to 15 characters of digits, spaces, '+', '-', '(' or ')'",
        )

    employee_id = body.get("employeeId")
    employee_id = employee_id.strip() if isinstance(employee_id, str) and employee_id.strip() else None

    return EmployeeCreate(
        first_name=body["firstName"],
        last_name=body["lastName"],
        user_role=body["userRole"],
        email=body["email"],
        phone_number=body["phoneNumber"],
        parent_user_uid=body["parentUserUid"],
        employee_id=employee_id,
    )
