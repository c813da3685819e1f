"""Pydantic schemas for the Employee domain."""

from datetime import datetime, timezone
from typing import Optional

from pydantic import BaseModel, ConfigDict, field_serializer
from pydantic.alias_generators import to_camel


class EmployeeCreate(BaseModel):
    """A creation request that passed validation. Values are kept verbatim."""

    first_name: str
    last_name: str
    user_role: str
    email: str
    phone_number: str
    parent_user_uid: str
    employee_id: Optional[str] = None


class EmployeeRead(BaseModel):
    user_uid: str
    first_name: str
    last_name: str
    employee_id: Optional[str] = None
    login_id: str
    user_role: str
    email: str
    phone_number: str
    garage_uid: Optional[str] = None
    garage_id: Optional[str] = None
    garage_name: str
    is_active: bool
    created_at: datetime
    updated_at: datetime

    model_config = ConfigDict(from_attributes=True, alias_generator=to_camel, populate_by_name=True)

    @field_serializer("created_at", "updated_at")
    def serialize_timestamp(self, value: datetime) -> str:
        # SQLite hands timestamps back without an offset; they are stored as UTC.
        if value.tzinfo is None:
            value = value.replace(tzinfo=timezone.utc)
        return value.isoformat()


class EmployeeResponse(BaseModel):
    success: bool = True
    message: Optional[str] = None
    employee: EmployeeRead


class EmployeeListResponse(BaseModel):
    success: bool = True
    employees: list[EmployeeRead]
    count: int
