"""Employee API routes — create, list, look up by login ID, soft delete."""

from typing import Any, Optional

from fastapi import APIRouter, Depends, Request, status
from starlette.concurrency import run_in_threadpool

from garage_api.config import Settings, get_settings
from garage_api.core.exceptions import InternalError
from garage_api.interfaces.api.deps import get_caller_uid
from garage_api.interfaces.deps import (
    get_garage_auth_repository,
    get_policy,
    get_uniqueness,
    get_user_repository,
)
from garage_api.domain.repositories.user_repository import UserRepository
from garage_api.domain.repositories.garage_auth_repository import GarageAuthRepository
from garage_api.domain.schemas.employee import EmployeeListResponse, EmployeeRead, EmployeeResponse
from garage_api.application.services.login_id_uniqueness import LoginIdUniqueness
from garage_api.application.services.provisioning_policy import ProvisioningPolicy
from garage_api.application.services.employee_service import (
    create_employee,
    deactivate_employee,
    get_employee_by_login_id,
    list_employees,
)

router = APIRouter(prefix="/api/employees", tags=["Employees"])


async def read_json_body(request: Request) -> Any:
    # Parsing happens before any field validation, so a broken body is a 500, not a 400.
    try:
        return await request.json()
    except ValueError as e:
        raise InternalError("Invalid request body", details=str(e)) from e


@router.post("", response_model=EmployeeResponse, status_code=status.HTTP_201_CREATED)
async def add_employee(
    request: Request,
    users: UserRepository = Depends(get_user_repository),
    auths: GarageAuthRepository = Depends(get_garage_auth_repository),
    uniqueness: LoginIdUniqueness = Depends(get_uniqueness),
    policy: ProvisioningPolicy = Depends(get_policy),
    caller_uid: Optional[str] = Depends(get_caller_uid),
    settings: Settings = Depends(get_settings),
):
    """Create an employee under a garage owner, with its auth mapping."""
    body = await read_json_body(request)
    user = await run_in_threadpool(
        create_employee,
        body,
        users,
        auths,
        uniqueness,
        policy,
        caller_uid,
        settings.SANITIZE_NAMES,
    )
    return EmployeeResponse(
        message="Employee added successfully",
        employee=EmployeeRead.model_validate(user),
    )


@router.get("/list", response_model=EmployeeListResponse)
def list_garage_employees(
    garageId: Optional[str] = None,
    users: UserRepository = Depends(get_user_repository),
):
    """List a garage's employees, owner excluded, newest first."""
    employees = [EmployeeRead.model_validate(u) for u in list_employees(users, garageId)]
    return EmployeeListResponse(employees=employees, count=len(employees))


@router.get("/by-login/{login_id:path}", response_model=EmployeeResponse)
def employee_by_login(
    login_id: str,
    users: UserRepository = Depends(get_user_repository),
):
    """Fetch one employee by login ID."""
    user = get_employee_by_login_id(users, login_id)
    return EmployeeResponse(employee=EmployeeRead.model_validate(user))


@router.delete("/delete", response_model=EmployeeResponse)
async def delete_employee(
    request: Request,
    users: UserRepository = Depends(get_user_repository),
):
    """Soft delete an employee (is_active = false)."""
    body = await read_json_body(request)
    employee_id = body.get("employeeId") if isinstance(body, dict) else None
    user = await run_in_threadpool(deactivate_employee, users, employee_id)
    return EmployeeResponse(
        message="Employee deleted successfully",
        employee=EmployeeRead.model_validate(user),
    )
