"""Employee service — provisioning, lookup and soft delete of garage employees."""

from datetime import datetime, timedelta, timezone
from typing import Any, Dict, List, Optional

import structlog

from garage_api.application.services.employee_validation import validate_employee_request
from garage_api.application.services.login_id import derive_login_id
from garage_api.application.services.login_id_uniqueness import LoginIdUniqueness
from garage_api.application.services.provisioning_policy import AllowAllPolicy, ProvisioningPolicy
from garage_api.application.services.provisioning_saga import (
    ProvisioningSaga,
    SagaCompleted,
    SagaOrphaned,
)
from garage_api.core.exceptions import (
    ForbiddenError,
    InternalError,
    NotFoundError,
    ValidationError,
)
from garage_api.domain.models.user import User, new_user_uid
from garage_api.domain.repositories.base import RepositoryError
from garage_api.domain.repositories.garage_auth_repository import GarageAuthRepository
from garage_api.domain.repositories.user_repository import UserRepository

logger = structlog.get_logger(__name__)

OWNER_ROLE = "Owner"
AUTH_INSERT_FAILED = "Failed to create authentication record"


def _store_detail(exc: Exception) -> str:
    return exc.detail if isinstance(exc, RepositoryError) else str(exc)


def create_employee(
    body: Any,
    users: UserRepository,
    auths: GarageAuthRepository,
    uniqueness: LoginIdUniqueness,
    policy: ProvisioningPolicy | None = None,
    caller_uid: Optional[str] = None,
    sanitize_names: bool = False,
) -> User:
    """
    Provision an employee under a garage owner.

    Writes a ``users`` row and then its ``garage_auth`` row. If the second
    insert fails the user row is deleted again; if that delete fails as well
    the user is left orphaned and a warning is logged with its UID.
    """
    request = validate_employee_request(body)

    parent = users.get_by_id(request.parent_user_uid)
    if parent is None or not parent.is_active:
        raise NotFoundError("Parent user not found")

    policy = policy or AllowAllPolicy()
    if not policy.can_provision_under(caller_uid, parent):
        logger.info(
            "employee.provisioning_denied",
            caller_uid=caller_uid,
            parent_user_uid=parent.user_uid,
            policy=policy.name,
        )
        raise ForbiddenError("Not authorized to add employees for this garage")

    login_id = derive_login_id(request.first_name, request.last_name, parent.garage_name, sanitize=sanitize_names)
    uniqueness.ensure_unique_login_id(users, login_id)

    now = datetime.now(timezone.utc)
    user_uid = new_user_uid()

    def create_user(_: Dict[str, Any]) -> User:
        return users.create({
            "user_uid": user_uid,
            "garage_uid": parent.garage_uid,
            "garage_id": parent.garage_id,
            "garage_name": parent.garage_name,
            "first_name": request.first_name,
            "last_name": request.last_name,
            "employee_id": request.employee_id,
            "login_id": login_id,
            "user_role": request.user_role,
            "email": request.email,
            "phone_number": request.phone_number,
            "is_active": True,
            "created_at": now,
            "updated_at": now,
        })

    def delete_user(_: User) -> None:
        users.delete(user_uid)

    def create_auth_mapping(_: Dict[str, Any]):
        return auths.create({
            "user_uid": user_uid,
            "garage_uid": parent.garage_uid,
            "garage_id": parent.garage_id,
            "garage_name": parent.garage_name,
            "first_name": request.first_name,
            "last_name": request.last_name,
            "login_id": login_id,
            "user_role": request.user_role,
            "password_hash": None,
            "created_at": now,
            "updated_at": now,
        })

    outcome = (
        ProvisioningSaga("create_employee")
        .step("create_user", create_user, compensation=delete_user)
        .step("create_auth_mapping", create_auth_mapping)
        .run()
    )

    if isinstance(outcome, SagaCompleted):
        user = outcome.results["create_user"]
        logger.info(
            "employee.created",
            user_uid=user.user_uid,
            login_id=user.login_id,
            garage_id=user.garage_id,
        )
        return user

    if outcome.failed_step == "create_user":
        raise uniqueness.translate_insert_error(outcome.cause)

    if isinstance(outcome, SagaOrphaned):
        logger.warning(
            "provisioning.orphaned_user",
            user_uid=user_uid,
            login_id=login_id,
            cause=str(outcome.cause),
            compensation_errors=[f"{step}: {exc}" for step, exc in outcome.compensation_errors],
        )
    else:
        logger.info("provisioning.compensated", user_uid=user_uid, login_id=login_id, cause=str(outcome.cause))

    raise InternalError(AUTH_INSERT_FAILED, details=_store_detail(outcome.cause))


def list_employees(users: UserRepository, garage_id: Optional[str]) -> List[User]:
    """All users of a garage except its owner, newest first."""
    if not garage_id or not garage_id.strip():
        raise ValidationError("Garage ID is required")
    return users.list_by_garage(garage_id, exclude_role=OWNER_ROLE)


def get_employee_by_login_id(users: UserRepository, login_id: str) -> User:
    if not login_id or not login_id.strip():
        raise ValidationError("Login ID is required")
    user = users.get_by_login_id(login_id)
    if user is None:
        raise NotFoundError("Employee not found")
    return user


def deactivate_employee(users: UserRepository, user_uid: Optional[str]) -> User:
    """Soft delete: the row stays, is_active goes false."""
    if not isinstance(user_uid, str) or not user_uid.strip():
        raise ValidationError("Employee ID is required")
    try:
        user = users.deactivate(user_uid)
    except RepositoryError as e:
        raise InternalError("Failed to delete employee", details=e.detail) from e
    if user is None:
        raise NotFoundError("Employee not found")
    logger.info("employee.deactivated", user_uid=user.user_uid)
    return user


def find_orphaned_users(users: UserRepository, grace_minutes: int = 0) -> List[User]:
    """
    Users whose auth mapping is missing, typically left by a failed rollback.

    Users younger than ``grace_minutes`` are skipped; their provisioning
    request may still be running.
    """
    cutoff = datetime.now(timezone.utc) - timedelta(minutes=grace_minutes) if grace_minutes else None
    return users.list_without_auth_mapping(created_before=cutoff)


def reconcile_orphans(users: UserRepository, delete: bool = False, grace_minutes: int = 0) -> Dict[str, Any]:
    """Report orphaned users and optionally delete them."""
    orphans = find_orphaned_users(users, grace_minutes)
    deleted: List[str] = []
    failed: List[str] = []

    for user in orphans:
        user_uid = user.user_uid
        logger.warning("orphan_sweep.orphan_found", user_uid=user_uid, login_id=user.login_id)
        if not delete:
            continue
        try:
            users.delete(user_uid)
        except RepositoryError as e:
            logger.error("orphan_sweep.delete_failed", user_uid=user_uid, error=e.detail)
            failed.append(user_uid)
        else:
            deleted.append(user_uid)

    summary = {"found": len(orphans), "deleted": deleted, "failed": failed}
    logger.info("orphan_sweep.finished", found=len(orphans), deleted=len(deleted), failed=len(failed))
    return summary


def ensure_garage_owner(
    users: UserRepository,
    auths: GarageAuthRepository,
    garage_name: str = "Demo Garage",
    garage_id: str = "GARAGE001",
) -> User:
    """Create a garage owner (user + auth mapping) unless its login ID already exists."""
    login_id = derive_login_id("Garage", "Owner", garage_name)
    existing = users.get_by_login_id(login_id)
    if existing is not None:
        return existing

    now = datetime.now(timezone.utc)
    owner = users.create({
        "user_uid": new_user_uid(),
        "garage_uid": new_user_uid(),
        "garage_id": garage_id,
        "garage_name": garage_name,
        "first_name": "Garage",
        "last_name": "Owner",
        "login_id": login_id,
        "user_role": OWNER_ROLE,
        "email": "owner@example.com",
        "phone_number": "+10000000000",
        "is_active": True,
        "created_at": now,
        "updated_at": now,
    })
    auths.create({
        "user_uid": owner.user_uid,
        "garage_uid": owner.garage_uid,
        "garage_id": garage_id,
        "garage_name": garage_name,
        "first_name": owner.first_name,
        "last_name": owner.last_name,
        "login_id": login_id,
        "user_role": OWNER_ROLE,
        "password_hash": None,
        "created_at": now,
        "updated_at": now,
    })
    logger.info("Garage owner created", user_uid=owner.user_uid, login_id=login_id)
    return owner
