"""
Login ID uniqueness strategies.

``precheck`` looks the login ID up before inserting. Two concurrent requests can
both pass that lookup, after which the unique index on ``users.login_id`` makes
the loser's insert fail as an ordinary store error.

``constraint`` skips the lookup and relies on the unique index alone. A
constraint violation on insert is then the only way to get a conflict, so the
race cannot produce duplicates or a 500.
"""

from typing import Protocol

import structlog

from garage_api.core.exceptions import AppError, ConflictError, InternalError
from garage_api.domain.repositories.base import ConstraintViolationError, RepositoryError
from garage_api.domain.repositories.user_repository import UserRepository

logger = structlog.get_logger(__name__)

DUPLICATE_LOGIN_ID = "Employee with this login ID already exists"
USER_INSERT_FAILED = "Failed to create user"


class LoginIdUniqueness(Protocol):
    name: str

    def ensure_unique_login_id(self, users: UserRepository, login_id: str) -> None:
        """Raise ConflictError when the login ID is known to be taken."""
        ...

    def translate_insert_error(self, exc: Exception) -> AppError:
        """Map a failed user insert to the error reported to the caller."""
        ...


def _store_detail(exc: Exception) -> str:
    return exc.detail if isinstance(exc, RepositoryError) else str(exc)


class PreCheckUniqueness:
    name = "precheck"

    def ensure_unique_login_id(self, users: UserRepository, login_id: str) -> None:
        if users.get_by_login_id(login_id) is not None:
            logger.info("employee.duplicate_login_id", login_id=login_id, strategy=self.name)
            raise ConflictError(DUPLICATE_LOGIN_ID)

    def translate_insert_error(self, exc: Exception) -> AppError:
        return InternalError(USER_INSERT_FAILED, details=_store_detail(exc))


class ConstraintUniqueness:
    name = "constraint"

    def ensure_unique_login_id(self, users: UserRepository, login_id: str) -> None:
        return None

    def translate_insert_error(self, exc: Exception) -> AppError:
        if isinstance(exc, ConstraintViolationError):
            logger.info("employee.duplicate_login_id", strategy=self.name, detail=exc.detail)
            return ConflictError(DUPLICATE_LOGIN_ID)
        return InternalError(USER_INSERT_FAILED, details=_store_detail(exc))


STRATEGIES = {
    PreCheckUniqueness.name: PreCheckUniqueness,
    ConstraintUniqueness.name: ConstraintUniqueness,
}


def get_uniqueness_strategy(name: str) -> LoginIdUniqueness:
    try:
        return STRATEGIES[name.lower()]()
    except KeyError:
        raise ValueError(f"Unknown LOGIN_ID_UNIQUENESS strategy: {name!r}") from None
