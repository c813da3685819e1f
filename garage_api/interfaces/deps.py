"""
API Dependencies.
"""

from fastapi import Depends
from sqlalchemy.orm import Session

from garage_api.config import Settings, get_settings
from garage_api.infrastructure.database import get_db
from garage_api.domain.models.user import User
from garage_api.domain.models.garage_auth import GarageAuth
from garage_api.domain.repositories.user_repository import UserRepository
from garage_api.domain.repositories.garage_auth_repository import GarageAuthRepository
from garage_api.infrastructure.repositories.user_repository import SQLAlchemyUserRepository
from garage_api.infrastructure.repositories.garage_auth_repository import SQLAlchemyGarageAuthRepository
from garage_api.application.services.login_id_uniqueness import LoginIdUniqueness, get_uniqueness_strategy
from garage_api.application.services.provisioning_policy import ProvisioningPolicy, get_provisioning_policy


def get_user_repository(db: Session = Depends(get_db)) -> UserRepository:
    """Get user repository instance."""
    return SQLAlchemyUserRepository(db, User)


def get_garage_auth_repository(db: Session = Depends(get_db)) -> GarageAuthRepository:
    """Get auth-mapping repository instance."""
    return SQLAlchemyGarageAuthRepository(db, GarageAuth)


def get_uniqueness(settings: Settings = Depends(get_settings)) -> LoginIdUniqueness:
    """Login ID uniqueness strategy selected by LOGIN_ID_UNIQUENESS."""
    return get_uniqueness_strategy(settings.LOGIN_ID_UNIQUENESS)


def get_policy(
    settings: Settings = Depends(get_settings),
    users: UserRepository = Depends(get_user_repository),
) -> ProvisioningPolicy:
    """Provisioning policy selected by PROVISIONING_POLICY."""
    return get_provisioning_policy(settings.PROVISIONING_POLICY, users)
