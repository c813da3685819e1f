"""
SQLAlchemy Implementation of GarageAuth Repository.
"""

from typing import Optional

from sqlalchemy import select

from garage_api.domain.models.garage_auth import GarageAuth
from garage_api.domain.repositories.garage_auth_repository import GarageAuthRepository
from garage_api.infrastructure.repositories.base_repository import SQLAlchemyRepository


class SQLAlchemyGarageAuthRepository(SQLAlchemyRepository[GarageAuth], GarageAuthRepository):
    """Auth-mapping repository implementation using SQLAlchemy."""

    def get_by_user_uid(self, user_uid: str) -> Optional[GarageAuth]:
        return self.db.scalars(select(GarageAuth).where(GarageAuth.user_uid == user_uid)).first()
