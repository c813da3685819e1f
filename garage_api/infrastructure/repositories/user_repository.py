"""
SQLAlchemy Implementation of User Repository.
"""

from datetime import datetime, timezone
from typing import List, Optional

from sqlalchemy import func, select

from garage_api.domain.models.garage_auth import GarageAuth
from garage_api.domain.models.user import User
from garage_api.domain.repositories.user_repository import UserRepository
from garage_api.infrastructure.repositories.base_repository import SQLAlchemyRepository


class SQLAlchemyUserRepository(SQLAlchemyRepository[User], UserRepository):
    """User repository implementation using SQLAlchemy."""

    def get_by_login_id(self, login_id: str) -> Optional[User]:
        return self.db.scalars(select(User).where(User.login_id == login_id)).first()

    def list_by_garage(self, garage_id: str, exclude_role: str | None = None) -> List[User]:
        query = select(User).where(User.garage_id == garage_id)
        if exclude_role:
            query = query.where(func.lower(User.user_role) != exclude_role.lower())
        return list(self.db.scalars(query.order_by(User.created_at.desc())).all())

    def deactivate(self, user_uid: str) -> Optional[User]:
        user = self.get_by_id(user_uid)
        if user is None:
            return None
        user.is_active = False
        user.updated_at = datetime.now(timezone.utc)
        self._commit("Failed to deactivate user")
        self.db.refresh(user)
        return user

    def list_without_auth_mapping(self, created_before: datetime | None = None) -> List[User]:
        query = (
            select(User)
            .outerjoin(GarageAuth, GarageAuth.user_uid == User.user_uid)
            .where(GarageAuth.id.is_(None))
        )
        if created_before is not None:
            query = query.where(User.created_at < created_before)
        query = query.order_by(User.created_at.asc())
        return list(self.db.scalars(query).all())
