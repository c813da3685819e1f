"""
User Repository Interface.
Defines data access operations for garage users and employees.
"""

from datetime import datetime
from typing import List, Optional

from garage_api.domain.repositories.base import BaseRepository
from garage_api.domain.models.user import User


class UserRepository(BaseRepository[User]):
    """Interface for User-specific operations."""

    def get_by_login_id(self, login_id: str) -> Optional[User]:
        """Get the user holding a login ID, if any."""
        ...

    def list_by_garage(self, garage_id: str, exclude_role: str | None = None) -> List[User]:
        """List a garage's users, newest first."""
        ...

    def deactivate(self, user_uid: str) -> Optional[User]:
        """Soft delete a user by clearing is_active."""
        ...

    def list_without_auth_mapping(self, created_before: datetime | None = None) -> List[User]:
        """Users that have no garage_auth row, optionally only those created before a cutoff."""
        ...
