"""
GarageAuth Repository Interface.
"""

from typing import Optional

from garage_api.domain.repositories.base import BaseRepository
from garage_api.domain.models.garage_auth import GarageAuth


class GarageAuthRepository(BaseRepository[GarageAuth]):
    """Interface for auth-mapping operations."""

    def get_by_user_uid(self, user_uid: str) -> Optional[GarageAuth]:
        """Get the auth mapping of a user."""
        ...
