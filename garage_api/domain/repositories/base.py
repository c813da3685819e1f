"""
Base Repository Interface.
Defines the standard contract for data access operations.
"""

from typing import TypeVar, Optional, Any, Protocol

T = TypeVar("T")


class RepositoryError(Exception):
    """The store rejected an operation. ``detail`` carries the store's own message."""

    def __init__(self, message: str, detail: str = ""):
        self.detail = detail or message
        super().__init__(message)


class ConstraintViolationError(RepositoryError):
    """A write violated a database constraint (unique index, foreign key, not null)."""


class BaseRepository(Protocol[T]):
    """Interface for the primitive operations the services rely on."""

    def get_by_id(self, id: Any) -> Optional[T]:
        """Get a single entity by primary key."""
        ...

    def create(self, obj_in: Any) -> T:
        """Insert a new entity and return it."""
        ...

    def delete(self, id: Any) -> Optional[T]:
        """Delete an entity by primary key."""
        ...
