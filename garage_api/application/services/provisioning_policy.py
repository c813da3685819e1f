"""Who may provision employees under a garage owner."""

from typing import Optional, Protocol

from garage_api.domain.models.user import User
from garage_api.domain.repositories.user_repository import UserRepository


class ProvisioningPolicy(Protocol):
    name: str

    def can_provision_under(self, caller_uid: Optional[str], parent_user: User) -> bool:
        ...


class AllowAllPolicy:
    """No check at all. Anyone who knows a parent UID can add employees under it."""

    name = "allow_all"

    def can_provision_under(self, caller_uid: Optional[str], parent_user: User) -> bool:
        return True


class SameGaragePolicy:
    """The caller must be an active user of the parent's garage."""

    name = "same_garage"

    def __init__(self, users: UserRepository):
        self.users = users

    def can_provision_under(self, caller_uid: Optional[str], parent_user: User) -> bool:
        if not caller_uid:
            return False
        caller = self.users.get_by_id(caller_uid)
        if caller is None or not caller.is_active:
            return False
        return caller.garage_uid == parent_user.garage_uid and caller.garage_id == parent_user.garage_id


def get_provisioning_policy(name: str, users: UserRepository) -> ProvisioningPolicy:
    name = name.lower()
    if name == AllowAllPolicy.name:
        return AllowAllPolicy()
    if name == SameGaragePolicy.name:
        return SameGaragePolicy(users)
    raise ValueError(f"Unknown PROVISIONING_POLICY: {name!r}")
