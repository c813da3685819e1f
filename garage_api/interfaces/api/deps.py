"""FastAPI dependency — caller identity for the provisioning policy."""

from typing import Optional

from fastapi import Header


def get_caller_uid(x_user_uid: Optional[str] = Header(default=None)) -> Optional[str]:
    """
    UID of the user making the request, taken from ``X-User-Uid``.

    The header is not authenticated; it only feeds the provisioning policy,
    which ignores it under the default ``allow_all`` setting.
    """
    if x_user_uid is None or not x_user_uid.strip():
        return None
    return x_user_uid.strip()
