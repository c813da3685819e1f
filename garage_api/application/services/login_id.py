"""Login ID derivation — ``firstname.lastname@garagename``."""

import re
import unicodedata

_WHITESPACE = re.compile(r"\s+")
_UNSAFE_LOGIN_CHARS = re.compile(r"[^a-z0-9'\-]")


def clean_name(value: str) -> str:
    """Collapse whitespace runs, trim, drop the remaining spaces and lower-case."""
    collapsed = _WHITESPACE.sub(" ", value).strip()
    return collapsed.replace(" ", "").lower()


def clean_garage_name(value: str) -> str:
    """Lower-case and strip every whitespace character. Nothing else is touched."""
    return _WHITESPACE.sub("", value.lower())


def sanitize_segment(value: str) -> str:
    """Reduce a login segment to ASCII letters, digits, apostrophes and hyphens."""
    decomposed = unicodedata.normalize("NFKD", value)
    ascii_only = "".join(c for c in decomposed if not unicodedata.combining(c))
    return _UNSAFE_LOGIN_CHARS.sub("", ascii_only.lower())


def derive_login_id(first_name: str, last_name: str, garage_name: str | None, sanitize: bool = False) -> str:
    """
    Build the login ID of a new employee.

    Without ``sanitize`` the names go in byte for byte apart from whitespace and
    case, so markup or control characters in a name show up in the login ID.
    An empty garage name leaves a bare trailing ``@``.
    """
    first = clean_name(first_name)
    last = clean_name(last_name)
    garage = clean_garage_name(garage_name or "")

    if sanitize:
        first, last, garage = sanitize_segment(first), sanitize_segment(last), sanitize_segment(garage)

    return f"{first}.{last}@{garage}"
