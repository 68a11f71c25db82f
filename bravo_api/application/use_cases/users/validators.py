"""Common validation helpers for user use cases."""

import re

_USERNAME_PATTERN = re.compile(r"^[a-z0-9._-]{3,50}$")


def ensure_valid_username(username: str) -> str:
    """Return a normalized username or raise ``ValueError``."""

    normalized = username.strip().lower()
    if not _USERNAME_PATTERN.match(normalized):
        raise ValueError(
            "Username must be 3-50 characters of letters, digits, dots, dashes or underscores"
        )
    return normalized
