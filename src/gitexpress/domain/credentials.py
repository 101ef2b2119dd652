"""Format checks for user-supplied credentials."""

import re

from .exceptions import InvalidTokenError

GITHUB_TOKEN_PATTERN = re.compile(r"^gh[pousr]_[A-Za-z0-9_]{36,}$")


def is_valid_github_token(token: str | None) -> bool:
    return bool(token) and GITHUB_TOKEN_PATTERN.match(token) is not None


def validate_github_token(token: str | None) -> str:
    """Return ``token`` unchanged or raise ``InvalidTokenError``."""
    if not is_valid_github_token(token):
        raise InvalidTokenError()
    return token


def mask_secret(secret: str | None, visible: int = 4) -> str | None:
    """Show only the last ``visible`` characters of a secret."""
    if not secret:
        return None
    if len(secret) <= visible:
        return "*" * len(secret)
    return "*" * (len(secret) - visible) + secret[-visible:]
