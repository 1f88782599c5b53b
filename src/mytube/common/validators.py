from __future__ import annotations

import re

from ..core.constants import (
    BCRYPT_MAX_PASSWORD_BYTES,
    PASSWORD_MIN_LENGTH,
    USERNAME_MAX_LENGTH,
    USERNAME_MIN_LENGTH,
)
from ..core.exceptions import ValidationError

_USERNAME_RE = re.compile(r"^[A-Za-z0-9_.-]+$")


def require_non_empty(value: str, field_name: str) -> str:
    if not value or not value.strip():
        raise ValidationError(f"{field_name} is required")
    return value.strip()


def require_min_length(value: str, field_name: str, min_len: int) -> str:
    if value is None or len(value) < min_len:
        raise ValidationError(f"{field_name} must be at least {min_len} characters")
    return value


def require_max_length(value: str, field_name: str, max_len: int) -> str:
    if len(value) > max_len:
        raise ValidationError(f"{field_name} must be at most {max_len} characters")
    return value


def validate_username(value: str) -> str:
    username = require_non_empty(value, "username")
    require_min_length(username, "username", USERNAME_MIN_LENGTH)
    require_max_length(username, "username", USERNAME_MAX_LENGTH)
    if not _USERNAME_RE.match(username):
        raise ValidationError("username may only contain letters, digits, '_', '.' and '-'")
    return username


def validate_password(value: str) -> str:
    # Passwords are never stripped: surrounding spaces are part of the secret.
    if not value:
        raise ValidationError("password is required")
    require_min_length(value, "password", PASSWORD_MIN_LENGTH)
    if len(value.encode("utf-8")) > BCRYPT_MAX_PASSWORD_BYTES:
        raise ValidationError(f"password must be at most {BCRYPT_MAX_PASSWORD_BYTES} bytes")
    return value
