from __future__ import annotations

from typing import Any, Mapping, Optional


class DomainError(Exception):
    """Base exception for business rule violations."""


class ValidationError(DomainError):
    """Raised when input data is invalid or violates domain rules."""


class AuthenticationError(DomainError):
    """Raised when login credentials are invalid."""


class AccountNotFoundError(AuthenticationError):
    """Raised when no account exists for the given username."""


class AuthenticationFailedError(AuthenticationError):
    """Raised when the password does not match the stored hash."""


class UsernameConflictError(DomainError):
    """Raised when the username is already used by another account."""


class InfrastructureError(DomainError):
    """Opaque failure of a collaborator (store, hasher).

    The original exception is kept as ``__cause__``. ``context`` carries the
    operation name and the username; secrets never go in here.
    """

    def __init__(self, message: str, *, operation: str, username: Optional[str] = None):
        super().__init__(message)
        self.operation = operation
        self.username = username

    @property
    def context(self) -> Mapping[str, Any]:
        ctx: dict[str, Any] = {"operation": self.operation}
        if self.username is not None:
            ctx["username"] = self.username
        return ctx

    def __str__(self) -> str:
        base = super().__str__()
        details = ", ".join(f"{k}={v}" for k, v in self.context.items())
        return f"{base} ({details})"


class HasherError(Exception):
    """Internal failure of a secret hasher."""


class InputTooLongError(HasherError):
    """Raised when the plaintext exceeds what the hashing scheme supports."""

    def __init__(self, length: int, max_length: int):
        super().__init__(f"plaintext is {length} bytes, the maximum is {max_length}")
        self.length = length
        self.max_length = max_length


class HashMismatchError(HasherError):
    """Raised when a candidate does not match the stored digest."""


class ConfigError(Exception):
    """Raised when configuration cannot be loaded."""


class ConfigNotFoundError(ConfigError):
    """Raised when a configuration file does not exist."""


class MissingEnvError(ConfigError):
    """Raised when a required environment variable is unset or blank."""

    def __init__(self, name: str):
        super().__init__(f"required environment variable {name} is not set")
        self.name = name


class ServerError(Exception):
    """Raised when the HTTP server cannot be started."""
