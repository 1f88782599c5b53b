from __future__ import annotations

import logging
from typing import Optional

from ..core.exceptions import (
    AccountNotFoundError,
    AuthenticationFailedError,
    HashMismatchError,
    InfrastructureError,
    UsernameConflictError,
)
from ..identifiers.provider import IdentifierProvider
from ..security.hasher import SecretHasher
from .model import Account, new_account
from .repository import AccountRepository


class AuthService:
    """Use case: sign up and sign in with username/password.

    Inputs are trusted to be well-formed; shape validation belongs to the
    caller. The service keeps no state of its own beyond its collaborators,
    so one instance can serve concurrent requests.

    ``AccountNotFoundError`` and ``AuthenticationFailedError`` are distinct
    here so they can be logged apart. Anything facing end users should
    report both as the same "invalid credentials" answer.
    """

    def __init__(
        self,
        accounts: AccountRepository,
        hasher: SecretHasher,
        identifiers: IdentifierProvider,
        logger: Optional[logging.Logger] = None,
    ):
        self._accounts = accounts
        self._hasher = hasher
        self._identifiers = identifiers
        self._log = logger or logging.getLogger(__name__)

    def sign_up(self, username: str, password: str) -> Account:
        # Advisory only: the store's insert is the real uniqueness guard, since
        # another sign-up may slip in between this check and the insert.
        try:
            used = self._accounts.exists_by_username(username)
        except Exception as exc:
            raise self._infrastructure("failed to check if the username is used", "sign_up", username, exc) from exc
        if used:
            self._log.info("sign_up rejected: username already used (username=%s)", username)
            raise UsernameConflictError(f"username {username!r} is already used")

        try:
            password_hash = self._hasher.hash(password)
        except Exception as exc:
            raise self._infrastructure("failed to hash the password", "sign_up", username, exc) from exc

        account = new_account(self._identifiers.generate(), username, password_hash)

        try:
            self._accounts.insert(account)
        except UsernameConflictError:
            self._log.info("sign_up rejected by store: username already used (username=%s)", username)
            raise
        except Exception as exc:
            raise self._infrastructure("failed to save the account", "sign_up", username, exc) from exc

        self._log.info("account created (username=%s)", username)
        return account

    def sign_in(self, username: str, password: str) -> Account:
        try:
            account = self._accounts.find_by_username(username)
        except AccountNotFoundError:
            self._log.info("sign_in failed: account not found (username=%s)", username)
            raise
        except Exception as exc:
            raise self._infrastructure("failed to find the account by the username", "sign_in", username, exc) from exc

        try:
            self._hasher.verify(account.password_hash, password)
        except HashMismatchError:
            self._log.info("sign_in failed: wrong password (username=%s)", username)
            raise AuthenticationFailedError("the username or password is not correct") from None
        except Exception as exc:
            raise self._infrastructure("failed to verify the password", "sign_in", username, exc) from exc

        return account

    def _infrastructure(self, message: str, operation: str, username: str, exc: Exception) -> InfrastructureError:
        err = InfrastructureError(message, operation=operation, username=username)
        self._log.error("%s: %s: %s", err, type(exc).__name__, exc)
        return err
