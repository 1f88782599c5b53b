from __future__ import annotations

import threading
from typing import Dict

from ..core.exceptions import AccountNotFoundError, UsernameConflictError
from .model import Account
from .repository import AccountRepository


class InMemoryAccountRepository(AccountRepository):
    """Process-local store, used for tests and ``ACCOUNT_STORE=memory`` runs."""

    def __init__(self):
        self._lock = threading.Lock()
        self._by_username: Dict[str, Account] = {}
        self._ids: set[str] = set()

    def exists_by_username(self, username: str) -> bool:
        with self._lock:
            return username in self._by_username

    def insert(self, account: Account) -> None:
        with self._lock:
            if account.username in self._by_username:
                raise UsernameConflictError(f"username {account.username!r} is already used")
            if account.id in self._ids:
                raise ValueError(f"account id {account.id!r} is already used")
            self._by_username[account.username] = account
            self._ids.add(account.id)

    def find_by_username(self, username: str) -> Account:
        with self._lock:
            account = self._by_username.get(username)
        if account is None:
            raise AccountNotFoundError(f"account {username!r} not found")
        return account

    def __len__(self) -> int:
        with self._lock:
            return len(self._by_username)
