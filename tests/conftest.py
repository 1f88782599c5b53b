from __future__ import annotations

import os

import pytest

os.environ["APP_ENV"] = "testing"

from mytube.accounts.memory_account_repository import InMemoryAccountRepository
from mytube.accounts.service import AuthService
from mytube.security.hasher import BcryptSecretHasher


class SequenceIdentifiers:
    """Deterministic ids: acc-1, acc-2, ..."""

    def __init__(self, prefix: str = "acc"):
        self._prefix = prefix
        self.calls = 0

    def generate(self) -> str:
        self.calls += 1
        return f"{self._prefix}-{self.calls}"


@pytest.fixture
def fast_hasher() -> BcryptSecretHasher:
    return BcryptSecretHasher(rounds=4)


@pytest.fixture
def account_store() -> InMemoryAccountRepository:
    return InMemoryAccountRepository()


@pytest.fixture
def identifiers() -> SequenceIdentifiers:
    return SequenceIdentifiers()


@pytest.fixture
def auth_service(account_store, fast_hasher, identifiers) -> AuthService:
    return AuthService(account_store, fast_hasher, identifiers)
