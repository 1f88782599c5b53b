from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Any, Optional

from .accounts.memory_account_repository import InMemoryAccountRepository
from .accounts.mysql_account_repository import MySQLAccountRepository
from .accounts.repository import AccountRepository
from .accounts.service import AuthService
from .core.constants import DEFAULT_BCRYPT_ROUNDS
from .core.logging import new_logger
from .database.connection import DBConfig, DatabaseConnection
from .identifiers.provider import IdentifierProvider, UUIDIdentifierProvider
from .security.hasher import SecretHasher, build_hasher


@dataclass(frozen=True)
class Container:
    conn: Optional[DatabaseConnection]

    accounts_repo: AccountRepository
    hasher: SecretHasher
    identifiers: IdentifierProvider

    auth_service: AuthService
    logger: logging.Logger


def build_account_repository(store: str, conn: Optional[DatabaseConnection]) -> AccountRepository:
    key = (store or "memory").strip().lower()
    if key == "memory":
        return InMemoryAccountRepository()
    if key == "mysql":
        if conn is None:
            raise ValueError("ACCOUNT_STORE=mysql requires DB_CONFIG")
        return MySQLAccountRepository(conn)
    raise ValueError(f"Unknown account store: {store!r}")


def build_container(*, settings: Any) -> Container:
    store = str(getattr(settings, "ACCOUNT_STORE", "memory"))
    db_config = getattr(settings, "DB_CONFIG", None)

    conn = None
    if store.strip().lower() == "mysql" and db_config:
        conn = DatabaseConnection(DBConfig.from_mapping(db_config))

    accounts_repo = build_account_repository(store, conn)
    hasher = build_hasher(
        str(getattr(settings, "PASSWORD_HASHER", "bcrypt")),
        rounds=int(getattr(settings, "BCRYPT_ROUNDS", DEFAULT_BCRYPT_ROUNDS)),
    )
    identifiers = UUIDIdentifierProvider()

    logger = new_logger("app")
    auth_service = AuthService(accounts_repo, hasher, identifiers, logger=new_logger("accounts.auth"))

    return Container(
        conn=conn,
        accounts_repo=accounts_repo,
        hasher=hasher,
        identifiers=identifiers,
        auth_service=auth_service,
        logger=logger,
    )
