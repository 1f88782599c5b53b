from __future__ import annotations

from mysql.connector import errorcode
from mysql.connector.errors import IntegrityError

from ..core.exceptions import AccountNotFoundError, UsernameConflictError
from ..database.connection import DatabaseConnection
from ..database.mysql_base import db_cursor, fetchone
from .model import Account
from .repository import AccountRepository


class MySQLAccountRepository(AccountRepository):
    """``accounts`` table access.

    Username uniqueness is enforced by the ``UNIQUE`` key on ``username``;
    a duplicate-key error on insert is reported as ``UsernameConflictError``.
    """

    def __init__(self, conn_factory: DatabaseConnection):
        self._conn_factory = conn_factory

    def exists_by_username(self, username: str) -> bool:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute("SELECT 1 AS found FROM accounts WHERE username=%s LIMIT 1", (username,))
            return fetchone(cur) is not None

    def insert(self, account: Account) -> None:
        try:
            with db_cursor(self._conn_factory) as (_, cur):
                cur.execute(
                    """
                    INSERT INTO accounts(id, username, password_hash)
                    VALUES(%s,%s,%s)
                    """,
                    (account.id, account.username, account.password_hash),
                )
        except IntegrityError as exc:
            if exc.errno == errorcode.ER_DUP_ENTRY and "username" in (exc.msg or ""):
                raise UsernameConflictError(f"username {account.username!r} is already used") from exc
            raise

    def find_by_username(self, username: str) -> Account:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                """
                SELECT id, username, password_hash
                FROM accounts
                WHERE username=%s
                """,
                (username,),
            )
            row = fetchone(cur)
            if not row:
                raise AccountNotFoundError(f"account {username!r} not found")
            return Account(
                id=str(row["id"]),
                username=row["username"],
                password_hash=row["password_hash"],
            )
