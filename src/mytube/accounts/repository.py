from __future__ import annotations

from typing import Protocol

from .model import Account


class AccountRepository(Protocol):
    """Giao diện repository cho Account.

    Lưu ý (DIP): tầng service phụ thuộc vào interface này, không phụ thuộc trực tiếp DB cụ thể.

    Implementations must enforce username uniqueness themselves: ``insert``
    raises ``UsernameConflictError`` when the username is taken, even if
    ``exists_by_username`` said otherwise a moment earlier.
    """

    def exists_by_username(self, username: str) -> bool:
        raise NotImplementedError

    def insert(self, account: Account) -> None:
        raise NotImplementedError

    def find_by_username(self, username: str) -> Account:
        """Return the account or raise ``AccountNotFoundError``."""

        raise NotImplementedError
