from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Dict


@dataclass(frozen=True)
class Account:
    """Thực thể miền (domain): Account.

    ``id`` is internal only; outside the system an account is identified by
    ``username``. ``password_hash`` never leaves the process: it is masked in
    ``repr`` and left out of ``to_public_dict``.
    """

    id: str
    username: str
    password_hash: str = field(repr=False)

    def to_public_dict(self) -> Dict[str, Any]:
        return {"username": self.username}


def new_account(id: str, username: str, password_hash: str) -> Account:
    return Account(id=id, username=username, password_hash=password_hash)
