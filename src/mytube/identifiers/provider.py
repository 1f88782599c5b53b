from __future__ import annotations

import uuid
from typing import Protocol


class IdentifierProvider(Protocol):
    """Generates opaque identifiers for new records."""

    def generate(self) -> str:
        raise NotImplementedError


class UUIDIdentifierProvider(IdentifierProvider):
    """Random (version 4) UUIDs rendered as 32 hex characters.

    No shared state, so concurrent callers need no locking.
    """

    def generate(self) -> str:
        return uuid.uuid4().hex
