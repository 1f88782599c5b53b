"""Password hashing.

Two interchangeable schemes live here:

- ``BcryptSecretHasher`` (default): bcrypt with a tunable work factor. The
  salt and the cost are embedded in the digest, so nothing else needs storing.
  bcrypt only looks at the first 72 bytes of its input; longer inputs are
  rejected instead of being silently truncated.
- ``WerkzeugSecretHasher``: ``werkzeug.security`` (scrypt / pbkdf2), same
  contract, with a generous length cap so huge inputs cannot be used to burn
  CPU.

Both return ``None`` from ``verify`` on success and raise ``HashMismatchError``
for a wrong candidate. Any other problem (corrupted digest, backend failure)
is a plain ``HasherError`` so callers never confuse it with a wrong password.
"""

from __future__ import annotations

from typing import Any, Protocol

import bcrypt
from werkzeug.security import check_password_hash, generate_password_hash

from ..core.constants import (
    BCRYPT_MAX_PASSWORD_BYTES,
    DEFAULT_BCRYPT_ROUNDS,
    WERKZEUG_MAX_PASSWORD_BYTES,
)
from ..core.exceptions import HasherError, HashMismatchError, InputTooLongError


class SecretHasher(Protocol):
    def hash(self, plaintext: str) -> str:
        raise NotImplementedError

    def verify(self, digest: str, candidate: str) -> None:
        raise NotImplementedError


def _encode(plaintext: str) -> bytes:
    if not isinstance(plaintext, str):
        raise HasherError(f"plaintext must be str, got {type(plaintext).__name__}")
    return plaintext.encode("utf-8")


class BcryptSecretHasher(SecretHasher):
    max_length = BCRYPT_MAX_PASSWORD_BYTES

    def __init__(self, rounds: int = DEFAULT_BCRYPT_ROUNDS):
        # bcrypt accepts cost factors 4..31
        if not 4 <= int(rounds) <= 31:
            raise ValueError(f"bcrypt rounds must be between 4 and 31, got {rounds}")
        self._rounds = int(rounds)

    @property
    def rounds(self) -> int:
        return self._rounds

    def hash(self, plaintext: str) -> str:
        raw = _encode(plaintext)
        if len(raw) > self.max_length:
            raise InputTooLongError(len(raw), self.max_length)

        try:
            digest = bcrypt.hashpw(raw, bcrypt.gensalt(rounds=self._rounds))
        except (ValueError, TypeError) as exc:
            raise HasherError(f"bcrypt failed to hash: {exc}") from exc
        return digest.decode("ascii")

    def verify(self, digest: str, candidate: str) -> None:
        raw = _encode(candidate)
        if len(raw) > self.max_length:
            # Such a candidate can never have been hashed by this scheme.
            raise HashMismatchError("candidate does not match the digest")

        try:
            ok = bcrypt.checkpw(raw, digest.encode("ascii"))
        except (AttributeError, ValueError, TypeError, UnicodeEncodeError) as exc:
            raise HasherError(f"bcrypt failed to verify: {exc}") from exc

        if not ok:
            raise HashMismatchError("candidate does not match the digest")


class WerkzeugSecretHasher(SecretHasher):
    def __init__(self, method: str = "scrypt", max_length: int = WERKZEUG_MAX_PASSWORD_BYTES, salt_length: int = 16):
        self._method = method
        self.max_length = int(max_length)
        self._salt_length = int(salt_length)

    def hash(self, plaintext: str) -> str:
        raw = _encode(plaintext)
        if len(raw) > self.max_length:
            raise InputTooLongError(len(raw), self.max_length)

        try:
            return generate_password_hash(plaintext, method=self._method, salt_length=self._salt_length)
        except (ValueError, TypeError) as exc:
            raise HasherError(f"werkzeug failed to hash with {self._method!r}: {exc}") from exc

    def verify(self, digest: str, candidate: str) -> None:
        raw = _encode(candidate)
        if len(raw) > self.max_length:
            raise HashMismatchError("candidate does not match the digest")

        # werkzeug digests look like "<method>$<salt>$<hash>"
        if digest.count("$") < 2:
            raise HasherError("digest is not a werkzeug password hash")

        try:
            ok = check_password_hash(digest, candidate)
        except (ValueError, TypeError) as exc:
            raise HasherError(f"werkzeug failed to verify: {exc}") from exc

        if not ok:
            raise HashMismatchError("candidate does not match the digest")


def build_hasher(name: str, **options: Any) -> SecretHasher:
    """Resolve the ``PASSWORD_HASHER`` setting into a hasher instance."""

    key = (name or "bcrypt").strip().lower()
    if key == "bcrypt":
        return BcryptSecretHasher(rounds=int(options.get("rounds", DEFAULT_BCRYPT_ROUNDS)))
    if key == "werkzeug":
        return WerkzeugSecretHasher(method=str(options.get("method", "scrypt")))
    raise ValueError(f"Unknown password hasher: {name!r}")
