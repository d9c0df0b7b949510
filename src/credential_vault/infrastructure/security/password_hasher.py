"""Argon2 password hasher adapter."""

from __future__ import annotations

import hmac
import secrets
from dataclasses import dataclass

from argon2.exceptions import HashingError
from argon2.low_level import Type, hash_secret_raw

from credential_vault.application.ports.password_hasher_port import PasswordHasherPort
from credential_vault.domain.auth.credentials import (
    HASH_LENGTH,
    SALT_LENGTH,
    Plaintext,
    StoredCredential,
)


class PasswordHashingError(RuntimeError):
    """Raised when the Argon2 primitive cannot complete a hash computation."""

    def __init__(self, *, detail: str) -> None:
        super().__init__(f"password hashing failed: {detail}")
        self.detail = detail


@dataclass(frozen=True)
class Argon2Parameters:
    """Argon2 cost parameters, fixed for the lifetime of a deployment.

    Credentials are stored without their parameters, so changing any value
    here makes every previously stored credential fail verification.
    Values outside the unsigned 32-bit range are reported as hashing failures.
    """

    time_cost: int = 2
    memory_cost: int = 19_456
    parallelism: int = 1
    variant: Type = Type.ID


class Argon2PasswordHasher(PasswordHasherPort):
    """Password hashing adapter using raw Argon2 digests and per-call salts."""

    def __init__(self, *, parameters: Argon2Parameters | None = None) -> None:
        self._parameters = parameters or Argon2Parameters()

    @property
    def parameters(self) -> Argon2Parameters:
        return self._parameters

    def encode(self, plaintext: Plaintext) -> StoredCredential:
        salt = secrets.token_bytes(SALT_LENGTH)
        digest = self._derive(secret=_as_bytes(plaintext), salt=salt)
        return StoredCredential(salt=salt, hash=digest)

    def verify(self, stored: StoredCredential, candidate: Plaintext) -> bool:
        digest = self._derive(secret=_as_bytes(candidate), salt=stored.salt)
        return hmac.compare_digest(digest, stored.hash)

    def _derive(self, *, secret: bytes, salt: bytes) -> bytes:
        try:
            return hash_secret_raw(
                secret=secret,
                salt=salt,
                time_cost=self._parameters.time_cost,
                memory_cost=self._parameters.memory_cost,
                parallelism=self._parameters.parallelism,
                hash_len=HASH_LENGTH,
                type=self._parameters.variant,
            )
        except (HashingError, OverflowError) as exc:
            raise PasswordHashingError(detail=str(exc)) from exc


def _as_bytes(value: Plaintext) -> bytes:
    if isinstance(value, str):
        return value.encode("utf-8")
    return bytes(value)
