"""Port for password hashing and verification."""

from __future__ import annotations

from typing import Protocol

from credential_vault.domain.auth.credentials import Plaintext, StoredCredential


class PasswordHasherPort(Protocol):
    """Password encoding/verification contract."""

    def encode(self, plaintext: Plaintext) -> StoredCredential:
        """Derive a freshly salted credential from a plaintext password."""

    def verify(self, stored: StoredCredential, candidate: Plaintext) -> bool:
        """Return whether the candidate reproduces the stored credential."""
