"""Stored password credential value object."""

from __future__ import annotations

from dataclasses import dataclass

# Raw passwords: text is UTF-8 encoded, byte sequences are taken as their bytes.
Plaintext = str | bytes | bytearray | memoryview

SALT_LENGTH = 16
HASH_LENGTH = 32

_REDACTED = "StoredCredential(<redacted>)"


@dataclass(frozen=True, repr=False)
class StoredCredential:
    """Salt and derived digest for one password.

    Both fields are raw bytes meant for an external store. The textual form is
    a fixed placeholder so a credential can be logged or printed by accident
    without disclosing either field.
    """

    salt: bytes
    hash: bytes

    def __post_init__(self) -> None:
        if len(self.salt) != SALT_LENGTH:
            raise ValueError(f"salt must be {SALT_LENGTH} bytes")
        if len(self.hash) != HASH_LENGTH:
            raise ValueError(f"hash must be {HASH_LENGTH} bytes")

    def __repr__(self) -> str:
        return _REDACTED

    def __str__(self) -> str:
        return _REDACTED

    def __format__(self, format_spec: str) -> str:
        return format(_REDACTED, format_spec)
