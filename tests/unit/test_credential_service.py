from __future__ import annotations

import pytest

from credential_vault.application.services.credential_service import CredentialService
from credential_vault.domain.auth.credentials import StoredCredential
from credential_vault.domain.auth.locale import Locale
from credential_vault.domain.auth.user import MissingUserFieldError, UserDraft
from credential_vault.infrastructure.security.password_hasher import Argon2PasswordHasher


class FakePasswordHasher:
    def __init__(self) -> None:
        self.encode_calls: list[str | bytes] = []
        self.verify_calls: list[tuple[StoredCredential, str | bytes]] = []

    def encode(self, plaintext: str | bytes) -> StoredCredential:
        self.encode_calls.append(plaintext)
        return StoredCredential(salt=b"s" * 16, hash=b"h" * 32)

    def verify(self, stored: StoredCredential, candidate: str | bytes) -> bool:
        self.verify_calls.append((stored, candidate))
        return candidate == "pw"


def _identity_draft() -> UserDraft:
    return UserDraft(
        user_id=7,
        username="someuser",
        email="someuser@example.com",
        locale=Locale.GERMAN,
    )


def test_enroll_hashes_password_and_builds_user() -> None:
    hasher = FakePasswordHasher()
    service = CredentialService(password_hasher=hasher)

    user = service.enroll(draft=_identity_draft(), password="pw")

    assert hasher.encode_calls == ["pw"]
    assert user.user_id == 7
    assert user.locale is Locale.GERMAN
    assert service.check_password(user=user, password="pw") is True
    assert service.check_password(user=user, password="nope") is False
    assert hasher.verify_calls == [
        (StoredCredential(salt=b"s" * 16, hash=b"h" * 32), "pw"),
        (StoredCredential(salt=b"s" * 16, hash=b"h" * 32), "nope"),
    ]


def test_enroll_rejects_incomplete_draft_before_hashing() -> None:
    hasher = FakePasswordHasher()
    service = CredentialService(password_hasher=hasher)
    draft = UserDraft(user_id=7, username="someuser", locale=Locale.GERMAN)

    with pytest.raises(MissingUserFieldError) as excinfo:
        service.enroll(draft=draft, password="pw")

    assert excinfo.value.field_name == "email"
    assert hasher.encode_calls == []


def test_enroll_replaces_credential_already_on_draft() -> None:
    hasher = Argon2PasswordHasher()
    service = CredentialService(password_hasher=hasher)
    stale = hasher.encode("old-password")

    user = service.enroll(draft=_identity_draft().with_credential(stale), password="new-password")

    assert service.check_password(user=user, password="new-password") is True
    assert service.check_password(user=user, password="old-password") is False
