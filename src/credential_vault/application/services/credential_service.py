"""Application service enrolling users and checking their passwords."""

from __future__ import annotations

from credential_vault.application.ports.password_hasher_port import PasswordHasherPort
from credential_vault.domain.auth.credentials import Plaintext
from credential_vault.domain.auth.user import MissingUserFieldError, UserDraft, UserRecord


class CredentialService:
    """Bind freshly hashed passwords to user records and verify candidates."""

    def __init__(self, *, password_hasher: PasswordHasherPort) -> None:
        self._password_hasher = password_hasher

    def enroll(self, *, draft: UserDraft, password: Plaintext) -> UserRecord:
        """Hash one raw password and build the user record owning it.

        Identity fields are validated before hashing so an incomplete draft is
        rejected without running Argon2. Any credential already on the draft is
        replaced.
        """

        missing = draft.missing_field(skip=frozenset({"credential"}))
        if missing is not None:
            raise MissingUserFieldError(field_name=missing)

        credential = self._password_hasher.encode(password)
        return draft.with_credential(credential).build()

    def check_password(self, *, user: UserRecord, password: Plaintext) -> bool:
        """Return whether the password matches the user's stored credential."""

        return user.verify_with(self._password_hasher, password)
