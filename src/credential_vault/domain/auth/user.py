"""User record bound to one stored credential, plus its validating builder."""

from __future__ import annotations

from dataclasses import dataclass, fields, replace
from typing import Protocol

from credential_vault.domain.auth.credentials import Plaintext, StoredCredential
from credential_vault.domain.auth.locale import Locale


class CredentialVerifier(Protocol):
    """Anything able to check a candidate password against a stored credential."""

    def verify(self, stored: StoredCredential, candidate: Plaintext) -> bool:
        """Return whether the candidate reproduces the stored credential."""


class MissingUserFieldError(ValueError):
    """Raised when a user draft is built before every required field is set."""

    def __init__(self, *, field_name: str) -> None:
        super().__init__(f"missing required user field: {field_name}")
        self.field_name = field_name


class UserRecord:
    """Identity metadata owning exactly one stored credential.

    Two records are the same user when their ids match, whatever the other
    fields hold. The credential is kept private and only reachable through
    ``verify_with``.
    """

    __slots__ = ("_user_id", "_username", "_email", "_locale", "_credential")

    def __init__(
        self,
        *,
        user_id: int,
        username: str,
        email: str,
        credential: StoredCredential,
        locale: Locale,
    ) -> None:
        self._user_id = user_id
        self._username = username
        self._email = email
        self._credential = credential
        self._locale = locale

    @property
    def user_id(self) -> int:
        return self._user_id

    @property
    def username(self) -> str:
        return self._username

    @property
    def email(self) -> str:
        return self._email

    @property
    def locale(self) -> Locale:
        return self._locale

    def verify_with(self, hasher: CredentialVerifier, candidate: Plaintext) -> bool:
        """Check one candidate password against this user's stored credential."""

        return hasher.verify(self._credential, candidate)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, UserRecord):
            return NotImplemented
        return self._user_id == other._user_id

    def __hash__(self) -> int:
        return hash(self._user_id)

    def __repr__(self) -> str:
        return (
            f"UserRecord(user_id={self._user_id!r}, username={self._username!r}, "
            f"email={self._email!r}, locale={self._locale.code!r}, "
            f"credential={self._credential!r})"
        )


@dataclass(frozen=True)
class UserDraft:
    """Collects user fields incrementally and validates them in ``build``."""

    user_id: int | None = None
    username: str | None = None
    email: str | None = None
    credential: StoredCredential | None = None
    locale: Locale | None = None

    def with_user_id(self, user_id: int) -> UserDraft:
        return replace(self, user_id=user_id)

    def with_username(self, username: str) -> UserDraft:
        return replace(self, username=username)

    def with_email(self, email: str) -> UserDraft:
        return replace(self, email=email)

    def with_credential(self, credential: StoredCredential) -> UserDraft:
        return replace(self, credential=credential)

    def with_locale(self, locale: Locale) -> UserDraft:
        return replace(self, locale=locale)

    def missing_field(self, *, skip: frozenset[str] = frozenset()) -> str | None:
        """Return the first unset field name in declaration order, if any."""

        for draft_field in fields(self):
            if draft_field.name in skip:
                continue
            if getattr(self, draft_field.name) is None:
                return draft_field.name
        return None

    def build(self) -> UserRecord:
        """Return the user record or raise for the first missing field."""

        missing = self.missing_field()
        if missing is not None:
            raise MissingUserFieldError(field_name=missing)

        assert self.user_id is not None
        assert self.username is not None
        assert self.email is not None
        assert self.credential is not None
        assert self.locale is not None
        return UserRecord(
            user_id=self.user_id,
            username=self.username,
            email=self.email,
            credential=self.credential,
            locale=self.locale,
        )
