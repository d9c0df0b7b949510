"""demo entrypoint."""

from __future__ import annotations

import logging

from credential_vault.application.services.credential_service import CredentialService
from credential_vault.config.settings import Settings, load_settings
from credential_vault.domain.auth.locale import parse_locale
from credential_vault.domain.auth.user import UserDraft
from credential_vault.infrastructure.logging import configure_logging
from credential_vault.infrastructure.security.password_hasher import (
    Argon2Parameters,
    Argon2PasswordHasher,
)

logger = logging.getLogger(__name__)

DEMO_USER_ID = 1
DEMO_USERNAME = "someuser100"
DEMO_EMAIL = "someuser100@protomail.com"
DEMO_PASSWORD = "123"
DEMO_CANDIDATES = ("1234", "123")


def build_password_hasher(settings: Settings) -> Argon2PasswordHasher:
    """Build the Argon2 adapter from deployment-wide cost settings."""

    return Argon2PasswordHasher(
        parameters=Argon2Parameters(
            time_cost=settings.argon2_time_cost,
            memory_cost=settings.argon2_memory_cost_kib,
            parallelism=settings.argon2_parallelism,
        )
    )


def run_demo(*, settings: Settings) -> list[str]:
    """Enroll the demo user, try each candidate password and return report lines."""

    service = CredentialService(password_hasher=build_password_hasher(settings))
    draft = (
        UserDraft()
        .with_user_id(DEMO_USER_ID)
        .with_username(DEMO_USERNAME)
        .with_email(DEMO_EMAIL)
        .with_locale(parse_locale(settings.demo_locale))
    )
    user = service.enroll(draft=draft, password=DEMO_PASSWORD)
    logger.info("demo_user_enrolled user_id=%s locale=%s", user.user_id, user.locale.code)

    lines = [
        f"User id {user.user_id}, username {user.username}, "
        f"email {user.email}, language {user.locale.display_name}"
    ]
    for candidate in DEMO_CANDIDATES:
        works = service.check_password(user=user, password=candidate)
        lines.append(f"Does the password {candidate} work? {'yes' if works else 'no'}")
    return lines


def main() -> None:
    """Run the credential enrollment and verification demo."""

    settings = load_settings()
    configure_logging(level=settings.log_level)
    logger.info(
        "demo_starting time_cost=%s memory_cost_kib=%s parallelism=%s",
        settings.argon2_time_cost,
        settings.argon2_memory_cost_kib,
        settings.argon2_parallelism,
    )
    for line in run_demo(settings=settings):
        print(line)


if __name__ == "__main__":
    main()
