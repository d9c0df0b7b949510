"""Process logging configuration for credential_vault entry points."""

from __future__ import annotations

import logging

_LOG_FORMAT = "%(asctime)s %(levelname)s [%(name)s] %(message)s"


def resolve_log_level(level: str) -> int:
    """Map a level name to its numeric value, defaulting to INFO."""

    normalized_level = level.strip().upper() or "INFO"
    resolved_level = logging.getLevelName(normalized_level)
    if isinstance(resolved_level, int):
        return resolved_level
    return logging.INFO


def configure_logging(*, level: str) -> None:
    """Configure root logging once with a consistent format."""

    logging.basicConfig(level=resolve_log_level(level), format=_LOG_FORMAT)
