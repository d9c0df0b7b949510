from __future__ import annotations

import logging

import pytest

from credential_vault.infrastructure.logging import configure_logging, resolve_log_level


@pytest.mark.parametrize(
    ("level", "expected"),
    [
        ("DEBUG", logging.DEBUG),
        (" warning ", logging.WARNING),
        ("error", logging.ERROR),
        ("", logging.INFO),
        ("   ", logging.INFO),
        ("not-a-level", logging.INFO),
    ],
)
def test_resolve_log_level(level: str, expected: int) -> None:
    assert resolve_log_level(level) == expected


def test_configure_logging_sets_root_level(monkeypatch: pytest.MonkeyPatch) -> None:
    calls: list[dict[str, object]] = []
    monkeypatch.setattr(logging, "basicConfig", lambda **kwargs: calls.append(kwargs))

    configure_logging(level="debug")

    assert calls == [
        {"level": logging.DEBUG, "format": "%(asctime)s %(levelname)s [%(name)s] %(message)s"}
    ]
