"""Closed set of user display locales."""

from __future__ import annotations

from enum import StrEnum


class LocaleNotFoundError(LookupError):
    """Raised when a locale code does not match any supported locale."""

    def __init__(self, *, code: str) -> None:
        super().__init__(f"locale not found: {code}")
        self.code = code


class Locale(StrEnum):
    """Supported user locales keyed by their short language code."""

    ENGLISH = "en"
    CHINESE = "zh"
    SPANISH = "es"
    FRENCH = "fr"
    GERMAN = "de"
    JAPANESE = "ja"
    PORTUGUESE = "pt"
    RUSSIAN = "ru"
    ARABIC = "ar"
    KOREAN = "ko"

    @property
    def code(self) -> str:
        return self.value

    @property
    def display_name(self) -> str:
        """Return the human-readable language name, e.g. ``English``."""

        return self.name.capitalize()


_LOCALES_BY_CODE: dict[str, Locale] = {locale.value: locale for locale in Locale}


def parse_locale(code: str) -> Locale:
    """Resolve one exact locale code or raise ``LocaleNotFoundError``."""

    try:
        return _LOCALES_BY_CODE[code]
    except KeyError:
        raise LocaleNotFoundError(code=code) from None
