"""Localized diagnostic strings.

Usage:
    from legion.strings import message

    message("unsafe_mixin")          # locale from settings
    message("unsafe_mixin", "de")
"""

from __future__ import annotations

from legion.config import get_settings

DEFAULT_LOCALE = "en"

STRINGS: dict[str, dict[str, str]] = {
    "en": {
        "unsafe_mixin": (
            "mixin() skipped {key!r}: it would overwrite an existing method and break "
            "parent(). Use extend() or implement() to add methods, or pass safe=False."
        ),
    },
    "de": {
        "unsafe_mixin": (
            "mixin() hat {key!r} übersprungen: eine vorhandene Methode würde überschrieben "
            "und parent() unterbrochen. Methoden mit extend() oder implement() hinzufügen "
            "oder safe=False übergeben."
        ),
    },
}


def message(key: str, locale: str | None = None, **params: object) -> str:
    """Look up a localized message and format it.

    Args:
        key: Message key, e.g. "unsafe_mixin".
        locale: Locale to use. Defaults to the configured locale; unknown
            locales and missing keys fall back to English.
        **params: Values substituted into the message.

    Returns:
        Formatted message text.

    Raises:
        KeyError: If key is not defined for the default locale either.
    """
    table = STRINGS.get(locale or get_settings().locale, {})
    template = table.get(key) or STRINGS[DEFAULT_LOCALE][key]
    return template.format(**params)
