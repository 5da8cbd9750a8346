"""Configuration module using Pydantic Settings.

Usage:
    from legion.config import get_settings

    settings = get_settings()
    print(settings.locale)
"""

from legion.config.settings import LegionSettings, get_settings, reset_settings

__all__ = [
    "LegionSettings",
    "get_settings",
    "reset_settings",
]
