"""Configuration settings using Pydantic Settings.

Usage:
    from legion.config import LegionSettings, get_settings

    # Load from environment variables (LEGION_*)
    settings = get_settings()

    # Or override with explicit values
    settings = LegionSettings(locale="de", registry_policy="error")
"""

from __future__ import annotations

from functools import lru_cache
from typing import Literal

from pydantic_settings import BaseSettings, SettingsConfigDict


class LegionSettings(BaseSettings):  # type: ignore[misc]
    """Runtime configuration for the class layer and the game loop.

    Attributes:
        locale: Locale key for diagnostic messages (falls back to "en").
        registry_policy: Collision policy for registries built from settings.
        frame_interval: Seconds between environment frames.
        client_id: client_id a Game adopts when none is given (None = server).

    Environment Variables:
        LEGION_LOCALE
        LEGION_REGISTRY_POLICY
        LEGION_FRAME_INTERVAL
        LEGION_CLIENT_ID
    """

    model_config = SettingsConfigDict(
        env_prefix="LEGION_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    locale: str = "en"
    registry_policy: Literal["last_wins", "error"] = "last_wins"
    frame_interval: float = 1 / 60
    client_id: str | None = None


@lru_cache(maxsize=1)
def get_settings() -> LegionSettings:
    """Get the cached settings loaded from the environment."""
    return LegionSettings()


def reset_settings() -> None:
    """Forget cached settings so the next get_settings() reloads them."""
    get_settings.cache_clear()
