"""Configuration management for gamemstr.

This module provides centralized configuration management using pydantic-settings,
supporting environment variables, .env files, and runtime configuration overrides.

Example:
    >>> from gamemstr.core.config import get_settings
    >>> settings = get_settings()
    >>> settings.render.default_reach_ft
    5

Environment Variables:
    GAMEMSTR_LOG_LEVEL: Logging level (DEBUG, INFO, WARNING, ERROR, CRITICAL)
    GAMEMSTR_JSON_LOGS: Emit JSON log lines instead of console output
    GAMEMSTR_RENDER_DEFAULT_REACH_FT: Reach shown for melee attacks without one
    GAMEMSTR_RENDER_DEFAULT_CLOSE_RANGE_FT: Close range shown for ranged attacks without one
    GAMEMSTR_RENDER_DEFAULT_LONG_RANGE_FT: Long range shown for ranged attacks without one
"""

from __future__ import annotations

from functools import lru_cache
from typing import Literal

from pydantic import Field, model_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from gamemstr.core.exceptions import ConfigurationError


class RenderSettings(BaseSettings):
    """Configuration for stat-block text rendering.

    Attributes:
        default_reach_ft: Reach rendered for melee legs with no explicit reach.
        default_close_range_ft: Close range rendered for ranged legs with no
            explicit range. When unset, the range leg is omitted.
        default_long_range_ft: Long range paired with default_close_range_ft.
        bullet: Marker placed before bulleted lair paragraphs.
        ability_separator: Separator between cells of the ability line.
    """

    model_config = SettingsConfigDict(
        env_prefix="GAMEMSTR_RENDER_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    default_reach_ft: int = Field(
        default=5,
        ge=0,
        description="Reach in feet used when a melee attack omits it",
    )
    default_close_range_ft: int | None = Field(
        default=None,
        ge=0,
        description="Close range in feet used when a ranged attack omits it",
    )
    default_long_range_ft: int | None = Field(
        default=None,
        ge=0,
        description="Long range in feet used when a ranged attack omits it",
    )
    bullet: str = Field(
        default="•",
        min_length=1,
        description="Bullet marker for lair paragraphs",
    )
    ability_separator: str = Field(
        default=" | ",
        description="Separator between ability score cells",
    )

    @model_validator(mode="after")
    def validate_default_range(self) -> "RenderSettings":
        """Ensure the default range is either fully set or fully unset.

        Returns:
            Self if validation passes.

        Raises:
            ConfigurationError: If only one leg is set or long < close.
        """
        close, long = self.default_close_range_ft, self.default_long_range_ft
        if (close is None) != (long is None):
            raise ConfigurationError(
                "default_close_range_ft and default_long_range_ft must be set together",
                config_key="default_close_range_ft",
            )
        if close is not None and long is not None and long < close:
            raise ConfigurationError(
                f"default_long_range_ft ({long}) must not be less than "
                f"default_close_range_ft ({close})",
                config_key="default_long_range_ft",
            )
        return self

    @property
    def default_range(self) -> tuple[int, int] | None:
        """Get the configured default range as a (close, long) pair.

        Returns:
            The default range, or None when no default is configured.
        """
        if self.default_close_range_ft is None or self.default_long_range_ft is None:
            return None
        return (self.default_close_range_ft, self.default_long_range_ft)


class Settings(BaseSettings):
    """Main library settings.

    Attributes:
        app_name: Library name.
        app_version: Library version string.
        debug: Enable debug mode.
        log_level: Logging level.
        json_logs: Emit JSON logs instead of console output.
        render: Text rendering settings.
    """

    model_config = SettingsConfigDict(
        env_prefix="GAMEMSTR_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
        env_nested_delimiter="__",
    )

    app_name: str = Field(
        default="gamemstr",
        description="Library name",
    )
    app_version: str = Field(
        default="0.1.0",
        description="Library version",
    )
    debug: bool = Field(
        default=False,
        description="Enable debug mode",
    )
    log_level: Literal["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"] = Field(
        default="INFO",
        description="Logging level",
    )
    json_logs: bool = Field(
        default=False,
        description="Emit JSON log lines",
    )

    render: RenderSettings = Field(default_factory=RenderSettings)


@lru_cache(maxsize=1)
def get_settings() -> Settings:
    """Get the library settings singleton.

    Returns:
        The cached Settings instance.

    Raises:
        ConfigurationError: If configuration is missing or invalid.
    """
    try:
        return Settings()
    except ConfigurationError:
        raise
    except Exception as exc:
        raise ConfigurationError(
            f"Failed to load library settings: {exc}",
            details={"original_error": str(exc)},
        ) from exc


def clear_settings_cache() -> None:
    """Clear the settings cache, forcing a reload on next access.

    Example:
        >>> clear_settings_cache()
        >>> settings = get_settings()  # Reloads from environment
    """
    get_settings.cache_clear()


__all__ = [
    "RenderSettings",
    "Settings",
    "get_settings",
    "clear_settings_cache",
]
