"""Object View Engine configuration: environment-driven defaults plus runtime switches.

The process-wide values live on ``settings``; renders never read them directly,
they take a ``RenderConfig`` snapshot through ``current_config`` once per call."""

from __future__ import annotations

import threading
from typing import Any

from loguru import logger
from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from ..core.context import DEFAULT_DEPTH_LIMIT, DEFAULT_SHOW_FUNCTIONS, MAX_DEPTH_LIMIT, RenderConfig


def _valid_depth_limit(value: Any) -> bool:
    return isinstance(value, int) and not isinstance(value, bool) and 1 <= value <= MAX_DEPTH_LIMIT


class Settings(BaseSettings):
    """Object View configuration, every field carries the OBJECT_VIEW_ prefix."""
    OBJECT_VIEW_DEPTH_LIMIT: int = Field(
        DEFAULT_DEPTH_LIMIT, description="Nested expandable levels rendered before truncation"
    )
    OBJECT_VIEW_SHOW_FUNCTIONS: bool = Field(
        DEFAULT_SHOW_FUNCTIONS, description="Whether callables get a row (name only, never source)"
    )
    OBJECT_VIEW_LOG_LEVEL: str = Field("WARNING", description="Level used by setup_logging when none is given")

    model_config = SettingsConfigDict(
        env_file=".env",
        env_prefix="",
        case_sensitive=False,
        extra="ignore",
        validate_assignment=True,
    )

    @field_validator("OBJECT_VIEW_DEPTH_LIMIT", mode="before")
    @classmethod
    def sanitize_depth_limit(cls, value: Any) -> int:
        """A bad value from the environment falls back to the default instead of breaking import."""
        if isinstance(value, str) and value.strip().lstrip("-").isdigit():
            value = int(value)
        if not _valid_depth_limit(value):
            logger.warning(f"ObjectView: ignoring invalid depth limit {value!r}, using {DEFAULT_DEPTH_LIMIT}")
            return DEFAULT_DEPTH_LIMIT
        return value


_lock = threading.Lock()
settings = Settings()


def reload_settings() -> Settings:
    """Rebuild the global settings from .env and environment variables."""
    global settings
    with _lock:
        settings = Settings()
    return settings


def get_settings() -> Settings:
    return settings


def current_config() -> RenderConfig:
    """Snapshot of the process-wide values, taken atomically."""
    with _lock:
        return RenderConfig(
            depth_limit=settings.OBJECT_VIEW_DEPTH_LIMIT,
            show_functions=settings.OBJECT_VIEW_SHOW_FUNCTIONS,
        )


def get_depth_limit() -> int:
    return settings.OBJECT_VIEW_DEPTH_LIMIT


def set_depth_limit(limit: Any) -> int:
    """Change the depth limit and return the limit now in force.

    Anything that is not an integer in 1..MAX_DEPTH_LIMIT (``bool`` included) is
    rejected with a warning and the stored limit stays as it was."""
    with _lock:
        if not _valid_depth_limit(limit):
            logger.warning(
                f"ObjectView: rejected depth limit {limit!r}, keeping {settings.OBJECT_VIEW_DEPTH_LIMIT}"
            )
            return settings.OBJECT_VIEW_DEPTH_LIMIT
        settings.OBJECT_VIEW_DEPTH_LIMIT = limit
        logger.debug(f"ObjectView: depth limit set to {limit}")
        return settings.OBJECT_VIEW_DEPTH_LIMIT


def show_fns() -> bool:
    """Render callables by name from now on; returns the new flag."""
    with _lock:
        settings.OBJECT_VIEW_SHOW_FUNCTIONS = True
        return settings.OBJECT_VIEW_SHOW_FUNCTIONS


def hide_fns() -> bool:
    """Suppress callables from now on; returns the new flag."""
    with _lock:
        settings.OBJECT_VIEW_SHOW_FUNCTIONS = False
        return settings.OBJECT_VIEW_SHOW_FUNCTIONS


def print_config(config: Settings | None = None):
    """Output the current configuration items to the log in human-readable format."""
    config = config or settings
    message = ""
    message += "\n=== Object View Configuration ===\n"
    message += f"Depth limit: {config.OBJECT_VIEW_DEPTH_LIMIT}\n"
    message += f"Show functions: {config.OBJECT_VIEW_SHOW_FUNCTIONS}\n"
    message += f"Log level: {config.OBJECT_VIEW_LOG_LEVEL}\n"
    message += "=================================\n"
    logger.info(message)


__all__ = [
    "Settings",
    "settings",
    "reload_settings",
    "get_settings",
    "current_config",
    "get_depth_limit",
    "set_depth_limit",
    "show_fns",
    "hide_fns",
    "print_config",
]
