"""Object View Engine tool module: configuration and logging setup."""

from ObjectViewEngine.utils.config import (
    Settings,
    current_config,
    get_depth_limit,
    get_settings,
    hide_fns,
    print_config,
    reload_settings,
    set_depth_limit,
    show_fns,
)
from ObjectViewEngine.utils.logging import setup_logging

__all__ = [
    "Settings",
    "current_config",
    "get_depth_limit",
    "get_settings",
    "hide_fns",
    "print_config",
    "reload_settings",
    "set_depth_limit",
    "show_fns",
    "setup_logging",
]
