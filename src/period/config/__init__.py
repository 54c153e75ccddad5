"""Configuration helpers for period."""

from .settings import (
    Settings,
    SettingsManager,
    cache_dir,
    config_dir,
    get_settings,
    log_dir,
    reset_settings,
)

__all__ = [
    "Settings",
    "SettingsManager",
    "cache_dir",
    "config_dir",
    "get_settings",
    "log_dir",
    "reset_settings",
]
