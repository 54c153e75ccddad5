from __future__ import annotations

import os
from dataclasses import dataclass
from pathlib import Path

from dotenv import load_dotenv
from platformdirs import user_cache_dir, user_config_dir

APP_NAME = "period"
ENV_PREFIX = "PERIOD_"
ENV_FILE_NAME = "settings.env"

_TRUTHY = {"1", "true", "yes", "on"}


def _config_dir() -> Path:
    path = Path(user_config_dir(APP_NAME, roaming=True))
    path.mkdir(parents=True, exist_ok=True)
    return path


def _cache_dir() -> Path:
    path = Path(user_cache_dir(APP_NAME))
    path.mkdir(parents=True, exist_ok=True)
    return path


def config_dir() -> Path:
    return _config_dir()


def cache_dir() -> Path:
    return _cache_dir()


def log_dir() -> Path:
    path = cache_dir() / "logs"
    path.mkdir(parents=True, exist_ok=True)
    return path


def _env_file_path(explicit: Path | None) -> Path:
    if explicit is not None:
        return explicit
    return Path(user_config_dir(APP_NAME, roaming=True)) / ENV_FILE_NAME


@dataclass(slots=True)
class Settings:
    """Runtime options shared by the clock, logging and CLI.

    ``timezone`` is an IANA zone name (``"Europe/Oslo"``). When unset the
    system local zone is used for "now" and for naive datetimes.
    """

    timezone: str | None = None
    log_level: str = "INFO"
    log_to_file: bool = False


class SettingsManager:
    """Load and persist settings with environment overrides."""

    def __init__(self, env_file: Path | None = None) -> None:
        self._env_file = _env_file_path(env_file)

    @property
    def env_file(self) -> Path:
        return self._env_file

    def load(self) -> Settings:
        """Load settings from environment, falling back to persisted file."""
        if self._env_file.is_file():
            load_dotenv(self._env_file, override=False)

        settings = Settings(timezone=self._get_env("TIMEZONE"))

        log_level = self._get_env("LOG_LEVEL")
        if log_level:
            settings.log_level = log_level.upper()

        log_to_file = self._get_env("LOG_TO_FILE")
        if log_to_file:
            settings.log_to_file = log_to_file.strip().lower() in _TRUTHY

        return settings

    def save(self, settings: Settings) -> None:
        """Persist settings to the managed env file."""
        self._env_file.parent.mkdir(parents=True, exist_ok=True)
        content = [
            f"{ENV_PREFIX}TIMEZONE={settings.timezone or ''}",
            f"{ENV_PREFIX}LOG_LEVEL={settings.log_level}",
            f"{ENV_PREFIX}LOG_TO_FILE={'true' if settings.log_to_file else 'false'}",
        ]
        self._env_file.write_text("\n".join(content) + "\n", encoding="utf-8")

    def _get_env(self, name: str) -> str | None:
        return os.getenv(f"{ENV_PREFIX}{name}") or None


_settings: Settings | None = None


def get_settings() -> Settings:
    """Return the process-wide settings, loading them on first use."""
    global _settings
    if _settings is None:
        _settings = SettingsManager().load()
    return _settings


def reset_settings() -> None:
    global _settings
    _settings = None


__all__ = [
    "Settings",
    "SettingsManager",
    "cache_dir",
    "config_dir",
    "get_settings",
    "log_dir",
    "reset_settings",
]
