from __future__ import annotations

import json
import logging
import os
from pathlib import Path
from typing import Optional

from platformdirs import user_config_dir
from pydantic import BaseModel, Field, ValidationError, field_validator

from .errors import SettingsError

logger = logging.getLogger(__name__)

APP_NAME = "knapsack"
SETTINGS_FILENAME = "settings.json"
LOG_LEVEL_ENV = "KNAPSACK_LOG_LEVEL"
DEFAULT_LOG_FORMAT = "[%(asctime)s] [%(levelname)s] %(name)s: %(message)s"

_LEVEL_NAMES = {"CRITICAL", "ERROR", "WARNING", "INFO", "DEBUG", "NOTSET"}
_LEVEL_ALIASES = {"WARN": "WARNING", "FATAL": "CRITICAL"}


def normalize_level(name: str) -> str:
    """Return the canonical stdlib level name for ``name``; ValueError if unknown."""
    level = str(name).strip().upper()
    level = _LEVEL_ALIASES.get(level, level)
    if level not in _LEVEL_NAMES:
        raise ValueError(f"Unknown log level: {name}")
    return level


def env_log_level() -> Optional[str]:
    """Normalized KNAPSACK_LOG_LEVEL, or None when unset. Raises SettingsError if invalid."""
    raw = os.getenv(LOG_LEVEL_ENV)
    if not raw:
        return None
    try:
        return normalize_level(raw)
    except ValueError as e:
        raise SettingsError(f"{LOG_LEVEL_ENV}: {e}") from e


class KnapsackSettings(BaseModel):
    """Library settings; currently only how logging is configured."""

    log_level: str = Field("INFO", description="Stdlib logging level name")
    log_format: str = Field(DEFAULT_LOG_FORMAT, description="Format string passed to logging.basicConfig")

    @field_validator("log_level")
    @classmethod
    def check_level(cls, v: str) -> str:
        return normalize_level(v)

    def level_number(self) -> int:
        return logging.getLevelName(self.log_level)


def default_config_dir() -> Path:
    return Path(user_config_dir(appname=APP_NAME))


def load_settings(config_dir: Optional[Path] = None) -> KnapsackSettings:
    """
    Load settings from ``settings.json`` under ``config_dir`` (or the user config dir).

    A missing file yields defaults. The KNAPSACK_LOG_LEVEL environment variable,
    when set, overrides ``log_level``. Raises SettingsError for unreadable or
    invalid files and for an unknown level in the environment variable.
    """
    path = Path(config_dir) if config_dir else default_config_dir()
    settings_file = path / SETTINGS_FILENAME
    data: dict = {}
    if settings_file.exists():
        try:
            data = json.loads(settings_file.read_text(encoding="utf-8"))
        except (OSError, json.JSONDecodeError) as e:
            raise SettingsError(f"{settings_file}: failed to read/parse JSON: {e}") from e
        if not isinstance(data, dict):
            raise SettingsError(f"{settings_file}: expected a JSON object.")
        logger.info("Settings loaded from %s", settings_file)
    env_level = env_log_level()
    if env_level:
        data = {**data, "log_level": env_level}
    try:
        return KnapsackSettings(**data)
    except ValidationError as e:
        raise SettingsError(f"{settings_file}: invalid settings: {e}") from e
