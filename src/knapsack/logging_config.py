import logging
from typing import Optional

from .settings import DEFAULT_LOG_FORMAT, KnapsackSettings, env_log_level


def configure_logging(default_level: int = logging.INFO, settings: Optional[KnapsackSettings] = None) -> None:
    """Configure root logger for applications using the knapsack library.

    Respects KNAPSACK_LOG_LEVEL env var if present, then ``settings.log_level``.
    An unknown level name in the env var raises SettingsError.
    """
    level = default_level
    fmt = DEFAULT_LOG_FORMAT
    if settings is not None:
        level = settings.level_number()
        fmt = settings.log_format
    level_name = env_log_level()
    if level_name:
        level = logging.getLevelName(level_name)
    logging.basicConfig(level=level, format=fmt)
