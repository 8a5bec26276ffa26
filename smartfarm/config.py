"""
Configuration for SmartFarm
===========================
Runtime settings for the recommendation engine and the digital twin, loaded
from environment variables. Sets up the logging configuration as well.
"""

import logging
import os
import sys
from dataclasses import dataclass, field
from logging.handlers import RotatingFileHandler
from pathlib import Path

from smartfarm.domain.exceptions import ConfigurationError


def _env_bool(name: str, default: bool = False) -> bool:
    value = os.getenv(name)
    if value is None:
        return default
    return value.lower() in {"1", "true", "t", "yes", "on"}


def _env_int(name: str, default: int) -> int:
    value = os.getenv(name)
    if value is None:
        return default
    try:
        return int(value)
    except ValueError:
        raise ConfigurationError(f"Environment variable {name} must be an integer.") from None


def _env_float(name: str, default: float) -> float:
    value = os.getenv(name)
    if value is None:
        return default
    try:
        return float(value)
    except ValueError:
        raise ConfigurationError(f"Environment variable {name} must be a number.") from None


@dataclass
class AdvisorConfig:
    """Runtime configuration loaded from environment variables."""

    environment: str = field(default_factory=lambda: os.getenv("SMARTFARM_ENV", "development"))
    DEBUG: bool = field(default_factory=lambda: _env_bool("SMARTFARM_DEBUG", False))
    log_level: str = field(default_factory=lambda: os.getenv("SMARTFARM_LOG_LEVEL", "INFO"))
    log_file: str | None = field(default_factory=lambda: os.getenv("SMARTFARM_LOG_FILE") or None)

    # Recommendation rules
    recommendation_ttl_hours: float = field(
        default_factory=lambda: _env_float("SMARTFARM_RECOMMENDATION_TTL_HOURS", 4.0)
    )
    harvest_soon_days: float = field(default_factory=lambda: _env_float("SMARTFARM_HARVEST_SOON_DAYS", 7.0))
    harvest_overdue_days: float = field(default_factory=lambda: _env_float("SMARTFARM_HARVEST_OVERDUE_DAYS", 7.0))
    rain_moisture_limit: float = field(default_factory=lambda: _env_float("SMARTFARM_RAIN_MOISTURE_LIMIT", 50.0))
    frost_temperature: float = field(default_factory=lambda: _env_float("SMARTFARM_FROST_TEMPERATURE", 5.0))
    heat_temperature: float = field(default_factory=lambda: _env_float("SMARTFARM_HEAT_TEMPERATURE", 35.0))

    # Digital twin
    twin_refresh_seconds: int = field(default_factory=lambda: _env_int("SMARTFARM_TWIN_REFRESH_SECONDS", 10))
    twin_max_action_logs: int = field(default_factory=lambda: _env_int("SMARTFARM_TWIN_MAX_ACTION_LOGS", 500))


# ==================== CONFIGURATION VALIDATION ====================


def validate_config(config: AdvisorConfig) -> list[str]:
    """
    Validate configuration and return list of warnings.

    Args:
        config: AdvisorConfig instance

    Returns:
        List of warning messages (empty if all valid)

    Raises:
        ConfigurationError: for values no rule can work with
    """
    if config.recommendation_ttl_hours <= 0:
        raise ConfigurationError("Recommendation TTL must be positive", detail={"value": config.recommendation_ttl_hours})
    if config.twin_max_action_logs <= 0:
        raise ConfigurationError("Action log cap must be positive", detail={"value": config.twin_max_action_logs})

    warnings = []

    if config.frost_temperature >= config.heat_temperature:
        warnings.append(
            f"Frost temperature ({config.frost_temperature}°C) is not below heat temperature "
            f"({config.heat_temperature}°C); both weather warnings may fire together"
        )

    if config.twin_refresh_seconds < 5:
        warnings.append(
            f"Digital twin refresh interval ({config.twin_refresh_seconds}s) is very short. Recommended: 10s or more"
        )

    if config.log_file:
        parent = Path(config.log_file).parent
        if not parent.exists():
            warnings.append(f"Log directory does not exist and will be created: {parent}")

    return warnings


LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"


def _resolve_level(debug: bool, level: str) -> int:
    if debug:
        return logging.DEBUG
    resolved = logging.getLevelName(level.upper())
    return resolved if isinstance(resolved, int) else logging.INFO


def _rotating_file_handler(path: str) -> RotatingFileHandler:
    Path(path).parent.mkdir(parents=True, exist_ok=True)
    return RotatingFileHandler(path, maxBytes=10 * 1024 * 1024, backupCount=5, encoding="utf-8")


def setup_logging(debug: bool = False, log_file: str | None = None, level: str = "INFO") -> logging.Logger:
    """
    Attach a console handler (and a rotating file handler when ``log_file`` is
    set) to the ``smartfarm`` logger. ``debug`` overrides ``level``.

    Handlers are found again by name, so repeated calls only adjust levels.
    """
    log_level = _resolve_level(debug, level)
    package_logger = logging.getLogger("smartfarm")
    package_logger.setLevel(log_level)

    factories = {"smartfarm_console": lambda: logging.StreamHandler(sys.stderr)}
    if log_file:
        factories["smartfarm_file"] = lambda: _rotating_file_handler(log_file)

    existing = {handler.name: handler for handler in package_logger.handlers}
    for name, factory in factories.items():
        handler = existing.get(name)
        if handler is None:
            handler = factory()
            handler.name = name
            handler.setFormatter(logging.Formatter(LOG_FORMAT))
            package_logger.addHandler(handler)
        handler.setLevel(log_level)

    return package_logger


def load_config() -> AdvisorConfig:
    """Helper for callers to load and validate configuration."""
    config = AdvisorConfig()
    logger = logging.getLogger("config_loader")
    for warning in validate_config(config):
        logger.warning(warning)
    return config
