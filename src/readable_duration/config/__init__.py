"""Configuration documents - YAML loading and saving."""

from readable_duration.config.loader import (
    ConfigError,
    ConfigFieldError,
    ConfigLockError,
    ConfigNotFoundError,
    ConfigValidationError,
    load_config,
    save_config,
)

__all__ = [
    "ConfigError",
    "ConfigFieldError",
    "ConfigLockError",
    "ConfigNotFoundError",
    "ConfigValidationError",
    "load_config",
    "save_config",
]
