"""Configuration loader - YAML loading, validation, and saving."""

from __future__ import annotations

import logging
import os
from pathlib import Path
from typing import Any, TypeVar

import portalocker
import yaml
from pydantic import BaseModel, ValidationError

logger = logging.getLogger(__name__)

ModelT = TypeVar("ModelT", bound=BaseModel)


class ConfigError(Exception):
    """Base exception for configuration errors."""

    def __init__(self, message: str, retriable: bool = False, suggested_action: str | None = None):
        """Initialize ConfigError with retriable flag and suggested action.

        Args:
            message: Error message
            retriable: Whether this error is transient and can be retried
            suggested_action: Suggested action for the user
        """
        super().__init__(message)
        self.retriable = retriable
        self.suggested_action = suggested_action


class ConfigNotFoundError(ConfigError):
    """Config file not found."""

    def __init__(self, message: str):
        super().__init__(
            message,
            retriable=False,
            suggested_action="Check the config file path",
        )


class ConfigValidationError(ConfigError):
    """Config document is malformed or fails model validation."""

    def __init__(self, message: str):
        super().__init__(
            message,
            retriable=False,
            suggested_action="Fix the config file",
        )


class ConfigFieldError(ConfigError):
    """A dotted field path does not exist in the document."""

    def __init__(self, message: str, field: str):
        super().__init__(
            message,
            retriable=False,
            suggested_action="Check the field path (e.g. server.timeout)",
        )
        self.field = field


class ConfigLockError(ConfigError):
    """Failed to acquire the config lock (transient)."""

    def __init__(self, message: str, timeout: float = 5.0):
        """Initialize ConfigLockError (retriable - another process has the lock).

        Args:
            message: Error message
            timeout: Lock timeout that was attempted
        """
        super().__init__(
            message,
            retriable=True,
            suggested_action=f"Retry (lock timeout was {timeout}s)",
        )
        self.timeout = timeout


def load_document(path: Path) -> dict[str, Any]:
    """Load a YAML config document as a plain mapping.

    Raises:
        ConfigNotFoundError: If the file doesn't exist.
        ConfigValidationError: If the YAML is invalid or not a mapping.
    """
    path = Path(path)
    if not path.exists():
        raise ConfigNotFoundError(f"Config not found: {os.path.normpath(path)}")

    try:
        with open(path, encoding="utf-8") as f:
            raw = yaml.safe_load(f)
    except yaml.YAMLError as e:
        raise ConfigValidationError(f"Invalid YAML: {e}") from e

    if raw is None:
        raw = {}
    if not isinstance(raw, dict):
        raise ConfigValidationError(
            f"Config must be a mapping at the top level, got {type(raw).__name__}"
        )

    logger.debug("Loaded config document %s (%d keys)", path, len(raw))
    return raw


def load_config(path: Path, model: type[ModelT]) -> ModelT:
    """Load a YAML config file and validate it into a model.

    Duration parse errors appear verbatim in the raised message.

    Raises:
        ConfigNotFoundError: If the file doesn't exist.
        ConfigValidationError: If the document fails validation.
    """
    raw = load_document(path)
    try:
        return model.model_validate(raw)
    except ValidationError as e:
        raise ConfigValidationError(f"Config validation failed: {e}") from e


def save_document(data: dict[str, Any], path: Path, timeout: float = 5.0) -> None:
    """Save a mapping as YAML atomically with file locking.

    Raises:
        ConfigLockError: If the lock cannot be acquired.
    """
    path = Path(path)
    lock_path = path.with_suffix(path.suffix + ".lock")

    try:
        with portalocker.Lock(lock_path, timeout=timeout) as _:
            # Write to temp file first
            temp_path = path.with_suffix(path.suffix + ".tmp")
            try:
                with open(temp_path, "w", encoding="utf-8") as f:
                    yaml.dump(data, f, default_flow_style=False, sort_keys=False)
                temp_path.replace(path)
            except BaseException:
                temp_path.unlink(missing_ok=True)
                raise
    except portalocker.LockException as e:
        raise ConfigLockError(f"Failed to acquire config lock: {e}", timeout=timeout) from e

    logger.debug("Saved config document %s", path)


def save_config(config: BaseModel, path: Path, timeout: float = 5.0) -> None:
    """Save a model as YAML; durations are written in canonical text form."""
    save_document(config.model_dump(mode="json"), path, timeout=timeout)


def get_field(data: dict[str, Any], field: str) -> Any:
    """Get a value from nested mappings by dotted path (e.g. "server.timeout").

    Raises:
        ConfigFieldError: If any part of the path is missing.
    """
    current: Any = data
    for part in field.split("."):
        if not isinstance(current, dict) or part not in current:
            raise ConfigFieldError(f"Field not found: {field}", field)
        current = current[part]
    return current


def set_field(data: dict[str, Any], field: str, value: Any) -> None:
    """Set an existing value in nested mappings by dotted path.

    Raises:
        ConfigFieldError: If any part of the path is missing.
    """
    *parents, last = field.split(".")
    current: Any = data
    for part in parents:
        if not isinstance(current, dict) or part not in current:
            raise ConfigFieldError(f"Field not found: {field}", field)
        current = current[part]
    if not isinstance(current, dict) or last not in current:
        raise ConfigFieldError(f"Field not found: {field}", field)
    current[last] = value
