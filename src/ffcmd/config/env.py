"""Environment variable reader with dependency injection support."""

from __future__ import annotations

import logging
import os
from collections.abc import Mapping
from pathlib import Path

logger = logging.getLogger(__name__)


class EnvReader:
    """Environment variable reader with type conversion.

    Accepts an optional env mapping so code depending on environment
    variables can be tested without modifying os.environ.

    Example:
        reader = EnvReader({"FFCMD_TIMEOUT": "60"})
        reader.get_float("FFCMD_TIMEOUT")  # 60.0
    """

    def __init__(self, env: Mapping[str, str] | None = None) -> None:
        self._env: Mapping[str, str] = env if env is not None else os.environ

    def get_str(self, var: str, default: str | None = None) -> str | None:
        value = self._env.get(var)
        if value is None:
            return default
        return value

    def get_int(self, var: str, default: int | None = None) -> int | None:
        """Get an integer; logs a warning and returns default if invalid."""
        value = self._env.get(var)
        if value is None:
            return default
        try:
            return int(value)
        except ValueError:
            logger.warning("Invalid integer value for %s: %s", var, value)
            return default

    def get_float(self, var: str, default: float | None = None) -> float | None:
        """Get a float; logs a warning and returns default if invalid."""
        value = self._env.get(var)
        if value is None:
            return default
        try:
            return float(value)
        except ValueError:
            logger.warning("Invalid float value for %s: %s", var, value)
            return default

    def get_bool(self, var: str, default: bool | None = None) -> bool | None:
        """Get a boolean.

        "true", "1", "yes" and "on" (case-insensitive) are true, any other
        value is false.
        """
        value = self._env.get(var)
        if value is None:
            return default
        return value.lower() in ("true", "1", "yes", "on")

    def get_path(
        self, var: str, must_exist: bool = True, default: Path | None = None
    ) -> Path | None:
        """Get a path with tilde expansion.

        Args:
            var: Environment variable name.
            must_exist: Log a warning and return default when the path does
                not exist.
            default: Value returned when unset or missing.
        """
        value = self._env.get(var)
        if value is None:
            return default

        path = Path(value).expanduser()
        if must_exist and not path.exists():
            logger.warning(
                "Environment variable %s points to non-existent path: %s",
                var,
                value,
            )
            return default
        return path
