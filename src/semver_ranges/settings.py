"""Configuration loader for parsing behaviour.

Settings are read from a JSON file when one is given (explicitly or through
``SEMVER_RANGES_CONFIG``) and validated against ``SETTINGS_SCHEMA``. Without a
file the built-in defaults apply. ``SEMVER_RANGES_STRICT`` overrides the
``strict`` flag either way.

Example settings file::

    {"strict": true}
"""

from __future__ import annotations

import json
import logging
import os
from dataclasses import dataclass
from pathlib import Path
from typing import Any

from jsonschema import Draft202012Validator

logger = logging.getLogger(__name__)

CONFIG_PATH_ENV_VAR = "SEMVER_RANGES_CONFIG"
STRICT_ENV_VAR = "SEMVER_RANGES_STRICT"

SETTINGS_SCHEMA: dict[str, Any] = {
    "$schema": "https://json-schema.org/draft/2020-12/schema",
    "type": "object",
    "properties": {
        "strict": {"type": "boolean"},
    },
    "additionalProperties": False,
}

_TRUTHY = {"1", "true", "yes", "y"}
_FALSY = {"0", "false", "no", "n", ""}


class ConfigError(RuntimeError):
    """Raised when the configuration file cannot be loaded or is invalid."""


@dataclass(slots=True, frozen=True)
class Settings:
    """Top-level settings container.

    strict: reject leading zeros in numeric version components and numeric
        prerelease identifiers.
    """

    strict: bool = False

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> Settings:
        """Create Settings from a decoded JSON document, validating it first."""
        validator = Draft202012Validator(SETTINGS_SCHEMA)
        errors = sorted(validator.iter_errors(data), key=lambda e: list(e.path))
        if errors:
            messages = []
            for error in errors:
                pointer = "/".join(str(p) for p in error.path)
                messages.append(f"{pointer or '<root>'}: {error.message}")
            raise ConfigError("Invalid settings: " + "; ".join(messages))
        return cls(strict=data.get("strict", False))


def _resolve_config_path(path: Path | str | None = None) -> Path | None:
    """Resolve the configuration file path.

    Priority:
    1. Explicit path argument
    2. SEMVER_RANGES_CONFIG environment variable
    3. None (built-in defaults)
    """
    if path is not None:
        return Path(path)

    env_path = os.environ.get(CONFIG_PATH_ENV_VAR)
    if env_path:
        return Path(env_path)

    return None


def _strict_override() -> bool | None:
    raw = os.environ.get(STRICT_ENV_VAR)
    if raw is None:
        return None
    value = raw.strip().lower()
    if value in _TRUTHY:
        return True
    if value in _FALSY:
        return False
    raise ConfigError(f"Invalid {STRICT_ENV_VAR} value: {raw!r}")


def load_settings(path: Path | str | None = None) -> Settings:
    """Load and validate settings.

    Args:
        path: Optional path to a JSON settings file. If not provided, uses the
            SEMVER_RANGES_CONFIG env var or falls back to the defaults.

    Raises:
        ConfigError: If the file cannot be read or contains invalid data.
    """
    config_path = _resolve_config_path(path)

    if config_path is None:
        settings = Settings()
    else:
        if not config_path.exists():
            raise ConfigError(f"Configuration file not found: {config_path}")

        try:
            content = config_path.read_text(encoding="utf-8")
        except OSError as exc:
            raise ConfigError(f"Failed to read configuration file: {exc}") from exc

        try:
            data = json.loads(content)
        except json.JSONDecodeError as exc:
            raise ConfigError(f"Invalid JSON in configuration file: {exc}") from exc

        settings = Settings.from_dict(data)
        logger.info("Loaded settings from %s", config_path)

    strict = _strict_override()
    if strict is not None:
        settings = Settings(strict=strict)
    return settings


_settings: Settings | None = None


def get_settings() -> Settings:
    """Return the process settings, loading them on first use."""
    global _settings
    if _settings is None:
        _settings = load_settings()
    return _settings


def set_settings(settings: Settings | None) -> None:
    """Replace the process settings; None forces a reload on next use."""
    global _settings
    _settings = settings
