"""Client configuration loader.

Settings come from a JSON file when one is given (explicitly or through the
``BALIKOBOT_CONFIG`` environment variable), otherwise from individual
environment variables. The JSON file holds an object with ``api_user`` and
``api_key`` and optionally ``api_url`` and ``timeout``.
"""

from __future__ import annotations

import json
import os
from collections.abc import Mapping
from dataclasses import dataclass
from pathlib import Path
from typing import Any

from .definitions import API_URL
from .exceptions import BalikobotError

CONFIG_PATH_ENV_VAR = "BALIKOBOT_CONFIG"
API_USER_ENV_VAR = "BALIKOBOT_API_USER"
API_KEY_ENV_VAR = "BALIKOBOT_API_KEY"
API_URL_ENV_VAR = "BALIKOBOT_API_URL"
TIMEOUT_ENV_VAR = "BALIKOBOT_TIMEOUT"

DEFAULT_TIMEOUT = 30.0


class ConfigError(BalikobotError):
    """Raised when the configuration cannot be loaded or is invalid."""


@dataclass(slots=True, frozen=True)
class Settings:
    """Credentials and endpoint used to reach the API."""

    api_user: str
    api_key: str
    api_url: str = API_URL
    timeout: float = DEFAULT_TIMEOUT

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> Settings:
        """Create Settings from a mapping, validating required fields."""
        api_user = data.get("api_user")
        if not api_user or not isinstance(api_user, str):
            raise ConfigError("Configuration is missing required 'api_user' field")

        api_key = data.get("api_key")
        if not api_key or not isinstance(api_key, str):
            raise ConfigError("Configuration is missing required 'api_key' field")

        api_url = data.get("api_url") or API_URL
        if not isinstance(api_url, str):
            raise ConfigError("'api_url' must be a string")
        if not api_url.startswith(("http://", "https://")):
            raise ConfigError(f"'api_url' must be an http(s) URL, got '{api_url}'")

        timeout = data.get("timeout", DEFAULT_TIMEOUT)
        try:
            timeout = float(timeout)
        except (TypeError, ValueError) as exc:
            raise ConfigError(f"'timeout' must be a number, got {timeout!r}") from exc
        if timeout <= 0:
            raise ConfigError("'timeout' must be greater than zero")

        return cls(
            api_user=api_user,
            api_key=api_key,
            api_url=api_url.rstrip("/"),
            timeout=timeout,
        )


def _resolve_config_path(path: Path | str | None = None) -> Path | None:
    """Resolve the configuration file path.

    Priority:
    1. Explicit path argument
    2. BALIKOBOT_CONFIG environment variable
    3. None, meaning settings are read from the environment
    """
    if path is not None:
        return Path(path)

    env_path = os.environ.get(CONFIG_PATH_ENV_VAR)
    if env_path:
        return Path(env_path)

    return None


def _load_file(config_path: Path) -> dict[str, Any]:
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

    if not isinstance(data, dict):
        raise ConfigError("Configuration must be a JSON object")

    return data


def _load_environment() -> dict[str, Any]:
    data: dict[str, Any] = {
        "api_user": os.environ.get(API_USER_ENV_VAR, ""),
        "api_key": os.environ.get(API_KEY_ENV_VAR, ""),
    }
    api_url = os.environ.get(API_URL_ENV_VAR)
    if api_url:
        data["api_url"] = api_url
    timeout = os.environ.get(TIMEOUT_ENV_VAR)
    if timeout:
        data["timeout"] = timeout
    return data


def load_settings(path: Path | str | None = None) -> Settings:
    """Load and validate client settings.

    Args:
        path: Optional path to a JSON config file. If not provided, uses the
            BALIKOBOT_CONFIG env var, and failing that the BALIKOBOT_API_*
            environment variables.

    Raises:
        ConfigError: If the file cannot be read or the values are invalid.
    """
    config_path = _resolve_config_path(path)
    data = _load_file(config_path) if config_path is not None else _load_environment()
    return Settings.from_dict(data)
