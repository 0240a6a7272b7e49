"""Configuration loading from TOML files and environment variables."""

import os
import tomllib
from pathlib import Path
from typing import Any

from pydantic import ValidationError

from ledger_live_sdk.config.models import ConfigError, SDKConfig

CONFIG_ENV = "LEDGER_LIVE_SDK_CONFIG"

# Environment variables overriding file settings
ENV_OVERRIDES = {
    "socket_path": "LEDGER_LIVE_SDK_SOCKET",
    "origin": "LEDGER_LIVE_SDK_ORIGIN",
    "target_origin": "LEDGER_LIVE_SDK_TARGET_ORIGIN",
    "log_level": "LEDGER_LIVE_SDK_LOG_LEVEL",
}


def _get_default_config_paths() -> list[Path]:
    """Get ordered list of default config file locations."""
    return [
        Path("ledger-live-sdk.toml"),  # Current directory
        Path("~/.config/ledger-live-sdk/config.toml"),
    ]


def _apply_env_overrides(config: dict[str, Any]) -> dict[str, Any]:
    for key, env_var in ENV_OVERRIDES.items():
        value = os.environ.get(env_var)
        if value:
            config[key] = value.upper() if key == "log_level" else value
    return config


def _find_config_path(path: Path | None) -> Path | None:
    if path is None and (env_path := os.environ.get(CONFIG_ENV)):
        path = Path(env_path)

    if path is not None:
        config_path = Path(path).expanduser()
        if not config_path.exists():
            raise FileNotFoundError(f"Config file not found: {config_path}")
        return config_path

    for default_path in _get_default_config_paths():
        expanded = default_path.expanduser()
        if expanded.exists():
            return expanded
    return None


def load_config(path: Path | None = None) -> SDKConfig:
    """Load configuration from a TOML file plus environment overrides.

    Args:
        path: Explicit path to config file. If None, uses LEDGER_LIVE_SDK_CONFIG
            or searches default locations; defaults apply when none exists.

    Returns:
        Validated SDKConfig instance.

    Raises:
        FileNotFoundError: If an explicitly requested file does not exist.
        ConfigError: If the file or overrides are invalid.
    """
    raw_config: dict[str, Any] = {}

    config_path = _find_config_path(path)
    if config_path is not None:
        try:
            with config_path.open("rb") as f:
                raw_config = tomllib.load(f)
        except tomllib.TOMLDecodeError as e:
            raise ConfigError(f"Invalid TOML in {config_path}: {e}") from e

    raw_config = _apply_env_overrides(raw_config)

    try:
        return SDKConfig.model_validate(raw_config)
    except ValidationError as e:
        raise ConfigError(f"Invalid configuration: {e}") from e
