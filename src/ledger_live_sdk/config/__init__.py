"""Configuration module."""

from ledger_live_sdk.config.loader import load_config
from ledger_live_sdk.config.models import ConfigError, SDKConfig

__all__ = [
    "ConfigError",
    "SDKConfig",
    "load_config",
]
