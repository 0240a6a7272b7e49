"""Configuration models using Pydantic."""

from pathlib import Path
from typing import Literal

from pydantic import BaseModel

from ledger_live_sdk.transport.base import ANY_ORIGIN


class ConfigError(Exception):
    """Configuration error."""

    pass


class SDKConfig(BaseModel):
    """Root configuration model.

    Only tools that build their own transport (the CLI) read this; apps
    embedding the SDK pass a transport directly.
    """

    # Unix socket the host listens on
    socket_path: Path | None = None

    # Origin inbound messages must come from ("*" accepts any peer)
    origin: str = ANY_ORIGIN

    # Origin outbound messages are addressed to; defaults to origin
    target_origin: str | None = None

    log_level: Literal["DEBUG", "INFO", "WARNING", "ERROR"] = "INFO"
