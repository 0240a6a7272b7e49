"""Logging configuration for tools built on the SDK.

The library itself only logs through module loggers (and the logger handed
to LedgerLivePlatformSDK); applications decide where records go. Tools such
as the CLI call configure_logging() once at startup.

Logging Levels:
- DEBUG: Every envelope sent and received, dropped inbound messages
- INFO: Connect/disconnect, pending calls rejected on disconnect
- WARNING: Unexpected host results, host calls to unsupported methods
"""

import logging
import os
import re
from dataclasses import dataclass, field

LOG_LEVEL_ENV = "LEDGER_LIVE_SDK_LOG_LEVEL"

# Hex blobs this long are signatures, payloads or raw transactions
DEFAULT_REDACT_PATTERNS: list[str] = [
    r"\b(?:0x)?([0-9a-fA-F]{64,})\b",
]


@dataclass
class PayloadRedactor:
    """Shortens binary payloads in log messages.

    Envelopes carry signatures and exchange payloads as hex. They are masked
    down to their first and last 8 characters so records stay readable and
    do not leak full signed material.
    """

    patterns: list[re.Pattern[str]] = field(default_factory=list)
    enabled: bool = True

    def __post_init__(self) -> None:
        if not self.patterns:
            self.patterns = [re.compile(p) for p in DEFAULT_REDACT_PATTERNS]

    def redact(self, text: str) -> str:
        if not self.enabled or not text:
            return text
        result = text
        for pattern in self.patterns:
            result = pattern.sub(self._mask_match, result)
        return result

    def _mask_match(self, match: re.Match[str]) -> str:
        full = match.group(0)
        token = match.group(1) if match.lastindex else full
        masked = f"{token[:8]}...{token[-8:]}"
        return full.replace(token, masked)


# Module-level redactor instance
_redactor = PayloadRedactor()


def configure_redaction(
    enabled: bool = True, extra_patterns: list[str] | None = None
) -> None:
    """Configure payload redaction for log messages.

    Args:
        enabled: Whether to enable redaction.
        extra_patterns: Additional regex patterns to mask.
    """
    global _redactor
    patterns = [re.compile(p) for p in DEFAULT_REDACT_PATTERNS]
    if extra_patterns:
        patterns.extend(re.compile(p) for p in extra_patterns)
    _redactor = PayloadRedactor(patterns=patterns, enabled=enabled)


class ComponentFormatter(logging.Formatter):
    """Formatter that shortens logger paths and redacts payloads.

    Converts full module paths to short component names:
    - ledger_live_sdk.rpc.client -> rpc
    - ledger_live_sdk.transport.channel -> transport
    """

    def format(self, record: logging.LogRecord) -> str:
        parts = record.name.split(".")
        if len(parts) >= 2 and parts[0] == "ledger_live_sdk":
            record.component = parts[1]
        else:
            record.component = parts[0]
        return _redactor.redact(super().format(record))


def _resolve_level(level: str | None) -> int:
    if level is None:
        level = os.environ.get(LOG_LEVEL_ENV, "INFO")
    level = level.upper()
    if level not in ("DEBUG", "INFO", "WARNING", "ERROR"):
        level = "INFO"
    return getattr(logging, level)


def configure_logging(level: str | None = None, use_rich: bool = False) -> None:
    """Configure logging for the SDK.

    Args:
        level: Log level (DEBUG, INFO, WARNING, ERROR).
            If None, uses LEDGER_LIVE_SDK_LOG_LEVEL or INFO.
        use_rich: Use Rich handler for colorful terminal output.
    """
    log_level = _resolve_level(level)

    if use_rich:
        from rich.logging import RichHandler

        handler: logging.Handler = RichHandler(
            rich_tracebacks=False,
            show_path=False,
            show_time=True,
            markup=False,
        )
        handler.setFormatter(ComponentFormatter("%(component)s | %(message)s"))
    else:
        handler = logging.StreamHandler()
        handler.setFormatter(
            ComponentFormatter(
                "%(asctime)s | %(levelname)-8s | %(component)s | %(message)s",
                datefmt="%H:%M:%S",
            )
        )

    logging.basicConfig(level=log_level, handlers=[handler], force=True)
