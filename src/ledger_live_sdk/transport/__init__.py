"""Channels and transports carrying JSON-RPC envelopes to the host."""

from ledger_live_sdk.transport.base import (
    ANY_ORIGIN,
    MessageChannel,
    MessageEvent,
    Transport,
)
from ledger_live_sdk.transport.channel import MessageChannelTransport
from ledger_live_sdk.transport.local import LocalChannel
from ledger_live_sdk.transport.stream import StreamChannel

__all__ = [
    "ANY_ORIGIN",
    "LocalChannel",
    "MessageChannel",
    "MessageChannelTransport",
    "MessageEvent",
    "StreamChannel",
    "Transport",
]
