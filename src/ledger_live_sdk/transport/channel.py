"""Transport over a MessageChannel."""

import json
import logging
from typing import Any

from ledger_live_sdk.errors import NotConnectedError
from ledger_live_sdk.rpc.protocol import dumps, is_envelope
from ledger_live_sdk.transport.base import (
    ANY_ORIGIN,
    EnvelopeHandler,
    MessageChannel,
    MessageEvent,
    Transport,
)

logger = logging.getLogger(__name__)


class MessageChannelTransport(Transport):
    """JSON-RPC transport that posts envelopes through a MessageChannel.

    Inbound messages are trusted only when they come from the expected
    origin and decode to a JSON-RPC 2.0 envelope. Anything else is dropped
    without raising, since the channel may carry unrelated traffic.
    """

    def __init__(
        self,
        channel: MessageChannel,
        expected_origin: str = ANY_ORIGIN,
        target_origin: str | None = None,
    ):
        """Initialize the transport.

        Args:
            channel: Channel to the host.
            expected_origin: Origin inbound messages must come from.
                ANY_ORIGIN accepts every peer.
            target_origin: Origin outbound messages are addressed to.
                Defaults to expected_origin.
        """
        self._channel = channel
        self._expected_origin = expected_origin
        self._target_origin = target_origin or expected_origin
        self._on_message: EnvelopeHandler | None = None

    @property
    def channel(self) -> MessageChannel:
        return self._channel

    @property
    def on_message(self) -> EnvelopeHandler | None:
        return self._on_message

    @property
    def is_connected(self) -> bool:
        return self._on_message is not None

    def connect(self, on_message: EnvelopeHandler) -> None:
        if self._on_message is not None:
            self._channel.remove_listener(self._handle_event)
        self._on_message = on_message
        self._channel.add_listener(self._handle_event)
        logger.debug("transport_connected", extra={"origin": self._expected_origin})

    def disconnect(self) -> None:
        if self._on_message is None:
            return
        self._channel.remove_listener(self._handle_event)
        self._on_message = None
        logger.debug("transport_disconnected")

    def send(self, envelope: dict[str, Any]) -> None:
        if self._on_message is None:
            raise NotConnectedError()
        message = dumps(envelope)
        logger.debug("transport_send: %s", message)
        self._channel.post_message(message, self._target_origin)

    def _accepts_origin(self, origin: str) -> bool:
        return self._expected_origin == ANY_ORIGIN or origin == self._expected_origin

    def _handle_event(self, event: MessageEvent) -> None:
        handler = self._on_message
        if handler is None:
            return

        if not self._accepts_origin(event.origin):
            logger.debug("transport_drop_origin", extra={"origin": event.origin})
            return

        try:
            payload = json.loads(event.data)
        except (TypeError, json.JSONDecodeError):
            logger.debug("transport_drop_malformed: %.200s", event.data)
            return

        if not is_envelope(payload):
            logger.debug("transport_drop_not_jsonrpc: %.200s", event.data)
            return

        logger.debug("transport_receive: %s", event.data)
        handler(payload)
