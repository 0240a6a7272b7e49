"""In-process message channel, mostly useful for embedding and tests."""

import asyncio
import logging

from ledger_live_sdk.transport.base import (
    ANY_ORIGIN,
    MessageChannel,
    MessageEvent,
    MessageListener,
)

logger = logging.getLogger(__name__)


class LocalChannel(MessageChannel):
    """One endpoint of an in-process channel pair.

    Messages are delivered on the running event loop rather than inline, so
    a post never re-enters the sender's own call stack.
    """

    def __init__(self, origin: str):
        self._origin = origin
        self._peer: LocalChannel | None = None
        self._listeners: list[MessageListener] = []
        self._closed = False

    @classmethod
    def pair(
        cls, origin: str = "app://client", peer_origin: str = "app://host"
    ) -> tuple["LocalChannel", "LocalChannel"]:
        """Create two connected endpoints."""
        left = cls(origin)
        right = cls(peer_origin)
        left._peer = right
        right._peer = left
        return left, right

    @property
    def origin(self) -> str:
        return self._origin

    @property
    def peer(self) -> "LocalChannel | None":
        return self._peer

    @property
    def listener_count(self) -> int:
        return len(self._listeners)

    def post_message(self, data: str, target_origin: str = ANY_ORIGIN) -> None:
        peer = self._peer
        if self._closed or peer is None or peer._closed:
            logger.debug("local_channel_drop_closed")
            return
        if target_origin not in (ANY_ORIGIN, peer.origin):
            logger.debug("local_channel_drop_target", extra={"target": target_origin})
            return

        event = MessageEvent(data=data, origin=self._origin)
        try:
            loop = asyncio.get_running_loop()
        except RuntimeError:
            peer._dispatch(event)
            return
        loop.call_soon(peer._dispatch, event)

    def add_listener(self, listener: MessageListener) -> None:
        self._listeners.append(listener)

    def remove_listener(self, listener: MessageListener) -> None:
        if listener in self._listeners:
            self._listeners.remove(listener)

    def close(self) -> None:
        self._closed = True
        self._listeners.clear()

    def _dispatch(self, event: MessageEvent) -> None:
        # Copy: a listener may unregister itself while handling the event
        for listener in list(self._listeners):
            listener(event)
