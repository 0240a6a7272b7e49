"""Message channel over an asyncio stream (Unix socket or TCP)."""

import asyncio
import logging
from pathlib import Path

from ledger_live_sdk.errors import ProtocolError
from ledger_live_sdk.rpc.protocol import encode_frame, read_frame
from ledger_live_sdk.transport.base import (
    ANY_ORIGIN,
    MessageChannel,
    MessageEvent,
    MessageListener,
)

logger = logging.getLogger(__name__)


class StreamChannel(MessageChannel):
    """Length-prefixed message channel over a stream connection.

    A stream only ever has one peer, so the peer origin is fixed when the
    channel is opened and stamped on every inbound event.
    """

    def __init__(
        self,
        reader: asyncio.StreamReader,
        writer: asyncio.StreamWriter,
        peer_origin: str,
        origin: str = "app://client",
    ):
        self._reader = reader
        self._writer = writer
        self._peer_origin = peer_origin
        self._origin = origin
        self._listeners: list[MessageListener] = []
        self._reader_task: asyncio.Task[None] | None = None

    @classmethod
    async def open_unix(
        cls, socket_path: Path | str, peer_origin: str | None = None
    ) -> "StreamChannel":
        """Connect to a host listening on a Unix domain socket."""
        reader, writer = await asyncio.open_unix_connection(str(socket_path))
        channel = cls(reader, writer, peer_origin or f"unix://{socket_path}")
        channel.start()
        return channel

    @classmethod
    async def open_tcp(
        cls, host: str, port: int, peer_origin: str | None = None
    ) -> "StreamChannel":
        """Connect to a host listening on TCP."""
        reader, writer = await asyncio.open_connection(host, port)
        channel = cls(reader, writer, peer_origin or f"tcp://{host}:{port}")
        channel.start()
        return channel

    @property
    def origin(self) -> str:
        return self._origin

    @property
    def peer_origin(self) -> str:
        return self._peer_origin

    @property
    def is_open(self) -> bool:
        return self._reader_task is not None and not self._reader_task.done()

    def start(self) -> None:
        """Start reading frames from the peer."""
        if self._reader_task is None:
            self._reader_task = asyncio.get_running_loop().create_task(
                self._read_loop()
            )

    def post_message(self, data: str, target_origin: str = ANY_ORIGIN) -> None:
        if target_origin not in (ANY_ORIGIN, self._peer_origin):
            logger.debug("stream_channel_drop_target", extra={"target": target_origin})
            return
        if self._writer.is_closing():
            logger.debug("stream_channel_drop_closed")
            return
        self._writer.write(encode_frame(data))

    def add_listener(self, listener: MessageListener) -> None:
        self._listeners.append(listener)

    def remove_listener(self, listener: MessageListener) -> None:
        if listener in self._listeners:
            self._listeners.remove(listener)

    async def close(self) -> None:
        """Stop reading and close the connection."""
        if self._reader_task is not None:
            self._reader_task.cancel()
            try:
                await self._reader_task
            except asyncio.CancelledError:
                pass
            self._reader_task = None

        self._listeners.clear()
        if not self._writer.is_closing():
            self._writer.close()
        try:
            await self._writer.wait_closed()
        except (ConnectionError, OSError):
            logger.debug("stream_channel_close_error", exc_info=True)

    async def _read_loop(self) -> None:
        while True:
            try:
                data = await read_frame(self._reader)
            except ProtocolError:
                logger.warning("Dropping stream after oversized frame", exc_info=True)
                break
            except (ConnectionError, OSError):
                logger.debug("stream_channel_read_error", exc_info=True)
                break

            if data is None:
                logger.debug("stream_channel_eof")
                break

            event = MessageEvent(data=data, origin=self._peer_origin)
            for listener in list(self._listeners):
                try:
                    listener(event)
                except Exception:
                    logger.exception("Stream channel listener failed")
