"""JSON-RPC client correlating responses to outstanding calls."""

import asyncio
import itertools
import logging
from typing import Any

from ledger_live_sdk.errors import DisconnectedError, NotConnectedError, RemoteError
from ledger_live_sdk.rpc.protocol import (
    ErrorCode,
    RPCRequest,
    RPCResponse,
    is_request,
)
from ledger_live_sdk.transport.base import Transport

logger = logging.getLogger(__name__)


class RPCClient:
    """Issues JSON-RPC calls over a transport and matches their responses.

    Each call gets an id from a per-client counter and a future stored in the
    pending map. Responses are matched by id only, so they may arrive in any
    order. A response with no pending id (unknown, late, or duplicate) is
    ignored.
    """

    def __init__(self, transport: Transport):
        self._transport = transport
        self._ids = itertools.count(1)
        self._pending: dict[int, asyncio.Future[Any]] = {}

    @property
    def pending_count(self) -> int:
        return len(self._pending)

    async def call(self, method: str, params: dict[str, Any] | None = None) -> Any:
        """Send a request and wait for its result.

        Args:
            method: RPC method name (e.g., "account.list").
            params: Method parameters.

        Returns:
            The host's result value.

        Raises:
            NotConnectedError: If the transport is not connected.
            RemoteError: If the host answers with an error envelope.
            DisconnectedError: If the client is closed before the answer arrives.
        """
        if not self._transport.is_connected:
            raise NotConnectedError()

        request_id = next(self._ids)
        request = RPCRequest(method=method, params=params or {}, id=request_id)
        future: asyncio.Future[Any] = asyncio.get_running_loop().create_future()
        self._pending[request_id] = future

        try:
            self._transport.send(request.to_dict())
            logger.debug("rpc_call", extra={"method": method, "id": request_id})
            return await future
        finally:
            self._pending.pop(request_id, None)

    def handle_message(self, payload: dict[str, Any]) -> None:
        """Handle a validated inbound envelope from the transport."""
        if is_request(payload):
            self._reject_host_request(RPCRequest.from_dict(payload))
            return

        response = RPCResponse.from_dict(payload)
        future = None
        if isinstance(response.id, int):
            future = self._pending.pop(response.id, None)
        if future is None:
            logger.debug("rpc_unmatched_response", extra={"id": response.id})
            return
        if future.done():
            return

        if response.error is not None:
            future.set_exception(
                RemoteError(
                    code=response.error.code,
                    message=response.error.message,
                    data=response.error.data,
                )
            )
        else:
            future.set_result(response.result)

    def close(self, exc: BaseException | None = None) -> None:
        """Reject every outstanding call.

        Args:
            exc: Error delivered to waiting callers. Defaults to DisconnectedError.
        """
        pending = list(self._pending.values())
        self._pending.clear()
        for future in pending:
            if not future.done():
                future.set_exception(exc or DisconnectedError())
        if pending:
            logger.info("rpc_pending_rejected", extra={"count": len(pending)})

    def _reject_host_request(self, request: RPCRequest) -> None:
        # The client exposes no methods; answer calls, ignore notifications
        if request.is_notification:
            logger.debug("rpc_ignored_notification", extra={"method": request.method})
            return
        logger.warning("Host called unsupported method: %s", request.method)
        response = RPCResponse.error_response(
            request.id,
            ErrorCode.METHOD_NOT_FOUND,
            f"Method not found: {request.method}",
        )
        self._transport.send(response.to_dict())
