"""Shared test fixtures and factories."""

import json
from typing import Any

import pytest

from ledger_live_sdk import (
    LedgerLivePlatformSDK,
    LocalChannel,
    MessageChannelTransport,
    MessageEvent,
)
from ledger_live_sdk.rpc.protocol import RPCResponse

CLIENT_ORIGIN = "app://client"
HOST_ORIGIN = "app://host"


class FakeHost:
    """Host double answering requests posted on its LocalChannel endpoint.

    Every raw string it receives is kept in ``received`` so tests can check
    the exact bytes the SDK put on the channel.
    """

    def __init__(self, channel: LocalChannel):
        self.channel = channel
        self.received: list[str] = []
        self.results: dict[str, Any] = {}
        self.errors: dict[str, tuple[int, str]] = {}
        channel.add_listener(self._on_message)

    @property
    def requests(self) -> list[dict[str, Any]]:
        return [json.loads(raw) for raw in self.received]

    def reply(self, method: str, result: Any) -> None:
        """Answer every call to method with result."""
        self.results[method] = result

    def fail(self, method: str, message: str, code: int = -32000) -> None:
        """Answer every call to method with an error envelope."""
        self.errors[method] = (code, message)

    def respond(self, request_id: int, result: Any) -> None:
        self.post(RPCResponse.success(request_id, result).to_json())

    def post(self, data: str) -> None:
        self.channel.post_message(data)

    def _on_message(self, event: MessageEvent) -> None:
        self.received.append(event.data)
        request = json.loads(event.data)
        method = request.get("method")
        if method in self.errors:
            code, message = self.errors[method]
            response = RPCResponse.error_response(request["id"], code, message)
        elif method in self.results:
            response = RPCResponse.success(request["id"], self.results[method])
        else:
            return
        self.post(response.to_json())


# =============================================================================
# Channel / Transport Fixtures
# =============================================================================


@pytest.fixture
def channels() -> tuple[LocalChannel, LocalChannel]:
    return LocalChannel.pair(CLIENT_ORIGIN, HOST_ORIGIN)


@pytest.fixture
def host(channels: tuple[LocalChannel, LocalChannel]) -> FakeHost:
    return FakeHost(channels[1])


@pytest.fixture
def transport(
    channels: tuple[LocalChannel, LocalChannel],
) -> MessageChannelTransport:
    return MessageChannelTransport(channels[0], expected_origin=HOST_ORIGIN)


@pytest.fixture
def sdk(transport: MessageChannelTransport) -> LedgerLivePlatformSDK:
    return LedgerLivePlatformSDK(transport)
