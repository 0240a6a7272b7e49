"""JSON-RPC 2.0 envelopes and stream framing."""

import asyncio
import json
import struct
from dataclasses import dataclass, field
from typing import Any

from ledger_live_sdk.errors import ProtocolError

JSONRPC_VERSION = "2.0"

# Frames larger than this are rejected on stream channels
MAX_FRAME_SIZE = 10 * 1024 * 1024

_HEADER = struct.Struct("!I")


# JSON-RPC 2.0 error codes
class ErrorCode:
    PARSE_ERROR = -32700
    INVALID_REQUEST = -32600
    METHOD_NOT_FOUND = -32601
    INVALID_PARAMS = -32602
    INTERNAL_ERROR = -32603


def dumps(payload: Any) -> str:
    """Serialize a payload the way the host expects it: compact, UTF-8 kept."""
    return json.dumps(payload, separators=(",", ":"), ensure_ascii=False)


@dataclass
class RPCRequest:
    """JSON-RPC 2.0 request."""

    method: str
    params: dict[str, Any] = field(default_factory=dict)
    id: int | str | None = 1
    jsonrpc: str = JSONRPC_VERSION

    def to_dict(self) -> dict[str, Any]:
        return {
            "jsonrpc": self.jsonrpc,
            "method": self.method,
            "params": self.params,
            "id": self.id,
        }

    def to_json(self) -> str:
        return dumps(self.to_dict())

    @property
    def is_notification(self) -> bool:
        return self.id is None

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "RPCRequest":
        return cls(
            method=data.get("method", ""),
            params=data.get("params", {}),
            id=data.get("id"),
            jsonrpc=data.get("jsonrpc", JSONRPC_VERSION),
        )


@dataclass
class RPCError:
    """JSON-RPC 2.0 error."""

    code: int
    message: str
    data: Any = None

    def to_dict(self) -> dict[str, Any]:
        d = {"code": self.code, "message": self.message}
        if self.data is not None:
            d["data"] = self.data
        return d


@dataclass
class RPCResponse:
    """JSON-RPC 2.0 response."""

    id: int | str | None
    result: Any = None
    error: RPCError | None = None
    jsonrpc: str = JSONRPC_VERSION

    def to_dict(self) -> dict[str, Any]:
        d: dict[str, Any] = {"jsonrpc": self.jsonrpc, "id": self.id}
        if self.error is not None:
            d["error"] = self.error.to_dict()
        else:
            d["result"] = self.result
        return d

    def to_json(self) -> str:
        return dumps(self.to_dict())

    @classmethod
    def success(cls, id: int | str | None, result: Any) -> "RPCResponse":
        return cls(id=id, result=result)

    @classmethod
    def error_response(
        cls, id: int | str | None, code: int, message: str, data: Any = None
    ) -> "RPCResponse":
        return cls(id=id, error=RPCError(code=code, message=message, data=data))

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "RPCResponse":
        error = None
        if "error" in data:
            err = data["error"]
            if not isinstance(err, dict):
                err = {"message": str(err)}
            error = RPCError(
                code=err.get("code", ErrorCode.INTERNAL_ERROR),
                message=err.get("message", "Unknown error"),
                data=err.get("data"),
            )
        return cls(
            id=data.get("id"),
            result=data.get("result"),
            error=error,
            jsonrpc=data.get("jsonrpc", JSONRPC_VERSION),
        )


def is_envelope(payload: Any) -> bool:
    """Check that a decoded payload has the shape of a JSON-RPC 2.0 message."""
    if not isinstance(payload, dict):
        return False
    if payload.get("jsonrpc") != JSONRPC_VERSION:
        return False
    if "method" in payload:
        return isinstance(payload["method"], str)
    return "id" in payload and ("result" in payload or "error" in payload)


def is_request(payload: dict[str, Any]) -> bool:
    return "method" in payload


def encode_frame(message: str) -> bytes:
    """Serialize a message to length-prefixed bytes."""
    payload = message.encode()
    if len(payload) > MAX_FRAME_SIZE:
        raise ProtocolError(f"Message too large: {len(payload)}")
    return _HEADER.pack(len(payload)) + payload


async def read_frame(reader: asyncio.StreamReader) -> str | None:
    """Read a length-prefixed message from an async reader.

    Returns None if the connection closed.
    """
    try:
        length_bytes = await reader.readexactly(_HEADER.size)
    except asyncio.IncompleteReadError:
        return None

    length = _HEADER.unpack(length_bytes)[0]
    if length > MAX_FRAME_SIZE:
        raise ProtocolError(f"Message too large: {length}")

    try:
        data = await reader.readexactly(length)
    except asyncio.IncompleteReadError:
        return None
    return data.decode(errors="replace")
