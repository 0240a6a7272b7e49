"""JSON-RPC layer between the SDK and the host.

Public API:
- RPCClient: Correlates outbound calls with inbound responses

Protocol:
- RPCRequest, RPCResponse, RPCError: JSON-RPC 2.0 message types
- encode_frame, read_frame: Length-prefixed message I/O for stream channels
"""

from ledger_live_sdk.rpc.client import RPCClient
from ledger_live_sdk.rpc.protocol import (
    ErrorCode,
    RPCError,
    RPCRequest,
    RPCResponse,
    encode_frame,
    is_envelope,
    read_frame,
)

__all__ = [
    # Client
    "RPCClient",
    # Protocol
    "ErrorCode",
    "RPCError",
    "RPCRequest",
    "RPCResponse",
    "encode_frame",
    "is_envelope",
    "read_frame",
]
