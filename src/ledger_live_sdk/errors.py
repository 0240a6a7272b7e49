"""Errors raised by the Ledger Live platform SDK.

Every error derives from SDKError so callers can tell SDK failures apart from
anything else (assertion failures included).
"""

from typing import Any


class SDKError(Exception):
    """Base class for SDK errors."""


class NotConnectedError(SDKError):
    """Raised when a remote operation is attempted without a connection."""

    def __init__(self, message: str = "Ledger Live API not connected"):
        super().__init__(message)


class DisconnectedError(SDKError):
    """Raised on a pending call abandoned by disconnect()."""

    def __init__(self, message: str = "Ledger Live API disconnected"):
        super().__init__(message)


class ValidationError(SDKError):
    """A method precondition failed before anything was sent."""


class NotImplementedYetError(SDKError, NotImplementedError):
    """Raised by capability methods the host does not back yet."""

    def __init__(self, message: str = "Function is not implemented yet"):
        super().__init__(message)


class RemoteError(SDKError):
    """The host answered with a JSON-RPC error envelope."""

    def __init__(self, code: int, message: str, data: Any = None):
        super().__init__(message)
        self.code = code
        self.message = message
        self.data = data


class InvalidResponseError(SDKError):
    """A host result did not match the type expected for its method."""

    def __init__(self, method: str, detail: str):
        super().__init__(f"Invalid result for {method}: {detail}")
        self.method = method
        self.detail = detail


class ProtocolError(SDKError):
    """A channel received data that breaks the wire framing."""
