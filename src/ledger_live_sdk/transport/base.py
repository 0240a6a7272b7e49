"""Channel and transport contracts."""

from abc import ABC, abstractmethod
from collections.abc import Callable
from dataclasses import dataclass
from typing import Any

# Origin wildcard: post to, or accept from, any peer
ANY_ORIGIN = "*"


@dataclass(frozen=True)
class MessageEvent:
    """A string received from a peer, tagged with the peer's origin."""

    data: str
    origin: str


MessageListener = Callable[[MessageEvent], None]
EnvelopeHandler = Callable[[dict[str, Any]], None]


class MessageChannel(ABC):
    """Duplex string channel to a single remote peer."""

    @property
    @abstractmethod
    def origin(self) -> str:
        """Origin this endpoint presents to its peer."""
        ...

    @abstractmethod
    def post_message(self, data: str, target_origin: str = ANY_ORIGIN) -> None:
        """Send a string to the peer.

        The message is dropped unless target_origin is ANY_ORIGIN or
        matches the peer's origin.
        """
        ...

    @abstractmethod
    def add_listener(self, listener: MessageListener) -> None: ...

    @abstractmethod
    def remove_listener(self, listener: MessageListener) -> None: ...


class Transport(ABC):
    """Carries JSON-RPC envelopes to and from the host."""

    @property
    @abstractmethod
    def is_connected(self) -> bool: ...

    @abstractmethod
    def connect(self, on_message: EnvelopeHandler) -> None:
        """Start delivering validated inbound envelopes to on_message."""
        ...

    @abstractmethod
    def disconnect(self) -> None: ...

    @abstractmethod
    def send(self, envelope: dict[str, Any]) -> None: ...
