"""Streaming search ports.

Two structural protocols meet at the WebSocket boundary:

- SearchEventSink: what the stream client drives. The application's search
  session implements it; every method is synchronous and never blocks.
- SearchStreamProtocol: the transport that opens the connection, sends the
  queued query once and feeds inbound frames to the sink.

Only the sink reads inbound frames; only the transport sends.
"""

from typing import Any, Protocol

from src.domain.value_objects.stream_message import StreamMessage


class SearchEventSink(Protocol):
    """Receiver of streaming transport events."""

    @property
    def is_closing(self) -> bool:
        """True once a decisive signal arrived; later events are ignored."""
        ...

    def begin_connect(self) -> None:
        """Transport is about to open the connection."""
        ...

    def on_open(self) -> dict[str, Any] | None:
        """Connection established.

        Returns:
            The queued outbound payload the first time, None afterwards.
        """
        ...

    def on_message(self, message: StreamMessage) -> None:
        """A well-formed JSON object frame arrived."""
        ...

    def on_transport_error(self, error: Exception) -> None:
        """The connection failed or dropped abnormally."""
        ...

    def on_transport_close(self) -> None:
        """The connection is gone (always the last event)."""
        ...


class SearchStreamProtocol(Protocol):
    """Transport for wildcard searches."""

    async def run(self, sink: SearchEventSink) -> None:
        """Drive one streaming session to completion.

        Args:
            sink: Session receiving transport events. Must hold a queued
                outbound payload.
        """
        ...
