"""Search session connection lifecycle states.

State Machine:
    IDLE → CONNECTING → OPEN → CLOSING → CLOSED

    - IDLE: Session created, nothing sent yet
    - CONNECTING: WebSocket handshake in progress
    - OPEN: Connected, queued query sent, consuming frames
    - CLOSING: Decisive signal received, connection being released
    - CLOSED: Connection released (terminal)

Exact lookups skip CONNECTING and OPEN and go straight to CLOSED once the
HTTP response is resolved.
"""

from enum import Enum


class ConnectionState(str, Enum):
    """Search session connection lifecycle states.

    State Transitions:
        IDLE → CONNECTING: Streaming session starts connecting
        CONNECTING → OPEN: Handshake completed, queued message flushed
        OPEN → CLOSING: Error or final frame received
        CONNECTING/OPEN → CLOSING: Transport error
        Any → CLOSED: Transport closed, exact lookup resolved, or superseded
    """

    IDLE = "idle"
    CONNECTING = "connecting"
    OPEN = "open"
    CLOSING = "closing"
    CLOSED = "closed"

    @property
    def is_closed(self) -> bool:
        return self is ConnectionState.CLOSED
