"""WebSocket client for the wildcard account search endpoint.

Drives a SearchEventSink through one connection:

    1. begin_connect()
    2. open the WebSocket
    3. on_open() → send the queued query once (never again)
    4. decode each inbound frame → on_message()
    5. stop reading as soon as the sink is closing
    6. on_transport_error() on failure, on_transport_close() always

Frames that are not JSON objects are skipped with a warning.

Architecture:
    - Infrastructure layer (adapter for the validator WebSocket API)
    - Implements SearchStreamProtocol (structural typing)
    - Uses the websockets asyncio client
"""

import json
from collections.abc import Callable
from typing import Any

import structlog
from websockets.asyncio.client import connect
from websockets.exceptions import ConnectionClosedOK, WebSocketException

from src.core.constants import SEARCH_ACCOUNT_PATH, STREAM_OPEN_TIMEOUT_DEFAULT
from src.domain.protocols import SearchEventSink
from src.domain.value_objects import StreamMessage

logger = structlog.get_logger(__name__)


def decode_frame(frame: str | bytes) -> StreamMessage | None:
    """Decode one inbound frame.

    Args:
        frame: Raw text or binary frame.

    Returns:
        StreamMessage, or None when the frame is not a JSON object.
    """
    try:
        data = json.loads(frame)
    except (ValueError, TypeError) as e:
        logger.warning("search_stream_invalid_json", error=str(e))
        return None

    if not isinstance(data, dict):
        logger.warning(
            "search_stream_unexpected_format",
            data_type=type(data).__name__,
        )
        return None

    return StreamMessage.from_payload(data)


class ValidatorStreamClient:
    """Async client for ``/ws/search-account``.

    One ``run`` call serves exactly one query; the connection is never reused.

    Attributes:
        _url: Full WebSocket URL.
        _open_timeout: Opening handshake timeout in seconds.
        _connect: Connection factory (``websockets.asyncio.client.connect``).

    Example:
        >>> client = ValidatorStreamClient(base_url="ws://localhost:8080")
        >>> await client.run(session)
        >>> session.outcome
    """

    def __init__(
        self,
        *,
        base_url: str,
        open_timeout: float = STREAM_OPEN_TIMEOUT_DEFAULT,
        connect_factory: Callable[..., Any] = connect,
    ) -> None:
        """Initialize stream client.

        Args:
            base_url: WebSocket base URL (e.g., "ws://localhost:8080").
            open_timeout: Opening handshake timeout in seconds.
            connect_factory: Callable returning an async context manager that
                yields a connection with ``send`` and async iteration.
        """
        self._url = f"{base_url.rstrip('/')}{SEARCH_ACCOUNT_PATH}"
        self._open_timeout = open_timeout
        self._connect = connect_factory

    @property
    def url(self) -> str:
        return self._url

    async def run(self, sink: SearchEventSink) -> None:
        """Drive one streaming session to completion.

        Args:
            sink: Session receiving transport events.
        """
        sink.begin_connect()
        logger.debug("search_stream_connecting", url=self._url)

        try:
            async with self._connect(
                self._url,
                open_timeout=self._open_timeout,
            ) as websocket:
                outbound = sink.on_open()
                if outbound is None:
                    return
                await websocket.send(json.dumps(outbound))
                logger.debug("search_stream_query_sent")

                async for frame in websocket:
                    message = decode_frame(frame)
                    if message is not None:
                        sink.on_message(message)
                    if sink.is_closing:
                        break

        except ConnectionClosedOK:
            logger.debug("search_stream_closed_by_server")

        except (OSError, TimeoutError, WebSocketException) as e:
            logger.warning(
                "search_stream_transport_error",
                error_type=type(e).__name__,
                error=str(e),
            )
            sink.on_transport_error(e)

        finally:
            sink.on_transport_close()
