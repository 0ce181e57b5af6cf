"""Search session state machine.

A SearchSession owns the lifecycle of one dispatched query. It accumulates
streamed matches, publishes interim progress, and guarantees exactly one
final outcome.

State Machine:
    IDLE → CONNECTING → OPEN → CLOSING → CLOSED

    ``terminal`` becomes True once a decisive signal is reduced to a final
    outcome. ``is_closing`` guards every handler: once set, frames and
    transport callbacks are ignored, so a late error can never override a
    completed search.

Transitions:
    begin_connect()         IDLE → CONNECTING
    on_open()               CONNECTING → OPEN, hands out the queued query once
    on_message(error)       publish SearchFailure(error), → CLOSING
    on_message(account)     append, publish MultipleAccounts(final=False)
    on_message(final)       publish final MultipleAccounts or
                            SearchFailure("no matching accounts found"), → CLOSING
    on_transport_error()    publish SearchFailure("connection error occurred"), → CLOSING
    on_transport_close()    keep existing result, → CLOSED
    resolve(outcome)        exact lookups: publish outcome, → CLOSED
    cancel()                superseded or torn down: → CLOSED, nothing published

All handlers are synchronous. They run on the event loop thread and never
await, so two handlers cannot interleave.
"""

import asyncio
from collections.abc import Callable
from typing import Any

import structlog

from src.core.enums import ErrorCode
from src.domain.entities import AccountRecord
from src.domain.enums import ConnectionState, QueryMode
from src.domain.errors import (
    SearchError,
    ValidatorServerError,
    ValidatorTransportError,
)
from src.domain.protocols import LoggerProtocol
from src.domain.value_objects import (
    AccountQuery,
    MultipleAccounts,
    NoAccounts,
    SearchFailure,
    SearchOutcome,
    StreamMessage,
)

OutcomeListener = Callable[[SearchOutcome], None]
"""Callback receiving interim and final outcomes, in publication order."""


class SearchSession:
    """State of one in-flight account query.

    Implements SearchEventSink (structural typing) so the stream client can
    drive it without knowing about outcomes.

    Attributes:
        _query: Query being resolved.
        _accumulated: Streamed matches in arrival order.
        _state: Current connection state.
        _terminal: Whether the final outcome has been decided.
        _is_closing: Guard for late frames and transport callbacks.
        _last_error: Last error text recorded (server or transport).
        _queued_outbound: Query payload waiting for the connection to open.
        _outcome: Latest published outcome.
        _on_outcome: Optional consumer callback.

    Example:
        >>> session = SearchSession(query=query, on_outcome=render)
        >>> session.begin_connect()
        >>> payload = session.on_open()  # sent once by the transport
        >>> session.on_message(StreamMessage(account=record))
        >>> session.on_message(StreamMessage(final=True))
        >>> session.outcome
        MultipleAccounts(records=(record,), final=True)
    """

    def __init__(
        self,
        *,
        query: AccountQuery,
        on_outcome: OutcomeListener | None = None,
        logger: LoggerProtocol | None = None,
    ) -> None:
        """Initialize a session in the IDLE state.

        Args:
            query: Query to resolve. PATTERN queries get their payload queued
                for the streaming transport.
            on_outcome: Optional callback for published outcomes.
            logger: Optional logger (creates default if not provided).
        """
        self._query = query
        self._accumulated: list[AccountRecord] = []
        self._state = ConnectionState.IDLE
        self._terminal = False
        self._is_closing = False
        self._last_error: str | None = None
        self._queued_outbound: dict[str, Any] | None = (
            query.to_payload() if query.mode is QueryMode.PATTERN else None
        )
        self._outcome: SearchOutcome | None = None
        self._on_outcome = on_outcome
        self._settled = asyncio.Event()
        self._logger = (logger or structlog.get_logger(__name__)).bind(
            mode=query.mode.value,
            bank_code=query.bank_code,
        )

    # -------------------------------------------------------------------------
    # Read-only state
    # -------------------------------------------------------------------------

    @property
    def query(self) -> AccountQuery:
        return self._query

    @property
    def mode(self) -> QueryMode:
        return self._query.mode

    @property
    def accumulated(self) -> tuple[AccountRecord, ...]:
        """Matches received so far, in arrival order."""
        return tuple(self._accumulated)

    @property
    def connection_state(self) -> ConnectionState:
        return self._state

    @property
    def terminal(self) -> bool:
        return self._terminal

    @property
    def is_closing(self) -> bool:
        return self._is_closing

    @property
    def last_error(self) -> str | None:
        return self._last_error

    @property
    def queued_outbound(self) -> dict[str, Any] | None:
        return self._queued_outbound

    @property
    def outcome(self) -> SearchOutcome | None:
        """Latest published outcome (final once ``terminal`` is True)."""
        return self._outcome

    @property
    def is_loading(self) -> bool:
        """Whether the consumer should still show a loading indicator."""
        return not self._terminal

    async def wait(self) -> SearchOutcome | None:
        """Wait until the session settles.

        Returns:
            SearchOutcome | None: Final outcome, or None when the session was
            cancelled before deciding one.
        """
        await self._settled.wait()
        return self._outcome

    # -------------------------------------------------------------------------
    # Transport events (SearchEventSink)
    # -------------------------------------------------------------------------

    def begin_connect(self) -> None:
        if self._is_closing or self._state is not ConnectionState.IDLE:
            return
        self._state = ConnectionState.CONNECTING
        self._logger.debug("search_session_connecting")

    def on_open(self) -> dict[str, Any] | None:
        """Move to OPEN and hand out the queued query exactly once.

        Returns:
            dict | None: Query payload on the first call, None afterwards or
            when the session is already closing.
        """
        if self._is_closing:
            return None
        if self._state is ConnectionState.CONNECTING:
            self._state = ConnectionState.OPEN
            self._logger.debug("search_session_open")

        payload, self._queued_outbound = self._queued_outbound, None
        return payload

    def on_message(self, message: StreamMessage) -> None:
        """Reduce one streamed frame.

        Args:
            message: Decoded frame.
        """
        if self._is_closing or self._state is not ConnectionState.OPEN:
            self._logger.debug(
                "search_session_message_ignored",
                state=self._state.value,
                is_closing=self._is_closing,
            )
            return

        if message.error is not None:
            self._last_error = message.error
            self._logger.info("search_session_server_error", error=message.error)
            self._finish(
                SearchFailure(
                    reason=message.error,
                    error=ValidatorServerError(
                        code=ErrorCode.SEARCH_REJECTED,
                        message=message.error,
                    ),
                )
            )
            return

        if message.account is not None:
            self._accumulated.append(message.account)
            self._publish(
                MultipleAccounts(records=tuple(self._accumulated), final=False)
            )
        elif message.malformed_account:
            self._logger.debug("search_session_malformed_account_skipped")

        if message.final:
            self._logger.info(
                "search_session_completed",
                match_count=len(self._accumulated),
            )
            if self._accumulated:
                self._finish(
                    MultipleAccounts(records=tuple(self._accumulated), final=True)
                )
            else:
                self._finish(
                    SearchFailure(
                        reason=SearchError.NO_MATCHING_ACCOUNTS,
                        error=ValidatorServerError(
                            code=ErrorCode.NO_MATCHING_ACCOUNTS,
                            message=SearchError.NO_MATCHING_ACCOUNTS,
                        ),
                    )
                )

    def on_transport_error(self, error: Exception) -> None:
        """Record a connection failure unless a decision was already made.

        Args:
            error: Transport exception.
        """
        if self._is_closing:
            return

        self._last_error = SearchError.CONNECTION_ERROR
        self._logger.warning(
            "search_session_transport_error",
            error_type=type(error).__name__,
            error_message=str(error),
        )
        self._finish(
            SearchFailure(
                reason=SearchError.CONNECTION_ERROR,
                error=ValidatorTransportError(
                    code=ErrorCode.STREAM_CONNECTION_FAILED,
                    message=str(error) or SearchError.CONNECTION_ERROR,
                ),
            )
        )

    def on_transport_close(self) -> None:
        """Release the connection.

        An unexpected close (no decisive frame yet) keeps whatever result was
        already shown: the accumulated matches, or NoAccounts when there are
        none.
        """
        if not self._is_closing:
            self._logger.info(
                "search_session_closed_unexpectedly",
                match_count=len(self._accumulated),
            )
            if self._accumulated:
                outcome: SearchOutcome = MultipleAccounts(
                    records=tuple(self._accumulated), final=True
                )
            else:
                outcome = NoAccounts()
            self._finish(outcome)

        self._state = ConnectionState.CLOSED
        self._settled.set()

    # -------------------------------------------------------------------------
    # Direct resolution and cancellation
    # -------------------------------------------------------------------------

    def resolve(self, outcome: SearchOutcome) -> None:
        """Settle an exact lookup with its single outcome.

        Args:
            outcome: Outcome built from the HTTP response.
        """
        if self._is_closing:
            return
        self._finish(outcome)
        self._state = ConnectionState.CLOSED
        self._settled.set()

    def cancel(self) -> None:
        """Close the session without publishing anything further. Idempotent."""
        if self._state.is_closed:
            return
        if not self._terminal:
            self._logger.debug("search_session_cancelled", state=self._state.value)
        self._is_closing = True
        self._terminal = True
        self._queued_outbound = None
        self._state = ConnectionState.CLOSED
        self._settled.set()

    # -------------------------------------------------------------------------
    # Internals
    # -------------------------------------------------------------------------

    def _finish(self, outcome: SearchOutcome) -> None:
        self._is_closing = True
        if not self._state.is_closed:
            self._state = ConnectionState.CLOSING
        self._publish(outcome)
        self._terminal = True
        self._settled.set()

    def _publish(self, outcome: SearchOutcome) -> None:
        if self._terminal:
            return
        self._outcome = outcome
        if self._on_outcome is None:
            return
        try:
            self._on_outcome(outcome)
        except Exception as e:
            # Fail-open: a broken consumer must not wedge the state machine
            self._logger.error(
                "search_session_listener_failed",
                error_type=type(e).__name__,
                error_message=str(e),
            )
