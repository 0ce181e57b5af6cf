"""Account search service.

Dispatches account queries to the right transport and owns the single
active-session slot.

Transport selection:
    - EXACT: one HTTP request/response, resolved before dispatch returns
    - PATTERN: WebSocket stream driven by a background task; the session is
      returned immediately and settles later

Supersession:
    Every dispatch first closes the previous session and cancels its stream
    task, so at most one session is ever active and a superseded session
    never publishes again.

Usage:
    service = get_account_search_service()

    result = await service.submit("09034*7364", "000014", on_outcome=render)
    if isinstance(result, Success):
        outcome = await result.value.wait()

    await service.close()
"""

import asyncio
import contextlib
from typing import Any

from src.application.services.query_builder import build_account_query
from src.application.services.search_session import OutcomeListener, SearchSession
from src.core.enums import ErrorCode
from src.core.errors import ValidationError
from src.core.result import Failure, Result, Success
from src.domain.entities import AccountRecord
from src.domain.errors import (
    SearchError,
    ValidatorServerError,
    ValidatorTransportError,
)
from src.domain.protocols import (
    AccountValidatorProtocol,
    BankDirectoryProtocol,
    LoggerProtocol,
    SearchStreamProtocol,
)
from src.domain.value_objects import (
    AccountQuery,
    MultipleAccounts,
    NoAccounts,
    SearchFailure,
    SearchOutcome,
    SingleAccount,
)


def outcome_from_validation_payload(payload: dict[str, Any]) -> SearchOutcome:
    """Reduce an exact-lookup JSON response to an outcome.

    Args:
        payload: Decoded 2xx response body.

    Returns:
        SearchOutcome:
            - SearchFailure(message) when ``isValid`` is false
            - MultipleAccounts / NoAccounts when the body carries ``accounts``
            - SingleAccount for a well-formed single record
            - SearchFailure("Validation failed") for a malformed record
    """
    if not payload.get("isValid"):
        message = payload.get("message")
        reason = (
            message
            if isinstance(message, str) and message
            else SearchError.VALIDATION_FAILED
        )
        return SearchFailure(
            reason=reason,
            error=ValidatorServerError(
                code=ErrorCode.ACCOUNT_NOT_VALIDATED,
                message=reason,
            ),
        )

    accounts = payload.get("accounts")
    if isinstance(accounts, list):
        records = tuple(
            record
            for record in (AccountRecord.from_payload(item) for item in accounts)
            if record is not None
        )
        if records:
            return MultipleAccounts(records=records)
        return NoAccounts()

    record = AccountRecord.from_payload(payload)
    if record is None:
        return SearchFailure(
            reason=SearchError.VALIDATION_FAILED,
            error=ValidatorTransportError(
                code=ErrorCode.VALIDATOR_INVALID_RESPONSE,
                message="Validator response is missing account fields",
                is_transient=False,
            ),
        )
    return SingleAccount(record=record)


class AccountSearchService:
    """Transport selector and owner of the active search session.

    Dependencies (injected via constructor):
        - AccountValidatorProtocol: Exact lookups over HTTP
        - SearchStreamProtocol: Pattern searches over WebSocket
        - BankDirectoryProtocol: Bank code validation
        - LoggerProtocol: Structured logging

    Example:
        >>> service = AccountSearchService(
        ...     validator=validator,
        ...     stream=stream,
        ...     bank_directory=directory,
        ...     logger=logger,
        ... )
        >>> session = await service.dispatch(query)
        >>> await session.wait()
    """

    def __init__(
        self,
        *,
        validator: AccountValidatorProtocol,
        stream: SearchStreamProtocol,
        bank_directory: BankDirectoryProtocol,
        logger: LoggerProtocol,
    ) -> None:
        self._validator = validator
        self._stream = stream
        self._bank_directory = bank_directory
        self._logger = logger
        self._active_session: SearchSession | None = None
        self._active_task: asyncio.Task[None] | None = None

    @property
    def active_session(self) -> SearchSession | None:
        return self._active_session

    async def submit(
        self,
        raw_input: str | None,
        bank_code: str | None,
        holder_name: str | None = None,
        *,
        on_outcome: OutcomeListener | None = None,
    ) -> Result[SearchSession, ValidationError]:
        """Validate user input and dispatch it.

        Args:
            raw_input: Account number as typed.
            bank_code: Selected bank code.
            holder_name: Optional holder name.
            on_outcome: Optional callback for published outcomes.

        Returns:
            Success(SearchSession): Dispatched session.
            Failure(ValidationError): Input rejected; nothing was sent and the
                active session (if any) is left untouched.
        """
        result = build_account_query(
            raw_input,
            bank_code,
            holder_name,
            directory=self._bank_directory,
        )
        if isinstance(result, Failure):
            self._logger.info(
                "account_query_rejected",
                code=result.error.code.value,
                field=result.error.field,
            )
            return result

        session = await self.dispatch(result.value, on_outcome=on_outcome)
        return Success(value=session)

    async def dispatch(
        self,
        query: AccountQuery,
        *,
        on_outcome: OutcomeListener | None = None,
    ) -> SearchSession:
        """Supersede the active session and start resolving ``query``.

        Args:
            query: Validated query.
            on_outcome: Optional callback for published outcomes.

        Returns:
            SearchSession: Settled for EXACT queries, in flight for PATTERN.
        """
        await self.close()

        session = SearchSession(
            query=query,
            on_outcome=on_outcome,
            logger=self._logger,
        )
        self._active_session = session
        self._logger.info(
            "account_search_dispatched",
            mode=query.mode.value,
            bank_code=query.bank_code,
        )

        if query.mode.is_streaming:
            session.begin_connect()
            self._active_task = asyncio.create_task(
                self._stream.run(session),
                name=f"account-search-{query.bank_code}",
            )
        else:
            await self._resolve_exact(session)

        return session

    async def close(self) -> None:
        """Close the active session and its connection. Idempotent."""
        session, task = self._active_session, self._active_task
        self._active_session = None
        self._active_task = None

        if session is not None:
            session.cancel()

        if task is not None and not task.done():
            task.cancel()
            with contextlib.suppress(asyncio.CancelledError):
                await task

    async def _resolve_exact(self, session: SearchSession) -> None:
        result = await self._validator.validate_account(session.query)

        match result:
            case Failure(error=error):
                self._logger.warning(
                    "account_validation_failed",
                    code=error.code.value,
                    status_code=error.status_code,
                )
                session.resolve(SearchFailure(reason=error.message, error=error))
            case Success(value=payload):
                session.resolve(outcome_from_validation_payload(payload))
