"""Unit tests for AccountSearchService.

Tests cover:
- Exact-lookup payload reduction (outcome_from_validation_payload)
- Transport selection (HTTP for EXACT, stream task for PATTERN)
- Input validation failures (nothing dispatched)
- Supersession of the active session
- Teardown via close()

Architecture:
- Validator mocked with AsyncMock
- Pattern searches driven through ValidatorStreamClient with a fake connection
"""

import asyncio
import json
from unittest.mock import AsyncMock, MagicMock

import pytest

from src.application.services import (
    AccountSearchService,
    outcome_from_validation_payload,
)
from src.core.enums import ErrorCode
from src.core.result import Failure, Success
from src.domain.enums import ConnectionState
from src.domain.errors import ValidatorServerError, ValidatorTransportError
from src.domain.value_objects import (
    MultipleAccounts,
    NoAccounts,
    SearchFailure,
    SingleAccount,
    StreamMessage,
)
from src.infrastructure.validator import ValidatorStreamClient


class BlockingStream:
    """Stream that opens, sends, then waits until cancelled."""

    def __init__(self) -> None:
        self.started = asyncio.Event()
        self.sinks = []

    async def run(self, sink) -> None:
        sink.begin_connect()
        sink.on_open()
        self.sinks.append(sink)
        self.started.set()
        try:
            await asyncio.Event().wait()
        finally:
            sink.on_transport_close()


@pytest.fixture
def validator():
    mock = MagicMock()
    mock.validate_account = AsyncMock()
    return mock


@pytest.fixture
def make_service(validator, bank_directory, mock_logger):
    def _make(stream=None):
        return AccountSearchService(
            validator=validator,
            stream=stream or MagicMock(),
            bank_directory=bank_directory,
            logger=mock_logger,
        )

    return _make


@pytest.mark.unit
class TestOutcomeFromValidationPayload:
    """Test reduction of exact-lookup responses."""

    def test_valid_single_account(self, make_payload, record_one):
        outcome = outcome_from_validation_payload({"isValid": True, **make_payload()})

        assert outcome == SingleAccount(record=record_one)

    def test_not_valid_uses_server_message(self):
        outcome = outcome_from_validation_payload(
            {"isValid": False, "message": "Account not found"}
        )

        assert isinstance(outcome, SearchFailure)
        assert outcome.reason == "Account not found"
        assert isinstance(outcome.error, ValidatorServerError)
        assert outcome.error.code == ErrorCode.ACCOUNT_NOT_VALIDATED

    @pytest.mark.parametrize("payload", [{"isValid": False}, {"message": ""}, {}])
    def test_not_valid_without_message(self, payload):
        outcome = outcome_from_validation_payload(payload)

        assert outcome.reason == "Validation failed"

    def test_valid_but_malformed_record(self, make_payload):
        outcome = outcome_from_validation_payload(
            {"isValid": True, **make_payload(account_name="")}
        )

        assert isinstance(outcome, SearchFailure)
        assert outcome.reason == "Validation failed"
        assert isinstance(outcome.error, ValidatorTransportError)
        assert outcome.error.code == ErrorCode.VALIDATOR_INVALID_RESPONSE
        assert outcome.error.is_transient is False

    def test_accounts_list(self, make_payload, record_one, record_two):
        outcome = outcome_from_validation_payload(
            {
                "isValid": True,
                "accounts": [
                    make_payload("0903417364", "JANE DOE"),
                    make_payload(bank_code=""),
                    make_payload("0903427364", "JOHN DOE"),
                ],
            }
        )

        assert outcome == MultipleAccounts(records=(record_one, record_two))

    def test_empty_accounts_list(self):
        outcome = outcome_from_validation_payload({"isValid": True, "accounts": []})

        assert outcome == NoAccounts()


@pytest.mark.unit
class TestAccountSearchServiceExact:
    """Test exact lookups over HTTP."""

    @pytest.mark.asyncio
    async def test_exact_lookup_found(self, make_service, validator, make_payload, record_one):
        validator.validate_account.return_value = Success(
            value={"isValid": True, **make_payload()}
        )
        service = make_service()
        published = []

        result = await service.submit(
            "0903417364", "000014", on_outcome=published.append
        )

        assert isinstance(result, Success)
        session = result.value
        assert session.outcome == SingleAccount(record=record_one)
        assert session.connection_state is ConnectionState.CLOSED
        assert published == [SingleAccount(record=record_one)]
        sent_query = validator.validate_account.await_args.args[0]
        assert sent_query.account_number == "0903417364"
        assert sent_query.bank_code == "000014"

    @pytest.mark.asyncio
    async def test_exact_lookup_not_valid(self, make_service, validator):
        validator.validate_account.return_value = Success(
            value={"isValid": False, "message": "Account not found"}
        )
        service = make_service()

        result = await service.submit("0903417364", "000014")

        outcome = await result.value.wait()
        assert isinstance(outcome, SearchFailure)
        assert outcome.reason == "Account not found"

    @pytest.mark.asyncio
    async def test_exact_lookup_transport_failure(self, make_service, validator, mock_logger):
        error = ValidatorTransportError(
            code=ErrorCode.VALIDATOR_HTTP_ERROR,
            message="Server error: 502 Bad Gateway",
            status_code=502,
        )
        validator.validate_account.return_value = Failure(error=error)
        service = make_service()

        result = await service.submit("0903417364", "000014")

        assert result.value.outcome == SearchFailure(
            reason="Server error: 502 Bad Gateway", error=error
        )
        mock_logger.warning.assert_any_call(
            "account_validation_failed",
            code="validator_http_error",
            status_code=502,
        )

    @pytest.mark.asyncio
    async def test_exact_lookup_does_not_touch_stream(self, make_service, validator, make_payload):
        validator.validate_account.return_value = Success(
            value={"isValid": True, **make_payload()}
        )
        stream = MagicMock()
        service = make_service(stream)

        await service.submit("0903417364", "000014")

        stream.run.assert_not_called()


@pytest.mark.unit
class TestAccountSearchServiceValidation:
    """Test rejected input."""

    @pytest.mark.asyncio
    async def test_empty_account_number_sends_nothing(self, make_service, validator):
        service = make_service()

        result = await service.submit("", "000014")

        assert isinstance(result, Failure)
        assert result.error.code == ErrorCode.EMPTY_ACCOUNT_NUMBER
        validator.validate_account.assert_not_awaited()
        assert service.active_session is None

    @pytest.mark.asyncio
    async def test_rejected_input_keeps_active_session(self, make_service):
        stream = BlockingStream()
        service = make_service(stream)
        first = (await service.submit("09034*7364", "000014")).value
        await asyncio.wait_for(stream.started.wait(), timeout=1)

        result = await service.submit("0903417364", "")

        assert result.error.code == ErrorCode.BANK_NOT_SELECTED
        assert service.active_session is first
        assert first.connection_state is ConnectionState.OPEN
        await service.close()


@pytest.mark.unit
class TestAccountSearchServicePattern:
    """Test pattern searches over the stream."""

    @pytest.mark.asyncio
    async def test_two_matches_then_final(
        self, make_service, fake_connect_factory, make_payload, record_one, record_two
    ):
        connect = fake_connect_factory(
            frames=[
                json.dumps({"account": make_payload("0903417364", "JANE DOE"), "final": False}),
                json.dumps({"account": make_payload("0903427364", "JOHN DOE"), "final": False}),
                json.dumps({"final": True}),
            ]
        )
        stream = ValidatorStreamClient(base_url="ws://validator.test", connect_factory=connect)
        service = make_service(stream)
        published = []

        result = await service.submit(
            "09034*7364", "000014", "Jane", on_outcome=published.append
        )
        outcome = await asyncio.wait_for(result.value.wait(), timeout=1)

        assert outcome == MultipleAccounts(records=(record_one, record_two), final=True)
        assert [o.final for o in published] == [False, False, True]
        assert [json.loads(data) for data in connect.websocket.sent] == [
            {"account_number": "09034*7364", "bank_code": "000014", "name": "Jane"}
        ]
        await service.close()

    @pytest.mark.asyncio
    async def test_bare_final(self, make_service, fake_connect_factory):
        connect = fake_connect_factory(frames=[json.dumps({"final": True})])
        stream = ValidatorStreamClient(base_url="ws://validator.test", connect_factory=connect)
        service = make_service(stream)

        result = await service.submit("*", "000014")
        outcome = await asyncio.wait_for(result.value.wait(), timeout=1)

        assert outcome.reason == "no matching accounts found"

    @pytest.mark.asyncio
    async def test_dispatch_returns_before_stream_settles(self, make_service):
        stream = BlockingStream()
        service = make_service(stream)

        result = await service.submit("09034*7364", "000014")

        session = result.value
        assert session.terminal is False
        assert session.is_loading is True
        await service.close()

    @pytest.mark.asyncio
    async def test_dispatch_starts_connecting_immediately(self, make_service):
        stream = BlockingStream()
        service = make_service(stream)

        result = await service.submit("09034*7364", "000014")

        assert result.value.connection_state is ConnectionState.CONNECTING
        await asyncio.wait_for(stream.started.wait(), timeout=1)
        assert result.value.connection_state is ConnectionState.OPEN
        await service.close()


@pytest.mark.unit
class TestAccountSearchServiceSupersession:
    """Test single active session and teardown."""

    @pytest.mark.asyncio
    async def test_new_query_supersedes_active_pattern_search(
        self, make_service, validator, make_payload, record_two
    ):
        stream = BlockingStream()
        validator.validate_account.return_value = Success(
            value={"isValid": True, **make_payload("0903427364", "JOHN DOE")}
        )
        service = make_service(stream)
        published_a = []

        first = (
            await service.submit("09034*7364", "000014", on_outcome=published_a.append)
        ).value
        await asyncio.wait_for(stream.started.wait(), timeout=1)

        second = (await service.submit("0903427364", "000014")).value

        assert service.active_session is second
        assert first.connection_state is ConnectionState.CLOSED
        assert first.is_closing is True
        assert second.outcome == SingleAccount(record=record_two)

        # Late frame for the superseded session is ignored
        first.on_message(StreamMessage(final=True))
        assert published_a == []
        assert first.outcome is None

    @pytest.mark.asyncio
    async def test_close_cancels_stream_task(self, make_service):
        stream = BlockingStream()
        service = make_service(stream)
        session = (await service.submit("09034*7364", "000014")).value
        await asyncio.wait_for(stream.started.wait(), timeout=1)

        await service.close()

        assert service.active_session is None
        assert session.connection_state is ConnectionState.CLOSED
        assert await asyncio.wait_for(session.wait(), timeout=1) is None

    @pytest.mark.asyncio
    async def test_close_is_idempotent(self, make_service):
        service = make_service()

        await service.close()
        await service.close()

        assert service.active_session is None
