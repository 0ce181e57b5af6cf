"""Shared pytest fixtures.

Provides:
1. A small in-memory bank directory
2. Account payload/record builders matching the validator wire format
3. Exact and pattern queries
4. A fake WebSocket connect factory for driving the stream client offline
"""

import contextlib
from collections.abc import AsyncIterator, Callable, Iterable
from typing import Any
from unittest.mock import MagicMock

import pytest

from src.domain.entities import AccountRecord
from src.domain.value_objects import AccountQuery
from src.infrastructure.bank_directory import StaticBankDirectory

BANKS: dict[str, str] = {
    "000014": "ACCESS BANK",
    "000013": "GTBANK",
    "000016": "FIRST BANK OF NIGERIA",
    "100004": "OPAY",
}


def account_payload(
    account_number: str = "0903417364",
    account_name: str = "JANE DOE",
    bank_code: str = "000014",
    bank_name: str = "ACCESS BANK",
    **extra: Any,
) -> dict[str, Any]:
    """Helper to build an account object as the validator sends it.

    Usage:
        payload = account_payload()
        payload = account_payload("0903427364", first_name="JANE")
        payload = account_payload(bank_code="")  # malformed
    """
    return {
        "account_number": account_number,
        "account_name": account_name,
        "bank_name": bank_name,
        "bank_code": bank_code,
        **extra,
    }


class FakeWebSocket:
    """Minimal stand-in for a websockets client connection.

    Frames are yielded in order. An exception instance in ``frames`` is raised
    at that point of the iteration instead of being yielded.
    """

    def __init__(self, frames: Iterable[Any] = ()) -> None:
        self.frames = list(frames)
        self.sent: list[str] = []
        self.received = 0

    async def send(self, data: str) -> None:
        self.sent.append(data)

    def __aiter__(self) -> AsyncIterator[Any]:
        return self._iterate()

    async def _iterate(self) -> AsyncIterator[Any]:
        for frame in self.frames:
            if isinstance(frame, BaseException):
                raise frame
            self.received += 1
            yield frame


class FakeConnect:
    """Callable mimicking ``websockets.asyncio.client.connect``.

    Attributes:
        websocket: Connection handed to the ``async with`` body.
        error: Raised instead of opening the connection, when set.
        calls: ``(url, kwargs)`` of every connect attempt.
    """

    def __init__(
        self,
        websocket: FakeWebSocket | None = None,
        *,
        error: BaseException | None = None,
    ) -> None:
        self.websocket = websocket or FakeWebSocket()
        self.error = error
        self.calls: list[tuple[str, dict[str, Any]]] = []

    def __call__(self, url: str, **kwargs: Any) -> Any:
        self.calls.append((url, kwargs))
        return self._open()

    @contextlib.asynccontextmanager
    async def _open(self) -> AsyncIterator[FakeWebSocket]:
        if self.error is not None:
            raise self.error
        yield self.websocket


@pytest.fixture
def bank_directory() -> StaticBankDirectory:
    """Directory with four banks."""
    return StaticBankDirectory(BANKS)


@pytest.fixture
def make_payload() -> Callable[..., dict[str, Any]]:
    return account_payload


@pytest.fixture
def record_one() -> AccountRecord:
    record = AccountRecord.from_payload(account_payload("0903417364", "JANE DOE"))
    assert record is not None
    return record


@pytest.fixture
def record_two() -> AccountRecord:
    record = AccountRecord.from_payload(account_payload("0903427364", "JOHN DOE"))
    assert record is not None
    return record


@pytest.fixture
def exact_query() -> AccountQuery:
    return AccountQuery(account_number="0903417364", bank_code="000014")


@pytest.fixture
def pattern_query() -> AccountQuery:
    return AccountQuery(
        account_number="09034*7364",
        bank_code="000014",
        holder_name="Jane",
    )


@pytest.fixture
def mock_logger() -> MagicMock:
    """LoggerProtocol double; ``bind`` returns the same mock."""
    logger = MagicMock()
    logger.bind.return_value = logger
    return logger


@pytest.fixture
def fake_connect_factory() -> Callable[..., FakeConnect]:
    """Build a FakeConnect from frames or a connect-time error.

    Usage:
        connect = fake_connect_factory(frames=['{"final": true}'])
        connect = fake_connect_factory(error=OSError("refused"))
    """

    def _factory(
        frames: Iterable[Any] = (),
        *,
        error: BaseException | None = None,
    ) -> FakeConnect:
        return FakeConnect(FakeWebSocket(frames), error=error)

    return _factory
