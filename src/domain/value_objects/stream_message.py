"""Decoded streaming search frame.

The validator streams JSON objects shaped ``{account?, final, error?}``.
StreamMessage is the typed form the search session consumes.
"""

from dataclasses import dataclass
from typing import Any

from src.domain.entities.account_record import AccountRecord


@dataclass(frozen=True, slots=True, kw_only=True)
class StreamMessage:
    """One inbound frame of a wildcard search.

    Attributes:
        account: Well-formed account carried by the frame, if any.
        final: End-of-stream marker, honoured with or without an account.
        error: Server-reported error text. Decisive when present.
        malformed_account: True when the frame carried an ``account`` object
            that is missing required fields (it is skipped, not fatal).
    """

    account: AccountRecord | None = None
    final: bool = False
    error: str | None = None
    malformed_account: bool = False

    @classmethod
    def from_payload(cls, data: dict[str, Any]) -> "StreamMessage":
        """Build a message from a decoded JSON object.

        Args:
            data: Decoded frame.

        Returns:
            StreamMessage: Typed frame. An empty or non-string ``error`` is
            treated as absent.
        """
        raw_account = data.get("account")
        account = AccountRecord.from_payload(raw_account) if raw_account else None
        error = data.get("error")

        return cls(
            account=account,
            final=data.get("final") is True,
            error=error if isinstance(error, str) and error else None,
            malformed_account=bool(raw_account) and account is None,
        )
