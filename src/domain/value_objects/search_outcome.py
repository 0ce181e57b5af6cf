"""Search outcome value objects.

An outcome is the consumer-facing reduction of a search session. A session
publishes zero or more interim ``MultipleAccounts(final=False)`` outcomes and
exactly one final outcome.

Variants:
    - SingleAccount: Exact lookup found the account
    - MultipleAccounts: Pattern search matches (interim or final)
    - NoAccounts: Stream ended without a decisive signal and without matches
    - SearchFailure: Validation, transport or server-reported failure

Usage:
    match outcome:
        case SingleAccount(record=record):
            show(record)
        case MultipleAccounts(records=records, final=False):
            show_progress(records)
        case SearchFailure(reason=reason):
            show_error(reason)
"""

from dataclasses import dataclass
from typing import TypeAlias

from src.core.errors import DomainError
from src.domain.entities.account_record import AccountRecord


@dataclass(frozen=True, slots=True, kw_only=True)
class SingleAccount:
    """Exactly one account found.

    Attributes:
        record: The validated account.
    """

    record: AccountRecord

    @property
    def final(self) -> bool:
        return True


@dataclass(frozen=True, slots=True, kw_only=True)
class MultipleAccounts:
    """Accounts matched by a pattern search, in arrival order.

    Attributes:
        records: Matches received so far.
        final: False while the stream is still running.
    """

    records: tuple[AccountRecord, ...]
    final: bool = True


@dataclass(frozen=True, slots=True, kw_only=True)
class NoAccounts:
    """The search finished without any account and without an error."""

    @property
    def final(self) -> bool:
        return True


@dataclass(frozen=True, slots=True, kw_only=True)
class SearchFailure:
    """The search failed.

    Attributes:
        reason: User-facing message.
        error: Underlying error, when one was produced.
    """

    reason: str
    error: DomainError | None = None

    @property
    def final(self) -> bool:
        return True


SearchOutcome: TypeAlias = SingleAccount | MultipleAccounts | NoAccounts | SearchFailure
