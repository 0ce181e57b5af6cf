"""Domain value objects (immutable, no identity)."""

from src.domain.value_objects.account_query import AccountQuery
from src.domain.value_objects.search_outcome import (
    MultipleAccounts,
    NoAccounts,
    SearchFailure,
    SearchOutcome,
    SingleAccount,
)
from src.domain.value_objects.stream_message import StreamMessage

__all__ = [
    "AccountQuery",
    "MultipleAccounts",
    "NoAccounts",
    "SearchFailure",
    "SearchOutcome",
    "SingleAccount",
    "StreamMessage",
]
