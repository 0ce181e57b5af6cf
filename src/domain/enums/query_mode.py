"""Account query modes.

The mode is derived from the normalized account number and decides which
transport carries the query.

    - EXACT: Full account number, one HTTP request/response exchange
    - PATTERN: Contains the wildcard marker, streamed WebSocket search

Usage:
    from src.domain.enums import QueryMode

    if query.mode == QueryMode.PATTERN:
        # Streaming search
"""

from enum import Enum

from src.core.constants import WILDCARD_MARKER


class QueryMode(str, Enum):
    """How an account query is resolved.

    String Enum:
        Inherits from str for easy serialization and logging.
    """

    EXACT = "exact"
    """Complete account number, validated with a single HTTP call."""

    PATTERN = "pattern"
    """Account number with unknown digits, searched over a WebSocket stream.

    The validator may return zero, one or many matches.
    """

    @classmethod
    def for_account_number(cls, account_number: str) -> "QueryMode":
        """Derive the mode of a normalized account number.

        Args:
            account_number: Normalized account number.

        Returns:
            QueryMode: PATTERN iff the number contains the wildcard marker.
        """
        if WILDCARD_MARKER in account_number:
            return cls.PATTERN
        return cls.EXACT

    @property
    def is_streaming(self) -> bool:
        """Whether this mode is resolved over the streaming transport.

        Returns:
            bool: True for PATTERN.
        """
        return self is QueryMode.PATTERN
