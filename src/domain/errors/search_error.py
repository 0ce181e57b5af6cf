"""Search error message constants.

User-facing messages used when a search ends in failure. These are NOT
exceptions - they are message values carried by ``SearchFailure``.
"""


class SearchError:
    """Search failure messages.

    Error Categories:
        - Query validation: EMPTY_ACCOUNT_NUMBER, BANK_NOT_SELECTED
        - Transport: CONNECTION_ERROR, SERVER_UNREACHABLE
        - Server-reported: NO_MATCHING_ACCOUNTS, VALIDATION_FAILED
    """

    # -------------------------------------------------------------------------
    # Query Validation
    # -------------------------------------------------------------------------

    EMPTY_ACCOUNT_NUMBER = "Please enter an account number"
    BANK_NOT_SELECTED = "Please select a bank"

    # -------------------------------------------------------------------------
    # Transport
    # -------------------------------------------------------------------------

    CONNECTION_ERROR = "connection error occurred"
    """WebSocket error before any decisive frame."""

    SERVER_UNREACHABLE = "Failed to connect to server"
    """HTTP request could not be completed."""

    # -------------------------------------------------------------------------
    # Server-reported
    # -------------------------------------------------------------------------

    NO_MATCHING_ACCOUNTS = "no matching accounts found"
    """Stream finished with neither matches nor an error."""

    VALIDATION_FAILED = "Validation failed"
    """Exact lookup rejected without a message."""
