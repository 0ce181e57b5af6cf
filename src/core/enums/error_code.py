"""Error codes (machine-readable).

Error codes follow ENTITY_ACTION_REASON naming convention.
Used with Result types for railway-oriented programming.

Categories:
- Query validation errors (raised before dispatch)
- Validator transport errors (HTTP / WebSocket failures)
- Validator-reported errors (server said no)
"""

from enum import Enum


class ErrorCode(Enum):
    """Error codes (machine-readable).

    Error codes follow ENTITY_ACTION_REASON naming convention.
    """

    # Query validation errors
    EMPTY_ACCOUNT_NUMBER = "empty_account_number"
    BANK_NOT_SELECTED = "bank_not_selected"

    # Validator transport errors
    VALIDATOR_UNAVAILABLE = "validator_unavailable"
    VALIDATOR_HTTP_ERROR = "validator_http_error"
    VALIDATOR_INVALID_RESPONSE = "validator_invalid_response"
    STREAM_CONNECTION_FAILED = "stream_connection_failed"

    # Validator-reported errors
    ACCOUNT_NOT_VALIDATED = "account_not_validated"
    SEARCH_REJECTED = "search_rejected"
    NO_MATCHING_ACCOUNTS = "no_matching_accounts"
