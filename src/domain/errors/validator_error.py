"""Validator error types.

These errors describe failures talking to the account validation service.
They are part of the client contract: the HTTP and stream clients return
them inside ``Failure`` and the search service turns them into
``SearchFailure`` outcomes.

Architecture:
- Domain layer errors (part of protocol contract)
- Inherit from DomainError (core layer)
- Used in Result types (railway-oriented programming)

Usage:
    from src.domain.errors import ValidatorTransportError
    from src.core.result import Failure

    return Failure(error=ValidatorTransportError(
        code=ErrorCode.VALIDATOR_HTTP_ERROR,
        message="Server error: 502 Bad Gateway",
        status_code=502,
    ))
"""

from dataclasses import dataclass
from typing import Any

from src.core.errors import DomainError


@dataclass(frozen=True, slots=True, kw_only=True)
class ValidatorError(DomainError):
    """Base validation service error.

    Attributes:
        code: ErrorCode.
        message: Human-readable message.
        details: Additional context (response body, endpoint).
    """

    details: dict[str, Any] | None = None


@dataclass(frozen=True, slots=True, kw_only=True)
class ValidatorTransportError(ValidatorError):
    """The validator could not be reached or answered outside the protocol.

    Raised when:
    - The HTTP response status is not 2xx
    - The request times out or the connection fails
    - The response body is not a JSON object
    - The WebSocket connection fails or drops

    Not retried: the user resubmits.

    Attributes:
        status_code: HTTP status when one was received.
        is_transient: Whether resubmitting may succeed.
    """

    status_code: int | None = None
    is_transient: bool = True


@dataclass(frozen=True, slots=True, kw_only=True)
class ValidatorServerError(ValidatorError):
    """The validator answered and reported a failure.

    Raised when:
    - An exact lookup returns ``isValid: false``
    - A streamed frame carries an ``error`` field
    - A stream finishes without any match
    """

    pass
