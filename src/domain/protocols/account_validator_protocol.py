"""AccountValidatorProtocol for the exact-lookup HTTP endpoint.

Port (interface) for the single request/response exchange used when the
account number has no wildcard. Infrastructure implements it with httpx.
"""

from typing import TYPE_CHECKING, Any, Protocol

if TYPE_CHECKING:
    from src.core.result import Result
    from src.domain.errors import ValidatorTransportError
    from src.domain.value_objects import AccountQuery


class AccountValidatorProtocol(Protocol):
    """Protocol for exact account validation.

    Example:
        >>> result = await validator.validate_account(query)
        >>> match result:
        ...     case Success(value=payload):
        ...         payload["isValid"]
    """

    async def validate_account(
        self, query: "AccountQuery"
    ) -> "Result[dict[str, Any], ValidatorTransportError]":
        """Send one validation request.

        Args:
            query: Exact-mode query.

        Returns:
            Success(dict): Decoded JSON object of a 2xx response.
            Failure(ValidatorTransportError): Non-2xx status, timeout,
                connection failure or non-object body.
        """
        ...
