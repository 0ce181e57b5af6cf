"""HTTP client for the exact account validation endpoint.

Handles:
- HTTP request execution with timeout/connection error handling
- Response status code interpretation (any non-2xx is a transport failure)
- JSON parsing with error handling
- Structured logging with operation context

Architecture:
    - Infrastructure layer (adapter for the validator HTTP API)
    - Implements AccountValidatorProtocol (structural typing)
    - Uses httpx for async HTTP
    - Returns Result types (no exceptions for expected failures)
"""

from typing import Any

import httpx
import structlog

from src.core.constants import (
    RESPONSE_BODY_MAX_LENGTH,
    VALIDATE_ACCOUNT_PATH,
    VALIDATOR_TIMEOUT_DEFAULT,
)
from src.core.enums import ErrorCode
from src.core.result import Failure, Result, Success
from src.domain.errors import SearchError, ValidatorTransportError
from src.domain.value_objects import AccountQuery

DEFAULT_HEADERS: dict[str, str] = {
    "Content-Type": "application/json",
    "Accept": "application/json",
}


class ValidatorAPIClient:
    """Async client for ``POST /api/validate-account``.

    Attributes:
        _base_url: Validator base URL (without trailing slash).
        _timeout: HTTP request timeout in seconds.
        _transport: Optional httpx transport (tests use httpx.MockTransport).
        _logger: Structured logger.

    Example:
        >>> client = ValidatorAPIClient(base_url="http://localhost:8080")
        >>> result = await client.validate_account(query)
        >>> match result:
        ...     case Success(value=payload):
        ...         payload["isValid"]
        ...     case Failure(error=error):
        ...         error.status_code
    """

    def __init__(
        self,
        *,
        base_url: str,
        timeout: float = VALIDATOR_TIMEOUT_DEFAULT,
        transport: httpx.AsyncBaseTransport | None = None,
    ) -> None:
        """Initialize validator API client.

        Args:
            base_url: Validator base URL (e.g., "http://localhost:8080").
            timeout: HTTP request timeout in seconds.
            transport: Optional httpx transport override.
        """
        self._base_url = base_url.rstrip("/")
        self._timeout = timeout
        self._transport = transport
        self._logger = structlog.get_logger("validator_api")

    async def validate_account(
        self, query: AccountQuery
    ) -> Result[dict[str, Any], ValidatorTransportError]:
        """Validate one complete account number.

        Args:
            query: Exact-mode query.

        Returns:
            Success(dict): Decoded JSON object of a 2xx response.
            Failure(ValidatorTransportError): On any transport failure.
        """
        operation = "validate_account"
        self._logger.debug(
            "validator_api_request",
            operation=operation,
            bank_code=query.bank_code,
        )

        result = await self._execute_request(
            method="POST",
            path=VALIDATE_ACCOUNT_PATH,
            json_data=query.to_payload(),
            operation=operation,
        )
        if isinstance(result, Failure):
            return result

        return self._parse_json_object(result.value, operation)

    async def _execute_request(
        self,
        *,
        method: str,
        path: str,
        json_data: dict[str, Any] | None = None,
        operation: str,
    ) -> Result[httpx.Response, ValidatorTransportError]:
        """Execute HTTP request with error handling.

        Args:
            method: HTTP method.
            path: URL path relative to base_url.
            json_data: Optional JSON body.
            operation: Operation name for logging.

        Returns:
            Success(httpx.Response): Raw HTTP response.
            Failure(ValidatorTransportError): On timeout or connection error.
        """
        url = f"{self._base_url}{path}"

        try:
            async with httpx.AsyncClient(
                timeout=self._timeout,
                transport=self._transport,
            ) as client:
                response = await client.request(
                    method=method,
                    url=url,
                    headers=DEFAULT_HEADERS,
                    json=json_data,
                )
            return Success(value=response)

        except httpx.TimeoutException as e:
            self._logger.warning(
                "validator_api_timeout",
                operation=operation,
                error=str(e),
            )
            return Failure(
                error=ValidatorTransportError(
                    code=ErrorCode.VALIDATOR_UNAVAILABLE,
                    message="Validator request timed out",
                    is_transient=True,
                )
            )

        except httpx.RequestError as e:
            self._logger.warning(
                "validator_api_connection_error",
                operation=operation,
                error=str(e),
            )
            return Failure(
                error=ValidatorTransportError(
                    code=ErrorCode.VALIDATOR_UNAVAILABLE,
                    message=SearchError.SERVER_UNREACHABLE,
                    is_transient=True,
                    details={"error": str(e)},
                )
            )

    def _check_error_response(
        self,
        response: httpx.Response,
        operation: str,
    ) -> Failure[ValidatorTransportError] | None:
        """Check HTTP response status.

        Args:
            response: HTTP response to check.
            operation: Operation name for logging.

        Returns:
            Failure(ValidatorTransportError) for non-2xx, None otherwise.
        """
        status = response.status_code

        if 200 <= status < 300:
            return None

        if status >= 500:
            self._logger.warning(
                "validator_api_server_error",
                operation=operation,
                status_code=status,
            )
        else:
            self._logger.warning(
                "validator_api_unexpected_status",
                operation=operation,
                status_code=status,
            )

        return Failure(
            error=ValidatorTransportError(
                code=ErrorCode.VALIDATOR_HTTP_ERROR,
                message=f"Server error: {status} {response.reason_phrase}".rstrip(),
                status_code=status,
                is_transient=status >= 500 or status == 429,
                details={"response_body": response.text[:RESPONSE_BODY_MAX_LENGTH]},
            )
        )

    def _parse_json_object(
        self,
        response: httpx.Response,
        operation: str,
    ) -> Result[dict[str, Any], ValidatorTransportError]:
        """Parse response as JSON object with error handling.

        Args:
            response: HTTP response to parse.
            operation: Operation name for logging.

        Returns:
            Success(dict): Parsed JSON object.
            Failure(ValidatorTransportError): On HTTP error or invalid JSON.
        """
        error_result = self._check_error_response(response, operation)
        if error_result is not None:
            return error_result

        try:
            data = response.json()
        except ValueError as e:
            self._logger.error(
                "validator_api_invalid_json",
                operation=operation,
                error=str(e),
            )
            return Failure(
                error=ValidatorTransportError(
                    code=ErrorCode.VALIDATOR_INVALID_RESPONSE,
                    message="Invalid JSON response from validator",
                    status_code=response.status_code,
                    is_transient=False,
                    details={"response_body": response.text[:RESPONSE_BODY_MAX_LENGTH]},
                )
            )

        if not isinstance(data, dict):
            self._logger.warning(
                "validator_api_unexpected_format",
                operation=operation,
                data_type=type(data).__name__,
            )
            return Failure(
                error=ValidatorTransportError(
                    code=ErrorCode.VALIDATOR_INVALID_RESPONSE,
                    message="Expected object response from validator",
                    status_code=response.status_code,
                    is_transient=False,
                    details={"response_body": response.text[:RESPONSE_BODY_MAX_LENGTH]},
                )
            )

        self._logger.debug(
            "validator_api_succeeded",
            operation=operation,
            is_valid=bool(data.get("isValid")),
        )
        return Success(value=data)
