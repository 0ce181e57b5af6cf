"""Infrastructure dependency factories.

Application-scoped singletons for infrastructure adapters:
- Logging (structlog console)
- Bank directory (JSON file or empty)
- Validator HTTP client (httpx)
- Validator stream client (websockets)

Adapters are imported lazily so that importing the container never pulls in
transport libraries that a caller does not use.
"""

from functools import lru_cache
from typing import TYPE_CHECKING

from src.core.config import get_settings

if TYPE_CHECKING:
    from src.domain.protocols import (
        AccountValidatorProtocol,
        BankDirectoryProtocol,
        LoggerProtocol,
        SearchStreamProtocol,
    )


@lru_cache()
def get_logger() -> "LoggerProtocol":
    """Return the application-scoped logger singleton.

    Adapter selection is centralized here (composition root):
    - development/production: ConsoleAdapter (human-readable)
    - testing/ci: ConsoleAdapter (JSON)

    Returns:
        LoggerProtocol: Logger instance implementing the protocol.
    """
    from src.infrastructure.logging.console_adapter import ConsoleAdapter

    settings = get_settings()
    use_json = settings.is_testing or settings.is_ci
    return ConsoleAdapter(use_json=use_json, level=settings.log_level)


@lru_cache()
def get_bank_directory() -> "BankDirectoryProtocol":
    """Get the bank directory singleton.

    Loads ``settings.bank_directory_path`` when set. Without it the directory
    is empty and every query is rejected with BANK_NOT_SELECTED.

    Returns:
        BankDirectoryProtocol: Loaded directory.

    Raises:
        OSError: If the configured file cannot be read.
        ValueError: If the configured file is not a code → name JSON object.
    """
    from src.infrastructure.bank_directory import StaticBankDirectory

    settings = get_settings()
    if settings.bank_directory_path:
        return StaticBankDirectory.from_json_file(settings.bank_directory_path)

    get_logger().warning("bank_directory_not_configured")
    return StaticBankDirectory({})


@lru_cache()
def get_validator_api_client() -> "AccountValidatorProtocol":
    """Get the exact-lookup HTTP client singleton.

    Returns:
        AccountValidatorProtocol: httpx-backed client.
    """
    from src.infrastructure.validator import ValidatorAPIClient

    settings = get_settings()
    return ValidatorAPIClient(
        base_url=settings.http_base_url,
        timeout=settings.http_timeout_seconds,
    )


@lru_cache()
def get_stream_client() -> "SearchStreamProtocol":
    """Get the streaming search client singleton.

    Returns:
        SearchStreamProtocol: websockets-backed client.
    """
    from src.infrastructure.validator import ValidatorStreamClient

    settings = get_settings()
    return ValidatorStreamClient(
        base_url=settings.ws_base_url,
        open_timeout=settings.ws_open_timeout_seconds,
    )
