"""Container module - centralized dependency injection.

Usage:
    from src.core.container import get_account_search_service, get_logger

The container is organized into modules:
- infrastructure: logging, bank directory, validator clients
- services: application services
"""

from src.core.container.infrastructure import (
    get_bank_directory,
    get_logger,
    get_stream_client,
    get_validator_api_client,
)
from src.core.container.services import get_account_search_service

__all__ = [
    "get_account_search_service",
    "get_bank_directory",
    "get_logger",
    "get_stream_client",
    "get_validator_api_client",
]
