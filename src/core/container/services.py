"""Application service factories."""

from functools import lru_cache

from src.application.services import AccountSearchService
from src.core.container.infrastructure import (
    get_bank_directory,
    get_logger,
    get_stream_client,
    get_validator_api_client,
)


@lru_cache()
def get_account_search_service() -> AccountSearchService:
    """Get the account search service singleton (app-scoped).

    The service owns the single active-session slot, so one instance must be
    shared by everything that submits queries.

    Returns:
        AccountSearchService: Wired service.
    """
    return AccountSearchService(
        validator=get_validator_api_client(),
        stream=get_stream_client(),
        bank_directory=get_bank_directory(),
        logger=get_logger(),
    )
