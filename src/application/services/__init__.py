"""Application services."""

from src.application.services.account_search_service import (
    AccountSearchService,
    outcome_from_validation_payload,
)
from src.application.services.query_builder import (
    build_account_query,
    detect_query_mode,
    normalize_account_number,
)
from src.application.services.search_session import OutcomeListener, SearchSession

__all__ = [
    "AccountSearchService",
    "OutcomeListener",
    "SearchSession",
    "build_account_query",
    "detect_query_mode",
    "normalize_account_number",
    "outcome_from_validation_payload",
]
