"""Domain errors package.

Usage:
    from src.domain.errors import SearchError, ValidatorTransportError
"""

from src.domain.errors.search_error import SearchError
from src.domain.errors.validator_error import (
    ValidatorError,
    ValidatorServerError,
    ValidatorTransportError,
)

__all__ = [
    "SearchError",
    "ValidatorError",
    "ValidatorServerError",
    "ValidatorTransportError",
]
