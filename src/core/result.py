"""Result types for railway-oriented programming.

Operations that can fail for expected reasons (bad input, unreachable
validator, malformed payloads) return a Result instead of raising. Callers
branch on the variant explicitly.

Usage:
    result = build_account_query("0123456789", "000014", "", directory=directory)
    match result:
        case Success(value=query):
            session = await service.dispatch(query)
        case Failure(error=error):
            print(error.message)
"""

from dataclasses import dataclass
from typing import Generic, TypeAlias, TypeVar

T = TypeVar("T")  # Success type
E = TypeVar("E")  # Error type


@dataclass(frozen=True, slots=True, kw_only=True)
class Success(Generic[T]):
    """Represents a successful operation result.

    Attributes:
        value: The successful result value.
    """

    value: T


@dataclass(frozen=True, slots=True, kw_only=True)
class Failure(Generic[E]):
    """Represents a failed operation result.

    Attributes:
        error: The error that occurred.
    """

    error: E


Result: TypeAlias = Success[T] | Failure[E]
