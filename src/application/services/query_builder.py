"""Account query builder.

Turns raw user input into a validated AccountQuery. Validation failures are
returned before any network call is attempted.

Normalization:
    - Everything except ASCII digits and the wildcard marker is stripped
    - The result is truncated to 10 characters (silently)

Usage:
    result = build_account_query("0903 4*7364", "000014", "", directory=directory)
    match result:
        case Success(value=query):
            query.account_number  # "09034*7364"
        case Failure(error=error):
            error.field  # "account_number" or "bank_code"
"""

import re

from src.core.constants import ACCOUNT_NUMBER_MAX_LENGTH, WILDCARD_MARKER
from src.core.enums import ErrorCode
from src.core.errors import ValidationError
from src.core.result import Failure, Result, Success
from src.domain.enums import QueryMode
from src.domain.errors import SearchError
from src.domain.protocols import BankDirectoryProtocol
from src.domain.value_objects import AccountQuery

_DISALLOWED_CHARACTERS = re.compile(rf"[^0-9{re.escape(WILDCARD_MARKER)}]")


def normalize_account_number(raw: str) -> str:
    """Keep digits and wildcard markers, truncated to the maximum length.

    Args:
        raw: Account number as typed.

    Returns:
        str: Normalized account number (may be empty).
    """
    return _DISALLOWED_CHARACTERS.sub("", raw)[:ACCOUNT_NUMBER_MAX_LENGTH]


def detect_query_mode(account_number: str) -> QueryMode:
    """Mode of a normalized account number (pure)."""
    return QueryMode.for_account_number(account_number)


def build_account_query(
    raw_input: str | None,
    bank_code: str | None,
    holder_name: str | None = None,
    *,
    directory: BankDirectoryProtocol,
) -> Result[AccountQuery, ValidationError]:
    """Validate and normalize user input into an AccountQuery.

    Args:
        raw_input: Account number as typed, possibly with wildcard markers.
        bank_code: Selected bank code.
        holder_name: Optional holder name, sent exactly as typed.
        directory: Bank directory used to check the bank code.

    Returns:
        Success(AccountQuery): Normalized query.
        Failure(ValidationError): EMPTY_ACCOUNT_NUMBER when nothing usable was
            typed, BANK_NOT_SELECTED when the bank code is missing or unknown.
    """
    account_number = normalize_account_number(raw_input or "")
    if not (raw_input or "").strip() or not account_number:
        return Failure(
            error=ValidationError(
                code=ErrorCode.EMPTY_ACCOUNT_NUMBER,
                message=SearchError.EMPTY_ACCOUNT_NUMBER,
                field="account_number",
            )
        )

    code = (bank_code or "").strip()
    if not code or not directory.contains(code):
        return Failure(
            error=ValidationError(
                code=ErrorCode.BANK_NOT_SELECTED,
                message=SearchError.BANK_NOT_SELECTED,
                field="bank_code",
                details={"bank_code": code} if code else None,
            )
        )

    return Success(
        value=AccountQuery(
            account_number=account_number,
            bank_code=code,
            holder_name=holder_name or "",
        )
    )
