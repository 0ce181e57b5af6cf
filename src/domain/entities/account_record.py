"""Account record domain entity.

Represents one account returned by the validation service, either as the
single result of an exact lookup or as one match of a wildcard search.

Architecture:
    - Pure domain entity (no infrastructure dependencies)
    - Immutable once received
    - Built from validator JSON via ``from_payload`` (returns None when malformed)

Usage:
    from src.domain.entities import AccountRecord

    record = AccountRecord.from_payload(message["account"])
    if record is not None:
        print(record.account_name)
"""

from dataclasses import dataclass
from typing import Any

REQUIRED_RECORD_FIELDS: tuple[str, ...] = (
    "account_number",
    "account_name",
    "bank_name",
    "bank_code",
)
"""Payload keys that must be present and non-empty for a record to be kept."""


@dataclass(frozen=True, slots=True, kw_only=True)
class AccountRecord:
    """Account as reported by the validation service.

    Attributes:
        account_number: Full 10-digit account number.
        account_name: Account holder name as registered with the bank.
        bank_name: Display name of the bank.
        bank_code: Bank code the account belongs to.
        first_name: Holder first name, when the bank reports it.
        last_name: Holder last name, when the bank reports it.
        other_name: Holder other name(s), when the bank reports it.

    Example:
        >>> record = AccountRecord(
        ...     account_number="0123456789",
        ...     account_name="JANE DOE",
        ...     bank_name="ACCESS BANK",
        ...     bank_code="000014",
        ... )
        >>> record.holder_names
        ()
    """

    account_number: str
    account_name: str
    bank_name: str
    bank_code: str
    first_name: str | None = None
    last_name: str | None = None
    other_name: str | None = None

    @classmethod
    def from_payload(cls, data: Any) -> "AccountRecord | None":
        """Build a record from a validator JSON object.

        Args:
            data: Decoded JSON value. Anything other than a dict is malformed.

        Returns:
            AccountRecord when every required field is a non-empty string,
            None otherwise.
        """
        if not isinstance(data, dict):
            return None

        for key in REQUIRED_RECORD_FIELDS:
            value = data.get(key)
            if not isinstance(value, str) or not value:
                return None

        return cls(
            account_number=data["account_number"],
            account_name=data["account_name"],
            bank_name=data["bank_name"],
            bank_code=data["bank_code"],
            first_name=_optional_text(data.get("first_name")),
            last_name=_optional_text(data.get("last_name")),
            other_name=_optional_text(data.get("other_name")),
        )

    @property
    def holder_names(self) -> tuple[str, ...]:
        """Name parts reported separately from the account name.

        Returns:
            tuple[str, ...]: first, last and other names that are present.
        """
        return tuple(
            name
            for name in (self.first_name, self.last_name, self.other_name)
            if name
        )

    def to_dict(self) -> dict[str, str | None]:
        """Serialize using the validator's field names."""
        return {
            "account_number": self.account_number,
            "account_name": self.account_name,
            "first_name": self.first_name,
            "last_name": self.last_name,
            "other_name": self.other_name,
            "bank_name": self.bank_name,
            "bank_code": self.bank_code,
        }


def _optional_text(value: Any) -> str | None:
    if isinstance(value, str) and value:
        return value
    return None
