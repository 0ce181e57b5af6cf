"""Account query value object.

An AccountQuery is the validated, normalized form of what the user typed.
It is produced by the query builder and never mutated afterwards.
"""

from dataclasses import dataclass

from src.domain.enums.query_mode import QueryMode


@dataclass(frozen=True, slots=True, kw_only=True)
class AccountQuery:
    """Validated account lookup request.

    Attributes:
        account_number: Normalized account number (digits and wildcard marker,
            at most 10 characters).
        bank_code: Bank code known to the bank directory.
        holder_name: Optional holder name used by the validator to narrow
            pattern matches. Empty string when not given.

    Example:
        >>> query = AccountQuery(account_number="09034*7364", bank_code="000014")
        >>> query.mode
        <QueryMode.PATTERN: 'pattern'>
    """

    account_number: str
    bank_code: str
    holder_name: str = ""

    @property
    def mode(self) -> QueryMode:
        """Mode derived from the account number.

        Returns:
            QueryMode: PATTERN iff the account number contains the wildcard marker.
        """
        return QueryMode.for_account_number(self.account_number)

    def to_payload(self) -> dict[str, str]:
        """Wire body shared by the HTTP and WebSocket endpoints.

        Returns:
            dict[str, str]: ``{account_number, bank_code, name}``.
        """
        return {
            "account_number": self.account_number,
            "bank_code": self.bank_code,
            "name": self.holder_name,
        }
