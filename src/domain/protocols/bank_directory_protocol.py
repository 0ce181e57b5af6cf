"""BankDirectoryProtocol for the bank code reference data.

The directory is an external collaborator: the search client only reads it,
to check that a selected bank code exists and to filter banks by name for
pickers.
"""

from typing import Protocol


class BankDirectoryProtocol(Protocol):
    """Read-only mapping of bank code to bank display name.

    Example:
        >>> directory: BankDirectoryProtocol = get_bank_directory()
        >>> directory.contains("000014")
        True
        >>> [code for code, _ in directory.search("access")]
        ['000014', '000005']
    """

    def contains(self, bank_code: str) -> bool:
        """Check whether a bank code is known.

        Args:
            bank_code: Code to look up.

        Returns:
            bool: True if the directory lists the code.
        """
        ...

    def name_for(self, bank_code: str) -> str | None:
        """Get the display name of a bank.

        Args:
            bank_code: Code to look up.

        Returns:
            str | None: Display name, or None for unknown codes.
        """
        ...

    def search(self, text: str) -> list[tuple[str, str]]:
        """Filter banks by case-insensitive substring of their name.

        Args:
            text: Substring to look for. Empty text matches every bank.

        Returns:
            list[tuple[str, str]]: ``(code, name)`` pairs sorted by name.
        """
        ...

    def __len__(self) -> int:
        ...
