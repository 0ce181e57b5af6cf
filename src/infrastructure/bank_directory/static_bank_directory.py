"""In-memory bank directory.

Adapter for BankDirectoryProtocol backed by a plain mapping of bank code to
display name. The reference data itself is supplied by the caller, either
directly or as a JSON object file (``{"000014": "ACCESS BANK", ...}``).
"""

import json
from collections.abc import Mapping
from pathlib import Path

import structlog

logger = structlog.get_logger(__name__)


class StaticBankDirectory:
    """Read-only bank code → name lookup.

    Note: Does NOT inherit from BankDirectoryProtocol (uses structural typing).

    Example:
        >>> directory = StaticBankDirectory({"000014": "ACCESS BANK"})
        >>> directory.contains("000014")
        True
        >>> directory.search("acc")
        [('000014', 'ACCESS BANK')]
    """

    def __init__(self, banks: Mapping[str, str]) -> None:
        """Copy the mapping; later changes to ``banks`` are not seen.

        Args:
            banks: Bank code → display name. Surrounding whitespace is
                stripped from both.
        """
        self._banks: dict[str, str] = {
            code.strip(): name.strip() for code, name in banks.items()
        }

    @classmethod
    def from_json_file(cls, path: str | Path) -> "StaticBankDirectory":
        """Load a directory from a JSON object file.

        Args:
            path: File containing ``{"<code>": "<name>", ...}``.

        Returns:
            StaticBankDirectory: Loaded directory.

        Raises:
            OSError: If the file cannot be read.
            ValueError: If the file is not a JSON object of strings.
        """
        raw = Path(path).read_text(encoding="utf-8")
        data = json.loads(raw)

        if not isinstance(data, dict) or not all(
            isinstance(code, str) and isinstance(name, str)
            for code, name in data.items()
        ):
            raise ValueError(f"Bank directory file must map codes to names: {path}")

        logger.info("bank_directory_loaded", path=str(path), bank_count=len(data))
        return cls(data)

    def contains(self, bank_code: str) -> bool:
        return bank_code in self._banks

    def name_for(self, bank_code: str) -> str | None:
        return self._banks.get(bank_code)

    def search(self, text: str) -> list[tuple[str, str]]:
        """Filter banks by case-insensitive substring of their name.

        Args:
            text: Substring to look for; blank text matches every bank.

        Returns:
            list[tuple[str, str]]: ``(code, name)`` pairs sorted by name, then code.
        """
        needle = text.strip().casefold()
        matches = [
            (code, name)
            for code, name in self._banks.items()
            if needle in name.casefold()
        ]
        return sorted(matches, key=lambda item: (item[1], item[0]))

    def __len__(self) -> int:
        return len(self._banks)
