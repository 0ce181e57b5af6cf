"""Bank directory adapters."""

from src.infrastructure.bank_directory.static_bank_directory import (
    StaticBankDirectory,
)

__all__ = ["StaticBankDirectory"]
