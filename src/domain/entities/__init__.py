"""Domain entities."""

from src.domain.entities.account_record import AccountRecord

__all__ = ["AccountRecord"]
