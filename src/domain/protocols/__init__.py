"""Domain protocols (ports) package.

Infrastructure adapters implement these protocols without inheritance.

Usage:
    from src.domain.protocols import BankDirectoryProtocol, LoggerProtocol
"""

from src.domain.protocols.account_validator_protocol import (
    AccountValidatorProtocol,
)
from src.domain.protocols.bank_directory_protocol import BankDirectoryProtocol
from src.domain.protocols.logger_protocol import LoggerProtocol
from src.domain.protocols.search_stream_protocol import (
    SearchEventSink,
    SearchStreamProtocol,
)

__all__ = [
    "AccountValidatorProtocol",
    "BankDirectoryProtocol",
    "LoggerProtocol",
    "SearchEventSink",
    "SearchStreamProtocol",
]
