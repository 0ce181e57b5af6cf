"""Domain enums.

Available Enums:
    - QueryMode: Exact lookup vs wildcard pattern search
    - ConnectionState: Search session connection lifecycle
"""

from src.domain.enums.connection_state import ConnectionState
from src.domain.enums.query_mode import QueryMode

__all__ = [
    "ConnectionState",
    "QueryMode",
]
