"""Centralized constants for internal implementation details.

This module contains constants that are fixed by the validator protocol,
NOT environment-specific configuration. For environment-specific settings,
use `src/core/config.py` instead.

Categories:
- Account numbers: Length limit and wildcard marker
- Endpoints: Validator HTTP and WebSocket paths
- Hosts: Loopback and emulator-reachable addresses
- Timeouts: Defaults for validator calls
- Limits: Truncation and safety limits
"""

# =============================================================================
# Account Numbers
# =============================================================================

ACCOUNT_NUMBER_MAX_LENGTH: int = 10
"""Maximum number of characters kept from a user-entered account number."""

WILDCARD_MARKER: str = "*"
"""Marks an unknown digit; any marker switches the query to streaming search."""


# =============================================================================
# Endpoints
# =============================================================================

VALIDATE_ACCOUNT_PATH: str = "/api/validate-account"
"""HTTP endpoint for exact account validation."""

SEARCH_ACCOUNT_PATH: str = "/ws/search-account"
"""WebSocket endpoint for wildcard account search."""


# =============================================================================
# Hosts
# =============================================================================

LOOPBACK_HOSTS: frozenset[str] = frozenset({"localhost", "127.0.0.1"})
"""Host names rewritten when the emulator host flag is set."""

EMULATOR_HOST: str = "10.0.2.2"
"""Address under which an Android emulator reaches the host loopback."""


# =============================================================================
# Timeouts
# =============================================================================

VALIDATOR_TIMEOUT_DEFAULT: float = 30.0
"""Default timeout for validator HTTP calls in seconds."""

STREAM_OPEN_TIMEOUT_DEFAULT: float = 10.0
"""Default timeout for the WebSocket opening handshake in seconds."""


# =============================================================================
# Response Limits
# =============================================================================

RESPONSE_BODY_MAX_LENGTH: int = 500
"""Maximum length for response body in error messages (truncation limit)."""
