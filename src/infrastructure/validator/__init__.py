"""Validator service adapters (HTTP and WebSocket)."""

from src.infrastructure.validator.api_client import ValidatorAPIClient
from src.infrastructure.validator.stream_client import (
    ValidatorStreamClient,
    decode_frame,
)

__all__ = [
    "ValidatorAPIClient",
    "ValidatorStreamClient",
    "decode_frame",
]
