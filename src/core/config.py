"""
Configuration management using Pydantic Settings.

This module provides type-safe, validated configuration loading from environment
variables (optionally a ``.env`` file).

Architecture:
- Flat Settings structure (no nesting)
- All config loaded from environment variables
- Type validation via Pydantic
- Derived validator URLs exposed as properties

Usage:
    from src.core.config import get_settings

    settings = get_settings()
    url = settings.http_base_url  # http://localhost:8080

    if settings.use_emulator_host:
        # Loopback is rewritten to 10.0.2.2
"""

from functools import lru_cache

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from src.core.constants import (
    EMULATOR_HOST,
    LOOPBACK_HOSTS,
    STREAM_OPEN_TIMEOUT_DEFAULT,
    VALIDATOR_TIMEOUT_DEFAULT,
)
from src.core.enums import Environment


class Settings(BaseSettings):
    """
    Client settings (flat structure).

    Configuration precedence:
        1. Environment variables
        2. ``.env`` file in the working directory
        3. Default values

    Returns:
        Settings: Client configuration loaded from environment.
    """

    # Environment detection
    environment: Environment = Field(
        default=Environment.DEVELOPMENT,
        description="Runtime environment (development, testing, ci, production)",
    )
    log_level: str = Field(
        default="INFO",
        description="Logging level (DEBUG, INFO, WARNING, ERROR, CRITICAL)",
    )

    # Validator service
    validator_host: str = Field(
        default="localhost",
        description="Host of the account validation service",
    )
    validator_port: int = Field(
        default=8080,
        description="Port of the account validation service",
    )
    validator_use_tls: bool = Field(
        default=False,
        description="Use https/wss instead of http/ws",
    )
    use_emulator_host: bool = Field(
        default=False,
        description="Rewrite a loopback validator host to the emulator-reachable address",
    )
    http_timeout_seconds: float = Field(
        default=VALIDATOR_TIMEOUT_DEFAULT,
        description="Timeout for the exact-lookup HTTP request in seconds",
    )
    ws_open_timeout_seconds: float = Field(
        default=STREAM_OPEN_TIMEOUT_DEFAULT,
        description="Timeout for the WebSocket opening handshake in seconds",
    )

    # Bank directory
    bank_directory_path: str | None = Field(
        default=None,
        description="Path to a JSON object mapping bank code to bank name",
    )

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    @field_validator("validator_host")
    @classmethod
    def validate_host(cls, v: str) -> str:
        """
        Strip whitespace and trailing slashes from the host.

        Args:
            v: Host string.

        Returns:
            str: Cleaned host.

        Raises:
            ValueError: If the host is empty.
        """
        host = v.strip().rstrip("/")
        if not host:
            raise ValueError("validator_host must not be empty")
        return host

    @field_validator("validator_port")
    @classmethod
    def validate_port(cls, v: int) -> int:
        """
        Validate the port is a usable TCP port.

        Args:
            v: Port number.

        Returns:
            int: Validated port.

        Raises:
            ValueError: If port is not between 1 and 65535.
        """
        if not 1 <= v <= 65535:
            raise ValueError("validator_port must be between 1 and 65535")
        return v

    @field_validator("http_timeout_seconds", "ws_open_timeout_seconds")
    @classmethod
    def validate_timeout(cls, v: float) -> float:
        if v <= 0:
            raise ValueError("timeouts must be positive")
        return v

    @property
    def effective_host(self) -> str:
        """
        Host actually targeted by both transports.

        Returns:
            str: EMULATOR_HOST when the emulator flag is set and the configured
            host is a loopback name, the configured host otherwise.
        """
        if self.use_emulator_host and self.validator_host in LOOPBACK_HOSTS:
            return EMULATOR_HOST
        return self.validator_host

    @property
    def http_base_url(self) -> str:
        """Base URL for the exact-lookup HTTP endpoint."""
        scheme = "https" if self.validator_use_tls else "http"
        return f"{scheme}://{self.effective_host}:{self.validator_port}"

    @property
    def ws_base_url(self) -> str:
        """Base URL for the streaming search endpoint."""
        scheme = "wss" if self.validator_use_tls else "ws"
        return f"{scheme}://{self.effective_host}:{self.validator_port}"

    @property
    def is_development(self) -> bool:
        return self.environment == Environment.DEVELOPMENT

    @property
    def is_testing(self) -> bool:
        return self.environment == Environment.TESTING

    @property
    def is_ci(self) -> bool:
        return self.environment == Environment.CI

    @property
    def is_production(self) -> bool:
        return self.environment == Environment.PRODUCTION


@lru_cache
def get_settings() -> Settings:
    """
    Get cached settings instance.

    Uses lru_cache to ensure settings are loaded only once per process.

    Returns:
        Settings: Cached settings instance.
    """
    return Settings()
