"""Configuration management for the MarketPulse service.

This module handles environment variable loading and provides type-safe
configuration access using Pydantic models.
"""

import logging
from typing import Literal, Optional

from pydantic import Field, field_validator, model_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

logger = logging.getLogger(__name__)


class Config(BaseSettings):
    """Application configuration loaded from environment variables and .env file.

    All configuration values are automatically loaded from:
    1. `.env` file in the project root (if present)
    2. Environment variables (as fallback)

    Attributes:
        log_level: Logging level (DEBUG, INFO, WARNING, ERROR, CRITICAL)
        data_provider: Competitor data source, "sample" or "http"
        provider_base_url: Base URL of the HTTP data source (required for "http")
        provider_api_key: Optional bearer token for the HTTP data source
        provider_timeout: Request timeout in seconds for the HTTP data source
        max_competitors: Upper bound on records accepted from a provider
        provider_cache_enabled: Enable/disable caching of acquired records
        provider_cache_size: Maximum number of cached (company, industry) keys
        service_name: Service identity reported by the health endpoint
        service_version: Service version reported by the health endpoint
        host: Interface the HTTP server binds to
        port: Port the HTTP server listens on
    """

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    log_level: str = Field(
        default="INFO",
        description="Logging level",
    )

    data_provider: Literal["sample", "http"] = Field(
        default="sample",
        description="Competitor data source",
    )

    provider_base_url: Optional[str] = Field(
        default=None,
        description="Base URL of the HTTP competitor data source",
    )

    provider_api_key: Optional[str] = Field(
        default=None,
        description="Bearer token for the HTTP competitor data source",
    )

    provider_timeout: float = Field(
        default=10.0,
        description="Request timeout in seconds for the HTTP data source",
        ge=0.1,
        le=120.0,
    )

    max_competitors: int = Field(
        default=3,
        description="Maximum number of competitor records accepted from a provider",
        ge=1,
        le=50,
    )

    # Acquisition caching
    provider_cache_enabled: bool = Field(
        default=False,
        description="Enable/disable in-memory caching of acquired competitor records",
    )

    provider_cache_size: int = Field(
        default=128,
        description="Maximum number of cached (company, industry) entries (LRU)",
        ge=1,
        le=10000,
    )

    # Service identity and server binding
    service_name: str = Field(
        default="marketpulse-api",
        description="Service name reported by the health endpoint",
    )

    service_version: str = Field(
        default="1.0.0",
        description="Service version reported by the health endpoint",
    )

    host: str = Field(
        default="0.0.0.0",
        description="Interface the HTTP server binds to",
    )

    port: int = Field(
        default=8080,
        description="Port the HTTP server listens on",
        ge=1,
        le=65535,
    )

    @field_validator("log_level")
    @classmethod
    def validate_log_level(cls, value: str) -> str:
        """Validate log level is one of the allowed values.

        Args:
            value: Log level string to validate

        Returns:
            Uppercase log level string

        Raises:
            ValueError: If log level is not one of the allowed values
        """
        allowed_levels = {"DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"}
        upper_value = value.upper()
        if upper_value not in allowed_levels:
            raise ValueError(
                f"log_level must be one of {allowed_levels}, got {value}"
            )
        return upper_value

    @field_validator("provider_base_url")
    @classmethod
    def validate_provider_base_url(cls, value: Optional[str]) -> Optional[str]:
        """Strip trailing slashes so endpoint paths can be appended."""
        if value is None:
            return None
        value = value.strip().rstrip("/")
        return value or None

    @model_validator(mode="after")
    def validate_http_provider_settings(self) -> "Config":
        """Require a base URL when the HTTP provider is selected.

        Raises:
            ValueError: If data_provider is "http" and provider_base_url is unset
        """
        if self.data_provider == "http" and not self.provider_base_url:
            raise ValueError(
                "provider_base_url is required when data_provider is 'http'"
            )
        return self


# Global configuration instance
_config: Optional[Config] = None


def get_config() -> Config:
    """Get the global configuration instance.

    Loads configuration from `.env` file (if present) and environment variables
    on first call and returns the same instance on subsequent calls.

    Returns:
        Config instance with loaded configuration values

    Raises:
        ValueError: If configuration values are invalid
    """
    global _config
    if _config is None:
        _config = Config()
        # Never log the API key itself
        logger.debug(
            f"Configuration loaded: "
            f"DATA_PROVIDER={_config.data_provider}, "
            f"PROVIDER_API_KEY={'set' if _config.provider_api_key else 'missing'}, "
            f"MAX_COMPETITORS={_config.max_competitors}, "
            f"PROVIDER_CACHE_ENABLED={_config.provider_cache_enabled}"
        )
    return _config


def reload_config() -> Config:
    """Reload configuration from environment variables.

    Useful for testing or when configuration changes at runtime.

    Returns:
        New Config instance with reloaded configuration values
    """
    global _config
    _config = Config()
    return _config
