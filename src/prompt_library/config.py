"""
Configuration management using Pydantic Settings.

This module handles all environment-based configuration for the Prompt Library
application: API server, logging, CORS, request validation and rate limits.
Prompt content itself is not configurable; it is embedded in the package.
"""

from pydantic import Field, computed_field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """
    Application settings loaded from environment variables and .env file.

    Every field has a default, so the service starts with no configuration.
    """

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    # API Configuration
    api_host: str = Field(default="0.0.0.0", description="API server host address")
    api_port: int = Field(default=8000, description="API server port")
    api_title: str = Field(default="Prompt Library", description="API title")
    api_version: str = Field(default="1.0.0", description="API version")

    # Environment
    environment: str = Field(
        default="development",
        description="Deployment environment",
        pattern="^(development|staging|production|test)$",
    )

    # Logging
    log_level: str = Field(
        default="INFO",
        description="Logging level",
        pattern="^(DEBUG|INFO|WARNING|ERROR|CRITICAL)$",
    )
    log_format: str = Field(
        default="json",
        description="Logging format",
        pattern="^(json|standard)$",
    )

    # CORS Configuration
    cors_origins: list[str] = Field(
        default=["*"],
        description="Allowed CORS origins",
    )
    cors_allow_credentials: bool = Field(
        default=False,  # Must be False when using wildcard
        description="Allow CORS credentials",
    )
    cors_allow_methods: list[str] = Field(
        default=["GET", "POST", "OPTIONS"],
        description="Allowed CORS methods",
    )
    cors_allow_headers: list[str] = Field(
        default=["Content-Type", "X-Request-ID"],
        description="Allowed CORS headers",
    )

    # Request Validation
    max_request_body_size: int = Field(
        default=65536,  # 64 KB; tool parameter records are small
        description="Maximum request body size in bytes",
        ge=1024,
        le=10485760,
    )

    # Security Headers Configuration
    enable_security_headers: bool = Field(
        default=True,
        description="Enable security headers (X-Content-Type-Options, X-Frame-Options, HSTS, X-XSS-Protection)",
    )

    # Rate Limiting Configuration
    rate_limit_enabled: bool = Field(
        default=True,
        description="Enable rate limiting for API endpoints",
    )
    rate_limit_default: str = Field(
        default="600/hour",
        description="Default rate limit applied globally (format: count/time_unit)",
    )
    rate_limit_tools: str = Field(
        default="60/minute",
        description="Rate limit for tool invocation endpoint (format: count/time_unit)",
    )

    @computed_field
    @property
    def base_url(self) -> str:
        """Computed property for base API URL."""
        protocol = "http" if self.environment == "development" else "https"
        return f"{protocol}://{self.api_host}:{self.api_port}"
