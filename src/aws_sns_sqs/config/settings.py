"""
Module: settings.py
Description: Library configuration using pydantic-settings.

Loads client-wide defaults from SNS_SQS_* environment variables with
validation. Supports .env files for local development.
"""

from typing import Optional

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Client settings loaded from environment variables."""

    model_config = SettingsConfigDict(
        env_prefix="SNS_SQS_",
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore"
    )

    log_level: str = Field(default="INFO", description="Logging level")

    # AWS settings
    aws_region: str = Field(default="us-east-1", description="AWS region")
    endpoint_url: Optional[str] = Field(
        default=None,
        description="Override endpoint for SNS/SQS (LocalStack, moto server)"
    )

    # Client defaults
    default_timeout: float = Field(
        default=5.0,
        ge=0,
        description="Default call timeout in seconds (0 disables the deadline)"
    )
    append_attributes: bool = Field(
        default=False,
        description="Merge collection options with client defaults instead of replacing them"
    )

    @field_validator('log_level')
    @classmethod
    def validate_log_level(cls, v: str) -> str:
        """Validate log level is a valid logging level."""
        valid_levels = ['DEBUG', 'INFO', 'WARNING', 'ERROR', 'CRITICAL']
        if v.upper() not in valid_levels:
            raise ValueError(f"log_level must be one of: {', '.join(valid_levels)}")
        return v.upper()

    @field_validator('endpoint_url')
    @classmethod
    def validate_endpoint_url(cls, v: Optional[str]) -> Optional[str]:
        if v is None or v == "":
            return None
        if not v.startswith(('http://', 'https://')):
            raise ValueError("endpoint_url must be a valid HTTP/HTTPS URL")
        return v
