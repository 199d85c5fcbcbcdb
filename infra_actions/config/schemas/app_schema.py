"""Main application configuration schema."""

from typing import Any, Dict, Optional

from pydantic import BaseModel, Field, field_validator

from infra_actions.config.schemas.logging_schema import LoggingConfig


class AWSConfig(BaseModel):
    """AWS provider configuration."""

    region: str = Field("us-west-2", description="Region every handler's session is scoped to")
    endpoint_url: Optional[str] = Field(None, description="Alternate service endpoint")
    profile: Optional[str] = Field(None, description="Named credentials profile")
    connection_timeout_ms: int = Field(10000, ge=1000)
    read_timeout_ms: int = Field(60000, ge=1000)
    request_retry_attempts: int = Field(0, ge=0, le=10)

    @field_validator("region")
    @classmethod
    def validate_region(cls, v: str) -> str:
        """Validate region."""
        if not v or not v.strip():
            raise ValueError("AWS region is required")
        return v.strip()

    @field_validator("endpoint_url", "profile", mode="before")
    @classmethod
    def empty_as_none(cls, v: Optional[str]) -> Optional[str]:
        return v or None


class AppConfig(BaseModel):
    """Application configuration."""

    aws: AWSConfig = Field(default_factory=AWSConfig)
    logging: LoggingConfig = Field(default_factory=LoggingConfig)

    @classmethod
    def from_dict(cls, config: Dict[str, Any]) -> "AppConfig":
        """
        Build the typed configuration from the flat configuration dictionary.

        Args:
            config: Interpolated dictionary from ConfigurationManager

        Returns:
            AppConfig instance
        """
        logging_config = config.get("LOGGING_CONFIG", {})
        file_config = logging_config.get("file", {})
        aws = {
            "region": config.get("AWS_REGION"),
            "endpoint_url": config.get("AWS_ENDPOINT_URL"),
            "profile": config.get("AWS_PROFILE"),
            "connection_timeout_ms": config.get("AWS_CONNECTION_TIMEOUT_MS"),
            "read_timeout_ms": config.get("AWS_READ_TIMEOUT_MS"),
            "request_retry_attempts": config.get("AWS_REQUEST_RETRY_ATTEMPTS"),
        }
        logging = {
            "level": logging_config.get("level"),
            "destination": logging_config.get("destination"),
            "file_path": file_config.get("path"),
            "max_size_mb": file_config.get("max_size_mb"),
            "backup_count": file_config.get("backup_count"),
            "format": logging_config.get("format"),
        }
        # Unset keys fall back to the schema defaults
        return cls(
            aws=AWSConfig(**{k: v for k, v in aws.items() if v is not None}),
            logging=LoggingConfig(**{k: v for k, v in logging.items() if v is not None}),
        )
