"""Logging configuration schema."""

from enum import Enum

from pydantic import BaseModel, Field, field_validator


class LogLevel(str, Enum):
    """Log level enumeration."""
    DEBUG = "DEBUG"
    INFO = "INFO"
    WARNING = "WARNING"
    ERROR = "ERROR"
    CRITICAL = "CRITICAL"


class LogDestination(str, Enum):
    """Log destination enumeration."""
    FILE = "file"
    STDOUT = "stdout"
    BOTH = "both"


class LoggingConfig(BaseModel):
    """Logging configuration."""

    level: LogLevel = LogLevel.INFO
    destination: LogDestination = LogDestination.STDOUT
    file_path: str = Field("/tmp/infra_actions.log", description="Log file when writing to file")
    max_size_mb: int = Field(10, ge=1)
    backup_count: int = Field(5, ge=0)
    format: str = "%(asctime)s - %(levelname)s - %(name)s [%(caller_info)s] - %(message)s"

    @field_validator("level", mode="before")
    @classmethod
    def normalize_level(cls, v):
        return v.upper() if isinstance(v, str) else v

    @field_validator("destination", mode="before")
    @classmethod
    def normalize_destination(cls, v):
        return v.lower() if isinstance(v, str) else v
