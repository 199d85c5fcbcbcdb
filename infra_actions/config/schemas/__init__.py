"""Configuration schemas."""

from infra_actions.config.schemas.app_schema import AppConfig, AWSConfig
from infra_actions.config.schemas.logging_schema import LogDestination, LoggingConfig, LogLevel

__all__: list[str] = [
    "AppConfig",
    "AWSConfig",
    "LoggingConfig",
    "LogLevel",
    "LogDestination",
]
