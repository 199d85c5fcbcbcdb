"""Configuration package with clean public API."""

from .defaults import DEFAULT_CONFIG, ConfigurationManager
from .schemas import AppConfig, AWSConfig, LogDestination, LoggingConfig, LogLevel

__all__ = [
    'DEFAULT_CONFIG',
    'ConfigurationManager',
    'AppConfig',
    'AWSConfig',
    'LoggingConfig',
    'LogLevel',
    'LogDestination',
]
