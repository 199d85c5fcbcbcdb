# infra_actions/config/defaults.py
import copy
import json
import os
from typing import Any, Dict, List, Optional

import yaml
from pydantic import ValidationError as PydanticValidationError

from infra_actions.config.schemas.app_schema import AppConfig
from infra_actions.infrastructure.exceptions import ConfigurationError

CONFIG_FILE_ENV_VAR = "INFRA_ACTIONS_CONFIG_FILE"

DEFAULT_CONFIG = {
    # AWS provider configuration
    "AWS_REGION": "${AWS_REGION:us-west-2}",
    "AWS_ENDPOINT_URL": "${AWS_ENDPOINT_URL:}",
    "AWS_PROFILE": "${AWS_PROFILE:}",
    "AWS_CONNECTION_TIMEOUT_MS": 10000,
    "AWS_READ_TIMEOUT_MS": 60000,
    # Handlers never retry; a transient failure goes straight back to the caller
    "AWS_REQUEST_RETRY_ATTEMPTS": 0,

    # Logging configuration
    "LOGGING_CONFIG": {
        "level": "${LOG_LEVEL:INFO}",
        "destination": "${LOG_DESTINATION:stdout}",
        "file": {
            "path": "${LOG_FILE:/tmp/infra_actions.log}",
            "max_size_mb": 10,
            "backup_count": 5
        },
        "format": "%(asctime)s - %(levelname)s - %(name)s [%(caller_info)s] - %(message)s"
    },

    # Validation ranges and rules
    "VALIDATION_RULES": {
        "AWS_REQUEST_RETRY_ATTEMPTS": {
            "min": 0,
            "max": 10,
            "type": "int"
        },
        "AWS_CONNECTION_TIMEOUT_MS": {
            "min": 1000,
            "type": "int"
        },
        "AWS_READ_TIMEOUT_MS": {
            "min": 1000,
            "type": "int"
        },
        "required_fields": [
            "AWS_REGION"
        ]
    }
}


class ConfigurationManager:
    """
    Manages application configuration with defaults and overrides.

    This class handles:
    - Loading default configuration
    - Applying a JSON configuration file
    - Applying environment variable overrides
    - Variable interpolation
    - Configuration validation
    """

    def __init__(self, config_file: Optional[str] = None):
        """
        Initialize configuration manager with defaults.

        Args:
            config_file: Optional path to configuration file. If not provided,
                        the file named by INFRA_ACTIONS_CONFIG_FILE is used when set.

        Raises:
            ConfigurationError: If the file cannot be read or the result is invalid
        """
        self._config = copy.deepcopy(DEFAULT_CONFIG)

        config_file = config_file or os.environ.get(CONFIG_FILE_ENV_VAR)
        if config_file:
            self._load_config_file(config_file)

        # Load environment variables (highest priority)
        self._load_env_vars()

        self.validate_config()

    def _load_config_file(self, config_path: str) -> None:
        """Load configuration from a JSON or YAML file."""
        try:
            with open(config_path, 'r') as f:
                if config_path.endswith(('.yaml', '.yml')):
                    user_config = yaml.safe_load(f) or {}
                else:
                    user_config = json.load(f)
        except (OSError, ValueError, yaml.YAMLError) as e:
            raise ConfigurationError(f"Failed to load configuration: {str(e)}")
        if not isinstance(user_config, dict):
            raise ConfigurationError(f"Configuration file {config_path} must contain a mapping")
        self.update_config(user_config)

    def _load_env_vars(self) -> None:
        """Load and apply environment variable overrides."""
        direct_mappings = [
            "AWS_REGION",
            "AWS_ENDPOINT_URL",
            "AWS_PROFILE",
            "AWS_CONNECTION_TIMEOUT_MS",
            "AWS_READ_TIMEOUT_MS",
            "AWS_REQUEST_RETRY_ATTEMPTS",
        ]

        for env_var in direct_mappings:
            if env_var in os.environ:
                self._config[env_var] = os.environ[env_var]

    def _interpolate_values(self, config: Any) -> Any:
        """Interpolate ${VAR} and ${VAR:default} references in configuration values."""
        if isinstance(config, str):
            if config.startswith("${") and config.endswith("}"):
                var_name = config[2:-1]
                if ":" in var_name:
                    var_name, default = var_name.split(":", 1)
                    return os.environ.get(var_name, default)
                return os.environ.get(var_name, config)
            return config
        elif isinstance(config, dict):
            return {k: self._interpolate_values(v) for k, v in config.items()}
        elif isinstance(config, list):
            return [self._interpolate_values(v) for v in config]
        return config

    def update_config(self, user_config: Dict[str, Any]) -> None:
        """
        Update configuration with user-provided values.

        Args:
            user_config: Configuration dictionary from user config file
        """
        def deep_update(target: Dict[str, Any], source: Dict[str, Any]) -> None:
            for key, value in source.items():
                if key in target and isinstance(target[key], dict) and isinstance(value, dict):
                    deep_update(target[key], value)
                else:
                    target[key] = value

        deep_update(self._config, user_config)

    def get_config(self) -> Dict[str, Any]:
        """
        Get the complete configuration with all interpolations applied.

        Returns:
            Dict containing the complete configuration
        """
        return self._interpolate_values(self._config)

    def get_app_config(self) -> AppConfig:
        """
        Get the typed view of the configuration.

        Raises:
            ConfigurationError: If the configuration does not fit the schema
        """
        try:
            return AppConfig.from_dict(self.get_config())
        except PydanticValidationError as e:
            errors = [
                f"{'.'.join(str(p) for p in err['loc'])}: {err['msg']}"
                for err in e.errors()
            ]
            raise ConfigurationError(
                "Configuration validation failed:\n" + "\n".join(errors), errors
            ) from e

    def validate_config(self) -> None:
        """
        Validate the configuration.

        Validates:
        - Required fields are present
        - Numeric values are integers within their allowed ranges
        - The result fits the typed schema

        Raises:
            ConfigurationError: If configuration is invalid, listing every problem
        """
        config = self.get_config()
        errors: List[str] = []

        for field in config["VALIDATION_RULES"]["required_fields"]:
            if not config.get(field):
                errors.append(f"{field} is required")

        for field, rules in config["VALIDATION_RULES"].items():
            if isinstance(rules, dict) and rules.get("type") == "int":
                value = config.get(field)
                if value is None:
                    continue
                try:
                    value = int(value)
                except (TypeError, ValueError):
                    errors.append(f"{field} must be an integer")
                    continue
                if "min" in rules and value < rules["min"]:
                    errors.append(f"{field} must be at least {rules['min']}")
                if "max" in rules and value > rules["max"]:
                    errors.append(f"{field} must be at most {rules['max']}")

        if errors:
            raise ConfigurationError(
                "Configuration validation failed:\n" + "\n".join(errors), errors
            )

        self.get_app_config()
