"""Configuration management for the pattern demos."""
from __future__ import annotations

import copy
import json
import logging
import os
from typing import Any, Dict, Optional

from pydantic import ValidationError as PydanticValidationError

from design_patterns.config.defaults import CONFIG_FILE_ENV, DEFAULT_CONFIG, ENV_OVERRIDES
from design_patterns.config.schemas import AppConfig, LoggingConfig
from design_patterns.config.utils.env_expansion import expand_config_env_vars
from design_patterns.domain.core.exceptions import ConfigurationError

logger = logging.getLogger(__name__)


class ConfigurationManager:
    """
    Manages application configuration with defaults and overrides.

    This class handles:
    - Loading default configuration
    - Applying a JSON configuration file
    - Applying environment variable overrides
    - Variable interpolation
    - Configuration validation

    Precedence, lowest to highest: defaults, file, environment.
    """

    def __init__(self, config_file: Optional[str] = None):
        """
        Initialize configuration manager with defaults.

        Args:
            config_file: Optional path to a JSON configuration file. If not
                        provided, the DESIGN_PATTERNS_CONFIG environment
                        variable is consulted.
        """
        self._config: Dict[str, Any] = copy.deepcopy(DEFAULT_CONFIG)

        config_file = config_file or os.environ.get(CONFIG_FILE_ENV)
        if config_file:
            self._load_config_file(config_file)

        # Environment variables have the highest priority
        self._load_env_vars()

        self._app_config = self.validate_config()

    def _load_config_file(self, config_path: str) -> None:
        """Load configuration from file."""
        try:
            with open(config_path, "r") as f:
                user_config = json.load(f)
        except (OSError, json.JSONDecodeError) as e:
            raise ConfigurationError(f"Failed to load configuration from {config_path}: {e}") from e

        if not isinstance(user_config, dict):
            raise ConfigurationError(f"Configuration file {config_path} must contain a JSON object")

        self._merge_config(self._config, user_config)
        logger.debug("Loaded configuration file %s", config_path)

    @classmethod
    def _merge_config(cls, base: Dict[str, Any], override: Dict[str, Any]) -> None:
        """Recursively merge override into base."""
        for key, value in override.items():
            if isinstance(value, dict) and isinstance(base.get(key), dict):
                cls._merge_config(base[key], value)
            else:
                base[key] = value

    def _load_env_vars(self) -> None:
        """Apply environment variable overrides."""
        for env_name, path in ENV_OVERRIDES.items():
            value = os.environ.get(env_name)
            if value is None or value == "":
                continue
            target = self._config
            for key in path[:-1]:
                target = target.setdefault(key, {})
                if not isinstance(target, dict):
                    raise ConfigurationError(
                        f"Configuration section '{key}' must be an object",
                        [".".join(path)]
                    )
            target[path[-1]] = value

    def validate_config(self) -> AppConfig:
        """
        Expand variables and validate the merged configuration.

        Raises:
            ConfigurationError: If any value is invalid
        """
        expanded = expand_config_env_vars(self._config)
        try:
            return AppConfig.model_validate(expanded)
        except PydanticValidationError as e:
            invalid = [".".join(str(part) for part in err["loc"]) for err in e.errors()]
            raise ConfigurationError(f"Invalid configuration: {e}", invalid) from e

    def get_config(self) -> Dict[str, Any]:
        """Get the raw (unexpanded) configuration dictionary."""
        return copy.deepcopy(self._config)

    @property
    def app_config(self) -> AppConfig:
        """Get typed application configuration."""
        return self._app_config

    @property
    def logging(self) -> LoggingConfig:
        """Get logging configuration."""
        return self._app_config.logging
