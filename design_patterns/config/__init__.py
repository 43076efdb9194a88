"""Configuration package - defaults, schemas and the configuration manager."""

from design_patterns.config.manager import ConfigurationManager
from design_patterns.config.schemas import AppConfig, LogFileConfig, LoggingConfig

__all__ = ["AppConfig", "ConfigurationManager", "LogFileConfig", "LoggingConfig"]
