"""Configuration schemas."""

from design_patterns.config.schemas.app_schema import AppConfig
from design_patterns.config.schemas.logging_schema import LogFileConfig, LoggingConfig

__all__ = ["AppConfig", "LogFileConfig", "LoggingConfig"]
