"""Logging configuration schema."""

from pydantic import BaseModel, Field, field_validator

from design_patterns.config.defaults import LogDestination, LogFormat, LogLevel


class LogFileConfig(BaseModel):
    """Rotating log file settings."""

    path: str = Field("logs/design_patterns.log", description="Log file path")
    max_size_mb: int = Field(10, description="Maximum size of a log file before rotation")
    backup_count: int = Field(5, description="Number of rotated files to keep")

    @field_validator("max_size_mb", "backup_count")
    @classmethod
    def validate_positive(cls, v: int) -> int:
        """Validate rotation limits."""
        if v < 1:
            raise ValueError("Log rotation limits must be at least 1")
        return v


class LoggingConfig(BaseModel):
    """Logging configuration."""

    level: LogLevel = Field(LogLevel.INFO, description="Root log level")
    destination: LogDestination = Field(LogDestination.STDOUT, description="Where log events go")
    format: LogFormat = Field(LogFormat.CONSOLE, description="Log event rendering")
    file: LogFileConfig = Field(default_factory=lambda: LogFileConfig())

    @field_validator("level", mode="before")
    @classmethod
    def normalize_level(cls, v):
        """Accept log levels in any case."""
        if isinstance(v, str):
            return v.upper()
        return v
