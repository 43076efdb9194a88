"""Main application configuration schema."""

from pydantic import BaseModel, Field, field_validator

from design_patterns.config.schemas.logging_schema import LoggingConfig


class AppConfig(BaseModel):
    """Application configuration."""

    environment: str = Field("development", description="Environment")
    logging: LoggingConfig = Field(default_factory=lambda: LoggingConfig())

    @field_validator("environment")
    @classmethod
    def validate_environment(cls, v: str) -> str:
        """
        Validate environment.

        Args:
            v: Value to validate

        Returns:
            Validated value

        Raises:
            ValueError: If environment is invalid
        """
        valid_environments = ["development", "testing", "production"]
        if v not in valid_environments:
            raise ValueError(f"Environment must be one of {valid_environments}")
        return v
