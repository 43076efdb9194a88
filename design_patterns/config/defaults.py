# design_patterns/config/defaults.py
from enum import Enum


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


class LogFormat(str, Enum):
    """Rendering used for structured log events."""
    CONSOLE = "console"
    JSON = "json"


CONFIG_FILE_ENV = "DESIGN_PATTERNS_CONFIG"

DEFAULT_CONFIG = {
    "environment": "development",

    # Logging configuration
    "logging": {
        "level": "INFO",
        "destination": "stdout",
        "format": "console",
        "file": {
            "path": "${DESIGN_PATTERNS_LOGDIR:logs}/design_patterns.log",
            "max_size_mb": 10,
            "backup_count": 5
        }
    }
}

# Environment variable -> path inside the configuration dictionary
ENV_OVERRIDES = {
    "DESIGN_PATTERNS_ENVIRONMENT": ("environment",),
    "DESIGN_PATTERNS_LOG_LEVEL": ("logging", "level"),
    "DESIGN_PATTERNS_LOG_DESTINATION": ("logging", "destination"),
    "DESIGN_PATTERNS_LOG_FORMAT": ("logging", "format"),
    "DESIGN_PATTERNS_LOG_FILE": ("logging", "file", "path"),
}
