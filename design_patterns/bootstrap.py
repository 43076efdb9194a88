"""Application bootstrap - configuration and logging for the demo entry points."""

from design_patterns.config import AppConfig, ConfigurationManager
from design_patterns.infrastructure.logging.logger import setup_logging
from design_patterns.infrastructure.patterns import get_singleton


def bootstrap() -> AppConfig:
    """
    Load configuration and configure logging.

    The configuration manager is shared process-wide, so repeated calls
    reuse the configuration loaded by the first one.

    Raises:
        ConfigurationError: If the configuration is invalid
    """
    manager = get_singleton(ConfigurationManager)
    setup_logging(manager.logging)
    return manager.app_config
