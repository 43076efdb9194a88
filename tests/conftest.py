import logging
import os

import pytest
import structlog

from design_patterns.creational import singleton
from design_patterns.infrastructure.patterns import SingletonRegistry


@pytest.fixture(autouse=True)
def clean_environment(monkeypatch):
    """Drop configuration overrides inherited from the shell."""
    for name in list(os.environ):
        if name.startswith("DESIGN_PATTERNS_"):
            monkeypatch.delenv(name, raising=False)


@pytest.fixture(autouse=True)
def reset_singletons():
    """Give every test a fresh singleton state."""
    singleton.reset_instance()
    SingletonRegistry.get_instance().reset()
    yield
    singleton.reset_instance()
    SingletonRegistry.get_instance().reset()


@pytest.fixture(autouse=True)
def reset_logging():
    """Undo handlers and structlog configuration installed by setup_logging."""
    yield
    root_logger = logging.getLogger()
    for handler in root_logger.handlers[:]:
        # leave pytest's own capture handlers alone
        if isinstance(handler.formatter, structlog.stdlib.ProcessorFormatter):
            root_logger.removeHandler(handler)
            handler.close()
    root_logger.setLevel(logging.WARNING)
    structlog.reset_defaults()


@pytest.fixture
def config_file(tmp_path):
    """Write a JSON configuration file and return its path."""
    def _write(content: str) -> str:
        path = tmp_path / "design_patterns.json"
        path.write_text(content)
        return str(path)
    return _write
