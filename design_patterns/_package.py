"""Package metadata and naming constants."""

from importlib.metadata import PackageNotFoundError, version

PACKAGE_NAME = "design-patterns"
PACKAGE_NAME_PYTHON = PACKAGE_NAME.replace("-", "_")

try:
    __version__ = version(PACKAGE_NAME)
except PackageNotFoundError:
    # Running from a source checkout that was never installed
    __version__ = "0.0.0"

VERSION = __version__
DESCRIPTION = "Small runnable demonstrations of creational and structural design patterns"
