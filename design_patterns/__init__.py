"""Design Patterns - Root Package.

Independent, runnable demonstrations of classic design patterns, each with
a toy domain:

    - creational.builder: fluent construction of a car
    - creational.factory: people created behind a capability type
    - creational.prototype: cloning circles
    - creational.singleton: one shared instance with guarded lazy creation
    - structural.decorator: printed t-shirts wrapping t-shirts

The demonstrations share no domain code. They do share the ambient layers:
configuration (config), structured logging and the once/singleton
primitives (infrastructure), and the base models and exceptions (domain).

Usage:
    >>> python -m design_patterns
    >>> python -m design_patterns.creational.singleton
"""

from ._package import PACKAGE_NAME, __version__

__package_name__ = PACKAGE_NAME

__all__ = ["__version__"]
