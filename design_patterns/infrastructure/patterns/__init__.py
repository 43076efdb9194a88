"""Infrastructure patterns package."""

from design_patterns.infrastructure.patterns.once import OnceGuard
from design_patterns.infrastructure.patterns.singleton_access import get_singleton
from design_patterns.infrastructure.patterns.singleton_registry import SingletonRegistry

__all__ = ["OnceGuard", "SingletonRegistry", "get_singleton"]
