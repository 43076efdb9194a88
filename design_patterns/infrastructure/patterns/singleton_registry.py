"""Process-wide registry of singleton instances."""
from __future__ import annotations

import logging
import threading
from typing import Any, Dict, Optional, Type, TypeVar, cast

from design_patterns.infrastructure.patterns.once import OnceGuard

T = TypeVar("T")

logger = logging.getLogger(__name__)

_registry: Optional[SingletonRegistry] = None
_registry_once = OnceGuard()


class SingletonRegistry:
    """
    Holds at most one instance per class.

    Instances are constructed under the registry lock, so concurrent first
    requests for the same class construct it once. The lock is re-entrant
    to let a constructor request other singletons.
    """

    def __init__(self) -> None:
        self._instances: Dict[type, Any] = {}
        self._lock = threading.RLock()

    @classmethod
    def get_instance(cls) -> SingletonRegistry:
        """Get the process-wide registry, creating it on first use."""
        _registry_once.do(_create_registry)
        return cast(SingletonRegistry, _registry)

    def get(self, singleton_class: Type[T], *args: Any, **kwargs: Any) -> T:
        """
        Get the instance of singleton_class, constructing it on first request.

        Constructor arguments are only used by the request that constructs
        the instance.
        """
        with self._lock:
            if singleton_class not in self._instances:
                self._instances[singleton_class] = singleton_class(*args, **kwargs)
                logger.debug("Created singleton %s", singleton_class.__name__)
            return cast(T, self._instances[singleton_class])

    def has(self, singleton_class: type) -> bool:
        """Check whether an instance of singleton_class exists."""
        with self._lock:
            return singleton_class in self._instances

    def reset(self, singleton_class: Optional[type] = None) -> None:
        """Drop one instance, or every instance when no class is given."""
        with self._lock:
            if singleton_class is None:
                self._instances.clear()
            else:
                self._instances.pop(singleton_class, None)


def _create_registry() -> None:
    global _registry
    _registry = SingletonRegistry()
