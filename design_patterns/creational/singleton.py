"""Singleton pattern - one shared instance per process.

The instance is created lazily by the first ``get_instance`` call. The
creation is guarded by a ``OnceGuard``, so concurrent first calls create
it exactly once and every caller gets the same object.
"""
from __future__ import annotations

from typing import Optional, cast

from design_patterns.bootstrap import bootstrap
from design_patterns.infrastructure.logging.logger import get_logger
from design_patterns.infrastructure.patterns.once import OnceGuard


class Singleton:
    """Marker type with a single process-wide instance."""

    __slots__ = ()


_instance: Optional[Singleton] = None
_once = OnceGuard()


def _create_instance() -> None:
    global _instance
    get_logger(__name__).info("Instance created")
    _instance = Singleton()


def get_instance() -> Singleton:
    """Get the shared instance, creating it on the first call."""
    _once.do(_create_instance)
    get_logger(__name__).info("Instance already created")
    return cast(Singleton, _instance)


def reset_instance() -> None:
    """
    Make the next call create a fresh instance. Tests only.

    The current instance stays in place until the replacement is created,
    so a concurrent get_instance never observes an empty slot.
    """
    _once.reset()


def main() -> None:
    bootstrap()

    first = get_instance()
    second = get_instance()

    print(first is second)


if __name__ == "__main__":
    main()
