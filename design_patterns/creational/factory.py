"""Factory pattern - construction behind a capability type.

Callers receive a ``Product`` and never see the concrete class behind it.
``new_person`` is the direct factory function; ``ProductFactory`` adds a
registry of constructors keyed by product kind.
"""
from __future__ import annotations

import logging
from abc import ABC, abstractmethod
from typing import Callable, Dict, List, Optional

from design_patterns.bootstrap import bootstrap
from design_patterns.domain.core.exceptions import ResourceNotFoundError, ValidationError

logger = logging.getLogger(__name__)

GREETING = "Hi"


class Product(ABC):
    """Capability exposed by every product the factory builds."""

    @abstractmethod
    def say_hi(self) -> None:
        """Emit a greeting on the console."""


class _Person(Product):
    """Concrete product. Not exported; obtain one through the factory."""

    def __init__(self, name: str) -> None:
        self._name = name

    def say_hi(self) -> None:
        print(GREETING)


def new_person(name: str) -> Product:
    """Create a person. The name is stored but does not change the greeting."""
    return _Person(name)


ProductConstructor = Callable[..., Product]


class ProductFactory:
    """
    Registry-backed product factory.

    Features:
    - Register constructors under a kind name
    - Optional aliases per kind
    - Keyword arguments are forwarded to the constructor
    """

    _registry: Dict[str, ProductConstructor] = {}
    _aliases: Dict[str, str] = {}

    @classmethod
    def register(cls, kind: str, constructor: ProductConstructor,
                 aliases: Optional[List[str]] = None) -> None:
        """
        Register a product constructor.

        Re-registering a kind replaces its constructor and its aliases.

        Args:
            kind: Product kind name
            constructor: Callable returning a Product
            aliases: Alternative names for the kind

        Raises:
            ValidationError: If constructor is not callable, is a class that
                is not a Product, or a name is already taken by another kind
        """
        if not callable(constructor):
            raise ValidationError(f"Constructor for product kind '{kind}' is not callable",
                                  {"kind": kind})
        if isinstance(constructor, type) and not issubclass(constructor, Product):
            raise ValidationError(
                f"Constructor for product kind '{kind}' is not a Product: {constructor.__name__}",
                {"kind": kind}
            )

        aliases = aliases or []
        owner = cls._aliases.get(kind)
        if owner is not None and owner != kind:
            raise ValidationError(f"Product kind '{kind}' is already an alias of '{owner}'",
                                  {"kind": kind})
        for alias in aliases:
            taken_by = alias if alias in cls._registry else cls._aliases.get(alias)
            if taken_by is not None and taken_by != kind:
                raise ValidationError(f"Alias '{alias}' is already used by product kind '{taken_by}'",
                                      {"kind": kind, "alias": alias})

        cls._drop_aliases(kind)
        cls._registry[kind] = constructor
        for alias in aliases:
            cls._aliases[alias] = kind
        logger.debug("Registered product kind %s (aliases: %s)", kind, aliases)

    @classmethod
    def create(cls, kind: str, **kwargs) -> Product:
        """
        Create a product of the given kind.

        Registered kind names take precedence over aliases.

        Raises:
            ResourceNotFoundError: If no constructor is registered for kind
            ValidationError: If the constructor does not return a Product
        """
        actual_kind = kind if kind in cls._registry else cls._aliases.get(kind, kind)
        constructor = cls._registry.get(actual_kind)
        if constructor is None:
            raise ResourceNotFoundError("Product kind", kind)

        product = constructor(**kwargs)
        if not isinstance(product, Product):
            raise ValidationError(
                f"Constructor for product kind '{actual_kind}' returned {type(product).__name__}",
                {"kind": actual_kind}
            )
        return product

    @classmethod
    def list_products(cls) -> List[str]:
        """List all registered product kinds."""
        return sorted(cls._registry.keys())

    @classmethod
    def unregister(cls, kind: str) -> None:
        """Remove a kind and its aliases."""
        cls._registry.pop(kind, None)
        cls._drop_aliases(kind)

    @classmethod
    def _drop_aliases(cls, kind: str) -> None:
        for alias in [a for a, k in cls._aliases.items() if k == kind]:
            del cls._aliases[alias]


ProductFactory.register("person", new_person, aliases=["pessoa"])


def main() -> None:
    bootstrap()

    person = new_person("Pessoa 1")
    person.say_hi()


if __name__ == "__main__":
    main()
