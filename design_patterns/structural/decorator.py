"""Decorator pattern - wrap a priced item to change its name and price.

Each ``PrintedDecorator`` layer prefixes the wrapped name with
``"printed "`` and adds a fixed surcharge to the wrapped price. Layers
stack: N wraps give N prefixes and N surcharges.
"""
from __future__ import annotations

from abc import ABC, abstractmethod
from decimal import Decimal
from typing import Union

from design_patterns.bootstrap import bootstrap

PRINTED_PREFIX = "printed "
PRINTED_SURCHARGE = Decimal("10")

Price = Union[Decimal, float, int, str]


class PricedItem(ABC):
    """Capability of anything with a name and a price."""

    @abstractmethod
    def get_name(self) -> str:
        pass

    @abstractmethod
    def get_price(self) -> Decimal:
        pass


class TShirt(PricedItem):
    """Base item."""

    def __init__(self, name: str, price: Price) -> None:
        self._name = name
        # Decimal(str) keeps "29.99" exact
        self._price = Decimal(str(price))

    def get_name(self) -> str:
        return self._name

    def get_price(self) -> Decimal:
        return self._price


class PrintedDecorator(PricedItem):
    """Wraps another item, composing with its name and price."""

    def __init__(self, item: PricedItem) -> None:
        self._item = item

    @property
    def wrapped(self) -> PricedItem:
        return self._item

    def get_name(self) -> str:
        return PRINTED_PREFIX + self._item.get_name()

    def get_price(self) -> Decimal:
        return self._item.get_price() + PRINTED_SURCHARGE


def main() -> None:
    bootstrap()

    tshirt = TShirt("t-shirt", "29.99")
    printed = PrintedDecorator(tshirt)
    printed_twice = PrintedDecorator(printed)

    print(printed.get_name())
    print(printed.get_price())

    print(printed_twice.get_name())
    print(printed_twice.get_price())


if __name__ == "__main__":
    main()
