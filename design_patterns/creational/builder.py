"""Builder pattern - fluent, stepwise construction of a car."""
from __future__ import annotations

import logging
from typing import Any, Dict

from pydantic import Field

from design_patterns.bootstrap import bootstrap
from design_patterns.domain.base.models import ValueObject

logger = logging.getLogger(__name__)


class Car(ValueObject):
    """A car. Fields left unset keep their zero values."""
    engine: str = Field("", description="Engine identifier")
    wheels: int = Field(0, description="Number of wheels")
    color: str = Field("", description="Color label")


class CarBuilder:
    """
    Accumulates car fields across chained calls.

    Usage:
        car = CarBuilder().set_engine("V8").set_wheels(4).set_color("Vermelho").build()
    """

    def __init__(self) -> None:
        self._fields: Dict[str, Any] = {}

    def set_engine(self, engine: str) -> CarBuilder:
        self._fields["engine"] = engine
        return self

    def set_wheels(self, wheels: int) -> CarBuilder:
        self._fields["wheels"] = wheels
        return self

    def set_color(self, color: str) -> CarBuilder:
        self._fields["color"] = color
        return self

    def build(self) -> Car:
        """Return a new Car from the accumulated fields, without validation."""
        car = Car.model_construct(**self._fields)
        logger.debug("Car built from fields %s", sorted(self._fields))
        return car


def main() -> None:
    bootstrap()

    car = (
        CarBuilder()
        .set_engine("V8")
        .set_wheels(4)
        .set_color("Vermelho")
        .build()
    )

    print(f"Car built: {car!s}")


if __name__ == "__main__":
    main()
