"""Prototype pattern - duplicate an existing shape instead of rebuilding it."""
from __future__ import annotations

from abc import ABC, abstractmethod

from design_patterns.bootstrap import bootstrap
from design_patterns.domain.base.models import DomainModel


class Shape(ABC):
    """Capability of a cloneable shape."""

    @abstractmethod
    def clone(self) -> Shape:
        """Return an independent copy of this shape."""

    @abstractmethod
    def get_info(self) -> str:
        """Describe the shape from its current field values."""


class Circle(DomainModel, Shape):
    """A circle that clones itself field by field."""
    radius: int
    color: str

    def clone(self) -> Shape:
        # deep copy so that no field value is shared with the original
        return self.model_copy(deep=True)

    def get_info(self) -> str:
        return f"Circle with radius {self.radius} and color {self.color}"


def main() -> None:
    bootstrap()

    original = Circle(radius=5, color="Vermelho")
    clone = original.clone()

    print("Original:", original.get_info())
    print("Clone:", clone.get_info())


if __name__ == "__main__":
    main()
