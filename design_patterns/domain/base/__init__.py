"""Base domain models."""

from design_patterns.domain.base.models import DomainModel, ValueObject

__all__ = ["DomainModel", "ValueObject"]
