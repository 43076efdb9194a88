"""Base domain models - foundation for the objects built by each pattern demo."""
from pydantic import BaseModel, ConfigDict


class ValueObject(BaseModel):
    """Base class for immutable value objects."""
    model_config = ConfigDict(
        frozen=True,  # Value objects never change once created
        arbitrary_types_allowed=True
    )


class DomainModel(BaseModel):
    """Base class for mutable domain models."""
    model_config = ConfigDict(
        frozen=False,
        validate_assignment=True,
        arbitrary_types_allowed=True
    )
