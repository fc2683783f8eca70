"""Base domain layer - shared kernel for all bounded contexts."""

from .entity import Entity, ValueObject
from .exceptions import (
    ConfigurationError,
    DomainException,
    EntityNotFoundError,
    InvariantViolationError,
    ValidationError,
)

__all__ = [
    # Entities
    "Entity",
    "ValueObject",
    # Exceptions
    "DomainException",
    "ValidationError",
    "EntityNotFoundError",
    "InvariantViolationError",
    "ConfigurationError",
]
