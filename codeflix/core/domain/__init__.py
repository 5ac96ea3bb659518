"""
Domain Layer - Core DDD building blocks

This module provides base classes for Domain-Driven Design:
- Entities: Objects with identity and lifecycle
- Value Objects: Immutable objects compared by value
- Identifiers: Sortable unique identifiers
- Exceptions: Domain-specific error handling
"""

from codeflix.core.domain.entities import AggregateRoot, Entity, utc_now
from codeflix.core.domain.exceptions import (
    DomainException,
    NotFoundException,
    NotificationException,
)
from codeflix.core.domain.identifiers import Identifier, IdGenerator, generate_ulid
from codeflix.core.domain.value_objects import ValueObject

__all__ = [
    # Entities
    "Entity",
    "AggregateRoot",
    "utc_now",
    # Value Objects
    "ValueObject",
    "Identifier",
    "IdGenerator",
    "generate_ulid",
    # Exceptions
    "DomainException",
    "NotificationException",
    "NotFoundException",
]
