"""
Base Entity Classes for Domain-Driven Design

Entities are domain objects with identity and lifecycle.
They maintain their identity regardless of their attributes.
"""

from abc import ABC, abstractmethod
from dataclasses import dataclass
from datetime import UTC, datetime
from typing import Any, Generic, TypeVar

from codeflix.core.validation.handler import ValidationHandler

# Type variable for entity ID
TId = TypeVar("TId")

_IMMUTABLE_FIELDS = frozenset({"id", "created_at"})


@dataclass(eq=False, kw_only=True)
class Entity(ABC, Generic[TId]):
    """
    Base class for all domain entities.

    An entity has an identity that runs through time and different states.
    `id` and `created_at` cannot be reassigned after construction;
    `deleted_at` is the soft-delete marker, set by subclasses.

    Type Parameters:
        TId: Type of entity identifier

    Example:
        ```python
        @dataclass(eq=False, kw_only=True)
        class Category(AggregateRoot[CategoryID]):
            name: str | None

            def validate(self, handler: ValidationHandler) -> None:
                CategoryValidator(self, handler).validate()
        ```
    """

    id: TId
    created_at: datetime
    updated_at: datetime
    deleted_at: datetime | None = None

    def __post_init__(self) -> None:
        if self.id is None:
            raise ValueError("id must not be null")
        if self.created_at is None:
            raise ValueError("created_at must not be null")
        if self.updated_at is None:
            raise ValueError("updated_at must not be null")

    def __setattr__(self, name: str, value: Any) -> None:
        if name in _IMMUTABLE_FIELDS and name in self.__dict__:
            raise AttributeError(f"'{name}' cannot be reassigned")
        super().__setattr__(name, value)

    def __eq__(self, other: object) -> bool:
        """Entities are equal if they have the same type and ID."""
        if self is other:
            return True
        if other is None or type(self) is not type(other):
            return False
        return self.id == other.id

    def __hash__(self) -> int:
        """Hash based on ID for use in sets and dicts."""
        return hash(self.id)

    @abstractmethod
    def validate(self, handler: ValidationHandler) -> None:
        """Report every invariant violation into the given handler."""
        ...

    def touch(self) -> None:
        """Update the updated_at timestamp."""
        self.updated_at = utc_now()

    def is_deleted(self) -> bool:
        """Check if entity is soft-deleted."""
        return self.deleted_at is not None


@dataclass(eq=False, kw_only=True)
class AggregateRoot(Entity[TId], Generic[TId]):
    """
    Base class for aggregate roots.

    An aggregate root is the unit of consistency and external addressing.
    Gateways and the API operate on aggregate roots only.
    """


def utc_now() -> datetime:
    """Current timezone-aware UTC time, microsecond precision."""
    return datetime.now(UTC)
