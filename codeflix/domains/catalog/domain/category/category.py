"""
Category Aggregate for the Catalog Domain

A category groups catalog content. It validates itself on construction and
on every update, so an invalid Category never escapes to the caller.
"""

import copy
from dataclasses import dataclass
from datetime import datetime

from codeflix.core.domain import AggregateRoot, IdGenerator, utc_now
from codeflix.core.validation import ValidationHandler, self_validate, validated_mutation

from .category_id import CategoryID
from .category_validator import CategoryValidator

CATEGORY_CREATION_ERROR = "The Category could not be created because of validation errors."
CATEGORY_UPDATE_ERROR = "The Category could not be updated because of validation errors."


@dataclass(eq=False, kw_only=True)
class Category(AggregateRoot[CategoryID]):
    """
    Category aggregate root.

    `deleted_at` is set whenever the category is inactive.

    Example:
        ```python
        category = Category.new_category("Filmes", "A categoria mais assistida", True)
        category.update("Séries", None, False)  # deactivates and touches
        ```
    """

    name: str | None
    description: str | None = None
    active: bool = True

    @classmethod
    def new_category(
        cls,
        name: str | None,
        description: str | None = None,
        active: bool = True,
        id_generator: IdGenerator | None = None,
    ) -> "Category":
        """
        Create a new category with a fresh identifier.

        Raises:
            NotificationException: If the category is invalid
        """
        now = utc_now()
        category = cls(
            id=CategoryID.unique(id_generator),
            created_at=now,
            updated_at=now,
            deleted_at=None if active else now,
            name=name,
            description=description,
            active=active,
        )
        self_validate(category, CATEGORY_CREATION_ERROR)
        return category

    @classmethod
    def with_(
        cls,
        id: CategoryID,
        name: str | None,
        description: str | None,
        active: bool,
        created_at: datetime,
        updated_at: datetime,
        deleted_at: datetime | None,
    ) -> "Category":
        """Rebuild a category from stored state."""
        category = cls(
            id=id,
            created_at=created_at,
            updated_at=updated_at,
            deleted_at=deleted_at,
            name=name,
            description=description,
            active=active,
        )
        self_validate(category, CATEGORY_CREATION_ERROR)
        return category

    def validate(self, handler: ValidationHandler) -> None:
        CategoryValidator(self, handler).validate()

    def activate(self) -> "Category":
        self.deleted_at = None
        self.active = True
        self.touch()
        return self

    def deactivate(self) -> "Category":
        if self.deleted_at is None:
            self.deleted_at = utc_now()
        self.active = False
        self.touch()
        return self

    def update(self, name: str | None, description: str | None, active: bool) -> "Category":
        """
        Replace the mutable fields and re-validate.

        Raises:
            NotificationException: If the result is invalid; the category is left unchanged
        """
        with validated_mutation(self, CATEGORY_UPDATE_ERROR):
            self.name = name
            self.description = description
            if active:
                self.activate()
            else:
                self.deactivate()
        return self

    def clone(self) -> "Category":
        return copy.copy(self)
