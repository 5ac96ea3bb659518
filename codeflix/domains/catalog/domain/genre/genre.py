"""
Genre Aggregate for the Catalog Domain

A genre records which categories it is associated with by identifier only;
it never owns Category lifecycle.
"""

import copy
from collections.abc import Iterable
from dataclasses import dataclass
from datetime import datetime

from codeflix.core.domain import AggregateRoot, IdGenerator, utc_now
from codeflix.core.validation import ValidationHandler, self_validate, validated_mutation
from codeflix.domains.catalog.domain.category.category_id import CategoryID

from .genre_id import GenreID
from .genre_validator import GenreValidator

GENRE_CREATION_ERROR = "The Genre could not be created because of validation errors."
GENRE_UPDATE_ERROR = "The Genre could not be updated because of validation errors."


def _unique_ids(ids: Iterable[CategoryID | None] | None) -> tuple[CategoryID, ...]:
    """Drop None and duplicates, keeping first-seen order."""
    if ids is None:
        return ()
    return tuple(dict.fromkeys(category_id for category_id in ids if category_id is not None))


@dataclass(eq=False, kw_only=True)
class Genre(AggregateRoot[GenreID]):
    """
    Genre aggregate root.

    `categories` is an ordered, read-only tuple of CategoryID references.

    Example:
        ```python
        genre = Genre.new_genre("Ação", True, [drama_id])
        genre.add_category(comedy_id)
        genre.remove_category(drama_id)
        ```
    """

    name: str | None
    active: bool = True
    categories: tuple[CategoryID, ...] = ()

    def __post_init__(self) -> None:
        super().__post_init__()
        self.categories = _unique_ids(self.categories)

    @classmethod
    def new_genre(
        cls,
        name: str | None,
        active: bool = True,
        categories: Iterable[CategoryID] | None = None,
        id_generator: IdGenerator | None = None,
    ) -> "Genre":
        """
        Create a new genre with a fresh identifier.

        Raises:
            NotificationException: If the genre is invalid
        """
        now = utc_now()
        genre = cls(
            id=GenreID.unique(id_generator),
            created_at=now,
            updated_at=now,
            deleted_at=None if active else now,
            name=name,
            active=active,
            categories=_unique_ids(categories),
        )
        self_validate(genre, GENRE_CREATION_ERROR)
        return genre

    @classmethod
    def with_(
        cls,
        id: GenreID,
        name: str | None,
        active: bool,
        categories: Iterable[CategoryID] | None,
        created_at: datetime,
        updated_at: datetime,
        deleted_at: datetime | None,
    ) -> "Genre":
        """Rebuild a genre from stored state."""
        genre = cls(
            id=id,
            created_at=created_at,
            updated_at=updated_at,
            deleted_at=deleted_at,
            name=name,
            active=active,
            categories=_unique_ids(categories),
        )
        self_validate(genre, GENRE_CREATION_ERROR)
        return genre

    def validate(self, handler: ValidationHandler) -> None:
        GenreValidator(self, handler).validate()

    def activate(self) -> "Genre":
        self.deleted_at = None
        self.active = True
        self.touch()
        return self

    def deactivate(self) -> "Genre":
        if self.deleted_at is None:
            self.deleted_at = utc_now()
        self.active = False
        self.touch()
        return self

    def update(
        self,
        name: str | None,
        active: bool,
        categories: Iterable[CategoryID] | None = None,
    ) -> "Genre":
        """
        Replace name, active flag and category references, then re-validate.

        Raises:
            NotificationException: If the result is invalid; the genre is left unchanged
        """
        with validated_mutation(self, GENRE_UPDATE_ERROR):
            self.name = name
            self.categories = _unique_ids(categories)
            if active:
                self.activate()
            else:
                self.deactivate()
        return self

    def add_category(self, category_id: CategoryID | None) -> "Genre":
        if category_id is None or category_id in self.categories:
            return self
        self.categories = self.categories + (category_id,)
        self.touch()
        return self

    def add_categories(self, category_ids: Iterable[CategoryID] | None) -> "Genre":
        merged = _unique_ids((*self.categories, *(category_ids or ())))
        if merged != self.categories:
            self.categories = merged
            self.touch()
        return self

    def remove_category(self, category_id: CategoryID | None) -> "Genre":
        if category_id is None or category_id not in self.categories:
            return self
        self.categories = tuple(c for c in self.categories if c != category_id)
        self.touch()
        return self

    def clone(self) -> "Genre":
        return copy.copy(self)
