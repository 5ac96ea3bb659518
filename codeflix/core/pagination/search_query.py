"""
SearchQuery

Normalized page, page size, free-text term and sort request.
"""

from dataclasses import dataclass

from codeflix.core.domain.value_objects import ValueObject
from codeflix.core.pagination.pagination import DEFAULT_PER_PAGE, FIRST_PAGE

DEFAULT_SORT = "createdAt"
DEFAULT_DIRECTION = "asc"
EMPTY_TERMS: str | None = None


def _blank(value: str | None) -> bool:
    return value is None or not str(value).strip()


@dataclass(frozen=True)
class SearchQuery(ValueObject):
    """
    Canonical search request.

    Normalization never fails and is idempotent:
    - page below FIRST_PAGE becomes FIRST_PAGE
    - non-positive per_page becomes DEFAULT_PER_PAGE
    - blank terms become None, other terms are stripped
    - blank sort/direction fall back to DEFAULT_SORT/DEFAULT_DIRECTION
    """

    page: int = FIRST_PAGE
    per_page: int = DEFAULT_PER_PAGE
    terms: str | None = EMPTY_TERMS
    sort: str = DEFAULT_SORT
    direction: str = DEFAULT_DIRECTION

    def _validate(self) -> None:
        page = self.page if self.page is not None else FIRST_PAGE
        per_page = self.per_page if self.per_page is not None else DEFAULT_PER_PAGE

        object.__setattr__(self, "page", max(int(page), FIRST_PAGE))
        object.__setattr__(self, "per_page", int(per_page) if int(per_page) > 0 else DEFAULT_PER_PAGE)
        object.__setattr__(self, "terms", None if _blank(self.terms) else str(self.terms).strip())
        object.__setattr__(self, "sort", DEFAULT_SORT if _blank(self.sort) else str(self.sort).strip())
        object.__setattr__(
            self,
            "direction",
            DEFAULT_DIRECTION if _blank(self.direction) else str(self.direction).strip(),
        )

    @classmethod
    def empty(cls) -> "SearchQuery":
        return cls(FIRST_PAGE, DEFAULT_PER_PAGE, EMPTY_TERMS, DEFAULT_SORT, DEFAULT_DIRECTION)

    @classmethod
    def of(
        cls,
        page: int | None,
        per_page: int | None,
        terms: str | None,
        sort: str | None,
        direction: str | None,
    ) -> "SearchQuery":
        return cls(page, per_page, terms, sort, direction)

    def is_descending(self) -> bool:
        return self.direction.lower() == "desc"
