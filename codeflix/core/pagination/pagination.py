"""
Pagination

Immutable paged-result container with page arithmetic.

Pages are numbered from FIRST_PAGE (1). All derived values are pure
functions of (page, per_page, total); construction is the only validation
gate and rejects illegal input instead of correcting it.
"""

from collections.abc import Callable, Sequence
from dataclasses import dataclass
from typing import Generic, TypeVar

from codeflix.core.domain.value_objects import ValueObject

T = TypeVar("T")
R = TypeVar("R")

FIRST_PAGE = 1
DEFAULT_PER_PAGE = 10


class PaginationException(ValueError):
    """Raised when a Pagination is built from illegal page/per_page/total/data."""


@dataclass(frozen=True)
class Range(ValueObject):
    """Zero-based, inclusive bounds of a slice of the full result set."""

    start: int
    end: int

    @classmethod
    def of(cls, start: int, end: int) -> "Range":
        return cls(start, end)

    @property
    def size(self) -> int:
        return self.end - self.start + 1


def count_pages(total: int, per_page: int) -> int:
    """Number of pages needed for `total` items; never less than one."""
    if total <= 0:
        return 1
    return (total + per_page - 1) // per_page


@dataclass(frozen=True)
class Pagination(Generic[T]):
    """
    One page of a result set.

    Attributes:
        page: 1-based page number
        per_page: Maximum items per page
        total: Total items in the full result set
        data: Snapshot of the items on this page

    Example:
        ```python
        page = Pagination.from_page(2, 10, 100, items)
        page.start, page.end        # (10, 19)
        page.next_page              # 3
        outputs = page.map(CategoryListOutput.from_category)
        ```
    """

    page: int
    per_page: int
    total: int
    data: list[T]

    # data is a mutable list snapshot, so pages are not hashable
    __hash__ = None  # type: ignore[assignment]

    def __post_init__(self) -> None:
        if self.page < FIRST_PAGE:
            raise PaginationException(f"Page number must be equal or greater than {FIRST_PAGE}.")
        if self.per_page < 1:
            raise PaginationException("Items per page must be greater than 0.")
        if self.total < 0:
            raise PaginationException("Total items must be greater than or equal to 0.")

        total_pages = count_pages(self.total, self.per_page)
        if self.page > total_pages:
            raise PaginationException(
                f"Page number [{self.page}] cannot exceed total pages [{total_pages}]."
            )

        if self.data is None:
            raise PaginationException("Data cannot be null.")
        object.__setattr__(self, "data", list(self.data))

    # Construction paths

    @classmethod
    def from_page(cls, page: int, per_page: int, total: int, data: Sequence[T]) -> "Pagination[T]":
        return cls(page, per_page, total, data)

    @classmethod
    def from_range(
        cls,
        range_or_start: Range | int,
        end_or_total: int,
        total_or_data: int | Sequence[T] | None = None,
        data: Sequence[T] | None = None,
    ) -> "Pagination[T]":
        """
        Build a page from zero-based inclusive bounds.

        Accepts either `from_range(Range(start, end), total, data)` or
        `from_range(start, end, total, data)`. `per_page` is the range width
        and `page` is `start // per_page + 1`.
        """
        if isinstance(range_or_start, Range):
            bounds = range_or_start
            total = end_or_total
            items = total_or_data
        else:
            bounds = Range(range_or_start, end_or_total)
            total = total_or_data
            items = data

        per_page = bounds.size
        page = bounds.start // per_page + 1 if per_page > 0 else FIRST_PAGE
        return cls(page, per_page, total, items)

    # Derived values

    @property
    def total_pages(self) -> int:
        return count_pages(self.total, self.per_page)

    @property
    def items_count(self) -> int:
        return len(self.data)

    @property
    def start(self) -> int:
        return (self.page - 1) * self.per_page

    @property
    def end(self) -> int:
        return max(min(self.page * self.per_page, self.total) - 1, 0)

    @property
    def offset(self) -> int:
        return self.start

    @property
    def limit(self) -> int:
        return self.per_page

    @property
    def range(self) -> Range:
        return Range(self.start, self.end)

    @property
    def previous_page(self) -> int:
        return max(self.page - 1, FIRST_PAGE)

    @property
    def next_page(self) -> int:
        return min(self.page + 1, self.total_pages)

    def has_previous(self) -> bool:
        return self.page > FIRST_PAGE

    def has_next_page(self) -> bool:
        return self.page < self.total_pages

    def is_first_page(self) -> bool:
        return self.page == FIRST_PAGE

    def is_last_page(self) -> bool:
        return self.page == self.total_pages

    def is_empty(self) -> bool:
        return len(self.data) == 0

    def is_not_empty(self) -> bool:
        return not self.is_empty()

    def map(self, mapper: Callable[[T], R]) -> "Pagination[R]":
        """Transform every item, keeping page, per_page and total."""
        return Pagination(self.page, self.per_page, self.total, [mapper(item) for item in self.data])
