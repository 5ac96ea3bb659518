"""
Category reference checks shared by the genre use cases.
"""

from collections.abc import Iterable

from codeflix.core.validation import Error, Notification, ValidationHandler
from codeflix.domains.catalog.application.ports import ICategoryGateway
from codeflix.domains.catalog.domain.category import CategoryID

CATEGORIES_NOT_FOUND_ERROR = "Some categories could not be found: {}"


def to_category_ids(values: Iterable[str] | None) -> list[CategoryID]:
    """
    Parse category id strings.

    Raises:
        DomainException: If any value is not a well-formed identifier
    """
    return [CategoryID.from_string(value) for value in values or []]


def validate_categories(gateway: ICategoryGateway, ids: list[CategoryID]) -> ValidationHandler:
    """Report, as a single error, every referenced category that does not exist."""
    notification = Notification.create()
    if not ids:
        return notification

    retrieved = set(gateway.exists_by_ids(ids))
    missing = [category_id for category_id in dict.fromkeys(ids) if category_id not in retrieved]
    if missing:
        notification.append(
            Error(CATEGORIES_NOT_FOUND_ERROR.format(", ".join(c.get_value() for c in missing)))
        )
    return notification
