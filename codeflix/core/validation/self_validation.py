"""
Self-validation helpers for aggregates.

Aggregates validate through the fail-fast handler on construction and on
every mutation; a failure surfaces as one NotificationException carrying the
full error detail, and a failed mutation leaves the aggregate untouched.
"""

import copy
from collections.abc import Iterator
from contextlib import contextmanager
from typing import TYPE_CHECKING

from codeflix.core.domain.exceptions import DomainException, NotificationException
from codeflix.core.validation.notification import Notification
from codeflix.core.validation.throws_validation_handler import ThrowsValidationHandler

if TYPE_CHECKING:
    from codeflix.core.domain.entities import Entity


def self_validate(entity: "Entity", message: str) -> None:
    """
    Validate an entity with the fail-fast handler.

    Raises:
        NotificationException: With `message` and the errors that were found
    """
    try:
        entity.validate(ThrowsValidationHandler())
    except DomainException as e:
        raise NotificationException(message, Notification(e.errors)) from None


@contextmanager
def validated_mutation(entity: "Entity", message: str) -> Iterator["Entity"]:
    """
    Apply in-place changes to an entity and validate them as one unit.

    Example:
        ```python
        with validated_mutation(self, CATEGORY_UPDATE_ERROR):
            self.name = name
        ```
    """
    state = copy.copy(entity.__dict__)
    try:
        yield entity
        self_validate(entity, message)
    except Exception:
        entity.__dict__.clear()
        entity.__dict__.update(state)
        raise
