"""
Notification - accumulating validation handler.
"""

import logging
from collections.abc import Callable, Iterable
from typing import TypeVar, Union

from codeflix.core.domain.exceptions import DomainException
from codeflix.core.validation.error import Error
from codeflix.core.validation.handler import ValidationHandler, message_of

logger = logging.getLogger(__name__)

T = TypeVar("T")


class Notification(ValidationHandler):
    """
    Collects validation errors without interrupting the caller.

    Use cases that combine several independent failure sources append them all
    to one Notification and decide once whether to reject.

    Example:
        ```python
        notification = Notification.create()
        notification.append(validate_categories(ids))
        genre = notification.validate(lambda: Genre.new_genre(name, True, ids))
        if notification.has_errors():
            raise NotificationException("Could not create Aggregate Genre", notification)
        ```
    """

    def __init__(self, errors: Iterable[Error] | None = None):
        self._errors: list[Error] = list(errors or [])

    @classmethod
    def create(cls, source: Error | BaseException | None = None) -> "Notification":
        """
        Create a notification, optionally seeded with one error.

        Args:
            source: An Error, or a caught exception whose message becomes the error

        Returns:
            New Notification
        """
        notification = cls()
        if isinstance(source, Error):
            notification.append(source)
        elif isinstance(source, BaseException):
            notification.append(Error(message_of(source)))
        return notification

    def append(self, item: Union[Error, ValidationHandler]) -> "Notification":
        if isinstance(item, ValidationHandler):
            self._errors.extend(item.get_errors())
        elif isinstance(item, Error):
            self._errors.append(item)
        else:
            raise TypeError(f"Cannot append {type(item).__name__} to a Notification")
        return self

    def validate(self, validation: Callable[[], T]) -> T | None:
        try:
            return validation()
        except DomainException as e:
            self._errors.extend(e.errors)
        except Exception as e:
            logger.debug(f"Unexpected failure downgraded to a validation error: {e!r}")
            self._errors.append(Error(message_of(e)))
        return None

    def has_errors(self) -> bool:
        return len(self._errors) > 0

    def get_errors(self) -> list[Error]:
        return self._errors

    def __repr__(self) -> str:
        return f"Notification(errors={self._errors!r})"
