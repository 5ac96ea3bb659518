"""
ThrowsValidationHandler - fail-fast validation handler.
"""

from collections.abc import Callable
from typing import NoReturn, TypeVar, Union

from codeflix.core.domain.exceptions import DomainException
from codeflix.core.validation.error import Error
from codeflix.core.validation.handler import ValidationHandler, message_of

T = TypeVar("T")


class ThrowsValidationHandler(ValidationHandler):
    """
    Raises a DomainException as soon as an error is appended.

    Nothing is ever accumulated, so get_errors() is always empty.
    """

    def append(self, item: Union[Error, ValidationHandler]) -> NoReturn:
        if isinstance(item, ValidationHandler):
            raise DomainException.with_errors(item.get_errors())
        raise DomainException.with_error(item)

    def validate(self, validation: Callable[[], T]) -> T:
        try:
            return validation()
        except Exception as e:
            raise DomainException.with_errors([Error(message_of(e))]) from e

    def get_errors(self) -> list[Error]:
        return []
