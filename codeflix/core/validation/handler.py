"""
Validation Handler Contract

Defines how validation errors are collected or propagated. Two strategies
implement it:

- Notification: accumulates every error in order and never raises on append
- ThrowsValidationHandler: raises on the first error it is given

Aggregates validate themselves through whichever handler the caller supplies.
"""

from abc import ABC, abstractmethod
from collections.abc import Callable
from typing import TypeVar, Union

from codeflix.core.validation.error import Error

T = TypeVar("T")


class ValidationHandler(ABC):
    """
    Base contract for validation error handlers.

    Example:
        ```python
        handler = Notification.create()
        handler.append(Error("'name' should not be null"))
        if handler.has_errors():
            print(handler.first_error().message)
        ```
    """

    @abstractmethod
    def append(self, item: Union[Error, "ValidationHandler"]) -> "ValidationHandler":
        """
        Record an error, or merge the errors of another handler.

        Args:
            item: A single Error or another ValidationHandler

        Returns:
            The handler reflecting the recorded error(s)
        """
        ...

    @abstractmethod
    def validate(self, validation: Callable[[], T]) -> T | None:
        """
        Run a unit of validation logic that may raise.

        Args:
            validation: Zero-argument callable

        Returns:
            The callable's result on success
        """
        ...

    @abstractmethod
    def get_errors(self) -> list[Error]:
        """Return the known errors, in the order they were recorded."""
        ...

    def has_errors(self) -> bool:
        """Check if at least one error is known."""
        errors = self.get_errors()
        return errors is not None and len(errors) > 0

    def first_error(self) -> Error | None:
        """Return the first known error, if any."""
        errors = self.get_errors()
        return errors[0] if errors else None


def message_of(exc: BaseException) -> str:
    """Extract the human-readable message of an exception."""
    message = getattr(exc, "message", None)
    if isinstance(message, str) and message:
        return message
    return str(exc)
