"""
Domain Exceptions

These exceptions represent validation failures and missing aggregates.
They are caught and translated to HTTP responses in the API layer.
"""

from collections.abc import Sequence
from typing import TYPE_CHECKING, Any

from codeflix.core.validation.error import Error

if TYPE_CHECKING:
    from codeflix.core.validation.handler import ValidationHandler


class DomainException(Exception):
    """
    Base exception for all domain errors.

    Carries the list of validation errors that caused it.
    """

    def __init__(
        self,
        message: str,
        errors: Sequence[Error] | None = None,
        code: str | None = None,
    ):
        """
        Initialize domain exception.

        Args:
            message: Human-readable error message
            errors: Detailed validation errors
            code: Machine-readable error code
        """
        super().__init__(message)
        self.message = message
        self.errors: list[Error] = list(errors or [])
        self.code = code or "VALIDATION_ERROR"

    @classmethod
    def with_error(cls, error: Error) -> "DomainException":
        return cls(error.message, [error])

    @classmethod
    def with_errors(cls, errors: Sequence[Error]) -> "DomainException":
        errors = list(errors)
        message = errors[0].message if errors else "Validation failed"
        return cls(message, errors)

    @classmethod
    def with_message(cls, message: str) -> "DomainException":
        return cls(message, [Error(message)])

    def to_dict(self) -> dict[str, Any]:
        """Convert exception to dictionary for API responses."""
        return {
            "error": self.code,
            "message": self.message,
            "errors": [{"message": error.message} for error in self.errors],
        }


class NotificationException(DomainException):
    """Raised once a handler has collected errors and the operation is rejected."""

    def __init__(self, message: str, notification: "ValidationHandler"):
        super().__init__(message, notification.get_errors(), "VALIDATION_ERROR")


class NotFoundException(DomainException):
    """
    Raised when no aggregate exists with the given identifier.

    Carries no detail errors; the message names the aggregate type and id.
    """

    def __init__(self, message: str, aggregate_type: str | None = None, aggregate_id: str | None = None):
        super().__init__(message, [], "ENTITY_NOT_FOUND")
        self.aggregate_type = aggregate_type
        self.aggregate_id = aggregate_id

    @classmethod
    def with_id(cls, aggregate: type | str, aggregate_id: Any) -> "NotFoundException":
        name = aggregate if isinstance(aggregate, str) else aggregate.__name__
        value = str(aggregate_id)
        return cls(cls.create_message(name, value), name, value)

    @staticmethod
    def create_message(aggregate: str, aggregate_id: Any) -> str:
        return f"{aggregate} with ID {aggregate_id} was not found"
