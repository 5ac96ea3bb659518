"""
Base class for aggregate validators.
"""

from abc import ABC, abstractmethod

from codeflix.core.validation.handler import ValidationHandler


class Validator(ABC):
    """
    Performs ordered checks on one aggregate and reports into a handler.

    Each check stops at its own first failure; independent checks all report
    into the same handler.
    """

    def __init__(self, handler: ValidationHandler):
        self._handler = handler

    @property
    def validation_handler(self) -> ValidationHandler:
        return self._handler

    @abstractmethod
    def validate(self) -> None:
        """Run every check against the aggregate."""
        ...
