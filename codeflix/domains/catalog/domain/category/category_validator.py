"""
Category Validator

Checks that a category name is present, not blank, and that its trimmed
length is between NAME_MIN_LENGTH and NAME_MAX_LENGTH.
"""

from typing import TYPE_CHECKING

from codeflix.core.validation import Error, ValidationHandler, Validator

if TYPE_CHECKING:
    from codeflix.domains.catalog.domain.category.category import Category

NAME_MIN_LENGTH = 3
NAME_MAX_LENGTH = 255

NULL_NAME_ERROR = "'name' should not be null"
EMPTY_NAME_ERROR = "'name' should not be empty"
NAME_LENGTH_OUT_OF_RANGE_ERROR = (
    f"'name' length must be between {NAME_MIN_LENGTH} and {NAME_MAX_LENGTH} characters"
)


class CategoryValidator(Validator):
    """Validates a Category into the given handler."""

    def __init__(self, category: "Category", handler: ValidationHandler):
        super().__init__(handler)
        self._category = category

    def validate(self) -> None:
        self._check_name_constraints()

    def _check_name_constraints(self) -> None:
        name = self._category.name
        if name is None:
            self.validation_handler.append(Error(NULL_NAME_ERROR))
            return

        if not name.strip():
            self.validation_handler.append(Error(EMPTY_NAME_ERROR))
            return

        length = len(name.strip())
        if length < NAME_MIN_LENGTH or length > NAME_MAX_LENGTH:
            self.validation_handler.append(Error(NAME_LENGTH_OUT_OF_RANGE_ERROR))
