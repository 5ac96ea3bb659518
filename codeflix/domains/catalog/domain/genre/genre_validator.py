from typing import TYPE_CHECKING

from codeflix.core.validation import Error, ValidationHandler, Validator

if TYPE_CHECKING:
    from codeflix.domains.catalog.domain.genre.genre import Genre

NAME_MIN_LENGTH = 1
NAME_MAX_LENGTH = 255

NULL_NAME_ERROR = "'name' should not be null"
EMPTY_NAME_ERROR = "'name' should not be empty"
NAME_LENGTH_OUT_OF_RANGE_ERROR = (
    f"'name' length must be between {NAME_MIN_LENGTH} and {NAME_MAX_LENGTH} characters"
)


class GenreValidator(Validator):
    def __init__(self, genre: "Genre", handler: ValidationHandler):
        super().__init__(handler)
        self._genre = genre

    def validate(self) -> None:
        self._check_name_constraints()

    def _check_name_constraints(self) -> None:
        name = self._genre.name
        if name is None:
            self.validation_handler.append(Error(NULL_NAME_ERROR))
            return

        trimmed = name.strip()
        if not trimmed:
            self.validation_handler.append(Error(EMPTY_NAME_ERROR))
            return

        if not NAME_MIN_LENGTH <= len(trimmed) <= NAME_MAX_LENGTH:
            self.validation_handler.append(Error(NAME_LENGTH_OUT_OF_RANGE_ERROR))
