"""
Sortable unique identifiers.

Identifiers wrap a lowercase ULID string: globally unique and
lexicographically sortable by creation order.
"""

import re
from collections.abc import Callable
from dataclasses import dataclass
from typing import TypeVar

from ulid import ULID

from codeflix.core.domain.exceptions import DomainException
from codeflix.core.domain.value_objects import ValueObject
from codeflix.core.validation.error import Error

# Crockford base32, first char bounded so the value fits in 128 bits
_ULID_PATTERN = re.compile(r"^[0-7][0-9a-hjkmnp-tv-z]{25}$")

TIdentifier = TypeVar("TIdentifier", bound="Identifier")

IdGenerator = Callable[[], str]


def generate_ulid() -> str:
    """Generate a new ULID string."""
    return str(ULID())


@dataclass(frozen=True, order=True)
class Identifier(ValueObject):
    """
    Base identifier value object.

    Two identifiers are equal only when they have the same concrete type and
    value, so a CategoryID never equals a GenreID.
    """

    value: str

    def _validate(self) -> None:
        if not isinstance(self.value, str):
            raise DomainException.with_error(Error(f"the Id {self.value} is invalid"))
        normalized = self.value.strip().lower()
        if not _ULID_PATTERN.match(normalized):
            raise DomainException.with_error(Error(f"the Id {self.value} is invalid"))
        try:
            normalized = str(ULID.from_str(normalized.upper())).lower()
        except ValueError as e:
            raise DomainException.with_error(Error(f"the Id {self.value} is invalid")) from e
        object.__setattr__(self, "value", normalized)

    @classmethod
    def unique(cls: type[TIdentifier], generator: IdGenerator | None = None) -> TIdentifier:
        """
        Create a new identifier.

        Args:
            generator: Optional zero-argument callable returning a ULID string

        Returns:
            Fresh identifier of the calling type
        """
        return cls((generator or generate_ulid)())

    @classmethod
    def from_string(cls: type[TIdentifier], value: str) -> TIdentifier:
        """
        Parse an existing identifier.

        Raises:
            DomainException: If the value is not a well-formed ULID
        """
        return cls(value)

    def get_value(self) -> str:
        return self.value

    def __str__(self) -> str:
        return self.value
