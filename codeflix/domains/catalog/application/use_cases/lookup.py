"""
Identifier lookup helpers shared by the catalog use cases.
"""

from typing import TypeVar

from codeflix.core.domain import DomainException, Identifier, NotFoundException

TIdentifier = TypeVar("TIdentifier", bound=Identifier)


def parse_id_or_not_found(id_type: type[TIdentifier], aggregate: type | str, value: str) -> TIdentifier:
    """
    Parse an identifier supplied by a caller.

    A malformed value can never match a stored aggregate, so it is reported
    as not found rather than as a validation failure.

    Raises:
        NotFoundException: If the value is not a well-formed identifier
    """
    try:
        return id_type.from_string(value)
    except DomainException:
        raise NotFoundException.with_id(aggregate, value) from None


def require_gateway(gateway, name: str):
    """Reject a missing gateway dependency."""
    if gateway is None:
        raise ValueError(f"{name} must not be null")
    return gateway
