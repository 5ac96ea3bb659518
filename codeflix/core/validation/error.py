"""
Validation Error

Immutable single-message record collected by validation handlers.
"""

from dataclasses import dataclass


@dataclass(frozen=True)
class Error:
    """A human-readable validation failure. Equal by message."""

    message: str

    def __str__(self) -> str:
        return self.message
