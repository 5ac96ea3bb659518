"""
Core Interfaces Module

Abstract interfaces (ports) for the application. High-level modules depend
on these abstractions rather than concrete implementations.
"""

from codeflix.core.interfaces.gateway import IGateway

__all__ = [
    "IGateway",
]
