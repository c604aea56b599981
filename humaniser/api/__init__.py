# humaniser/api/__init__.py
"""API layer for humaniser"""

from .exceptions import (
    HumaniserError,
    InvalidInputError,
    ConfigError,
    ValidationError,
)

__all__ = [
    # Exceptions
    "HumaniserError",
    "InvalidInputError",
    "ConfigError",
    "ValidationError",
]
