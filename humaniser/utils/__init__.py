# humaniser/utils/__init__.py
"""Utility functions for humaniser"""

from .formatting import (
    round_half_away,
    format_rounded,
    group_digits,
    is_finite,
    pluralize,
)

__all__ = [
    "round_half_away",
    "format_rounded",
    "group_digits",
    "is_finite",
    "pluralize",
]
