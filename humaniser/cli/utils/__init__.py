# humaniser/cli/utils/__init__.py
"""CLI utilities"""

from .output import (
    console,
    print_value,
    forms_table,
    settings_table,
    print_error,
    print_success,
)

__all__ = [
    "console",
    "print_value",
    "forms_table",
    "settings_table",
    "print_error",
    "print_success",
]
