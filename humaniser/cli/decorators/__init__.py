# humaniser/cli/decorators/__init__.py
"""CLI decorators"""

from .errors import reports_errors
from .style import style_options

__all__ = [
    'reports_errors',
    'style_options',
]
