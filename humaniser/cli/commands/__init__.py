# humaniser/cli/commands/__init__.py
"""CLI commands"""

from . import number
from . import size
from . import ago
from . import span
from . import percent
from . import perms
from . import config

__all__ = [
    "number",
    "size",
    "ago",
    "span",
    "percent",
    "perms",
    "config",
]
