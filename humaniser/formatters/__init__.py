# humaniser/formatters/__init__.py
"""Value formatters"""

from .base import HumanFormatter
from .number import HumanNumber, HumanCount
from .size import HumanSize
from .duration import HumanDuration
from .time import HumanTime
from .percent import HumanPercent
from .permissions import HumanPermissions, render_unix, render_descriptive

__all__ = [
    "HumanFormatter",
    "HumanNumber",
    "HumanCount",
    "HumanSize",
    "HumanDuration",
    "HumanTime",
    "HumanPercent",
    "HumanPermissions",
    "render_unix",
    "render_descriptive",
]
