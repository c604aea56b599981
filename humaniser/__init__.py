"""Humaniser - readable renderings of numbers, sizes, times and permissions.

Every formatter is an immutable value wrapper with a concise (symbol) and a
full (word) rendering:

    >>> HumanNumber(1_200).concise()
    '1.2K'
    >>> HumanSize(5_242_880).full()
    '5 mebibytes'
    >>> HumanTime(3661).concise()
    '1h 1m 1s'
"""

from .__version__ import __version__, __version_info__, __author__, __license__

# Formatters
from .formatters import (
    HumanFormatter,
    HumanNumber,
    HumanCount,
    HumanSize,
    HumanDuration,
    HumanTime,
    HumanPercent,
    HumanPermissions,
)

# Enums
from .constants import OutputFormat, UnitSystem, PermissionStyle

# Data models
from .models import (
    Unit,
    ScaledMagnitude,
    CompoundSpan,
    DurationBucket,
    BucketKind,
    FileType,
    Triplet,
    PermissionBits,
    HumaniserConfig,
)

# Core
from .core import ScaleSelector, ModeClassifier, StatModeClassifier, select

# Exceptions
from .api.exceptions import (
    HumaniserError,
    InvalidInputError,
    ConfigError,
    ValidationError,
)

# Configuration
from .services import load_config

__all__ = [
    # Version information
    "__version__",
    "__version_info__",
    "__author__",
    "__license__",

    # Formatters
    "HumanFormatter",
    "HumanNumber",
    "HumanCount",
    "HumanSize",
    "HumanDuration",
    "HumanTime",
    "HumanPercent",
    "HumanPermissions",

    # Enums
    "OutputFormat",
    "UnitSystem",
    "PermissionStyle",

    # Data models
    "Unit",
    "ScaledMagnitude",
    "CompoundSpan",
    "DurationBucket",
    "BucketKind",
    "FileType",
    "Triplet",
    "PermissionBits",
    "HumaniserConfig",

    # Core
    "ScaleSelector",
    "ModeClassifier",
    "StatModeClassifier",
    "select",

    # Exceptions
    "HumaniserError",
    "InvalidInputError",
    "ConfigError",
    "ValidationError",

    # Configuration
    "load_config",
]
