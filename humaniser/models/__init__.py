# humaniser/models/__init__.py
"""Data models for humaniser"""

from .scale import Unit, Ladder, ScaledMagnitude, build_ladder
from .span import CompoundSpan, DurationBucket, BucketKind
from .permissions import FileType, Triplet, PermissionBits
from .config import HumaniserConfig

__all__ = [
    # Scale models
    "Unit",
    "Ladder",
    "ScaledMagnitude",
    "build_ladder",

    # Span models
    "CompoundSpan",
    "DurationBucket",
    "BucketKind",

    # Permission models
    "FileType",
    "Triplet",
    "PermissionBits",

    # Config models
    "HumaniserConfig",
]
