# humaniser/core/__init__.py
"""Core components for humaniser"""

from .scale_selector import ScaleSelector, select
from .mode_classifier import ModeClassifier, StatModeClassifier
from .validation_engine import ValidationEngine, ValidationResult

__all__ = [
    "ScaleSelector",
    "select",
    "ModeClassifier",
    "StatModeClassifier",
    "ValidationEngine",
    "ValidationResult",
]
