# humaniser/core/validation_engine.py
"""Validation engine for configuration data"""

from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional

import jsonschema

from ..constants import CONFIG_SCHEMA


@dataclass
class ValidationResult:
    """Validation result container"""
    is_valid: bool = True
    errors: List[str] = field(default_factory=list)
    warnings: List[str] = field(default_factory=list)

    def add_error(self, message: str) -> None:
        """Add error message"""
        self.errors.append(message)
        self.is_valid = False

    def add_warning(self, message: str) -> None:
        """Add warning message"""
        self.warnings.append(message)

    def __str__(self) -> str:
        """String representation"""
        lines = []

        if self.errors:
            lines.append("Errors:")
            for error in self.errors:
                lines.append(f"  ✗ {error}")

        if self.warnings:
            lines.append("Warnings:")
            for warning in self.warnings:
                lines.append(f"  ⚠ {warning}")

        return "\n".join(lines) if lines else "Valid"


class ValidationEngine:
    """Validates configuration dictionaries against a JSON schema"""

    def __init__(self, schema: Optional[Dict[str, Any]] = None):
        self.schema = schema or CONFIG_SCHEMA
        self._validator = jsonschema.Draft7Validator(self.schema)

    def validate_config(self, config: Any) -> ValidationResult:
        """
        Validate a configuration mapping

        Args:
            config: Parsed configuration data

        Returns:
            ValidationResult
        """
        result = ValidationResult()

        if not isinstance(config, dict):
            result.add_error("Configuration must be a mapping")
            return result

        for error in sorted(self._validator.iter_errors(config), key=lambda e: list(e.path)):
            location = ".".join(str(part) for part in error.path) or "<root>"
            result.add_error(f"{location}: {error.message}")

        if not config:
            result.add_warning("Configuration is empty, defaults apply")

        return result
