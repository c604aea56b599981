"""Configuration data models"""

from dataclasses import dataclass
from typing import Any, Dict, Optional

from ..constants import (
    DEFAULT_PERCENT_PRECISION,
    PLATFORM_PERMISSION_STYLE,
    OutputFormat,
    PermissionStyle,
    UnitSystem,
)


@dataclass(frozen=True)
class HumaniserConfig:
    """Defaults applied by the command line front end"""

    style: OutputFormat = OutputFormat.CONCISE
    size_system: UnitSystem = UnitSystem.BINARY
    percent_precision: int = DEFAULT_PERCENT_PRECISION
    permission_style: Optional[PermissionStyle] = None  # None means platform default

    @property
    def effective_permission_style(self) -> PermissionStyle:
        """Permission style with the platform default resolved"""
        return self.permission_style or PLATFORM_PERMISSION_STYLE

    def to_dict(self) -> Dict[str, Any]:
        """Convert to dictionary"""
        return {
            "style": self.style.value,
            "size_system": self.size_system.value,
            "percent_precision": self.percent_precision,
            "permission_style": self.permission_style.value if self.permission_style else "auto",
        }

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> 'HumaniserConfig':
        """Create from an already validated dictionary"""
        permission_style = data.get("permission_style", "auto")
        return cls(
            style=OutputFormat(data.get("style", OutputFormat.CONCISE.value)),
            size_system=UnitSystem(data.get("size_system", UnitSystem.BINARY.value)),
            percent_precision=data.get("percent_precision", DEFAULT_PERCENT_PRECISION),
            permission_style=None if permission_style == "auto" else PermissionStyle(permission_style),
        )
