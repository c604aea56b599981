# humaniser/formatters/size.py
"""Byte size formatting in binary (KiB) or decimal (KB) units"""

from dataclasses import dataclass, replace
from typing import Union

from .base import HumanFormatter
from ..api.exceptions import InvalidInputError
from ..constants import (
    BINARY_SIZE_UNITS,
    DECIMAL_SIZE_UNITS,
    DEFAULT_DIGITS,
    OutputFormat,
    UnitSystem,
)
from ..core.scale_selector import ScaleSelector
from ..models.scale import build_ladder
from ..utils.formatting import format_rounded, is_finite, pluralize

SIZE_LADDERS = {
    UnitSystem.BINARY: build_ladder(UnitSystem.BINARY.step, BINARY_SIZE_UNITS),
    UnitSystem.DECIMAL: build_ladder(UnitSystem.DECIMAL.step, DECIMAL_SIZE_UNITS),
}

_selectors = {system: ScaleSelector(ladder) for system, ladder in SIZE_LADDERS.items()}


@dataclass(frozen=True)
class HumanSize(HumanFormatter):
    """Format a byte count

    Binary units are the default; call :meth:`decimal` for SI units.

    Examples:
        >>> HumanSize(5_242_880).concise()
        '5 MiB'
        >>> HumanSize(5_000_000).decimal().full()
        '5 megabytes'
    """

    size: Union[int, float]
    system: UnitSystem = UnitSystem.BINARY

    def __post_init__(self):
        if isinstance(self.size, bool) or not isinstance(self.size, (int, float)):
            raise InvalidInputError(f"Not a byte count: {self.size!r}", self.size)
        if not is_finite(self.size):
            raise InvalidInputError(f"Not a finite byte count within float range: {self.size!r}", self.size)
        if self.size < 0:
            raise InvalidInputError(f"Byte count cannot be negative: {self.size}", self.size)
        # Accept "binary"/"decimal" as well as the enum
        object.__setattr__(self, "system", UnitSystem(self.system))

    @classmethod
    def from_with_system(cls, size: Union[int, float], system: UnitSystem) -> 'HumanSize':
        return cls(size, system)

    def decimal(self) -> 'HumanSize':
        """Copy using 1000-based units"""
        return replace(self, system=UnitSystem.DECIMAL)

    def binary(self) -> 'HumanSize':
        """Copy using 1024-based units"""
        return replace(self, system=UnitSystem.BINARY)

    def format(self, style: OutputFormat) -> str:
        scaled, rounded = _selectors[self.system].select_rounded(self.size, DEFAULT_DIGITS)
        number = format_rounded(rounded, DEFAULT_DIGITS)

        if style == OutputFormat.CONCISE:
            return f"{number} {scaled.unit.symbol}"
        return f"{number} {pluralize(rounded, scaled.unit.word)}"
