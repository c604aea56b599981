# humaniser/formatters/number.py
"""Large number formatting (1.2K, 3 million)"""

from dataclasses import dataclass
from typing import Union

from .base import HumanFormatter
from ..api.exceptions import InvalidInputError
from ..constants import COUNT_UNITS, DEFAULT_DIGITS, OutputFormat
from ..core.scale_selector import ScaleSelector
from ..models.scale import build_ladder
from ..utils.formatting import format_rounded, group_digits, is_finite

COUNT_LADDER = build_ladder(1000, COUNT_UNITS)

_selector = ScaleSelector(COUNT_LADDER)


@dataclass(frozen=True)
class HumanNumber(HumanFormatter):
    """Scale a number by powers of 1000

    Examples:
        >>> HumanNumber(1_200).concise()
        '1.2K'
        >>> HumanNumber(1_200).full()
        '1.2 thousand'
        >>> HumanNumber(512).concise()
        '512'
    """

    value: Union[int, float]

    def __post_init__(self):
        if isinstance(self.value, bool) or not isinstance(self.value, (int, float)):
            raise InvalidInputError(f"Not a number: {self.value!r}", self.value)
        if not is_finite(self.value):
            raise InvalidInputError(f"Not a finite number within float range: {self.value!r}", self.value)

    def format(self, style: OutputFormat) -> str:
        scaled, rounded = _selector.select_rounded(self.value, DEFAULT_DIGITS)
        number = format_rounded(rounded, DEFAULT_DIGITS)

        if scaled.unit.is_base:
            return number
        if style == OutputFormat.CONCISE:
            return f"{number}{scaled.unit.symbol}"
        return f"{number} {scaled.unit.word}"

    def grouped(self) -> str:
        """The unscaled value with thousands separators"""
        return group_digits(self.value)


HumanCount = HumanNumber
