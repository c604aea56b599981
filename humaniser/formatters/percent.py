# humaniser/formatters/percent.py
"""Percentage formatting"""

from dataclasses import dataclass
from typing import Union

from .base import HumanFormatter
from ..api.exceptions import InvalidInputError
from ..constants import DEFAULT_PERCENT_PRECISION, NOT_A_NUMBER, OutputFormat
from ..utils.formatting import format_rounded, is_finite, round_half_away


@dataclass(frozen=True)
class HumanPercent(HumanFormatter):
    """Round a value that is already a percentage

    Values outside 0-100 are rendered as given. NaN and infinities render
    as ``-``; anything that is not an int or float is rejected.

    Examples:
        >>> HumanPercent(12.3456, 1).concise()
        '12.3%'
        >>> HumanPercent(12.3456, 2).full()
        '12.35 percent'
    """

    value: Union[int, float]
    precision: int = DEFAULT_PERCENT_PRECISION

    def __post_init__(self):
        if isinstance(self.value, bool) or not isinstance(self.value, (int, float)):
            raise InvalidInputError(f"Not a number: {self.value!r}", self.value)
        if isinstance(self.precision, bool) or not isinstance(self.precision, int):
            raise InvalidInputError(f"Precision must be an integer: {self.precision!r}", self.precision)
        if self.precision < 0:
            raise InvalidInputError(f"Precision cannot be negative: {self.precision}", self.precision)

    @classmethod
    def from_ratio(cls, ratio: Union[int, float], precision: int = DEFAULT_PERCENT_PRECISION) -> 'HumanPercent':
        """Build from a 0-1 ratio"""
        return cls(ratio * 100, precision)

    def format(self, style: OutputFormat) -> str:
        if not is_finite(self.value):
            return NOT_A_NUMBER

        number = format_rounded(round_half_away(self.value, self.precision), self.precision)
        if style == OutputFormat.CONCISE:
            return f"{number}%"
        return f"{number} percent"
