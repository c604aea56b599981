# humaniser/formatters/time.py
"""Elapsed span formatting ("1h 1m 1s")"""

import math
from dataclasses import dataclass
from datetime import timedelta
from typing import Union

from .base import HumanFormatter
from ..api.exceptions import InvalidInputError
from ..constants import OutputFormat
from ..models.span import CompoundSpan
from ..utils.formatting import pluralize

Span = Union[timedelta, int, float]


def to_seconds(duration: Span) -> int:
    """Whole seconds in a span, fractions truncated"""
    if isinstance(duration, timedelta):
        seconds = duration.total_seconds()
    elif isinstance(duration, bool) or not isinstance(duration, (int, float)):
        raise InvalidInputError(f"Not a timedelta or number of seconds: {duration!r}", duration)
    else:
        seconds = duration

    if not math.isfinite(seconds):
        raise InvalidInputError(f"Not a finite duration: {duration!r}", duration)
    if seconds < 0:
        raise InvalidInputError(f"Duration cannot be negative: {duration!r}", duration)
    return int(seconds)


@dataclass(frozen=True)
class HumanTime(HumanFormatter):
    """Format a non-negative span as hours, minutes and seconds

    The concise form drops leading zero components and keeps everything
    after the first shown one. The full form always names hours, minutes
    and seconds.

    Examples:
        >>> HumanTime(3661).concise()
        '1h 1m 1s'
        >>> HumanTime(3661).full()
        '1 hour 1 minute 1 second'
        >>> HumanTime(0).concise()
        '0s'
        >>> HumanTime(5).full()
        '0 hours 0 minutes 5 seconds'
    """

    duration: Span

    def __post_init__(self):
        to_seconds(self.duration)

    @property
    def span(self) -> CompoundSpan:
        return CompoundSpan.from_seconds(to_seconds(self.duration))

    def format(self, style: OutputFormat) -> str:
        if style == OutputFormat.CONCISE:
            return " ".join(f"{value}{word[0]}" for value, word in self.span.components())
        parts = self.span.parts()
        return " ".join(f"{value} {pluralize(value, word)}" for value, word in parts)
