"""Time span models"""

from dataclasses import dataclass
from enum import Enum
from typing import List, Tuple

from ..constants import SECONDS_PER_HOUR, SECONDS_PER_MINUTE


@dataclass(frozen=True)
class CompoundSpan:
    """A whole-second duration split into hours, minutes and seconds"""

    hours: int
    minutes: int
    seconds: int

    @classmethod
    def from_seconds(cls, total: int) -> 'CompoundSpan':
        """Decompose a non-negative number of whole seconds"""
        hours, remainder = divmod(total, SECONDS_PER_HOUR)
        minutes, seconds = divmod(remainder, SECONDS_PER_MINUTE)
        return cls(hours=hours, minutes=minutes, seconds=seconds)

    @property
    def total_seconds(self) -> int:
        return self.hours * SECONDS_PER_HOUR + self.minutes * SECONDS_PER_MINUTE + self.seconds

    def parts(self) -> List[Tuple[int, str]]:
        """All three ``(value, unit word)`` pairs, hours first"""
        return [(self.hours, "hour"), (self.minutes, "minute"), (self.seconds, "second")]

    def components(self) -> List[Tuple[int, str]]:
        """Components from the first non-zero one down to seconds

        Returns:
            ``(value, unit word)`` pairs; ``[(0, "second")]`` for a zero span
        """
        parts = self.parts()
        while len(parts) > 1 and parts[0][0] == 0:
            parts.pop(0)
        return parts


class BucketKind(Enum):
    """Classification of a relative time delta"""
    JUST_NOW = "just_now"
    SECOND = "second"
    MINUTE = "minute"
    HOUR = "hour"
    DAY = "day"
    YESTERDAY = "yesterday"
    TOMORROW = "tomorrow"
    WEEK = "week"
    MONTH = "month"
    YEAR = "year"


@dataclass(frozen=True)
class DurationBucket:
    """A relative delta bucketed into its coarsest whole unit"""

    kind: BucketKind
    count: int = 0
    future: bool = False
    suffix: str = ""

    @property
    def is_special(self) -> bool:
        """Buckets rendered as a fixed phrase rather than a count"""
        return self.kind in (BucketKind.JUST_NOW, BucketKind.YESTERDAY, BucketKind.TOMORROW)
