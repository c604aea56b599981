# humaniser/formatters/duration.py
"""Relative time formatting ("5m", "2 hours ago", "yesterday")"""

import math
import time
from dataclasses import dataclass
from datetime import datetime
from typing import Optional, Union

from .base import HumanFormatter
from ..api.exceptions import InvalidInputError
from ..constants import (
    DURATION_BUCKETS,
    FUTURE_PREFIX,
    FUTURE_SUFFIX,
    JUST_NOW,
    JUST_NOW_THRESHOLD,
    MISSING_CONCISE,
    MISSING_FULL,
    PAST_SUFFIX,
    SECONDS_PER_DAY,
    TOMORROW,
    YESTERDAY,
    OutputFormat,
)
from ..models.span import BucketKind, DurationBucket
from ..utils.formatting import pluralize

Instant = Union[datetime, int, float]

_PHRASES = {
    BucketKind.JUST_NOW: JUST_NOW,
    BucketKind.YESTERDAY: YESTERDAY,
    BucketKind.TOMORROW: TOMORROW,
}


def to_timestamp(instant: Instant) -> float:
    """Convert a datetime or POSIX timestamp to seconds since the epoch

    Naive datetimes are taken as local time, the same way
    :meth:`datetime.timestamp` treats them.
    """
    if isinstance(instant, datetime):
        return instant.timestamp()
    if isinstance(instant, bool) or not isinstance(instant, (int, float)):
        raise InvalidInputError(f"Not a datetime or timestamp: {instant!r}", instant)
    if not math.isfinite(instant):
        raise InvalidInputError(f"Not a finite timestamp: {instant!r}", instant)
    return float(instant)


def bucket_delta(delta: float) -> DurationBucket:
    """Classify a signed delta in seconds, positive meaning the past

    Counts use floor division on whole seconds.
    """
    future = delta < 0
    seconds = int(abs(delta))

    if seconds < JUST_NOW_THRESHOLD:
        return DurationBucket(BucketKind.JUST_NOW, future=future)

    if SECONDS_PER_DAY <= seconds < 2 * SECONDS_PER_DAY:
        kind = BucketKind.TOMORROW if future else BucketKind.YESTERDAY
        return DurationBucket(kind, count=1, future=future, suffix="d")

    for upper, divisor, suffix, word in DURATION_BUCKETS:
        if upper is None or seconds < upper:
            return DurationBucket(BucketKind(word), count=seconds // divisor, future=future, suffix=suffix)

    # DURATION_BUCKETS ends with an unbounded entry
    raise AssertionError("unreachable")


@dataclass(frozen=True)
class HumanDuration(HumanFormatter):
    """Time elapsed since (or remaining until) a reference instant

    ``now`` defaults to the current time at formatting; pass it explicitly
    for reproducible output.

    Examples:
        >>> HumanDuration(1_000, now=1_075).concise()
        '1m'
        >>> HumanDuration(1_000, now=1_075).full()
        '1 minute ago'
        >>> HumanDuration(None).full()
        'never'
    """

    reference: Optional[Instant]
    now: Optional[Instant] = None

    def __post_init__(self):
        # Reject bad instants at construction
        if self.reference is not None:
            to_timestamp(self.reference)
        if self.now is not None:
            to_timestamp(self.now)

    def delta(self) -> Optional[float]:
        """Seconds from the reference to now, negative for the future"""
        if self.reference is None:
            return None
        now = time.time() if self.now is None else to_timestamp(self.now)
        return now - to_timestamp(self.reference)

    def bucket(self) -> Optional[DurationBucket]:
        delta = self.delta()
        return None if delta is None else bucket_delta(delta)

    def format(self, style: OutputFormat) -> str:
        bucket = self.bucket()
        if bucket is None:
            return MISSING_CONCISE if style == OutputFormat.CONCISE else MISSING_FULL

        if bucket.is_special:
            return _PHRASES[bucket.kind]

        if style == OutputFormat.CONCISE:
            text = f"{bucket.count}{bucket.suffix}"
            return f"{FUTURE_PREFIX} {text}" if bucket.future else text

        word = pluralize(bucket.count, bucket.kind.value)
        direction = FUTURE_SUFFIX if bucket.future else PAST_SUFFIX
        return f"{bucket.count} {word} {direction}"
