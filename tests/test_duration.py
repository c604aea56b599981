"""Tests for HumanDuration."""

import time
from datetime import datetime, timedelta, timezone

import pytest

from humaniser import BucketKind, HumanDuration, InvalidInputError
from humaniser.formatters.duration import bucket_delta

NOW = 1_700_000_000


def ago(seconds, style="concise"):
    return HumanDuration(NOW - seconds, now=NOW).render(style)


def test_missing_reference():
    assert HumanDuration(None).concise() == "-"
    assert HumanDuration(None).full() == "never"


def test_just_now():
    assert ago(0) == "just now"
    assert ago(9, "full") == "just now"
    assert ago(-5, "full") == "just now"


def test_seconds():
    assert ago(45) == "45s"
    assert ago(45, "full") == "45 seconds ago"


def test_minutes_floor_not_round():
    assert ago(75) == "1m"
    assert ago(75, "full") == "1 minute ago"
    assert ago(119) == "1m"
    assert ago(120, "full") == "2 minutes ago"


def test_hours():
    assert ago(7200) == "2h"
    assert ago(7200, "full") == "2 hours ago"
    assert ago(86_399) == "23h"


def test_yesterday():
    assert ago(86_400, "full") == "yesterday"
    assert ago(86_400) == "yesterday"
    assert ago(2 * 86_400 - 1, "full") == "yesterday"


def test_days():
    assert ago(172_800) == "2d"
    assert ago(3 * 86_400, "full") == "3 days ago"


def test_weeks_months_years():
    assert ago(1_209_600) == "2w"
    assert ago(604_800, "full") == "1 week ago"
    assert ago(5_259_492, "full") == "2 months ago"
    assert ago(5_259_492) == "2mo"
    assert ago(63_113_904) == "2y"
    assert ago(31_536_000, "full") == "1 year ago"


def test_future():
    assert ago(-75) == "in 1m"
    assert ago(-75, "full") == "1 minute from now"
    assert ago(-3 * 3600, "full") == "3 hours from now"
    assert ago(-86_400, "full") == "tomorrow"
    assert ago(-86_400) == "tomorrow"
    assert ago(-10 * 86_400, "full") == "1 week from now"


def test_datetime_reference():
    now = datetime(2024, 1, 2, 13, 45, tzinfo=timezone.utc)
    reference = now - timedelta(minutes=5)
    assert HumanDuration(reference, now=now).concise() == "5m"


def test_default_now_is_current_time():
    result = HumanDuration(time.time() - 75).concise()
    assert "1m" in result


def test_bucket_classification():
    bucket = bucket_delta(-3 * 86_400)
    assert bucket.kind is BucketKind.DAY
    assert bucket.count == 3
    assert bucket.future
    assert bucket_delta(3).kind is BucketKind.JUST_NOW


@pytest.mark.parametrize("reference", ["yesterday", float("inf"), True])
def test_invalid_reference_rejected(reference):
    with pytest.raises(InvalidInputError):
        HumanDuration(reference)


def test_idempotent_with_fixed_now():
    duration = HumanDuration(NOW - 3_000, now=NOW)
    assert duration.full() == duration.full() == "50 minutes ago"
