"""Tests for HumanTime."""

from datetime import timedelta

import pytest

from humaniser import CompoundSpan, HumanTime, InvalidInputError


def test_hours_minutes_seconds():
    assert HumanTime(3661).concise() == "1h 1m 1s"
    assert HumanTime(3661).full() == "1 hour 1 minute 1 second"
    assert str(HumanTime(3661)) == "1 hour 1 minute 1 second"


def test_leading_zero_components_dropped():
    assert HumanTime(45).concise() == "45s"
    assert HumanTime(90).concise() == "1m 30s"
    assert HumanTime(303).concise() == "5m 3s"


def test_full_form_keeps_every_component():
    assert HumanTime(5).full() == "0 hours 0 minutes 5 seconds"
    assert HumanTime(303).full() == "0 hours 5 minutes 3 seconds"
    assert HumanTime(3600).full() == "1 hour 0 minutes 0 seconds"


def test_inner_zero_components_kept():
    assert HumanTime(3600).concise() == "1h 0m 0s"
    assert HumanTime(7205).full() == "2 hours 0 minutes 5 seconds"
    assert HumanTime(60).concise() == "1m 0s"


def test_zero():
    assert HumanTime(0).concise() == "0s"
    assert HumanTime(0).full() == "0 hours 0 minutes 0 seconds"


def test_plurals():
    assert HumanTime(3672).full() == "1 hour 1 minute 12 seconds"
    assert HumanTime(7322).full() == "2 hours 2 minutes 2 seconds"


def test_timedelta_and_fractions():
    assert HumanTime(timedelta(hours=1, minutes=1, seconds=1)).concise() == "1h 1m 1s"
    assert HumanTime(59.9).concise() == "59s"


def test_hours_are_not_wrapped_into_days():
    assert HumanTime(timedelta(days=2)).concise() == "48h 0m 0s"


@pytest.mark.parametrize("seconds", range(0, 7300, 37))
def test_hour_component_only_from_one_hour(seconds):
    assert ("h" in HumanTime(seconds).concise()) == (seconds >= 3600)


def test_span_parts_include_leading_zeros():
    span = CompoundSpan.from_seconds(65)
    assert span.parts() == [(0, "hour"), (1, "minute"), (5, "second")]
    assert span.components() == [(1, "minute"), (5, "second")]


@pytest.mark.parametrize("total", [0, 1, 59, 60, 61, 3599, 3600, 3661, 86_399, 1_000_000])
def test_span_recomposes_exactly(total):
    span = CompoundSpan.from_seconds(total)
    assert span.total_seconds == total
    assert 0 <= span.minutes < 60
    assert 0 <= span.seconds < 60


@pytest.mark.parametrize("value", [-1, timedelta(seconds=-5), float("nan")])
def test_invalid_durations_rejected(value):
    with pytest.raises(InvalidInputError):
        HumanTime(value)
