"""Tests for the shared rounding and text helpers."""

import math

from humaniser.utils.formatting import (
    format_rounded,
    group_digits,
    is_finite,
    pluralize,
    round_half_away,
)


def test_round_half_away_from_zero():
    assert round_half_away(0.5, 0) == 1
    assert round_half_away(-0.5, 0) == -1
    assert round_half_away(2.5, 0) == 3
    assert round_half_away(1.25, 1) == 1.3
    assert round_half_away(12.3456, 2) == 12.35
    assert round_half_away(1e308, 2) == 1e308


def test_format_rounded_trims_zeros():
    assert format_rounded(5.0, 1) == "5"
    assert format_rounded(1.2, 1) == "1.2"
    assert format_rounded(12.5, 3) == "12.5"
    assert format_rounded(-0.0, 1) == "0"
    assert format_rounded(300.0, 0) == "300"


def test_group_digits():
    assert group_digits(0) == "0"
    assert group_digits(1_000) == "1,000"
    assert group_digits(-1_234_567) == "-1,234,567"
    assert group_digits(1_000.0) == "1,000"


def test_is_finite():
    assert is_finite(10)
    assert is_finite(1.5)
    assert not is_finite(math.nan)
    assert not is_finite(-math.inf)
    assert is_finite(10 ** 300)
    assert not is_finite(10 ** 400)


def test_pluralize():
    assert pluralize(1, "byte") == "byte"
    assert pluralize(2, "byte") == "bytes"
    assert pluralize(0, "second") == "seconds"
    assert pluralize(1.0, "hour") == "hour"
    assert pluralize(3, "child", "children") == "children"
