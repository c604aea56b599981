"""Rounding and text helpers shared by the formatters"""

import math
import sys
from typing import Union

Number = Union[int, float]


def round_half_away(value: Number, digits: int) -> float:
    """Round to ``digits`` decimals, ties away from zero

    Args:
        value: Value to round
        digits: Number of decimal places, non-negative

    Returns:
        Rounded value

    Examples:
        >>> round_half_away(1.25, 1)
        1.3
        >>> round_half_away(-1.25, 1)
        -1.3
    """
    multiplier = 10 ** digits
    shifted = abs(value) * multiplier
    if not math.isfinite(shifted):
        # Too large to carry a fractional part
        return float(value)
    return math.copysign(math.floor(shifted + 0.5), value) / multiplier


def format_rounded(value: float, digits: int) -> str:
    """Render an already rounded value without trailing zeros

    Examples:
        >>> format_rounded(5.0, 1)
        '5'
        >>> format_rounded(1.2, 1)
        '1.2'
    """
    if value == 0:
        # -0.0 would print with a sign
        value = 0.0
    text = f"{value:.{digits}f}"
    if "." in text:
        text = text.rstrip("0").rstrip(".")
    return text


def group_digits(value: Number) -> str:
    """Insert thousands separators into a number

    Examples:
        >>> group_digits(1234567)
        '1,234,567'
        >>> group_digits(1234.5)
        '1,234.5'
    """
    if isinstance(value, int) or float(value).is_integer():
        return f"{int(value):,}"
    return f"{value:,}"


def is_finite(value: Number) -> bool:
    """Check that a number is neither NaN nor infinite

    Integers too large to convert to a float count as infinite.
    """
    if isinstance(value, int):
        return abs(value) <= sys.float_info.max
    return math.isfinite(value)


def pluralize(count: Number, singular: str, plural: str = None) -> str:
    """Pluralize a word based on count

    Args:
        count: Number of items, or its rendered form
        singular: Singular form
        plural: Plural form (optional, will add 's' if not provided)

    Returns:
        Pluralized word without the count
    """
    if plural is None:
        plural = singular + 's'

    return singular if count == 1 else plural
