# humaniser/core/scale_selector.py
"""Unit selection over magnitude ladders"""

from typing import Tuple, Union

from ..models.scale import Ladder, ScaledMagnitude
from ..utils.formatting import round_half_away

Number = Union[int, float]


class ScaleSelector:
    """Pick the unit of a ladder that fits a magnitude

    The ladder is ordered ascending by threshold. The chosen unit is the last
    one whose threshold does not exceed ``abs(magnitude)``; anything below the
    first threshold (zero included) uses the first unit. The sign of the raw
    value is carried into the scaled value.
    """

    def __init__(self, ladder: Ladder):
        if not ladder:
            raise ValueError("Ladder must contain at least one unit")
        self.ladder = ladder

    def select(self, magnitude: Number) -> ScaledMagnitude:
        """Scale a magnitude into its largest fitting unit"""
        size = abs(magnitude)
        index = 0
        for position, unit in enumerate(self.ladder):
            if unit.threshold <= size:
                index = position
            else:
                break
        return self._scaled(magnitude, index)

    def select_rounded(self, magnitude: Number, digits: int) -> Tuple[ScaledMagnitude, float]:
        """Like :meth:`select`, also returning the scaled value rounded to ``digits``

        When rounding reaches the next unit's threshold (999.95K rounds to
        1000K) the value moves up one unit instead. The returned
        :class:`ScaledMagnitude` keeps the exact scaled value.

        Returns:
            ``(selected, rounded)`` pair
        """
        selected = self.select(magnitude)
        rounded = round_half_away(selected.scaled, digits)

        next_index = selected.index + 1
        if next_index < len(self.ladder):
            boundary = self.ladder[next_index].threshold / selected.unit.divisor
            if abs(rounded) >= boundary:
                selected = self._scaled(magnitude, next_index)
                rounded = round_half_away(selected.scaled, digits)

        return selected, rounded

    def _scaled(self, magnitude: Number, index: int) -> ScaledMagnitude:
        unit = self.ladder[index]
        scaled = magnitude if unit.divisor == 1 else magnitude / unit.divisor
        return ScaledMagnitude(raw=magnitude, index=index, unit=unit, scaled=scaled)


def select(magnitude: Number, ladder: Ladder) -> ScaledMagnitude:
    """Select the unit for ``magnitude`` from ``ladder``"""
    return ScaleSelector(ladder).select(magnitude)
