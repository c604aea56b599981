"""Unit ladder models"""

from dataclasses import dataclass
from typing import List, Sequence, Tuple


@dataclass(frozen=True)
class Unit:
    """One rung of a unit ladder"""

    threshold: float
    divisor: float
    symbol: str
    word: str

    @property
    def is_base(self) -> bool:
        """Whether this is the unscaled unit"""
        return self.divisor == 1


Ladder = Tuple[Unit, ...]


def build_ladder(step: int, names: Sequence[Tuple[str, str]]) -> Ladder:
    """Build a geometric ladder where rung ``i`` starts at ``step ** i``

    Args:
        step: Ratio between consecutive units (1000 or 1024)
        names: ``(symbol, word)`` pairs, smallest unit first

    Returns:
        Ladder ordered ascending by threshold
    """
    units: List[Unit] = []
    for power, (symbol, word) in enumerate(names):
        value = step ** power
        units.append(Unit(threshold=value, divisor=value, symbol=symbol, word=word))
    return tuple(units)


@dataclass(frozen=True)
class ScaledMagnitude:
    """A raw value expressed in one unit of a ladder"""

    raw: float
    index: int
    unit: Unit
    scaled: float

    @property
    def negative(self) -> bool:
        return self.raw < 0
