"""Per-item value variance."""

import math
from fractions import Fraction
from typing import Union

from hoardgen.dice.roller import DiceRoller

VARIANCE_FORMULA = "95+1d10"


def apply_variance(base_value: Union[int, Fraction], roller: DiceRoller) -> int:
    """Scale a value by a fresh 96-105% roll, truncating fractional gold.

    Args:
        base_value: Value in gold pieces, possibly fractional.
        roller: Roller used for the variance roll.

    Returns:
        ``trunc(base_value * variance / 100)``.
    """
    variance = roller.evaluate(VARIANCE_FORMULA)
    return math.trunc(Fraction(base_value) * variance / 100)
