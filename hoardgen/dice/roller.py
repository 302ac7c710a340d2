"""Roll formula validation and evaluation.

Supported notation (whitespace ignored):

    [K+]NdM[+K|-K][*X]    e.g. "3d6", "1d4+5", "95+1d10", "3d6*100"
    K[*X]                 e.g. "12", "2*50"
"""

import logging
import random
import re
from typing import Optional

from pydantic import BaseModel, Field

from hoardgen.core.errors import InvalidFormula

logger = logging.getLogger(__name__)

FORMULA_PATTERN = re.compile(
    r"^(?:(?P<constant>\d+)\+)?"
    r"(?:(?P<count>\d*)d(?P<sides>\d+)|(?P<flat>\d+))"
    r"(?P<modifier>[+-]\d+)?"
    r"(?:\*(?P<multiplier>\d+))?$",
    re.IGNORECASE,
)


class DiceResult(BaseModel):
    """Result of evaluating a roll formula."""

    formula: str
    rolls: list[int] = Field(default_factory=list)
    constant: int = 0
    modifier: int = 0
    multiplier: int = 1
    total: int = 0


class DiceRoller:
    """Evaluates roll formulas with an injectable random source."""

    MAX_DICE = 1000
    MAX_SIDES = 1000

    def __init__(self, rng: Optional[random.Random] = None):
        """Initialize the roller.

        Args:
            rng: Random source for die rolls. A fresh ``random.Random`` if None.
        """
        self.rng = rng or random.Random()

    def _parse(self, formula: str) -> Optional[re.Match]:
        if not isinstance(formula, str):
            return None
        match = FORMULA_PATTERN.match(re.sub(r"\s+", "", formula))
        if not match:
            return None

        if match.group("sides") is not None:
            count = int(match.group("count") or 1)
            sides = int(match.group("sides"))
            if not 1 <= count <= self.MAX_DICE or not 1 <= sides <= self.MAX_SIDES:
                return None

        return match

    def validate(self, formula: str) -> bool:
        """Check whether a formula matches the supported notation."""
        return self._parse(formula) is not None

    def roll(self, formula: str) -> DiceResult:
        """Roll a formula and keep the individual dice.

        Args:
            formula: Roll formula like "3d6", "95+1d10" or "3d6*100".

        Returns:
            DiceResult with rolls and total.

        Raises:
            InvalidFormula: If the formula does not validate.
        """
        match = self._parse(formula)
        if not match:
            raise InvalidFormula(formula, f'"{formula}" is not a valid roll formula.')

        constant = int(match.group("constant") or 0)
        modifier = int(match.group("modifier") or 0)
        multiplier = int(match.group("multiplier") or 1)

        rolls: list[int] = []
        if match.group("sides") is not None:
            count = int(match.group("count") or 1)
            sides = int(match.group("sides"))
            rolls = [self.rng.randint(1, sides) for _ in range(count)]
        else:
            constant += int(match.group("flat"))

        total = (constant + sum(rolls) + modifier) * multiplier
        logger.debug(f"Rolled {formula}: {rolls} -> {total}")

        return DiceResult(
            formula=formula,
            rolls=rolls,
            constant=constant,
            modifier=modifier,
            multiplier=multiplier,
            total=total,
        )

    def evaluate(self, formula: str) -> int:
        """Roll a formula and return its total."""
        return self.roll(formula).total
