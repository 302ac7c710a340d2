"""Roll formulas and value expressions."""

from hoardgen.dice.expression import evaluate_expression
from hoardgen.dice.roller import DiceResult, DiceRoller

__all__ = ["DiceResult", "DiceRoller", "evaluate_expression"]
