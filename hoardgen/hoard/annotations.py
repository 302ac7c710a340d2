"""Annotations embedded in table entry text.

Authored tables carry machine-readable hints inside their text:

    [10gp]                                   gem value tier
    [x2], [x1/2]                             value multiplier of a gem size
    (Precious: egg/Semi-precious: walnut)    size wording per gem class
    Azurite [mottled deep blue stone]        descriptor of a semi-precious stone
    [[1d4]]                                  roll resolved once when generated

Any other bracketed text is a note for the referee and is stripped from names
and descriptions.
"""

import re
from fractions import Fraction

from hoardgen.core.errors import MalformedTableText
from hoardgen.dice.expression import evaluate_expression
from hoardgen.dice.roller import DiceRoller

GEM_VALUE_PATTERN = re.compile(r"\[\s*(?P<cost>\d+)\s*gp\s*\]", re.IGNORECASE)
MULTIPLIER_PATTERN = re.compile(r"\[\s*[x×]\s*(?P<mult>[^\]]+?)\s*\]", re.IGNORECASE)
SIZES_PATTERN = re.compile(
    r"\(\s*Precious:\s*(?P<precious>[^/)]+?)\s*/\s*Semi-precious:\s*(?P<semiprecious>[^)]+?)\s*\)",
    re.IGNORECASE,
)
DESCRIPTOR_PATTERN = re.compile(r"\[(?P<desc>[^\[\]]+)\]")
ROLL_MARKER_PATTERN = re.compile(r"\[\[(?P<formula>[^\[\]]*d[^\[\]]*)\]\]", re.IGNORECASE)
BRACKETED_PATTERN = re.compile(r"\s*(?:\[\[[^\]]*\]\]|\[[^\]]*\])")
LINE_BREAK_PATTERN = re.compile(r"<br\s*/?>", re.IGNORECASE)
WHITESPACE_PATTERN = re.compile(r"\s+")


def parse_gem_value(text: str, table_name: str) -> int:
    """Extract the gold piece value from a "[Ngp]" tag."""
    match = GEM_VALUE_PATTERN.search(text)
    if not match:
        raise MalformedTableText(table_name, text, "a value tag like [10gp]")
    return int(match.group("cost"))


def parse_multiplier(text: str, table_name: str) -> Fraction:
    """Extract the value multiplier from a "[xK]" tag, 1 when there is none."""
    match = MULTIPLIER_PATTERN.search(text)
    if not match:
        return Fraction(1)
    try:
        multiplier = evaluate_expression(match.group("mult"))
    except ValueError as e:
        raise MalformedTableText(table_name, text, f"a valid multiplier ({e})") from e
    if multiplier < 0:
        raise MalformedTableText(table_name, text, "a multiplier of zero or more")
    return multiplier


def parse_sizes(text: str, table_name: str) -> tuple[str, str]:
    """Extract the (precious, semi-precious) size wording."""
    match = SIZES_PATTERN.search(text)
    if not match:
        raise MalformedTableText(
            table_name, text, "a size note like (Precious: .../Semi-precious: ...)"
        )
    return match.group("precious"), match.group("semiprecious")


def parse_descriptor(text: str, table_name: str) -> str:
    """Extract the bracketed descriptor of a stone name."""
    match = DESCRIPTOR_PATTERN.search(text)
    if not match:
        raise MalformedTableText(table_name, text, "a bracketed descriptor")
    return match.group("desc").strip()


def strip_annotations(text: str) -> str:
    """Remove bracketed notes and normalise whitespace."""
    return normalize_whitespace(BRACKETED_PATTERN.sub("", text))


def normalize_whitespace(text: str) -> str:
    return WHITESPACE_PATTERN.sub(" ", text).strip()


def collapse_line_breaks(text: str) -> str:
    return LINE_BREAK_PATTERN.sub(" ", text)


def resolve_roll_markers(text: str, roller: DiceRoller, table_name: str) -> str:
    """Replace each "[[formula]]" marker with a rolled total.

    Every marker is rolled exactly once, so the text keeps showing the same
    number afterwards.
    """

    def roll_marker(match: re.Match) -> str:
        formula = match.group("formula").strip()
        if not roller.validate(formula):
            raise MalformedTableText(table_name, text, f"a valid roll formula in [[{formula}]]")
        return str(roller.evaluate(formula))

    return ROLL_MARKER_PATTERN.sub(roll_marker, text)
