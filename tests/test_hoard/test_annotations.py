"""Tests for table text annotations."""

from fractions import Fraction

import pytest

from hoardgen.core.errors import MalformedTableText
from hoardgen.dice.roller import DiceRoller
from hoardgen.hoard.annotations import (
    collapse_line_breaks,
    parse_descriptor,
    parse_gem_value,
    parse_multiplier,
    parse_sizes,
    resolve_roll_markers,
    strip_annotations,
)

from conftest import FixedRandom


class TestGemAnnotations:
    """Test value, multiplier, size and descriptor parsing."""

    def test_gem_value(self):
        assert parse_gem_value("Ornamental stone [10gp]", "Gem Value") == 10
        assert parse_gem_value("Jewel [1000 GP]", "Gem Value") == 1000

    def test_gem_value_missing(self):
        with pytest.raises(MalformedTableText) as exc_info:
            parse_gem_value("Ornamental stone", "Gem Value")
        assert exc_info.value.table_name == "Gem Value"

    @pytest.mark.parametrize(
        "text,expected",
        [
            ("Large [x2] (Precious: a/Semi-precious: b)", Fraction(2)),
            ("Tiny [x1/2] (Precious: a/Semi-precious: b)", Fraction(1, 2)),
            ("Huge [x1+2] (Precious: a/Semi-precious: b)", Fraction(3)),
            ("Small (Precious: a/Semi-precious: b)", Fraction(1)),
        ],
    )
    def test_multiplier(self, text, expected):
        assert parse_multiplier(text, "Gem Appearance") == expected

    def test_multiplier_is_never_executed(self):
        """Test that a multiplier that is not arithmetic is a data error."""
        with pytest.raises(MalformedTableText):
            parse_multiplier("Odd [x__import__('os')]", "Gem Appearance")

    def test_sizes(self):
        text = "Huge [x4] (Precious: walnut/Semi-precious: hen's egg)"
        assert parse_sizes(text, "Gem Appearance") == ("walnut", "hen's egg")

    def test_sizes_missing(self):
        with pytest.raises(MalformedTableText):
            parse_sizes("Large [x2]", "Gem Appearance")

    def test_descriptor(self):
        assert parse_descriptor("Azurite [mottled deep blue stone]", "T") == "mottled deep blue stone"

    def test_descriptor_missing(self):
        with pytest.raises(MalformedTableText):
            parse_descriptor("Azurite", "T")


class TestTextCleanup:
    """Test stripping and line breaks."""

    def test_strip_annotations(self):
        assert strip_annotations("Azurite [mottled deep blue stone]") == "Azurite"
        assert strip_annotations("of electrum [tarnished] set with gems") == "of electrum set with gems"
        assert strip_annotations("Plain") == "Plain"

    def test_strip_double_brackets(self):
        assert strip_annotations("a [[5]] b") == "a b"

    def test_collapse_line_breaks(self):
        assert collapse_line_breaks("one<br/>two<br />three<BR>four") == "one two three four"


class TestRollMarkers:
    """Test [[formula]] markers."""

    def test_markers_resolved_once(self):
        """Test that every marker becomes a fixed number."""
        roller = DiceRoller(FixedRandom(2))
        text = resolve_roll_markers("set with [[1d4]] garnets and [[2d6+1]] pearls", roller, "Jewellery")
        assert text == "set with 2 garnets and 5 pearls"

    def test_text_without_markers(self):
        roller = DiceRoller(FixedRandom(2))
        assert resolve_roll_markers("plain [note]", roller, "Jewellery") == "plain [note]"

    def test_invalid_marker(self):
        roller = DiceRoller(FixedRandom(2))
        with pytest.raises(MalformedTableText):
            resolve_roll_markers("set with [[1dx]] garnets", roller, "Jewellery")


class TestMultiplierBounds:
    """Test multipliers that cannot price a gem."""

    def test_negative_multiplier(self):
        with pytest.raises(MalformedTableText) as exc_info:
            parse_multiplier("Odd [x1-2] (Precious: a/Semi-precious: b)", "Gem Appearance")
        assert exc_info.value.table_name == "Gem Appearance"

    def test_zero_multiplier(self):
        assert parse_multiplier("Dust [x0] (Precious: a/Semi-precious: b)", "Gem Appearance") == 0
