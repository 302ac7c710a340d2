"""Tests for roll formula evaluation."""

import random

import pytest

from hoardgen.core.errors import InvalidFormula
from hoardgen.dice.roller import DiceResult, DiceRoller

from conftest import FixedRandom


class TestValidation:
    """Test formula validation."""

    @pytest.fixture
    def roller(self):
        return DiceRoller(random.Random(42))

    @pytest.mark.parametrize(
        "formula",
        ["3d6", "1d1", "d6", "1d4+5", "1d20-3", "95+1d10", "3d6*100", "2D10", " 2d6 + 1 ", "12", "2*50"],
    )
    def test_valid_formulas(self, roller, formula):
        """Test formulas of the supported notation."""
        assert roller.validate(formula) is True

    @pytest.mark.parametrize(
        "formula",
        ["", "bogus", "3d", "d", "0d6", "1d0", "3d6+", "3d6*", "1d6/2", "1d6+1d4", "-1d6", "2001d6", "1d1001"],
    )
    def test_invalid_formulas(self, roller, formula):
        """Test formulas outside the supported notation."""
        assert roller.validate(formula) is False

    def test_non_string_formula(self, roller):
        """Test that non-string formulas are rejected."""
        assert roller.validate(None) is False
        assert roller.validate(6) is False

    def test_roll_invalid_raises(self, roller):
        """Test rolling an invalid formula."""
        with pytest.raises(InvalidFormula):
            roller.roll("bogus")


class TestEvaluation:
    """Test formula evaluation."""

    @pytest.fixture
    def roller(self):
        return DiceRoller(random.Random(7))

    def test_3d6_range(self, roller):
        """Test that 3d6 totals stay in [3, 18]."""
        for _ in range(200):
            result = roller.roll("3d6")
            assert isinstance(result, DiceResult)
            assert len(result.rolls) == 3
            assert all(1 <= r <= 6 for r in result.rolls)
            assert 3 <= result.total <= 18

    def test_modifier_range(self, roller):
        """Test NdM+K totals stay in [N + K, N*M + K]."""
        for _ in range(200):
            assert 6 <= roller.evaluate("1d4+5") <= 9
            assert -2 <= roller.evaluate("1d20-3") <= 17

    def test_leading_constant(self, roller):
        """Test the variance roll K+NdM."""
        for _ in range(200):
            assert 96 <= roller.evaluate("95+1d10") <= 105

    def test_multiplier_applies_to_total(self):
        """Test that *K scales the whole prior total."""
        roller = DiceRoller(FixedRandom(4))
        result = roller.roll("3d6*100")
        assert result.rolls == [4, 4, 4]
        assert result.multiplier == 100
        assert result.total == 1200

        assert roller.evaluate("1d6+2*10") == 60

    def test_flat_values(self, roller):
        """Test formulas without dice."""
        assert roller.evaluate("12") == 12
        assert roller.evaluate("2*50") == 100
        assert roller.roll("12").rolls == []

    def test_one_sided_die(self, roller):
        """Test that 1d1 always rolls 1."""
        assert all(roller.evaluate("1d1") == 1 for _ in range(20))

    def test_seeded_rolls_repeat(self):
        """Test that equal seeds give equal rolls."""
        first = DiceRoller(random.Random(99))
        second = DiceRoller(random.Random(99))
        assert [first.evaluate("2d10") for _ in range(10)] == [
            second.evaluate("2d10") for _ in range(10)
        ]
