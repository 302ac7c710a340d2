"""Shared fixtures: deterministic randomness and in-memory table packs."""

import random

import pytest

from hoardgen.dice.roller import DiceRoller
from hoardgen.tables.lookup import TableLookup
from hoardgen.tables.models import RollTable, TablePack, TableResult
from hoardgen.tables.source import YamlTableSource

PACK_ID = "test-pack"


class FixedRandom(random.Random):
    """Random source whose every die shows the same face (clamped to the die)."""

    def __init__(self, face: int = 1):
        super().__init__(0)
        self.face = face

    def randint(self, a: int, b: int) -> int:
        return max(a, min(b, self.face))


def table(name: str, *texts: str, **kwargs) -> RollTable:
    """Build a table whose results all have weight 1."""
    return RollTable(name=name, results=[TableResult(text=t) for t in texts], **kwargs)


def build_gem_pack(
    value_text: str = "Ornamental stone [10gp]",
    size_text: str = "Large [x2] (Precious: hazelnut/Semi-precious: walnut)",
    stone_text: str = "Azurite [mottled deep blue stone]",
    precious_text: str = "Ruby",
) -> TablePack:
    """A pack whose gem tables each hold a single entry."""
    return TablePack(
        id=PACK_ID,
        tables=[
            table("Gem Value", value_text),
            table("Semi-Precious Stones [Low Value]", stone_text),
            table("Semi-Precious Stones [Medium Value]", "Onyx [black and white banded stone]"),
            table("Semi-Precious Stones [High Value]", "Jade [translucent deep green stone]"),
            table("Precious Stones", precious_text),
            RollTable(name="Gem Appearance", draw=["Gem Shape", "Gem Size", "Gem Finish"]),
            table("Gem Shape", "cabochon"),
            table("Gem Size", size_text),
            table("Gem Finish", "polished"),
        ],
    )


def build_jewellery_pack(*decorations: str) -> TablePack:
    return TablePack(
        id=PACK_ID,
        tables=[
            RollTable(
                name="Jewellery",
                draw=["Jewellery Item", "Jewellery Material", "Jewellery Decoration"],
            ),
            RollTable(
                name="Jewellery Item",
                results=[TableResult(text="Locket", icon="icons/locket.webp")],
            ),
            table("Jewellery Material", "wrought in silver<br/>"),
            table("Jewellery Decoration", *(decorations or ("set with [[1d4]] small garnets",))),
        ],
    )


def build_full_pack() -> TablePack:
    gems = build_gem_pack()
    jewellery = build_jewellery_pack()
    return TablePack(id=PACK_ID, tables=gems.tables + jewellery.tables)


@pytest.fixture
def fixed_random():
    """Random source rolling 3 on every die."""
    return FixedRandom(3)


@pytest.fixture
def roller(fixed_random):
    return DiceRoller(fixed_random)


@pytest.fixture
def full_pack():
    return build_full_pack()


@pytest.fixture
def lookup(full_pack, fixed_random):
    return TableLookup(YamlTableSource(packs=[full_pack], rng=fixed_random))
