"""Tests for concurrent item generation across a hoard."""

import asyncio

import pytest

from hoardgen.core.errors import MalformedTableText
from hoardgen.dice.roller import DiceRoller
from hoardgen.hoard.assembler import HoardAssembler
from hoardgen.hoard.store import InMemoryHoardStore, LoggingNotifier
from hoardgen.tables.lookup import TableLookup
from hoardgen.tables.source import YamlTableSource

from conftest import PACK_ID, FixedRandom, build_full_pack


class SuspendingTableSource(YamlTableSource):
    """Table source whose draws yield to the event loop and count overlap."""

    def __init__(self, fail_on=None, **kwargs):
        super().__init__(**kwargs)
        self.fail_on = fail_on
        self.in_flight = 0
        self.peak = 0
        self.completed = 0

    async def draw(self, handle, silent=True):
        self.in_flight += 1
        self.peak = max(self.peak, self.in_flight)
        try:
            await asyncio.sleep(0)
            await asyncio.sleep(0)
            if handle.name == self.fail_on:
                raise MalformedTableText(handle.name, "", "at least one result")
            entries = await super().draw(handle, silent)
        finally:
            self.in_flight -= 1
        self.completed += 1
        return entries


def make_assembler(source: SuspendingTableSource, rng: FixedRandom) -> HoardAssembler:
    return HoardAssembler(
        lookup=TableLookup(source),
        store=InMemoryHoardStore(),
        notifier=LoggingNotifier(),
        roller=DiceRoller(rng),
        pack_id=PACK_ID,
    )


class TestFanOut:
    """Test that item draws overlap and are joined in order."""

    @pytest.mark.asyncio
    async def test_gem_draws_overlap(self):
        """Test that the gems of one batch are drawn at the same time."""
        rng = FixedRandom(3)
        source = SuspendingTableSource(packs=[build_full_pack()], rng=rng)
        hoard = await make_assembler(source, rng).build_hoard("Pile", {"gems": "4"})

        assert len(hoard.items) == 4
        assert source.peak >= 4
        assert source.in_flight == 0

    @pytest.mark.asyncio
    async def test_draws_overlap_across_categories(self):
        """Test that gems and jewellery are generated together."""
        rng = FixedRandom(1)
        source = SuspendingTableSource(packs=[build_full_pack()], rng=rng)
        hoard = await make_assembler(source, rng).build_hoard(
            "Pile", {"gems": "2", "jewellery": "1"}
        )

        # 2 gems plus 2d10 = 2 pieces of jewellery, all in flight at once
        assert source.peak >= 4
        assert [i.name for i in hoard.items] == ["Azurite", "Azurite", "Locket", "Locket"]


class TestFanIn:
    """Test that one failing draw fails the whole hoard."""

    @pytest.mark.asyncio
    async def test_failing_draw_aborts_hoard(self):
        """Test that a jewellery failure surfaces while gem draws are pending."""
        rng = FixedRandom(3)
        source = SuspendingTableSource(
            fail_on="Jewellery", packs=[build_full_pack()], rng=rng
        )
        assembler = make_assembler(source, rng)

        with pytest.raises(MalformedTableText):
            await assembler.build_hoard("Pile", {"gems": "3d6", "jewellery": "1"})

        assert source.peak > 1
        assert len(assembler.store) == 0

    @pytest.mark.asyncio
    async def test_failure_is_notified(self):
        rng = FixedRandom(3)
        source = SuspendingTableSource(
            fail_on="Gem Appearance", packs=[build_full_pack()], rng=rng
        )
        assembler = make_assembler(source, rng)

        assert await assembler.generate_hoard("Pile", {"gems": "2"}) is None
        assert assembler.notifier.last[0] == "error"
        assert len(assembler.store) == 0
