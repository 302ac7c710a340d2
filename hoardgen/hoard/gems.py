"""Gem generation from the OSE gem tables."""

import asyncio
import logging
from typing import Optional

from hoardgen.core.config import settings
from hoardgen.core.errors import MalformedTableText
from hoardgen.dice.roller import DiceRoller
from hoardgen.hoard.annotations import (
    parse_descriptor,
    parse_gem_value,
    parse_multiplier,
    parse_sizes,
    strip_annotations,
)
from hoardgen.hoard.models import ItemRecord, ItemType
from hoardgen.hoard.value import apply_variance
from hoardgen.tables.lookup import TableLookup
from hoardgen.tables.models import TableHandle

logger = logging.getLogger(__name__)

GEM_VALUE_TABLE = "Gem Value"
GEM_APPEARANCE_TABLE = "Gem Appearance"
PRECIOUS_STONES_TABLE = "Precious Stones"

# Gem value (gp) to the table the stone is drawn from
GEM_TIER_TABLES: dict[int, str] = {
    10: "Semi-Precious Stones [Low Value]",
    50: "Semi-Precious Stones [Medium Value]",
    100: "Semi-Precious Stones [High Value]",
    500: PRECIOUS_STONES_TABLE,
    1000: PRECIOUS_STONES_TABLE,
}
DEFAULT_GEM_VALUE = 10


def gem_table_for_value(gem_value: int) -> str:
    """Pick the stone table for a gem value, falling back to the lowest tier."""
    table_name = GEM_TIER_TABLES.get(gem_value)
    if table_name is None:
        logger.warning(
            f"Unexpected gem value {gem_value}gp, using the {DEFAULT_GEM_VALUE}gp table"
        )
        table_name = GEM_TIER_TABLES[DEFAULT_GEM_VALUE]
    return table_name


def is_precious(table_name: str) -> bool:
    return table_name == PRECIOUS_STONES_TABLE


def _article(word: str) -> str:
    first = word[:1].lower()
    return "an" if first and first in "aeiou" else "a"


class GemGenerator:
    """Generates gems: value tier, stone, appearance and price."""

    def __init__(
        self,
        lookup: TableLookup,
        roller: DiceRoller,
        pack_id: Optional[str] = None,
        default_icon: Optional[str] = None,
    ):
        self.lookup = lookup
        self.roller = roller
        self.pack_id = pack_id or settings.table_pack_id
        self.default_icon = default_icon or settings.default_item_icon

    async def generate(self, quantity: int) -> list[ItemRecord]:
        """Generate ``quantity`` gems concurrently.

        Any failing gem fails the whole batch.
        """
        value_table = await self.lookup.resolve_table(self.pack_id, GEM_VALUE_TABLE)
        gems = await asyncio.gather(
            *[self._generate_gem(value_table) for _ in range(quantity)]
        )
        return list(gems)

    async def _generate_gem(self, value_table: TableHandle) -> ItemRecord:
        value_entry = (await self.lookup.draw(value_table))[0]
        gem_value = parse_gem_value(value_entry.text, value_table.name)
        return await self.generate_gem_detail(gem_value)

    async def generate_gem_detail(self, gem_value: int) -> ItemRecord:
        """Build one gem of a known value tier.

        Args:
            gem_value: Base value in gold pieces, normally 10/50/100/500/1000.

        Returns:
            ItemRecord for the gem.
        """
        stone_table_name = gem_table_for_value(gem_value)
        precious = is_precious(stone_table_name)

        stone_table = await self.lookup.resolve_table(self.pack_id, stone_table_name)
        appearance_table = await self.lookup.resolve_table(self.pack_id, GEM_APPEARANCE_TABLE)

        stone = (await self.lookup.draw(stone_table))[0]
        if precious:
            stone_desc = strip_annotations(stone.text).lower()
        else:
            stone_desc = parse_descriptor(stone.text, stone_table.name)

        appearance = await self.lookup.draw(appearance_table)
        if len(appearance) < 3:
            raise MalformedTableText(
                appearance_table.name,
                " / ".join(e.text for e in appearance),
                "a shape, a size and a finish",
            )
        shape, size_entry, finish = (e.text for e in appearance[:3])
        shape = strip_annotations(shape)
        finish = strip_annotations(finish)

        multiplier = parse_multiplier(size_entry, appearance_table.name)
        precious_size, semiprecious_size = parse_sizes(size_entry, appearance_table.name)
        size = precious_size if precious else semiprecious_size

        description = (
            f"{_article(stone_desc).capitalize()} {stone_desc} the size of "
            f"{_article(size)} {size}, cut as {_article(finish)} {finish} {shape}."
        )

        return ItemRecord(
            name=strip_annotations(stone.text),
            item_type=ItemType.ITEM,
            icon_path=stone.icon or self.default_icon,
            description=description,
            cost=apply_variance(gem_value * multiplier, self.roller),
            is_treasure=True,
        )
