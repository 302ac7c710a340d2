"""Jewellery generation from the OSE jewellery table."""

import asyncio
import logging
from typing import Optional

from hoardgen.core.config import settings
from hoardgen.dice.roller import DiceRoller
from hoardgen.hoard.annotations import (
    collapse_line_breaks,
    resolve_roll_markers,
    strip_annotations,
)
from hoardgen.hoard.models import ItemRecord, ItemType
from hoardgen.hoard.value import apply_variance
from hoardgen.tables.lookup import TableLookup
from hoardgen.tables.models import TableHandle

logger = logging.getLogger(__name__)

JEWELLERY_TABLE = "Jewellery"
JEWELLERY_VALUE_FORMULA = "3d6*100"


class JewelleryGenerator:
    """Generates pieces of jewellery with a 3d6 x 100gp base value."""

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
        """Generate ``quantity`` pieces of jewellery concurrently."""
        table = await self.lookup.resolve_table(self.pack_id, JEWELLERY_TABLE)
        pieces = await asyncio.gather(
            *[self._generate_piece(table) for _ in range(quantity)]
        )
        return list(pieces)

    async def _generate_piece(self, table: TableHandle) -> ItemRecord:
        entries = await self.lookup.draw(table)
        base = entries[0]

        # Multi-line results read as one sentence
        description = " ".join(e.text for e in entries)
        description = collapse_line_breaks(description)
        description = resolve_roll_markers(description, self.roller, table.name)
        description = strip_annotations(description)

        return ItemRecord(
            name=base.text,
            item_type=ItemType.ITEM,
            icon_path=base.icon or self.default_icon,
            description=description,
            cost=self.generate_value(),
            is_treasure=True,
        )

    def generate_value(self) -> int:
        """Roll a jewellery value: 3d6 x 100gp with variance."""
        return apply_variance(self.roller.evaluate(JEWELLERY_VALUE_FORMULA), self.roller)
