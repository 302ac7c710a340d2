"""Weighted table lookup used by the item generators."""

import logging

from hoardgen.core.errors import (
    ItemResolutionFailed,
    MalformedTableText,
    PackNotFound,
    TableNotFound,
)
from hoardgen.tables.models import ItemDefinition, TableEntry, TableHandle
from hoardgen.tables.source import TableSource

logger = logging.getLogger(__name__)


class TableLookup:
    """Resolves named tables in packs and draws from them."""

    def __init__(self, source: TableSource):
        self.source = source

    async def resolve_table(self, pack_id: str, table_name: str) -> TableHandle:
        """Find a table by name inside a pack.

        Args:
            pack_id: Pack identifier, e.g. "ose-generators".
            table_name: Exact table name.

        Returns:
            TableHandle ready for drawing.

        Raises:
            PackNotFound: If the pack does not exist.
            TableNotFound: If the pack has no table with that name.
        """
        pack = await self.source.resolve_pack(pack_id)
        if pack is None:
            raise PackNotFound(pack_id)

        ref = pack.find_table_by_name(table_name)
        if ref is None:
            raise TableNotFound(pack_id, table_name)

        table = await self.source.load_table(ref)
        if table is None:
            raise TableNotFound(pack_id, table_name)

        return TableHandle(pack_id=pack_id, table=table)

    async def draw(self, handle: TableHandle) -> list[TableEntry]:
        """Draw once from a resolved table.

        Raises:
            MalformedTableText: If the table produced no entry at all.
        """
        entries = await self.source.draw(handle, silent=True)
        if not entries:
            raise MalformedTableText(handle.name, "", "at least one result")

        logger.debug(f"{handle.name} -> {[e.text for e in entries]}")
        return entries

    async def resolve_item(self, entry: TableEntry) -> ItemDefinition:
        """Resolve the item an entry refers to.

        Raises:
            ItemResolutionFailed: If the entry has no reference or it is unknown.
        """
        uuid = entry.uuid
        if uuid is None:
            raise ItemResolutionFailed(f"{entry.collection}.{entry.result_id}")

        item = await self.source.resolve_by_uuid(uuid)
        if item is None:
            raise ItemResolutionFailed(uuid)
        return item
