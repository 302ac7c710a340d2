"""Weighted table sources backed by YAML pack files."""

import logging
import random
from pathlib import Path
from typing import Optional, Protocol

import yaml

from hoardgen.core.config import settings
from hoardgen.tables.models import (
    ItemDefinition,
    RollTable,
    TableEntry,
    TableHandle,
    TablePack,
    TableRef,
    TableResult,
)

logger = logging.getLogger(__name__)


class TableSource(Protocol):
    """Where roll tables live. Every call may suspend."""

    async def resolve_pack(self, pack_id: str) -> Optional[TablePack]:
        ...

    async def load_table(self, ref: TableRef) -> Optional[RollTable]:
        ...

    async def draw(self, handle: TableHandle, silent: bool = True) -> list[TableEntry]:
        ...

    async def resolve_by_uuid(self, uuid: str) -> Optional[ItemDefinition]:
        ...


def weighted_pick(results: list[TableResult], rng: random.Random) -> TableResult:
    """Pick one result, each with probability weight / total weight."""
    total = sum(r.weight for r in results)
    roll = rng.randint(1, max(1, total))
    acc = 0
    for r in results:
        acc += r.weight
        if roll <= acc:
            return r
    return results[-1]


class YamlTableSource:
    """Table source reading every ``*.yaml`` pack file from a directory.

    A pack file looks like::

        id: ose-generators
        label: OSE Generators
        tables:
          - name: Gem Value
            results:
              - {text: "Semi-precious stone [10gp]", weight: 4}
          - name: Gem Appearance
            draw: [Gem Shape, Gem Size, Gem Finish]
        items:
          - {id: ruby, name: Ruby, cost: 500}

    Packs are loaded on first use and never modified afterwards, so concurrent
    draws share them safely.
    """

    def __init__(
        self,
        packs_dir: Optional[Path] = None,
        rng: Optional[random.Random] = None,
        packs: Optional[list[TablePack]] = None,
    ):
        self.packs_dir = packs_dir or settings.packs_dir
        self.rng = rng or random.Random()
        self._packs: Optional[dict[str, TablePack]] = None
        if packs is not None:
            self._packs = {pack.id: pack for pack in packs}

    @property
    def packs(self) -> dict[str, TablePack]:
        if self._packs is None:
            self._packs = self._load_directory(self.packs_dir)
        return self._packs

    def _load_directory(self, directory: Path) -> dict[str, TablePack]:
        """Load all pack files from a directory."""
        packs: dict[str, TablePack] = {}

        if not directory.exists():
            logger.warning(f"Packs directory {directory} does not exist")
            return packs

        for yaml_file in sorted(directory.glob("*.yaml")):
            pack = self._load_file(yaml_file)
            if pack:
                packs[pack.id] = pack
                logger.debug(f"Loaded pack {pack.id} ({len(pack.tables)} tables) from {yaml_file.name}")

        return packs

    def _load_file(self, filepath: Path) -> Optional[TablePack]:
        """Load a single YAML pack file."""
        with open(filepath, "r", encoding="utf-8") as f:
            data = yaml.safe_load(f)

        if not data:
            return None

        data.setdefault("id", filepath.stem)
        return TablePack.model_validate(data)

    async def resolve_pack(self, pack_id: str) -> Optional[TablePack]:
        return self.packs.get(pack_id)

    async def load_table(self, ref: TableRef) -> Optional[RollTable]:
        pack = self.packs.get(ref.pack_id)
        if pack is None:
            return None
        return pack.get_table(ref)

    async def draw(self, handle: TableHandle, silent: bool = True) -> list[TableEntry]:
        """Draw once from a table.

        Compound tables draw once from each listed table, in order, and return
        every entry produced.
        """
        entries = self._draw_table(handle.pack_id, handle.table)

        if not silent:
            logger.info(f"Drew from {handle.name}: {[e.text for e in entries]}")
        return entries

    def _draw_table(self, pack_id: str, table: RollTable) -> list[TableEntry]:
        if table.is_compound:
            pack = self.packs[pack_id]
            entries: list[TableEntry] = []
            for name in table.draw:
                sub_table = pack.get_table(TableRef(pack_id=pack_id, name=name))
                entries.extend(self._draw_table(pack_id, sub_table))
            return entries

        if not table.results:
            return []

        picked = weighted_pick(table.results, self.rng)
        return [TableEntry.model_validate(picked.model_dump(exclude={"weight"}))]

    async def resolve_by_uuid(self, uuid: str) -> Optional[ItemDefinition]:
        pack_id, _, item_id = uuid.rpartition(".")
        pack = self.packs.get(pack_id)
        if pack is None:
            return None
        return pack.get_item(item_id)
