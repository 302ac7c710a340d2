"""Treasure hoard assembly: quantities, generators, container creation."""

import asyncio
import logging
import random
from collections.abc import Awaitable
from pathlib import Path
from typing import Optional

from hoardgen.core.config import settings
from hoardgen.core.errors import HoardError, InvalidFormula, UnsupportedItemType
from hoardgen.dice.roller import DiceRoller
from hoardgen.hoard.gems import GemGenerator
from hoardgen.hoard.jewellery import JewelleryGenerator
from hoardgen.hoard.models import HoardCategory, HoardResult, ItemRecord
from hoardgen.hoard.store import (
    HoardStore,
    InMemoryHoardStore,
    LoggingNotifier,
    Notifier,
)
from hoardgen.tables.lookup import TableLookup
from hoardgen.tables.source import YamlTableSource

logger = logging.getLogger(__name__)

# Jewellery quantity is always rolled on 2d10, whatever the configuration says
JEWELLERY_QUANTITY_FORMULA = "2d10"


class HoardAssembler:
    """Builds treasure hoards from a category -> quantity formula mapping.

    Example configuration::

        {"gems": "3d6", "jewellery": "1d4+5"}
    """

    def __init__(
        self,
        lookup: TableLookup,
        store: HoardStore,
        notifier: Notifier,
        roller: Optional[DiceRoller] = None,
        pack_id: Optional[str] = None,
        container_kind: Optional[str] = None,
        container_icon: Optional[str] = None,
    ):
        self.lookup = lookup
        self.store = store
        self.notifier = notifier
        self.roller = roller or DiceRoller()
        self.container_kind = container_kind or settings.hoard_container_kind
        self.container_icon = container_icon or settings.hoard_container_icon

        self.gems = GemGenerator(lookup, self.roller, pack_id=pack_id)
        self.jewellery = JewelleryGenerator(lookup, self.roller, pack_id=pack_id)

    def _quantity(self, category: HoardCategory, formula: str) -> int:
        if category == HoardCategory.JEWELLERY:
            return self.roller.evaluate(JEWELLERY_QUANTITY_FORMULA)
        return self.roller.evaluate(formula)

    def _plan(self, configuration: dict[str, str]) -> list[tuple[HoardCategory, int]]:
        """Validate the configuration and roll each category's quantity.

        Raises:
            HoardError: If the configuration is empty.
            UnsupportedItemType: On an unknown category.
            InvalidFormula: On a formula that does not validate or rolls below zero.
        """
        if not configuration:
            raise HoardError("The Treasure hoard generator needs at least one item type.")

        plan = []
        for key, formula in configuration.items():
            try:
                category = HoardCategory(key)
            except ValueError:
                raise UnsupportedItemType(key) from None

            if not self.roller.validate(formula):
                raise InvalidFormula(formula)

            quantity = self._quantity(category, formula)
            if quantity < 0:
                raise InvalidFormula(
                    formula,
                    f'"{formula}" rolled a negative item quantity ({quantity}) '
                    f"in the Treasure hoard generator.",
                )
            plan.append((category, quantity))
        return plan

    def _generate(self, category: HoardCategory, quantity: int) -> Awaitable[list[ItemRecord]]:
        if category == HoardCategory.GEMS:
            return self.gems.generate(quantity)
        return self.jewellery.generate(quantity)

    async def build_hoard(self, name: str, configuration: dict[str, str]) -> HoardResult:
        """Generate every configured category and store the hoard.

        Categories are generated concurrently. The first failure aborts the
        hoard and nothing is stored.

        Args:
            name: Name of the hoard container.
            configuration: Category to quantity roll formula.

        Returns:
            HoardResult with the items in configuration order.

        Raises:
            HoardError: On any generation failure.
        """
        plan = self._plan(configuration)
        logger.debug(f"Hoard {name!r} plan: {[(c.value, q) for c, q in plan]}")

        results = await asyncio.gather(
            *[self._generate(category, quantity) for category, quantity in plan]
        )
        items = [item for category_items in results for item in category_items]

        container = await self.store.create_container(
            name=name,
            kind=self.container_kind,
            icon_path=self.container_icon,
        )
        await self.store.add_items(container, items)

        return HoardResult(name=name, items=items, container_id=container.container_id)

    async def build_and_notify(self, name: str, configuration: dict[str, str]) -> HoardResult:
        """Build a hoard, notify the user of the outcome and re-raise failures."""
        try:
            hoard = await self.build_hoard(name, configuration)
        except HoardError as e:
            self.notifier.notify_error(e.message)
            raise
        except Exception as e:
            logger.exception(f"Unexpected error generating hoard {name!r}")
            self.notifier.notify_error(str(e))
            raise

        self.notifier.notify_success(f'Treasure hoard created for "{name}"')
        return hoard

    async def generate_hoard(self, name: str, configuration: dict[str, str]) -> Optional[HoardResult]:
        """Build a hoard and notify the user of the outcome.

        Returns:
            The HoardResult, or None when generation failed.
        """
        try:
            return await self.build_and_notify(name, configuration)
        except Exception:
            return None


def create_assembler(
    packs_dir: Optional[Path] = None,
    seed: Optional[int] = None,
    store: Optional[HoardStore] = None,
    notifier: Optional[Notifier] = None,
) -> HoardAssembler:
    """Wire an assembler to the YAML packs, an in-memory store and log notifications.

    Args:
        packs_dir: Directory of pack files. Defaults to ``settings.packs_dir``.
        seed: Seed for reproducible hoards.
        store: Hoard store. A new InMemoryHoardStore if None.
        notifier: Notifier. A new LoggingNotifier if None.
    """
    rng = random.Random(seed)
    source = YamlTableSource(packs_dir=packs_dir, rng=rng)
    return HoardAssembler(
        lookup=TableLookup(source),
        store=store or InMemoryHoardStore(),
        notifier=notifier or LoggingNotifier(),
        roller=DiceRoller(rng),
    )


_assembler: Optional[HoardAssembler] = None


def get_assembler() -> HoardAssembler:
    global _assembler
    if _assembler is None:
        _assembler = create_assembler()
    return _assembler


async def generate_treasure_hoard(
    hoard_name: str,
    hoard_configuration: dict[str, str],
    assembler: Optional[HoardAssembler] = None,
) -> Optional[HoardResult]:
    """Generate a treasure hoard and notify the outcome.

    Args:
        hoard_name: Name of the hoard container.
        hoard_configuration: Category to quantity formula, e.g. {"gems": "3d6"}.
        assembler: Assembler to use. The shared default if None.
    """
    return await (assembler or get_assembler()).generate_hoard(hoard_name, hoard_configuration)
