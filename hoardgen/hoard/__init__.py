"""Treasure hoard generation."""

from hoardgen.hoard.models import (
    HoardCategory,
    HoardContainer,
    HoardGenerateRequest,
    HoardGenerateResponse,
    HoardResult,
    ItemRecord,
    ItemType,
)
from hoardgen.hoard.value import apply_variance
from hoardgen.hoard.gems import GemGenerator
from hoardgen.hoard.jewellery import JewelleryGenerator
from hoardgen.hoard.store import (
    HoardStore,
    InMemoryHoardStore,
    LoggingNotifier,
    Notifier,
)
from hoardgen.hoard.assembler import (
    HoardAssembler,
    create_assembler,
    generate_treasure_hoard,
    get_assembler,
)

__all__ = [
    # Models
    "HoardCategory",
    "HoardContainer",
    "HoardGenerateRequest",
    "HoardGenerateResponse",
    "HoardResult",
    "ItemRecord",
    "ItemType",
    # Generators
    "apply_variance",
    "GemGenerator",
    "JewelleryGenerator",
    # Collaborators
    "HoardStore",
    "InMemoryHoardStore",
    "LoggingNotifier",
    "Notifier",
    # Assembly
    "HoardAssembler",
    "create_assembler",
    "generate_treasure_hoard",
    "get_assembler",
]
