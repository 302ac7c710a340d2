"""Roll tables, packs and weighted draws."""

from hoardgen.tables.lookup import TableLookup
from hoardgen.tables.models import (
    ItemDefinition,
    RollTable,
    TableEntry,
    TableHandle,
    TablePack,
    TableRef,
    TableResult,
)
from hoardgen.tables.source import TableSource, YamlTableSource, weighted_pick

__all__ = [
    # Models
    "ItemDefinition",
    "RollTable",
    "TableEntry",
    "TableHandle",
    "TablePack",
    "TableRef",
    "TableResult",
    # Sources
    "TableSource",
    "YamlTableSource",
    "weighted_pick",
    # Lookup
    "TableLookup",
]
