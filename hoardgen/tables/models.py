"""Pydantic models for weighted roll tables and table packs."""

from typing import Optional

from pydantic import BaseModel, Field, model_validator


class TableEntry(BaseModel):
    """One row produced by a table draw."""

    text: str
    icon: Optional[str] = None

    # Reference to a richer item definition, resolvable as "collection.result_id"
    collection: Optional[str] = None
    result_id: Optional[str] = None

    @property
    def uuid(self) -> Optional[str]:
        """Item reference of the entry, if it has one."""
        if not self.collection or not self.result_id:
            return None
        return f"{self.collection}.{self.result_id}"


class TableResult(TableEntry):
    """A weighted row of a roll table."""

    weight: int = Field(ge=1, default=1)


class RollTable(BaseModel):
    """A named roll table.

    A table either holds weighted ``results`` or lists other tables of the same
    pack in ``draw``; the latter yields one entry per listed table.
    """

    name: str
    description: Optional[str] = None
    results: list[TableResult] = Field(default_factory=list)
    draw: list[str] = Field(default_factory=list)

    @property
    def is_compound(self) -> bool:
        return bool(self.draw)


class ItemDefinition(BaseModel):
    """An item a table entry can point to."""

    id: str
    name: str
    description: str = ""
    icon: Optional[str] = None
    cost: int = Field(ge=0, default=0)


class TableRef(BaseModel):
    """Index entry of a table inside a pack."""

    pack_id: str
    name: str


class TablePack(BaseModel):
    """A collection of roll tables and items loaded from one pack file."""

    id: str
    label: str = ""
    tables: list[RollTable] = Field(default_factory=list)
    items: list[ItemDefinition] = Field(default_factory=list)

    @model_validator(mode="after")
    def check_compound_tables(self) -> "TablePack":
        """Compound tables must point at existing tables and never at themselves."""
        by_name = {table.name: table for table in self.tables}

        def visit(name: str, path: tuple[str, ...]) -> None:
            if name in path:
                raise ValueError(f"Table {name!r} draws from itself via {' -> '.join(path)}")
            table = by_name.get(name)
            if table is None:
                raise ValueError(f"Table {path[-1]!r} draws from unknown table {name!r}")
            for sub_name in table.draw:
                visit(sub_name, path + (name,))

        for table in self.tables:
            for sub_name in table.draw:
                visit(sub_name, (table.name,))
        return self

    def find_table_by_name(self, name: str) -> Optional[TableRef]:
        """Look up a table in the pack index by its exact name."""
        for table in self.tables:
            if table.name == name:
                return TableRef(pack_id=self.id, name=table.name)
        return None

    def get_table(self, ref: TableRef) -> Optional[RollTable]:
        for table in self.tables:
            if table.name == ref.name:
                return table
        return None

    def get_item(self, item_id: str) -> Optional[ItemDefinition]:
        for item in self.items:
            if item.id == item_id:
                return item
        return None


class TableHandle(BaseModel):
    """A resolved table ready to be drawn from."""

    pack_id: str
    table: RollTable

    @property
    def name(self) -> str:
        return self.table.name
