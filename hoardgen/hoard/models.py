"""Pydantic models for the treasure hoard system."""

from enum import Enum
from typing import Optional

from pydantic import BaseModel, ConfigDict, Field


class HoardCategory(str, Enum):
    """Item categories a hoard configuration may ask for."""

    GEMS = "gems"
    JEWELLERY = "jewellery"


class ItemType(str, Enum):
    """Kind of item document created in the hoard."""

    ITEM = "item"


class ItemRecord(BaseModel):
    """A generated treasure item."""

    model_config = ConfigDict(frozen=True)

    name: str
    item_type: ItemType = ItemType.ITEM
    icon_path: str
    description: str = ""
    cost: int = Field(ge=0)  # gold pieces
    is_treasure: bool = True


class HoardContainer(BaseModel):
    """The container record a hoard's items are stored in."""

    container_id: str
    name: str
    kind: str = "character"
    icon_path: str
    items: list[ItemRecord] = Field(default_factory=list)


class HoardResult(BaseModel):
    """A generated hoard: its name and items, in generation order."""

    name: str
    items: list[ItemRecord] = Field(default_factory=list)

    # Set once the store created the container
    container_id: Optional[str] = None

    @property
    def total_value(self) -> int:
        return sum(item.cost for item in self.items)


class HoardGenerateRequest(BaseModel):
    """Request to generate a treasure hoard.

    ``configuration`` maps a category ("gems", "jewellery") to the roll
    formula for its quantity, e.g. ``{"gems": "3d6", "jewellery": "1d4+5"}``.
    """

    name: str = Field(min_length=1)
    configuration: dict[str, str] = Field(min_length=1)


class HoardGenerateResponse(BaseModel):
    """Generated hoard as returned by the API."""

    container_id: Optional[str] = None
    name: str
    items: list[ItemRecord] = Field(default_factory=list)
    item_count: int = 0
    total_value: int = 0


class RollRequest(BaseModel):
    """Request to evaluate a roll formula."""

    formula: str
