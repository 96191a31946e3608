"""Pydantic schemas for wardrobe snapshots and collaborator input."""

from __future__ import annotations

from typing import Any, List, Literal

from pydantic import BaseModel, ConfigDict, Field, field_validator, model_validator


class ItemRecord(BaseModel):
    """One persisted item.

    ``item_type`` and ``style`` stay free strings here: a snapshot may carry
    values the category tree does not know, and those items are kept but left
    unindexed on load.
    """

    model_config = ConfigDict(populate_by_name=True)

    id: int = Field(gt=0)
    name: str
    item_type: str = Field(alias="itemType")
    color: str
    style: str


class WardrobeSnapshot(BaseModel):
    """On-disk layout of a wardrobe: the id counter and the flat item list."""

    model_config = ConfigDict(populate_by_name=True)

    next_id: int = Field(alias="nextId", ge=1)
    items: List[ItemRecord]

    @model_validator(mode="after")
    def _unique_ids(self) -> "WardrobeSnapshot":
        seen = set()
        for record in self.items:
            if record.id in seen:
                raise ValueError(f"duplicate item id {record.id}")
            seen.add(record.id)
        return self

    def to_json(self) -> str:
        return self.model_dump_json(by_alias=True, indent=2)


class AddItemInput(BaseModel):
    """Input contract for adding an item from the shell or the API."""

    model_config = ConfigDict(populate_by_name=True)

    name: str = Field(min_length=1)
    item_type: Literal["top", "bottom", "shoes"] = Field(alias="itemType")
    color: str
    style: Literal["casual", "formal"]

    @field_validator("name", "color", mode="before")
    @classmethod
    def _strip(cls, value: Any) -> Any:
        return value.strip() if isinstance(value, str) else value

    @field_validator("item_type", "style", mode="before")
    @classmethod
    def _lower(cls, value: Any) -> Any:
        return value.strip().lower() if isinstance(value, str) else value


__all__ = [
    "ItemRecord",
    "WardrobeSnapshot",
    "AddItemInput",
]
