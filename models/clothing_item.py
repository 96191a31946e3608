"""Clothing item value objects."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Dict, Optional

from models.taxonomy import ItemType, Style


@dataclass(frozen=True)
class ItemCandidate:
    """Caller-supplied fields for a new item; the wardrobe assigns the id."""

    name: str
    item_type: ItemType
    color: str
    style: Style


@dataclass(frozen=True)
class ClothingItem:
    """Represents an item in the user's wardrobe. Never mutated once created."""

    id: int
    name: str
    item_type: ItemType
    color: str
    style: Style

    @classmethod
    def from_candidate(cls, item_id: int, candidate: ItemCandidate) -> "ClothingItem":
        return cls(
            id=item_id,
            name=candidate.name,
            item_type=candidate.item_type,
            color=candidate.color,
            style=candidate.style,
        )

    def to_record(self) -> Dict[str, Any]:
        """Return the camelCase record used by the snapshot file and the API."""

        return {
            "id": self.id,
            "name": self.name,
            "itemType": self.item_type,
            "color": self.color,
            "style": self.style,
        }


@dataclass(frozen=True)
class Outfit:
    """One optional item per outfit slot."""

    top: Optional[ClothingItem] = None
    bottom: Optional[ClothingItem] = None
    shoes: Optional[ClothingItem] = None

    def slots(self) -> Dict[str, Optional[ClothingItem]]:
        return {"top": self.top, "bottom": self.bottom, "shoes": self.shoes}

    @property
    def is_empty(self) -> bool:
        return all(item is None for item in self.slots().values())


__all__ = ["ItemCandidate", "ClothingItem", "Outfit"]
