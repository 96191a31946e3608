"""Canonical taxonomy for wardrobe items and the category tree built from it.

Styles form the first level of the category tree and item types the second.
The tree shape is fixed once built: only the items held by leaf nodes change.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import List, Literal, Sequence, TYPE_CHECKING

if TYPE_CHECKING:
    from models.clothing_item import ClothingItem

ItemType = Literal["top", "bottom", "shoes"]
Style = Literal["casual", "formal"]

STYLES: tuple[str, ...] = ("casual", "formal")
ITEM_TYPES: tuple[str, ...] = ("top", "bottom", "shoes")


def _normalize_key(value: str) -> str:
    """Normalise a free-form string into a taxonomy key."""

    return value.strip().lower().replace(" ", "_")


@dataclass(eq=False)
class CategoryNode:
    """One level of the category tree.

    ``items`` holds references to items owned by the wardrobe's flat list.
    """

    name: str
    items: List["ClothingItem"] = field(default_factory=list)
    subcategories: List["CategoryNode"] = field(default_factory=list)

    @property
    def is_leaf(self) -> bool:
        return not self.subcategories


def build_category_tree(
    styles: Sequence[str] = STYLES, item_types: Sequence[str] = ITEM_TYPES
) -> List[CategoryNode]:
    """Return fresh root nodes, one per style, each with one child per item type."""

    return [
        CategoryNode(name=style, subcategories=[CategoryNode(name=item_type) for item_type in item_types])
        for style in styles
    ]


def validate_style(value: str) -> str:
    """Validate and normalise a style value.

    Raises a :class:`ValueError` if the style is not part of the taxonomy.
    """

    key = _normalize_key(value)
    if key not in STYLES:
        raise ValueError(f"Unsupported style '{value}'. Allowed: {list(STYLES)}")
    return key


__all__ = [
    "ItemType",
    "Style",
    "STYLES",
    "ITEM_TYPES",
    "CategoryNode",
    "build_category_tree",
    "validate_style",
]
