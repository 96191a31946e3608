"""Random outfit assembly from wardrobe items."""
from __future__ import annotations

import random
from typing import Iterable, List, Optional, Sequence, TypeVar

from models.clothing_item import ClothingItem, Outfit

T = TypeVar("T")

OUTFIT_SLOTS = ("top", "bottom", "shoes")


def pick_random(candidates: Sequence[T], rng: random.Random) -> Optional[T]:
    """Return one uniformly chosen element, or ``None`` for an empty sequence."""

    if not candidates:
        return None
    return rng.choice(candidates)


def candidates_for_slot(items: Iterable[ClothingItem], style: str, item_type: str) -> List[ClothingItem]:
    return [item for item in items if item.style == style and item.item_type == item_type]


def build_random_outfit(items: Sequence[ClothingItem], style: str, rng: random.Random) -> Outfit:
    """Draw one item per slot independently from the items matching ``style``."""

    picks = {slot: pick_random(candidates_for_slot(items, style, slot), rng) for slot in OUTFIT_SLOTS}
    return Outfit(**picks)


__all__ = ["OUTFIT_SLOTS", "pick_random", "candidates_for_slot", "build_random_outfit"]
