"""Shared fixtures for wardrobe tests."""

from __future__ import annotations

import random
import sys
from pathlib import Path
from typing import List

import pytest

sys.path.append(str(Path(__file__).resolve().parents[1]))

from models.clothing_item import ItemCandidate
from models.wardrobe import Wardrobe


def leaf_item_ids(wardrobe: Wardrobe) -> List[int]:
    """Concatenate the ids held by every leaf of the category tree."""

    return [
        item.id
        for root in wardrobe.root_categories
        for leaf in root.subcategories
        for item in leaf.items
    ]


@pytest.fixture()
def wardrobe() -> Wardrobe:
    return Wardrobe(rng=random.Random(7))


@pytest.fixture()
def populated_wardrobe(wardrobe: Wardrobe) -> Wardrobe:
    for candidate in (
        ItemCandidate(name="Tee", item_type="top", color="blue", style="casual"),
        ItemCandidate(name="Jeans", item_type="bottom", color="blue", style="casual"),
        ItemCandidate(name="Sneakers", item_type="shoes", color="white", style="casual"),
        ItemCandidate(name="Oxford shirt", item_type="top", color="white", style="formal"),
        ItemCandidate(name="Chinos", item_type="bottom", color="beige", style="formal"),
        ItemCandidate(name="Loafers", item_type="shoes", color="brown", style="formal"),
        ItemCandidate(name="Hoodie", item_type="top", color="grey", style="casual"),
    ):
        wardrobe.add_item(candidate)
    return wardrobe
