"""Model package exports."""

from models.taxonomy import *  # noqa: F401,F403
from models.clothing_item import ClothingItem, ItemCandidate, Outfit
from models.errors import DuplicateItemError, ItemNotFoundError, WardrobeError, WardrobeFileError

__all__ = [
    "ClothingItem",
    "ItemCandidate",
    "Outfit",
    "WardrobeError",
    "DuplicateItemError",
    "ItemNotFoundError",
    "WardrobeFileError",
]
