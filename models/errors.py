"""Exceptions raised by the wardrobe core."""


class WardrobeError(Exception):
    """Base class for wardrobe failures."""


class DuplicateItemError(WardrobeError):
    """Raised when an item id already exists in the wardrobe."""

    def __init__(self, item_id: int) -> None:
        super().__init__(f"Item with id {item_id} already exists.")
        self.item_id = item_id


class ItemNotFoundError(WardrobeError):
    """Raised when no item with the given id exists in the wardrobe."""

    def __init__(self, item_id: int) -> None:
        super().__init__(f"Item with id {item_id} not found.")
        self.item_id = item_id


class WardrobeFileError(WardrobeError):
    """Raised when a snapshot file cannot be read, parsed or written."""

    def __init__(self, path: str, reason: str) -> None:
        super().__init__(f"Wardrobe file '{path}': {reason}")
        self.path = path
        self.reason = reason


__all__ = ["WardrobeError", "DuplicateItemError", "ItemNotFoundError", "WardrobeFileError"]
