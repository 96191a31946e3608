"""In-memory wardrobe: a flat item list with a derived category tree."""

from __future__ import annotations

import random
from dataclasses import dataclass, field
from enum import Enum
from pathlib import Path
from typing import List, Optional, Sequence

from logic.outfit_builder import build_random_outfit
from logic.validation import ItemRecord, WardrobeSnapshot
from models.clothing_item import ClothingItem, ItemCandidate, Outfit
from models.errors import DuplicateItemError, ItemNotFoundError
from models.taxonomy import CategoryNode, build_category_tree
from tools.wardrobe_store import JSONWardrobeStore, WardrobeStore

DEFAULT_NEXT_ID = 1


class LoadStatus(str, Enum):
    LOADED = "loaded"
    MISSING = "missing"


@dataclass(frozen=True)
class LoadResult:
    """Outcome of :meth:`Wardrobe.load_from_file`."""

    status: LoadStatus
    path: str
    item_count: int = 0
    unindexed_ids: List[int] = field(default_factory=list)


class Wardrobe:
    """Owns the items of a single user's wardrobe.

    The flat list is authoritative and keeps insertion order. The category tree
    (style, then item type) holds references to the same item objects and is
    updated in lockstep with every add and remove. It is never persisted and is
    rebuilt from the flat list on load.
    """

    def __init__(self, rng: random.Random | None = None, store: WardrobeStore | None = None) -> None:
        self._items: List[ClothingItem] = []
        self.next_id = DEFAULT_NEXT_ID
        self.root_categories: List[CategoryNode] = build_category_tree()
        self.rng = rng or random.Random()
        self.store = store or JSONWardrobeStore()

    def __len__(self) -> int:
        return len(self._items)

    # Item lifecycle

    def add_item(self, candidate: ItemCandidate) -> int:
        """Assign the next id to ``candidate``, store it and return the id.

        The id counter advances even when the duplicate check fails, so a
        corrupted counter recovers on a later call.
        """

        item = ClothingItem.from_candidate(self.next_id, candidate)
        self.next_id += 1
        if any(existing.id == item.id for existing in self._items):
            raise DuplicateItemError(item.id)

        self._items.append(item)
        node = self.find_category_node(item.style, item.item_type)
        if node is not None:
            node.items.append(item)
        return item.id

    def remove_item(self, item_id: int) -> int:
        index = self._index_of(item_id)
        if index is None:
            raise ItemNotFoundError(item_id)

        removed = self._items.pop(index)
        node = self.find_category_node(removed.style, removed.item_type)
        if node is not None:
            for position, item in enumerate(node.items):
                if item.id == removed.id:
                    del node.items[position]
                    break
        return removed.id

    def list_items(self) -> List[ClothingItem]:
        """Return a copy of the flat list in insertion order."""

        return list(self._items)

    def _index_of(self, item_id: int) -> Optional[int]:
        for index, item in enumerate(self._items):
            if item.id == item_id:
                return index
        return None

    # Category tree

    def find_category_node(self, style: str, item_type: str) -> Optional[CategoryNode]:
        """Return the leaf for ``(style, item_type)`` or ``None``."""

        style_node = next((node for node in self.root_categories if node.name == style), None)
        if style_node is None:
            return None
        return next((node for node in style_node.subcategories if node.name == item_type), None)

    def find_category_by_name(
        self, name: str, nodes: Sequence[CategoryNode] | None = None
    ) -> Optional[CategoryNode]:
        """Depth-first, left-to-right search; the first node named ``name`` wins."""

        for node in self.root_categories if nodes is None else nodes:
            if node.name == name:
                return node
            found = self.find_category_by_name(name, node.subcategories)
            if found is not None:
                return found
        return None

    @staticmethod
    def collect_items_recursive(node: CategoryNode) -> List[ClothingItem]:
        results = list(node.items)
        for child in node.subcategories:
            results.extend(Wardrobe.collect_items_recursive(child))
        return results

    def get_items_in_category(self, name: str) -> List[ClothingItem]:
        node = self.find_category_by_name(name)
        if node is None:
            return []
        return self.collect_items_recursive(node)

    def _rebuild_index(self) -> List[int]:
        """Rebuild the tree from the flat list; return ids that have no leaf."""

        self.root_categories = build_category_tree()
        unindexed = []
        for item in self._items:
            node = self.find_category_node(item.style, item.item_type)
            if node is None:
                unindexed.append(item.id)
                continue
            node.items.append(item)
        return unindexed

    # Outfits

    def get_random_outfit_by_style(self, style: str) -> Outfit:
        return build_random_outfit(self._items, style, self.rng)

    # Persistence

    def to_snapshot(self) -> WardrobeSnapshot:
        return WardrobeSnapshot(
            next_id=self.next_id,
            items=[
                ItemRecord(
                    id=item.id,
                    name=item.name,
                    item_type=item.item_type,
                    color=item.color,
                    style=item.style,
                )
                for item in self._items
            ],
        )

    def save_to_file(self, path: str | Path) -> None:
        """Write ``nextId`` and the flat list to ``path``, replacing any existing file."""

        self.store.write(path, self.to_snapshot())

    def load_from_file(self, path: str | Path) -> LoadResult:
        """Replace the wardrobe with the snapshot at ``path``.

        A missing file resets to an empty wardrobe and reports
        :attr:`LoadStatus.MISSING`. Unreadable or malformed files raise
        :class:`~models.errors.WardrobeFileError` before any state changes.
        """

        snapshot = self.store.read(path)
        if snapshot is None:
            self.reset()
            return LoadResult(status=LoadStatus.MISSING, path=str(path))

        items = [
            ClothingItem(
                id=record.id,
                name=record.name,
                item_type=record.item_type,  # type: ignore[arg-type]
                color=record.color,
                style=record.style,  # type: ignore[arg-type]
            )
            for record in snapshot.items
        ]
        self.next_id = snapshot.next_id
        self._items = items
        unindexed = self._rebuild_index()
        return LoadResult(
            status=LoadStatus.LOADED,
            path=str(path),
            item_count=len(items),
            unindexed_ids=unindexed,
        )

    def reset(self) -> None:
        self._items = []
        self.next_id = DEFAULT_NEXT_ID
        self.root_categories = build_category_tree()


__all__ = ["DEFAULT_NEXT_ID", "LoadResult", "LoadStatus", "Wardrobe"]
