"""Wardrobe Manager app bootstrap."""

from __future__ import annotations

import logging
import random
from pathlib import Path
from typing import Any, Dict, List

from logic.validation import AddItemInput
from models.clothing_item import ClothingItem, ItemCandidate, Outfit
from models.wardrobe import LoadResult, LoadStatus, Wardrobe
from tools.observability import instrument_operation
from wardrobe_app.config import WardrobeConfig
from wardrobe_app.logging_config import configure_logging, get_logger, log_event

LOGGER = get_logger(__name__)


class WardrobeManagerApp:
    """Wires configuration, logging and a wardrobe together for the shell and API."""

    def __init__(self, config: WardrobeConfig | None = None, wardrobe: Wardrobe | None = None) -> None:
        self.config = config or WardrobeConfig.from_env()
        configure_logging(self.config.log_level)
        if wardrobe is None:
            wardrobe = Wardrobe(rng=random.Random(self.config.random_seed))
        self.wardrobe = wardrobe

    @property
    def wardrobe_path(self) -> Path:
        return Path(self.config.wardrobe_path)

    @instrument_operation("add_item")
    def add_item(self, candidate: ItemCandidate) -> int:
        item_id = self.wardrobe.add_item(candidate)
        log_event(LOGGER, logging.INFO, "item_added", item_id=item_id, item_type=candidate.item_type)
        return item_id

    def add_item_from_input(self, payload: Dict[str, Any]) -> int:
        """Validate raw collaborator input and add the resulting item.

        Raises :class:`pydantic.ValidationError` for invalid payloads.
        """

        validated = AddItemInput.model_validate(payload)
        return self.add_item(
            ItemCandidate(
                name=validated.name,
                item_type=validated.item_type,
                color=validated.color,
                style=validated.style,
            )
        )

    @instrument_operation("remove_item")
    def remove_item(self, item_id: int) -> int:
        removed = self.wardrobe.remove_item(item_id)
        log_event(LOGGER, logging.INFO, "item_removed", item_id=removed)
        return removed

    def list_items(self) -> List[ClothingItem]:
        return self.wardrobe.list_items()

    def items_in_category(self, name: str) -> List[ClothingItem]:
        return self.wardrobe.get_items_in_category(name)

    def suggest_outfit(self, style: str) -> Outfit:
        outfit = self.wardrobe.get_random_outfit_by_style(style)
        log_event(
            LOGGER,
            logging.DEBUG,
            "outfit_suggested",
            style=style,
            slots={slot: item.id if item else None for slot, item in outfit.slots().items()},
        )
        return outfit

    @instrument_operation("save")
    def save(self, path: str | Path | None = None) -> Path:
        target = Path(path) if path else self.wardrobe_path
        self.wardrobe.save_to_file(target)
        log_event(LOGGER, logging.INFO, "wardrobe_saved", path=str(target), item_count=len(self.wardrobe))
        return target

    @instrument_operation("load")
    def load(self, path: str | Path | None = None) -> LoadResult:
        source = Path(path) if path else self.wardrobe_path
        result = self.wardrobe.load_from_file(source)
        if result.status is LoadStatus.MISSING:
            log_event(LOGGER, logging.INFO, "wardrobe_file_missing", path=result.path)
            return result

        log_event(
            LOGGER,
            logging.INFO,
            "wardrobe_loaded",
            path=result.path,
            item_count=result.item_count,
            next_id=self.wardrobe.next_id,
        )
        if result.unindexed_ids:
            log_event(
                LOGGER,
                logging.WARNING,
                "wardrobe_items_unindexed",
                path=result.path,
                item_ids=result.unindexed_ids,
            )
        return result


__all__ = ["WardrobeManagerApp"]
