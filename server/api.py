"""FastAPI server exposing wardrobe operations as JSON endpoints."""

from typing import Dict, List, Optional

from fastapi import FastAPI, HTTPException

from logic.validation import AddItemInput
from models.clothing_item import ClothingItem, ItemCandidate
from models.errors import DuplicateItemError, ItemNotFoundError, WardrobeFileError
from models.taxonomy import validate_style
from wardrobe_app.app import WardrobeManagerApp
from wardrobe_app.logging_config import operation_context


def _record(item: Optional[ClothingItem]) -> Optional[dict]:
    return item.to_record() if item else None


def _records(items: List[ClothingItem]) -> List[dict]:
    return [item.to_record() for item in items]


def create_app(manager: WardrobeManagerApp | None = None) -> FastAPI:
    """Build a FastAPI app around one shared wardrobe.

    Handlers are coroutines so requests are served one at a time on the event
    loop and never mutate the wardrobe concurrently. Save and load read or
    write the whole snapshot file synchronously and block the loop while they
    run; the file holds a single user's wardrobe and stays small.
    """

    wardrobe_manager = manager if manager is not None else WardrobeManagerApp()
    api = FastAPI(title="Wardrobe Manager", version="0.1.0")
    api.state.wardrobe_manager = wardrobe_manager

    @api.get("/healthz")
    async def healthcheck() -> dict:
        """Lightweight readiness probe."""

        return {
            "status": "ok",
            "service": "wardrobe-manager",
            "environment": wardrobe_manager.config.environment or "local",
            "item_count": len(wardrobe_manager.wardrobe),
        }

    @api.get("/items")
    async def list_items() -> Dict[str, list]:
        return {"items": _records(wardrobe_manager.list_items())}

    @api.post("/items", status_code=201)
    async def add_item(payload: AddItemInput) -> dict:
        candidate = ItemCandidate(
            name=payload.name,
            item_type=payload.item_type,
            color=payload.color,
            style=payload.style,
        )
        with operation_context("api:add_item"):
            try:
                item_id = wardrobe_manager.add_item(candidate)
            except DuplicateItemError as exc:
                raise HTTPException(status_code=409, detail=str(exc)) from exc
        return {"id": item_id}

    @api.delete("/items/{item_id}")
    async def remove_item(item_id: int) -> dict:
        with operation_context("api:remove_item"):
            try:
                removed = wardrobe_manager.remove_item(item_id)
            except ItemNotFoundError as exc:
                raise HTTPException(status_code=404, detail=str(exc)) from exc
        return {"id": removed}

    @api.get("/categories/{name}/items")
    async def category_items(name: str) -> Dict[str, object]:
        return {"category": name, "items": _records(wardrobe_manager.items_in_category(name))}

    @api.get("/outfits/{style}")
    async def random_outfit(style: str) -> Dict[str, object]:
        try:
            style_key = validate_style(style)
        except ValueError as exc:
            raise HTTPException(status_code=422, detail=str(exc)) from exc
        outfit = wardrobe_manager.suggest_outfit(style_key)
        return {"style": style_key, **{slot: _record(item) for slot, item in outfit.slots().items()}}

    @api.post("/wardrobe/save")
    async def save() -> dict:
        with operation_context("api:save"):
            try:
                path = wardrobe_manager.save()
            except WardrobeFileError as exc:
                raise HTTPException(status_code=500, detail=exc.reason) from exc
        return {"status": "saved", "path": str(path), "item_count": len(wardrobe_manager.wardrobe)}

    @api.post("/wardrobe/load")
    async def load() -> dict:
        with operation_context("api:load"):
            try:
                result = wardrobe_manager.load()
            except WardrobeFileError as exc:
                raise HTTPException(status_code=500, detail=exc.reason) from exc
        return {
            "status": result.status.value,
            "path": result.path,
            "item_count": result.item_count,
            "unindexed_ids": result.unindexed_ids,
        }

    return api


def get_app() -> FastAPI:
    """Expose a FastAPI instance for ASGI servers."""

    return create_app()


if __name__ == "__main__":
    import uvicorn

    uvicorn.run("server.api:get_app", factory=True, host="0.0.0.0", port=8080, reload=False)
