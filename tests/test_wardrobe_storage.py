"""Wardrobe snapshot persistence tests."""

from __future__ import annotations

import json
from pathlib import Path

import pytest

from conftest import leaf_item_ids
from models.clothing_item import ItemCandidate
from models.errors import DuplicateItemError, WardrobeFileError
from models.wardrobe import DEFAULT_NEXT_ID, LoadStatus, Wardrobe
from tools.wardrobe_store import JSONWardrobeStore


def test_save_writes_documented_layout(populated_wardrobe: Wardrobe, tmp_path: Path) -> None:
    path = tmp_path / "wardrobe.json"
    populated_wardrobe.save_to_file(path)

    data = json.loads(path.read_text())
    assert set(data) == {"nextId", "items"}
    assert data["nextId"] == 8
    assert data["items"][0] == {
        "id": 1,
        "name": "Tee",
        "itemType": "top",
        "color": "blue",
        "style": "casual",
    }
    assert [record["id"] for record in data["items"]] == list(range(1, 8))


def test_save_overwrites_existing_file(populated_wardrobe: Wardrobe, tmp_path: Path) -> None:
    path = tmp_path / "wardrobe.json"
    path.write_text("stale contents")
    populated_wardrobe.save_to_file(path)
    assert json.loads(path.read_text())["nextId"] == 8


def test_round_trip_restores_items_and_counter(populated_wardrobe: Wardrobe, tmp_path: Path) -> None:
    """Save followed by load reproduces the flat list, counter and a consistent tree."""

    path = tmp_path / "wardrobe.json"
    populated_wardrobe.remove_item(2)
    populated_wardrobe.save_to_file(path)

    restored = Wardrobe()
    result = restored.load_from_file(path)

    assert result.status is LoadStatus.LOADED
    assert result.item_count == 6
    assert result.unindexed_ids == []
    assert restored.list_items() == populated_wardrobe.list_items()
    assert restored.next_id == populated_wardrobe.next_id
    assert sorted(leaf_item_ids(restored)) == sorted(item.id for item in restored.list_items())


def test_load_replaces_existing_state(populated_wardrobe: Wardrobe, tmp_path: Path) -> None:
    path = tmp_path / "wardrobe.json"
    path.write_text(
        json.dumps(
            {
                "nextId": 42,
                "items": [
                    {"id": 40, "name": "Blazer", "itemType": "top", "color": "navy", "style": "formal"}
                ],
            }
        )
    )

    populated_wardrobe.load_from_file(path)

    assert [item.id for item in populated_wardrobe.list_items()] == [40]
    assert populated_wardrobe.get_items_in_category("casual") == []
    assert [item.name for item in populated_wardrobe.get_items_in_category("formal")] == ["Blazer"]
    assert populated_wardrobe.add_item(
        ItemCandidate(name="Tie", item_type="top", color="red", style="formal")
    ) == 42


def test_missing_file_resets_to_empty(populated_wardrobe: Wardrobe, tmp_path: Path) -> None:
    result = populated_wardrobe.load_from_file(tmp_path / "absent.json")

    assert result.status is LoadStatus.MISSING
    assert result.item_count == 0
    assert populated_wardrobe.list_items() == []
    assert leaf_item_ids(populated_wardrobe) == []
    assert populated_wardrobe.next_id == DEFAULT_NEXT_ID


@pytest.mark.parametrize(
    "contents",
    [
        "{not json",
        json.dumps({"items": []}),
        json.dumps({"nextId": 0, "items": []}),
        json.dumps({"nextId": 3, "items": [{"id": 1, "name": "Tee"}]}),
        json.dumps([1, 2, 3]),
        json.dumps(
            {
                "nextId": 4,
                "items": [{"id": -3, "name": "Tee", "itemType": "top", "color": "blue", "style": "casual"}],
            }
        ),
        json.dumps(
            {
                "nextId": 4,
                "items": [
                    {"id": 3, "name": "Tee", "itemType": "top", "color": "blue", "style": "casual"},
                    {"id": 3, "name": "Jeans", "itemType": "bottom", "color": "blue", "style": "casual"},
                ],
            }
        ),
    ],
)
def test_malformed_file_raises_and_keeps_state(
    populated_wardrobe: Wardrobe, tmp_path: Path, contents: str
) -> None:
    path = tmp_path / "wardrobe.json"
    path.write_text(contents)
    before = populated_wardrobe.list_items()
    before_leaves = leaf_item_ids(populated_wardrobe)

    with pytest.raises(WardrobeFileError) as excinfo:
        populated_wardrobe.load_from_file(path)

    assert excinfo.value.path == str(path)
    assert excinfo.value.__cause__ is not None
    assert populated_wardrobe.list_items() == before
    assert leaf_item_ids(populated_wardrobe) == before_leaves
    assert populated_wardrobe.next_id == 8


def test_load_from_directory_is_a_failure(wardrobe: Wardrobe, tmp_path: Path) -> None:
    with pytest.raises(WardrobeFileError):
        wardrobe.load_from_file(tmp_path)


def test_save_into_missing_directory_fails(wardrobe: Wardrobe, tmp_path: Path) -> None:
    with pytest.raises(WardrobeFileError):
        wardrobe.save_to_file(tmp_path / "missing" / "wardrobe.json")


def test_unknown_category_items_stay_listed_but_unindexed(wardrobe: Wardrobe, tmp_path: Path) -> None:
    path = tmp_path / "wardrobe.json"
    path.write_text(
        json.dumps(
            {
                "nextId": 3,
                "items": [
                    {"id": 1, "name": "Track top", "itemType": "top", "color": "red", "style": "sport"},
                    {"id": 2, "name": "Tee", "itemType": "top", "color": "blue", "style": "casual"},
                ],
            }
        )
    )

    result = wardrobe.load_from_file(path)

    assert result.unindexed_ids == [1]
    assert [item.id for item in wardrobe.list_items()] == [1, 2]
    assert leaf_item_ids(wardrobe) == [2]
    assert wardrobe.remove_item(1) == 1
    assert leaf_item_ids(wardrobe) == [2]


def test_inconsistent_counter_trips_duplicate_check(wardrobe: Wardrobe, tmp_path: Path) -> None:
    """A snapshot whose counter lags behind its ids is caught on the next add."""

    path = tmp_path / "wardrobe.json"
    path.write_text(
        json.dumps(
            {
                "nextId": 1,
                "items": [{"id": 1, "name": "Tee", "itemType": "top", "color": "blue", "style": "casual"}],
            }
        )
    )
    wardrobe.load_from_file(path)

    with pytest.raises(DuplicateItemError):
        wardrobe.add_item(ItemCandidate(name="Jeans", item_type="bottom", color="blue", style="casual"))
    assert len(wardrobe) == 1
    assert leaf_item_ids(wardrobe) == [1]


def test_store_read_returns_none_for_missing_file(tmp_path: Path) -> None:
    assert JSONWardrobeStore().read(tmp_path / "nothing.json") is None


def test_store_accepts_extra_whitespace_and_field_order(tmp_path: Path) -> None:
    path = tmp_path / "wardrobe.json"
    path.write_text(
        '\n\n{ "items" : [ { "style": "formal", "color": "black", "itemType": "shoes",'
        ' "name": "Brogues", "id": 5 } ],\n   "nextId": 6 }\n'
    )
    snapshot = JSONWardrobeStore().read(path)
    assert snapshot is not None
    assert snapshot.next_id == 6
    assert snapshot.items[0].item_type == "shoes"
