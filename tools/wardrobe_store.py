"""Snapshot storage for wardrobes as a single JSON file."""
from __future__ import annotations

from pathlib import Path
from typing import Optional

from pydantic import ValidationError

from logic.validation import WardrobeSnapshot
from models.errors import WardrobeFileError


class WardrobeStore:
    """Persistence interface for wardrobe snapshots."""

    def read(self, path: str | Path) -> Optional[WardrobeSnapshot]:
        raise NotImplementedError

    def write(self, path: str | Path, snapshot: WardrobeSnapshot) -> None:
        raise NotImplementedError


class JSONWardrobeStore(WardrobeStore):
    """Whole-file JSON store. ``read`` returns ``None`` when the file is absent."""

    encoding = "utf-8"

    def read(self, path: str | Path) -> Optional[WardrobeSnapshot]:
        path = Path(path)
        try:
            raw = path.read_text(encoding=self.encoding)
        except FileNotFoundError:
            return None
        except (OSError, UnicodeDecodeError) as exc:
            raise WardrobeFileError(str(path), f"cannot read file ({exc})") from exc

        try:
            return WardrobeSnapshot.model_validate_json(raw)
        except ValidationError as exc:
            raise WardrobeFileError(
                str(path), f"invalid wardrobe data ({exc.error_count()} errors)"
            ) from exc

    def write(self, path: str | Path, snapshot: WardrobeSnapshot) -> None:
        path = Path(path)
        try:
            path.write_text(snapshot.to_json(), encoding=self.encoding)
        except OSError as exc:
            raise WardrobeFileError(str(path), f"cannot write file ({exc})") from exc


__all__ = ["WardrobeStore", "JSONWardrobeStore"]
