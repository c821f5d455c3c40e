"""Manifest loading.

A manifest is a JSON list of entries::

    [{"id": "a", "width": 1920, "height": 1080, "rating": 4},
     {"id": "b", "path": "photos/b.jpg", "rating": 2}]

Entries without width/height must name an image ``path`` (relative paths
resolve against the manifest's folder); its dimensions are read from the file.
"""

from __future__ import annotations

import json
import logging
from pathlib import Path
from typing import Any, List

from app.galleryrows.layout.items import ContentItem
from app.galleryrows.utils.imaging import probe_dimensions

logger = logging.getLogger(__name__)


def item_from_entry(entry: Any, base_dir: Path | None = None) -> ContentItem:
    if not isinstance(entry, dict):
        raise ValueError(f"manifest entry must be an object, got {type(entry).__name__}")
    if "id" not in entry:
        raise ValueError("manifest entry is missing 'id'")

    item_id = str(entry["id"])
    width = entry.get("width")
    height = entry.get("height")
    if width is None or height is None:
        raw_path = entry.get("path")
        if not raw_path:
            raise ValueError(f"item {item_id!r}: needs width/height or a path")
        path = Path(raw_path)
        if base_dir is not None and not path.is_absolute():
            path = base_dir / path
        width, height = probe_dimensions(path)
        logger.debug("probed %s -> %dx%d", path, width, height)

    rating = entry.get("rating", 0)
    return ContentItem(
        id=item_id,
        width=_pixel_size(item_id, "width", width),
        height=_pixel_size(item_id, "height", height),
        rating=rating,
    )


def _pixel_size(item_id: str, name: str, value: Any) -> int:
    # Whole numbers only; bool is an int subclass.
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        raise ValueError(f"item {item_id!r}: {name} must be a whole number, got {value!r}")
    if isinstance(value, float) and not value.is_integer():
        raise ValueError(f"item {item_id!r}: {name} must be a whole number, got {value!r}")
    return int(value)


def parse_manifest(data: Any, base_dir: Path | None = None) -> List[ContentItem]:
    if not isinstance(data, list):
        raise ValueError("manifest must be a JSON list")

    items = [item_from_entry(entry, base_dir) for entry in data]
    seen: set[str] = set()
    for item in items:
        if item.id in seen:
            raise ValueError(f"duplicate item id: {item.id!r}")
        seen.add(item.id)
    return items


def load_manifest(path: str | Path) -> List[ContentItem]:
    manifest = Path(path)
    data = json.loads(manifest.read_text(encoding="utf-8"))
    items = parse_manifest(data, base_dir=manifest.parent)
    logger.info("loaded %d items from %s", len(items), manifest)
    return items
