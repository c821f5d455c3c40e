from __future__ import annotations

from pathlib import Path

from PIL import Image


def probe_dimensions(path: str | Path) -> tuple[int, int]:
    """Read (width, height) from an image header without decoding pixels.

    EXIF orientations 5-8 (rotated a quarter turn) swap the two, so the
    result matches how the photo is displayed.
    """
    with Image.open(path) as img:
        width, height = img.size
        orientation = img.getexif().get(0x0112, 1)
    if orientation in (5, 6, 7, 8):
        width, height = height, width
    return int(width), int(height)
