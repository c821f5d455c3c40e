"""Content items and orientation classification.

Items arrive from the content listing already carrying pixel dimensions and
an editorial rating. Nothing here mutates them.
"""

from __future__ import annotations

import enum
from dataclasses import dataclass


class Orientation(str, enum.Enum):
    HORIZONTAL = "horizontal"
    VERTICAL = "vertical"


@dataclass(frozen=True)
class ContentItem:
    """Input item for row building.

    rating: editorial priority, integer 0..5.
    """

    id: str
    width: int
    height: int
    rating: int = 0

    def __post_init__(self) -> None:
        if self.width <= 0:
            raise ValueError(f"item {self.id!r}: width must be > 0")
        if self.height <= 0:
            raise ValueError(f"item {self.id!r}: height must be > 0")
        if isinstance(self.rating, bool) or not isinstance(self.rating, int):
            raise ValueError(f"item {self.id!r}: rating must be an int")
        if not 0 <= self.rating <= 5:
            raise ValueError(f"item {self.id!r}: rating must be within 0..5")

    @property
    def aspect_ratio(self) -> float:
        return self.width / self.height


def orientation(item: ContentItem) -> Orientation:
    # Square counts as vertical.
    return Orientation.HORIZONTAL if item.aspect_ratio > 1.0 else Orientation.VERTICAL


def is_vertical(item: ContentItem) -> bool:
    return orientation(item) is Orientation.VERTICAL
