"""Layout tuning knobs."""

from __future__ import annotations

from dataclasses import dataclass


LOOKAHEAD = 5
MIN_FILL_RATIO = 0.9
MAX_FILL_RATIO = 1.15


@dataclass(frozen=True)
class LayoutConfig:
    """Controls how far the builder looks ahead and how full a row must be."""

    # Items considered for the next row
    lookahead: int = LOOKAHEAD

    # Accepted fill band, closed on both ends
    min_fill_ratio: float = MIN_FILL_RATIO
    max_fill_ratio: float = MAX_FILL_RATIO

    # A lead item rated at or below this may be skipped by a standalone match
    low_rated_threshold: float = 2
    # Positions a standalone match may search once it skipped the lead item
    standalone_reach: int = 3
    # Extra positions beyond a pattern's slot count the matcher may scan
    slot_reach_extra: int = 3

    def __post_init__(self) -> None:
        if self.lookahead < 1:
            raise ValueError("lookahead must be >= 1")
        if self.min_fill_ratio <= 0:
            raise ValueError("min_fill_ratio must be > 0")
        if self.min_fill_ratio > self.max_fill_ratio:
            raise ValueError("min_fill_ratio must be <= max_fill_ratio")
        if self.standalone_reach < 1:
            raise ValueError("standalone_reach must be >= 1")
        if self.slot_reach_extra < 0:
            raise ValueError("slot_reach_extra must be >= 0")


DEFAULT_CONFIG = LayoutConfig()
