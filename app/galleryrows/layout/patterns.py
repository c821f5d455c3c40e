"""Declarative pattern table for row building.

Each pattern is plain data checked by the single generic matcher in
``matcher.py``. Adding a pattern means adding a table entry and a priority
slot; the matcher never changes.
"""

from __future__ import annotations

import enum
from dataclasses import dataclass, field
from typing import Dict, List, Optional, Tuple

from app.galleryrows.layout.items import Orientation


H = Orientation.HORIZONTAL
V = Orientation.VERTICAL


class Direction(str, enum.Enum):
    HORIZONTAL = "horizontal"
    VERTICAL = "vertical"


class LayoutShape(str, enum.Enum):
    """How matched items map onto a render tree."""

    CHAIN = "chain"
    MAIN_STACKED = "main-stacked"
    NESTED_QUAD = "nested-quad"
    HERO_TOP = "hero-top"
    HERO_BOTTOM = "hero-bottom"


class CombinationPattern(str, enum.Enum):
    STANDALONE = "STANDALONE"
    HERO_TRIPLE = "HERO_TRIPLE"
    HORIZONTAL_PAIR = "HORIZONTAL_PAIR"
    DOMINANT_VERTICAL_PAIR = "DOMINANT_VERTICAL_PAIR"
    DOMINANT_SECONDARY = "DOMINANT_SECONDARY"
    VERTICAL_PAIR = "VERTICAL_PAIR"
    TRIPLE_HORIZONTAL = "TRIPLE_HORIZONTAL"
    MULTI_SMALL = "MULTI_SMALL"
    # Synthetic: produced by the fallback, never matched
    FORCE_FILL = "FORCE_FILL"


@dataclass(frozen=True)
class PatternRequirement:
    """One slot of a pattern. No orientation means either orientation."""

    min_rating: float = 0
    max_rating: Optional[float] = None
    orientation: Optional[Orientation] = None


@dataclass(frozen=True)
class PatternDef:
    requires: Tuple[PatternRequirement, ...]
    direction: Optional[Direction]
    layout: LayoutShape = LayoutShape.CHAIN
    min_row_width: int = 1
    # Ideal spread between matched ratings (enforced by the matcher)
    rating_proximity: Optional[float] = None
    # Loosest spread still tolerable (informational)
    max_proximity: Optional[float] = None
    flexible: bool = False
    # Slot holding a full-value item that is left out of the fill check
    hero_slot: Optional[int] = None
    # A low-rated item at window position 0 may be passed over
    skip_low_rated_lead: bool = False
    description: str = field(default="", compare=False)

    @property
    def slot_count(self) -> int:
        return len(self.requires)


PATTERN_TABLE: Dict[CombinationPattern, PatternDef] = {
    CombinationPattern.STANDALONE: PatternDef(
        requires=(PatternRequirement(orientation=H, min_rating=5),),
        direction=None,
        min_row_width=5,
        skip_low_rated_lead=True,
        description="5-star horizontal alone",
    ),
    CombinationPattern.HERO_TRIPLE: PatternDef(
        requires=(
            PatternRequirement(orientation=H, min_rating=5),
            PatternRequirement(min_rating=0, max_rating=3),
            PatternRequirement(min_rating=0, max_rating=3),
            PatternRequirement(min_rating=0, max_rating=3),
        ),
        direction=Direction.VERTICAL,
        layout=LayoutShape.HERO_TOP,
        max_proximity=3,
        min_row_width=5,
        hero_slot=0,
        description="full-width hero over a row of three supporting items",
    ),
    CombinationPattern.HORIZONTAL_PAIR: PatternDef(
        requires=(
            PatternRequirement(orientation=H, min_rating=3, max_rating=4),
            PatternRequirement(orientation=H, min_rating=3, max_rating=4),
        ),
        direction=Direction.HORIZONTAL,
        rating_proximity=1,
        min_row_width=4,
        description="two similarly rated horizontals",
    ),
    CombinationPattern.DOMINANT_VERTICAL_PAIR: PatternDef(
        requires=(
            PatternRequirement(orientation=H, min_rating=4),
            PatternRequirement(min_rating=0, max_rating=3),
            PatternRequirement(min_rating=0, max_rating=3),
        ),
        direction=Direction.HORIZONTAL,
        layout=LayoutShape.MAIN_STACKED,
        max_proximity=3,
        min_row_width=5,
        description="dominant horizontal beside two stacked items",
    ),
    CombinationPattern.DOMINANT_SECONDARY: PatternDef(
        requires=(
            PatternRequirement(orientation=H, min_rating=4),
            PatternRequirement(orientation=V, min_rating=0, max_rating=3),
        ),
        direction=Direction.HORIZONTAL,
        max_proximity=3,
        min_row_width=4,
        description="dominant horizontal beside one vertical",
    ),
    CombinationPattern.VERTICAL_PAIR: PatternDef(
        requires=(
            PatternRequirement(orientation=V, min_rating=0, max_rating=4),
            PatternRequirement(orientation=V, min_rating=0, max_rating=4),
        ),
        direction=Direction.HORIZONTAL,
        rating_proximity=0,
        max_proximity=2,
        min_row_width=4,
        description="two equally rated verticals",
    ),
    CombinationPattern.TRIPLE_HORIZONTAL: PatternDef(
        requires=(
            PatternRequirement(orientation=H, min_rating=2, max_rating=3),
            PatternRequirement(orientation=H, min_rating=2, max_rating=3),
            PatternRequirement(orientation=H, min_rating=2, max_rating=3),
        ),
        direction=Direction.HORIZONTAL,
        rating_proximity=0,
        max_proximity=1,
        min_row_width=5,
        description="three equally rated horizontals",
    ),
    CombinationPattern.MULTI_SMALL: PatternDef(
        requires=(
            PatternRequirement(min_rating=0, max_rating=2),
            PatternRequirement(min_rating=0, max_rating=2),
            PatternRequirement(min_rating=0, max_rating=2),
        ),
        direction=Direction.HORIZONTAL,
        rating_proximity=0,
        max_proximity=2,
        min_row_width=3,
        flexible=True,
        description="three small items of any orientation",
    ),
}


# Highest value first. Generic fillers go last or they eat items a more
# distinctive pattern would have used.
PATTERNS_BY_PRIORITY: List[CombinationPattern] = [
    CombinationPattern.STANDALONE,
    CombinationPattern.HERO_TRIPLE,
    CombinationPattern.HORIZONTAL_PAIR,
    CombinationPattern.DOMINANT_VERTICAL_PAIR,
    CombinationPattern.DOMINANT_SECONDARY,
    CombinationPattern.VERTICAL_PAIR,
    CombinationPattern.TRIPLE_HORIZONTAL,
    CombinationPattern.MULTI_SMALL,
]
