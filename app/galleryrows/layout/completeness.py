"""Row fill checks.

A row is complete when the component values of its items cover between 90%
and 115% of the row-width budget. Below the band the row looks half empty;
above it every item has to shrink well under its intended size.
"""

from __future__ import annotations

from typing import Sequence

from app.galleryrows.layout.config import DEFAULT_CONFIG, LayoutConfig
from app.galleryrows.layout.items import ContentItem
from app.galleryrows.layout.patterns import PatternDef
from app.galleryrows.layout.ratings import DEFAULT_POLICY, RatingPolicy


def total_component_value(
    components: Sequence[ContentItem],
    row_width: int,
    *,
    policy: RatingPolicy = DEFAULT_POLICY,
) -> float:
    return sum(policy.component_value(item, row_width) for item in components)


def fill_ratio(
    components: Sequence[ContentItem],
    row_width: int,
    *,
    policy: RatingPolicy = DEFAULT_POLICY,
) -> float:
    if row_width <= 0:
        raise ValueError("row_width must be > 0")
    return total_component_value(components, row_width, policy=policy) / row_width


def is_fill_acceptable(fill: float, config: LayoutConfig = DEFAULT_CONFIG) -> bool:
    return config.min_fill_ratio <= fill <= config.max_fill_ratio


def is_row_complete(
    components: Sequence[ContentItem],
    row_width: int,
    *,
    policy: RatingPolicy = DEFAULT_POLICY,
    config: LayoutConfig = DEFAULT_CONFIG,
) -> bool:
    """Return True when the components fill the row within the closed band."""

    if not components:
        return False
    return is_fill_acceptable(fill_ratio(components, row_width, policy=policy), config)


def fill_check_components(
    components: Sequence[ContentItem], definition: PatternDef
) -> list[ContentItem]:
    """Components that count toward the fill check for a matched pattern.

    Components are in slot order. A hero slot holds an item that fills the row
    on its own, so only its supporting items are validated.
    """
    if definition.hero_slot is None:
        return list(components)
    return [c for slot, c in enumerate(components) if slot != definition.hero_slot]


def is_match_complete(
    components: Sequence[ContentItem],
    definition: PatternDef,
    row_width: int,
    *,
    policy: RatingPolicy = DEFAULT_POLICY,
    config: LayoutConfig = DEFAULT_CONFIG,
) -> bool:
    return is_row_complete(
        fill_check_components(components, definition),
        row_width,
        policy=policy,
        config=config,
    )
