"""Row builder: turns an ordered item list into gallery rows.

Each step looks at a small window of not-yet-placed items, tries every
pattern in priority order and keeps the first match that fills the row.
When nothing fits, the force-fill fallback composes the row instead. The
last row is allowed to stay under the fill floor: there may simply not be
enough items left.
"""

from __future__ import annotations

import logging
from collections import deque
from dataclasses import dataclass
from itertools import islice
from typing import Iterable, List, Optional, Tuple

from app.galleryrows.layout.box_tree import BoxTree, tree_for, tree_to_dict
from app.galleryrows.layout.completeness import (
    fill_check_components,
    fill_ratio,
    is_match_complete,
)
from app.galleryrows.layout.config import DEFAULT_CONFIG, LayoutConfig
from app.galleryrows.layout.force_fill import detect_nested_quad, force_complete_row
from app.galleryrows.layout.items import ContentItem
from app.galleryrows.layout.matcher import MatchResult, match_pattern
from app.galleryrows.layout.patterns import (
    PATTERN_TABLE,
    PATTERNS_BY_PRIORITY,
    CombinationPattern,
    Direction,
    LayoutShape,
)
from app.galleryrows.layout.ratings import DEFAULT_POLICY, RatingPolicy

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class RowResult:
    # In placement order: window order for pattern rows, pick order for
    # force-filled ones. The tree carries the visual arrangement.
    components: Tuple[ContentItem, ...]
    direction: Optional[Direction]
    pattern_name: CombinationPattern
    tree: BoxTree
    layout: LayoutShape = LayoutShape.CHAIN
    # Share of the row the fill check measured (supporting items only for a hero)
    fill_ratio: float = 0.0

    @property
    def ids(self) -> List[str]:
        return [item.id for item in self.components]

    def to_dict(self) -> dict:
        return {
            "pattern": self.pattern_name.value,
            "direction": self.direction.value if self.direction else None,
            "layout": self.layout.value,
            "fill": round(self.fill_ratio, 4),
            "components": self.ids,
            "tree": tree_to_dict(self.tree),
        }


def _match_row(
    window: List[ContentItem],
    row_width: int,
    policy: RatingPolicy,
    config: LayoutConfig,
) -> Optional[Tuple[MatchResult, LayoutShape]]:
    for name in PATTERNS_BY_PRIORITY:
        definition = PATTERN_TABLE[name]
        match = match_pattern(name, definition, window, row_width, policy=policy, config=config)
        if match is None:
            continue
        if not is_match_complete(match.components, definition, row_width, policy=policy, config=config):
            logger.debug("%s matched %s but missed the fill band", name.value, match.used_indices)
            continue
        return match, match.layout or definition.layout
    return None


def _force_row(
    window: List[ContentItem],
    row_width: int,
    policy: RatingPolicy,
    config: LayoutConfig,
) -> Tuple[MatchResult, RowResult]:
    forced = force_complete_row(window, row_width, policy=policy, config=config)
    components = forced.components

    quad = detect_nested_quad(components, row_width, policy=policy)
    if quad is not None:
        tree = tree_for(forced.pattern_name, quad.ordered(components), LayoutShape.NESTED_QUAD)
        row = RowResult(
            components=components,
            direction=None,
            pattern_name=forced.pattern_name,
            tree=tree,
            layout=LayoutShape.NESTED_QUAD,
            fill_ratio=fill_ratio(components, row_width, policy=policy),
        )
    else:
        row = RowResult(
            components=components,
            direction=forced.direction,
            pattern_name=forced.pattern_name,
            tree=tree_for(forced.pattern_name, components, LayoutShape.CHAIN),
            fill_ratio=fill_ratio(components, row_width, policy=policy),
        )
    return forced, row


def build_rows(
    items: Iterable[ContentItem],
    row_width: int,
    *,
    policy: RatingPolicy = DEFAULT_POLICY,
    config: LayoutConfig = DEFAULT_CONFIG,
) -> List[RowResult]:
    """Split items into rows.

    Every input item lands in exactly one row. Returns rows in display order.
    """
    if row_width <= 0:
        raise ValueError("row_width must be > 0")

    # deque: deleting near the left end is cheap
    remaining = deque(items)
    rows: List[RowResult] = []

    while remaining:
        window = list(islice(remaining, config.lookahead))

        found = _match_row(window, row_width, policy, config)
        if found is not None:
            match, layout = found
            placed = tuple(window[i] for i in sorted(match.used_indices))
            row = RowResult(
                components=placed,
                direction=match.direction,
                pattern_name=match.pattern_name,
                tree=tree_for(match.pattern_name, match.components, layout),
                layout=layout,
                fill_ratio=fill_ratio(
                    fill_check_components(match.components, PATTERN_TABLE[match.pattern_name]),
                    row_width,
                    policy=policy,
                ),
            )
        else:
            match, row = _force_row(window, row_width, policy, config)
            logger.debug(
                "no pattern fits %s; force-filled %s",
                [item.id for item in window],
                row.ids,
            )

        logger.debug("row %d: %s %s", len(rows), row.pattern_name.value, row.ids)
        rows.append(row)

        # Descending so earlier indices stay valid.
        for idx in sorted(match.used_indices, reverse=True):
            del remaining[idx]

    return rows
