"""Fallback row composition when no pattern both matches and fills the row.

Sequential fill comes first so input order survives. Best-fit only runs when
the very next item would overshoot the fill cap while the row is still under
the floor; it may then pick items out of order within the window.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import List, Optional, Sequence, Tuple

from app.galleryrows.layout.completeness import is_row_complete, total_component_value
from app.galleryrows.layout.config import DEFAULT_CONFIG, LayoutConfig
from app.galleryrows.layout.items import ContentItem, is_vertical
from app.galleryrows.layout.matcher import MatchResult
from app.galleryrows.layout.patterns import CombinationPattern, Direction
from app.galleryrows.layout.ratings import DEFAULT_POLICY, RatingPolicy


@dataclass(frozen=True)
class NestedQuad:
    """Role positions (into the row's components) for a nested-quad row."""

    main: int
    top_pair: Tuple[int, int]
    bottom: int

    def ordered(self, components: Sequence[ContentItem]) -> List[ContentItem]:
        """Components in role order: main, top left, top right, bottom."""
        return [
            components[self.main],
            components[self.top_pair[0]],
            components[self.top_pair[1]],
            components[self.bottom],
        ]


def _sequential_count(
    window: Sequence[ContentItem],
    row_width: int,
    policy: RatingPolicy,
    config: LayoutConfig,
) -> Optional[int]:
    """Number of leading items a sequential fill takes, or None on failure."""
    total = 0.0
    count = 0
    for i, item in enumerate(window):
        cv = policy.component_value(item, row_width)
        new_fill = (total + cv) / row_width
        if new_fill > config.max_fill_ratio:
            if total / row_width < config.min_fill_ratio:
                return None
            break
        total += cv
        count = i + 1
        if new_fill >= config.min_fill_ratio:
            break
    return count or None


def _best_fit_indices(
    window: Sequence[ContentItem],
    row_width: int,
    policy: RatingPolicy,
    config: LayoutConfig,
) -> List[int]:
    # Item 0 always goes first.
    used = [0]
    available = list(range(1, len(window)))

    def chosen() -> List[ContentItem]:
        return [window[i] for i in used]

    if is_row_complete(chosen(), row_width, policy=policy, config=config):
        return used

    while available:
        current = total_component_value(chosen(), row_width, policy=policy)
        gap = row_width - current

        # Closest value to the gap; lowest window index wins ties.
        best = min(
            available,
            key=lambda i: abs(policy.component_value(window[i], row_width) - gap),
        )
        candidate = current + policy.component_value(window[best], row_width)
        new_fill = candidate / row_width

        if new_fill > config.max_fill_ratio:
            current_fill = current / row_width
            if current_fill >= config.min_fill_ratio or abs(1.0 - current_fill) <= abs(1.0 - new_fill):
                break
            used.append(best)
            break

        used.append(best)
        available.remove(best)
        if is_row_complete(chosen(), row_width, policy=policy, config=config):
            break

    return used


def force_complete_row(
    window: Sequence[ContentItem],
    row_width: int,
    *,
    policy: RatingPolicy = DEFAULT_POLICY,
    config: LayoutConfig = DEFAULT_CONFIG,
) -> MatchResult:
    """Pick the items for a row no pattern could build.

    Always returns at least one item; the layout is a plain horizontal chain.
    """
    if not window:
        raise ValueError("force_complete_row called with an empty window")
    if row_width <= 0:
        raise ValueError("row_width must be > 0")

    count = _sequential_count(window, row_width, policy, config)
    if count is not None:
        indices = list(range(count))
    else:
        indices = _best_fit_indices(window, row_width, policy, config)

    return MatchResult(
        pattern_name=CombinationPattern.FORCE_FILL,
        used_indices=tuple(indices),
        components=tuple(window[i] for i in indices),
        direction=Direction.HORIZONTAL,
    )


def detect_nested_quad(
    components: Sequence[ContentItem],
    row_width: int,
    *,
    policy: RatingPolicy = DEFAULT_POLICY,
) -> Optional[NestedQuad]:
    """Find a main + (top pair / bottom) arrangement for a four-item row.

    Needs at least three verticals. The highest-rated vertical is the main
    item, the two lowest-rated remaining verticals form the top pair and the
    leftover item sits below them. Ties keep placement order.
    """
    if len(components) != 4:
        return None

    verticals = [i for i, item in enumerate(components) if is_vertical(item)]
    if len(verticals) < 3:
        return None

    def rating(i: int) -> float:
        return policy.rating(components[i], row_width)

    # sorted() is stable, so the earliest item wins rating ties.
    main = sorted(verticals, key=rating, reverse=True)[0]
    rest = sorted((i for i in verticals if i != main), key=rating)
    top_pair = rest[:2]
    if len(top_pair) < 2:
        return None

    taken = {main, *top_pair}
    bottom = next(i for i in range(4) if i not in taken)
    return NestedQuad(main=main, top_pair=(top_pair[0], top_pair[1]), bottom=bottom)
