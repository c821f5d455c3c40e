"""Generic pattern matcher.

Matching is greedy and order preserving:
- every match consumes window position 0, so rows are built strictly in
  input order (a standalone pattern may pass over a low-rated lead item)
- consumed positions form one contiguous run
- a rating proximity bound, when declared, caps the spread of matched ratings

"No match" is an ordinary outcome and is signalled with None.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import List, Optional, Sequence, Tuple

from app.galleryrows.layout.config import DEFAULT_CONFIG, LayoutConfig
from app.galleryrows.layout.items import ContentItem, orientation
from app.galleryrows.layout.patterns import (
    CombinationPattern,
    Direction,
    LayoutShape,
    PatternDef,
    PatternRequirement,
)
from app.galleryrows.layout.ratings import DEFAULT_POLICY, RatingPolicy


@dataclass(frozen=True)
class MatchResult:
    pattern_name: CombinationPattern
    # Window indices, in slot order
    used_indices: Tuple[int, ...]
    # Items, in slot order
    components: Tuple[ContentItem, ...]
    direction: Optional[Direction]
    # Set when the shape depends on where the dominant item fell
    layout: Optional[LayoutShape] = None


def satisfies(
    item: ContentItem,
    req: PatternRequirement,
    row_width: int,
    *,
    policy: RatingPolicy = DEFAULT_POLICY,
) -> bool:
    if req.orientation is not None and orientation(item) is not req.orientation:
        return False

    rating = policy.rating(item, row_width)
    if rating < req.min_rating:
        return False
    if req.max_rating is not None and rating > req.max_rating:
        return False
    return True


def _is_contiguous(indices: Sequence[int]) -> bool:
    ordered = sorted(indices)
    return all(b == a + 1 for a, b in zip(ordered, ordered[1:]))


def _hero_layout(definition: PatternDef, indices: Sequence[int]) -> Tuple[bool, Optional[LayoutShape]]:
    """Resolve hero placement. Returns (ok, layout override)."""
    if definition.hero_slot is None:
        return True, None
    hero = indices[definition.hero_slot]
    if hero == min(indices):
        return True, LayoutShape.HERO_TOP
    if hero == max(indices):
        return True, LayoutShape.HERO_BOTTOM
    # A hero in the middle of the run has no shape
    return False, None


def match_pattern(
    name: CombinationPattern,
    definition: PatternDef,
    window: Sequence[ContentItem],
    row_width: int,
    *,
    policy: RatingPolicy = DEFAULT_POLICY,
    config: LayoutConfig = DEFAULT_CONFIG,
) -> Optional[MatchResult]:
    """Try to satisfy one pattern against the lookahead window."""

    if len(window) < definition.slot_count:
        return None
    if row_width < definition.min_row_width:
        return None

    start = 0
    reach = definition.slot_count + config.slot_reach_extra
    if definition.skip_low_rated_lead:
        reach = config.standalone_reach
        if policy.rating(window[0], row_width) <= config.low_rated_threshold:
            start = 1

    candidates = list(window[start:start + reach])
    if len(candidates) < definition.slot_count:
        return None

    used: List[int] = []
    for req in definition.requires:
        for pos, item in enumerate(candidates):
            if pos in used:
                continue
            if satisfies(item, req, row_width, policy=policy):
                used.append(pos)
                break
        else:
            return None

    if start == 0 and 0 not in used:
        return None
    if not _is_contiguous(used):
        return None

    matched = [candidates[pos] for pos in used]
    if definition.rating_proximity is not None:
        ratings = [policy.rating(item, row_width) for item in matched]
        if max(ratings) - min(ratings) > definition.rating_proximity:
            return None

    indices = tuple(pos + start for pos in used)
    ok, layout = _hero_layout(definition, indices)
    if not ok:
        return None

    return MatchResult(
        pattern_name=name,
        used_indices=indices,
        components=tuple(matched),
        direction=definition.direction,
        layout=layout,
    )
