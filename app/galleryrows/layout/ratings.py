"""Rating policies: effective rating and component value per row budget.

The row builder treats these as black boxes. A component value is the share
of the row-width budget an item is meant to occupy, so a row is full when the
values of its items add up to the budget.
"""

from __future__ import annotations

from app.galleryrows.layout.items import ContentItem, is_vertical


NARROW_ROW_WIDTH = 2


class RatingPolicy:
    """Default star policy.

    Effective rating:
    - horizontal items keep their rating
    - vertical (and square) items lose one star, clamped at 0

    Component value:
    - 5 stars fill the row, 4 stars take half, 3 stars a third, 2 stars a
      quarter, 0-1 stars a fifth
    - narrow (two-slot) budgets: 3+ stars fill the row, everything else
      takes half

    Subclass and override either method to plug in another policy.
    """

    def rating(self, item: ContentItem, row_width: int) -> float:
        if is_vertical(item):
            return max(0, item.rating - 1)
        return item.rating

    def component_value(self, item: ContentItem, row_width: int) -> float:
        return component_value_for_rating(self.rating(item, row_width), row_width)


def component_value_for_rating(rating: float, row_width: int) -> float:
    if row_width <= 0:
        raise ValueError("row_width must be > 0")
    if row_width <= NARROW_ROW_WIDTH:
        return float(row_width) if rating >= 3 else row_width / 2

    clamped = min(5, max(1, rating))
    # N stars -> (6 - N) items per row
    return row_width / (6 - clamped)


DEFAULT_POLICY = RatingPolicy()
