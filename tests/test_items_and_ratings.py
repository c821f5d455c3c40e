import unittest

from app.galleryrows.layout.config import LayoutConfig
from app.galleryrows.layout.items import ContentItem, Orientation, orientation
from app.galleryrows.layout.ratings import (
    DEFAULT_POLICY,
    RatingPolicy,
    component_value_for_rating,
)


def h(item_id: str, rating: int) -> ContentItem:
    return ContentItem(item_id, width=1920, height=1080, rating=rating)


def v(item_id: str, rating: int) -> ContentItem:
    return ContentItem(item_id, width=1080, height=1920, rating=rating)


class TestContentItem(unittest.TestCase):
    def test_aspect_ratio(self) -> None:
        self.assertAlmostEqual(h("a", 3).aspect_ratio, 1920 / 1080)

    def test_invalid_fields(self) -> None:
        with self.assertRaises(ValueError):
            ContentItem("a", width=0, height=10)
        with self.assertRaises(ValueError):
            ContentItem("a", width=10, height=-1)
        with self.assertRaises(ValueError):
            ContentItem("a", width=10, height=10, rating=6)
        with self.assertRaises(ValueError):
            ContentItem("a", width=10, height=10, rating=-1)
        with self.assertRaises(ValueError):
            ContentItem("a", width=10, height=10, rating=2.5)
        with self.assertRaises(ValueError):
            ContentItem("a", width=10, height=10, rating=True)


class TestOrientation(unittest.TestCase):
    def test_landscape_is_horizontal(self) -> None:
        self.assertIs(orientation(h("a", 3)), Orientation.HORIZONTAL)
        self.assertIs(orientation(ContentItem("p", width=3000, height=1000)), Orientation.HORIZONTAL)

    def test_portrait_is_vertical(self) -> None:
        self.assertIs(orientation(v("a", 3)), Orientation.VERTICAL)

    def test_square_is_vertical(self) -> None:
        self.assertIs(orientation(ContentItem("s", width=1000, height=1000)), Orientation.VERTICAL)


class TestStarRatingPolicy(unittest.TestCase):
    def test_horizontal_keeps_rating(self) -> None:
        for rating in range(6):
            self.assertEqual(DEFAULT_POLICY.rating(h("a", rating), 5), rating)

    def test_vertical_loses_one_star(self) -> None:
        self.assertEqual(DEFAULT_POLICY.rating(v("a", 5), 5), 4)
        self.assertEqual(DEFAULT_POLICY.rating(v("a", 3), 5), 2)
        self.assertEqual(DEFAULT_POLICY.rating(v("a", 1), 5), 0)
        self.assertEqual(DEFAULT_POLICY.rating(v("a", 0), 5), 0)

    def test_component_values_on_wide_rows(self) -> None:
        self.assertEqual(component_value_for_rating(5, 5), 5)
        self.assertEqual(component_value_for_rating(4, 5), 2.5)
        self.assertAlmostEqual(component_value_for_rating(3, 5), 5 / 3)
        self.assertEqual(component_value_for_rating(2, 5), 1.25)
        self.assertEqual(component_value_for_rating(1, 5), 1)
        self.assertEqual(component_value_for_rating(0, 5), 1)

    def test_component_values_on_two_slot_rows(self) -> None:
        for rating in (3, 4, 5):
            self.assertEqual(component_value_for_rating(rating, 2), 2)
        for rating in (0, 1, 2):
            self.assertEqual(component_value_for_rating(rating, 2), 1)

    def test_item_component_value_uses_effective_rating(self) -> None:
        self.assertEqual(DEFAULT_POLICY.component_value(h("a", 5), 5), 5)
        self.assertEqual(DEFAULT_POLICY.component_value(v("a", 5), 5), 2.5)
        self.assertEqual(DEFAULT_POLICY.component_value(v("a", 3), 5), 1.25)

    def test_invalid_row_width(self) -> None:
        with self.assertRaises(ValueError):
            component_value_for_rating(3, 0)

    def test_policy_is_pluggable(self) -> None:
        class Flat(RatingPolicy):
            def component_value(self, item, row_width):
                return 1.0

        self.assertEqual(Flat().component_value(h("a", 5), 5), 1.0)
        self.assertEqual(Flat().rating(v("a", 5), 5), 4)


class TestLayoutConfig(unittest.TestCase):
    def test_defaults(self) -> None:
        config = LayoutConfig()
        self.assertEqual(config.lookahead, 5)
        self.assertEqual(config.min_fill_ratio, 0.9)
        self.assertEqual(config.max_fill_ratio, 1.15)

    def test_invalid(self) -> None:
        with self.assertRaises(ValueError):
            LayoutConfig(lookahead=0)
        with self.assertRaises(ValueError):
            LayoutConfig(min_fill_ratio=1.2, max_fill_ratio=1.1)
        with self.assertRaises(ValueError):
            LayoutConfig(standalone_reach=0)


if __name__ == "__main__":
    unittest.main()
