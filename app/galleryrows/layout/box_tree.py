"""Render trees: the per-row nesting handed to the size solver.

A tree is either a Leaf wrapping one item or a Combined node joining exactly
two subtrees side by side (horizontal) or stacked (vertical). Pixel sizing
happens downstream; this module only decides the shape.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Iterator, List, Optional, Sequence, Union

from app.galleryrows.layout.items import ContentItem
from app.galleryrows.layout.patterns import (
    PATTERN_TABLE,
    CombinationPattern,
    Direction,
    LayoutShape,
)


@dataclass(frozen=True)
class Leaf:
    item: ContentItem


@dataclass(frozen=True)
class Combined:
    direction: Direction
    first: "BoxTree"
    second: "BoxTree"


BoxTree = Union[Leaf, Combined]


def iter_leaves(tree: BoxTree) -> Iterator[ContentItem]:
    """Yield leaf items in tree order (depth first, first child first)."""
    stack: List[BoxTree] = [tree]
    while stack:
        node = stack.pop()
        if isinstance(node, Leaf):
            yield node.item
        else:
            stack.append(node.second)
            stack.append(node.first)


def leaf_ids(tree: BoxTree) -> List[str]:
    return [item.id for item in iter_leaves(tree)]


def tree_depth(tree: BoxTree) -> int:
    if isinstance(tree, Leaf):
        return 0
    return 1 + max(tree_depth(tree.first), tree_depth(tree.second))


def tree_to_dict(tree: BoxTree) -> dict:
    if isinstance(tree, Leaf):
        return {"type": "leaf", "id": tree.item.id}
    return {
        "type": "combined",
        "direction": tree.direction.value,
        "children": [tree_to_dict(tree.first), tree_to_dict(tree.second)],
    }


def chain(items: Sequence[ContentItem], direction: Direction = Direction.HORIZONTAL) -> BoxTree:
    """Fold items left to right into a left-heavy chain: (((a, b), c), d)."""
    if not items:
        raise ValueError("cannot build a tree from zero items")
    tree: BoxTree = Leaf(items[0])
    for item in items[1:]:
        tree = Combined(direction, tree, Leaf(item))
    return tree


def _expect(components: Sequence[ContentItem], count: int, layout: LayoutShape) -> None:
    if len(components) != count:
        raise ValueError(f"{layout.value} layout needs {count} items, got {len(components)}")


def tree_for(
    pattern_name: CombinationPattern,
    components: Sequence[ContentItem],
    layout: Optional[LayoutShape] = None,
) -> BoxTree:
    """Build the render tree for an accepted row.

    components are in slot order; for NESTED_QUAD they are in role order
    (main, top left, top right, bottom) and for hero layouts the hero sits
    in the pattern's hero slot (slot 0 when the pattern declares none).
    layout defaults to the pattern's declared shape.
    """
    definition = PATTERN_TABLE.get(pattern_name)
    if layout is None:
        layout = definition.layout if definition is not None else LayoutShape.CHAIN
    direction = Direction.HORIZONTAL
    if definition is not None and definition.direction is not None:
        direction = definition.direction

    if layout is LayoutShape.CHAIN:
        return chain(components, direction)

    if layout is LayoutShape.MAIN_STACKED:
        _expect(components, 3, layout)
        main, top, bottom = components
        return Combined(
            Direction.HORIZONTAL,
            Leaf(main),
            Combined(Direction.VERTICAL, Leaf(top), Leaf(bottom)),
        )

    if layout is LayoutShape.NESTED_QUAD:
        _expect(components, 4, layout)
        main, top_left, top_right, bottom = components
        return Combined(
            Direction.HORIZONTAL,
            Leaf(main),
            Combined(
                Direction.VERTICAL,
                Combined(Direction.HORIZONTAL, Leaf(top_left), Leaf(top_right)),
                Leaf(bottom),
            ),
        )

    if layout in (LayoutShape.HERO_TOP, LayoutShape.HERO_BOTTOM):
        if len(components) < 2:
            raise ValueError(f"{layout.value} layout needs a hero and supporting items")
        hero_slot = 0
        if definition is not None and definition.hero_slot is not None:
            hero_slot = definition.hero_slot
        if not 0 <= hero_slot < len(components):
            raise ValueError(f"hero slot {hero_slot} out of range for {len(components)} items")
        hero = Leaf(components[hero_slot])
        rest = [c for slot, c in enumerate(components) if slot != hero_slot]
        support = chain(rest, Direction.HORIZONTAL)
        if layout is LayoutShape.HERO_TOP:
            return Combined(Direction.VERTICAL, hero, support)
        return Combined(Direction.VERTICAL, support, hero)

    raise ValueError(f"unknown layout: {layout!r}")
