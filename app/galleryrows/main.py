from __future__ import annotations

import argparse
import json
import logging
import sys
from typing import List, Sequence

from app.galleryrows.catalog import load_manifest
from app.galleryrows.layout.box_tree import BoxTree, Leaf
from app.galleryrows.layout.config import LayoutConfig
from app.galleryrows.layout.rows import RowResult, build_rows


def describe_tree(tree: BoxTree) -> str:
    if isinstance(tree, Leaf):
        return tree.item.id
    joiner = " | " if tree.direction.value == "horizontal" else " / "
    return f"({describe_tree(tree.first)}{joiner}{describe_tree(tree.second)})"


def format_rows(rows: Sequence[RowResult]) -> str:
    lines: List[str] = []
    for n, row in enumerate(rows, start=1):
        lines.append(
            f"{n:>3}  {row.pattern_name.value:<24} {row.fill_ratio:6.1%}  {describe_tree(row.tree)}"
        )
    return "\n".join(lines)


def run(manifest: str, row_width: int = 5, lookahead: int = 5, output: str = "text") -> str:
    items = load_manifest(manifest)
    rows = build_rows(items, row_width, config=LayoutConfig(lookahead=lookahead))
    if output == "json":
        return json.dumps([row.to_dict() for row in rows], indent=2)
    return format_rows(rows)


def main(argv: Sequence[str] | None = None) -> int:
    parser = argparse.ArgumentParser(description="Arrange gallery items into display rows")
    parser.add_argument("manifest", help="JSON manifest of items")
    parser.add_argument("--row-width", type=int, default=5, help="Row width budget (5 on wide layouts)")
    parser.add_argument("--lookahead", type=int, default=5, help="Items considered per row")
    parser.add_argument("--format", choices=("text", "json"), default="text")
    parser.add_argument(
        "--log-level",
        choices=("debug", "info", "warning", "error", "critical"),
        default="warning",
        help="Logging level",
    )
    args = parser.parse_args(argv)

    logging.basicConfig(
        level=getattr(logging, args.log_level.upper()),
        format="%(asctime)s %(name)s %(levelname)s %(message)s",
    )

    try:
        print(run(args.manifest, args.row_width, args.lookahead, args.format))
    except (ValueError, OSError) as exc:
        print(f"galleryrows: {exc}", file=sys.stderr)
        return 2
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
