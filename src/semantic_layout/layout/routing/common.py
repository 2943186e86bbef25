"""Shared helpers for connection routing: side choice and boundary points."""

from __future__ import annotations

from semantic_layout.layout.constants import (
    FAN_SPREAD_HORIZONTAL,
    FAN_SPREAD_VERTICAL,
)
from semantic_layout.parser.model import PositionedNode, Side


def choose_sides(
    source: PositionedNode,
    target: PositionedNode,
    direction: str,
) -> tuple[Side, Side]:
    """Pick the exit side on ``source`` and the entry side on ``target``.

    TB prefers a vertical exit unless both centers share a row; LR prefers
    a horizontal exit unless both share a column. Otherwise the axis with
    the larger center delta wins (vertical on a tie).
    """
    dx = target.x - source.x
    dy = target.y - source.y

    prefer_vertical = direction == "TB" and dy != 0
    prefer_horizontal = direction == "LR" and dx != 0
    horizontal = prefer_horizontal or (not prefer_vertical and abs(dx) > abs(dy))

    if horizontal:
        if dx > 0:
            return Side.RIGHT, Side.LEFT
        return Side.LEFT, Side.RIGHT
    if dy > 0:
        return Side.BOTTOM, Side.TOP
    if dy < 0:
        return Side.TOP, Side.BOTTOM
    # Same center on both axes: fall back to a horizontal pair
    if dx > 0:
        return Side.RIGHT, Side.LEFT
    return Side.LEFT, Side.RIGHT


def spread_offset(index: int, count: int, total_spread: float) -> float:
    """Offset of slot ``index`` when ``count`` slots share ``total_spread``.

    Slots are evenly spaced and centered on zero; a single slot sits at 0.
    """
    if count <= 1:
        return 0.0
    return -total_spread / 2 + (total_spread * index) / (count - 1)


def side_spread(node: PositionedNode, side: Side) -> float:
    """Window along ``side`` over which shared endpoints are spread."""
    if side.is_horizontal:
        return node.height * FAN_SPREAD_HORIZONTAL
    return node.width * FAN_SPREAD_VERTICAL


def perpendicular_coord(node: PositionedNode, side: Side) -> float:
    """Coordinate along ``side`` (Y for LEFT/RIGHT, X for TOP/BOTTOM)."""
    return node.y if side.is_horizontal else node.x


def boundary_point(
    node: PositionedNode,
    side: Side,
    slot: int = 0,
    count: int = 1,
) -> tuple[float, float]:
    """Point on ``side`` of the node box for endpoint ``slot`` of ``count``."""
    offset = spread_offset(slot, count, side_spread(node, side))
    if side == Side.LEFT:
        return node.left, node.y + offset
    if side == Side.RIGHT:
        return node.right, node.y + offset
    if side == Side.TOP:
        return node.x + offset, node.top
    return node.x + offset, node.bottom
