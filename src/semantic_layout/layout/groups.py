"""Bounding rectangles for node groups."""

from __future__ import annotations

from semantic_layout.layout.config import LayoutConfig
from semantic_layout.layout.constants import GROUP_LABEL_HEIGHT
from semantic_layout.parser.model import DiagramGroup, PositionedGroup, PositionedNode, extend


def group_bounds(
    members: list[PositionedNode],
    padding: float,
    label_height: float = GROUP_LABEL_HEIGHT,
) -> tuple[float, float, float, float]:
    """Return (x, y, width, height) enclosing ``members``.

    The member extent is inflated by ``padding`` on every side plus
    ``label_height`` on top. ``x``/``y`` is the top-left corner.
    """
    min_x = min(n.left for n in members) - padding
    min_y = min(n.top for n in members) - padding - label_height
    max_x = max(n.right for n in members) + padding
    max_y = max(n.bottom for n in members) + padding
    return min_x, min_y, max_x - min_x, max_y - min_y


def position_group(
    group: DiagramGroup,
    node_map: dict[str, PositionedNode],
    config: LayoutConfig,
) -> PositionedGroup | None:
    """Position one group, or return None when no member resolves.

    Member IDs that do not resolve are dropped from the output group.
    """
    member_ids = [nid for nid in group.node_ids if nid in node_map]
    if not member_ids:
        return None

    x, y, width, height = group_bounds(
        [node_map[nid] for nid in member_ids], config.group_padding
    )
    return extend(
        group,
        PositionedGroup,
        node_ids=member_ids,
        x=x,
        y=y,
        width=width,
        height=height,
    )
