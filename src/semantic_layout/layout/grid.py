"""Grid-to-canvas mapping: (row, column, importance, label) -> box geometry."""

from __future__ import annotations

__all__ = ["cell_center", "grid_extent", "node_box_size", "position_nodes"]

from semantic_layout.layout.config import LayoutConfig
from semantic_layout.layout.constants import (
    HEADER_OFFSET,
    LABEL_CHAR_WIDTH,
    LABEL_PADDING,
    MAX_NODE_WIDTH,
)
from semantic_layout.parser.model import DiagramNode, PositionedNode, extend


def node_box_size(node: DiagramNode, config: LayoutConfig) -> tuple[float, float]:
    """Return (width, height) for a node.

    Width grows with the estimated label width up to MAX_NODE_WIDTH but
    never shrinks below the tier's base width.
    """
    base = config.node_size(node.importance)
    label_width = len(node.label or "") * LABEL_CHAR_WIDTH + LABEL_PADDING
    width = max(base.width, min(label_width, MAX_NODE_WIDTH))
    return width, base.height


def cell_center(row: int, col: int, config: LayoutConfig) -> tuple[float, float]:
    """Return the canvas center of a grid cell."""
    x = config.margin + col * config.cell_width + config.cell_width / 2
    y = (
        config.margin
        + HEADER_OFFSET
        + row * config.cell_height
        + config.cell_height / 2
    )
    return x, y


def position_nodes(
    nodes: list[DiagramNode],
    cells: dict[str, tuple[int, int]],
    ranks: dict[str, int],
    config: LayoutConfig,
) -> list[PositionedNode]:
    """Build positioned copies of ``nodes`` in declaration order."""
    positioned = []
    for node in nodes:
        row, col = cells.get(node.id, (0, 0))
        x, y = cell_center(row, col, config)
        width, height = node_box_size(node, config)
        positioned.append(
            extend(
                node,
                PositionedNode,
                row=row,
                column=col,
                rank=ranks.get(node.id, 0),
                x=x,
                y=y,
                width=width,
                height=height,
            )
        )
    return positioned


def grid_extent(nodes: list[PositionedNode]) -> tuple[int, int]:
    """Return (max_row, max_column) over positioned nodes (0 when empty)."""
    max_row = max((n.row or 0 for n in nodes), default=0)
    max_col = max((n.column or 0 for n in nodes), default=0)
    return max_row, max_col
