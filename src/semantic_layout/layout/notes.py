"""Note placement.

Attached notes sit beside their node, separated by a fixed gap. Floating
notes (and notes whose node is missing) stack below the grid, centered
over the occupied columns. Note heights are estimated from text length.
"""

from __future__ import annotations

import math

from semantic_layout.layout.config import LayoutConfig
from semantic_layout.layout.constants import (
    FLOATING_NOTE_GAP,
    HEADER_OFFSET,
    NOTE_CHARS_PER_LINE,
    NOTE_ICON_CHARS,
    NOTE_LINE_HEIGHT,
    NOTE_MIN_LINES,
    NOTE_PADDING,
    NOTE_STACK_GAP,
)
from semantic_layout.parser.model import DiagramNote, PositionedNode, PositionedNote, extend


def estimate_note_height(text: str) -> float:
    """Estimate the box height for ``text`` (plus its leading icon)."""
    length = len(text) + NOTE_ICON_CHARS
    lines = max(NOTE_MIN_LINES, math.ceil(length / NOTE_CHARS_PER_LINE))
    return lines * NOTE_LINE_HEIGHT + NOTE_PADDING


def attached_center(
    node: PositionedNode,
    position: str | None,
    width: float,
    height: float,
    gap: float,
) -> tuple[float, float]:
    """Center of a ``width`` x ``height`` note placed ``gap`` from ``node``."""
    if position == "left":
        return node.left - gap - width / 2, node.y
    if position == "right":
        return node.right + gap + width / 2, node.y
    if position == "above":
        return node.x, node.top - gap - height / 2
    return node.x, node.bottom + gap + height / 2


def floating_center(
    stack_index: int,
    max_row: int,
    max_col: int,
    config: LayoutConfig,
) -> tuple[float, float]:
    """Center of the ``stack_index``-th floating note below the grid."""
    x = config.margin + (max_col + 1) * config.cell_width / 2
    y = (
        config.margin
        + HEADER_OFFSET
        + (max_row + 1) * config.cell_height
        + FLOATING_NOTE_GAP
        + stack_index * (config.note_height + NOTE_STACK_GAP)
    )
    return x, y


def place_notes(
    notes: list[DiagramNote],
    node_map: dict[str, PositionedNode],
    max_row: int,
    max_col: int,
    config: LayoutConfig,
) -> list[PositionedNote]:
    """Place non-empty notes; callers filter blank ones beforehand."""
    placed = []
    floating = 0
    for note in notes:
        width = config.note_width
        height = estimate_note_height(note.text)
        node = node_map.get(note.attached_to) if note.attached_to else None
        if node is not None:
            x, y = attached_center(
                node, note.position, width, height, config.note_offset
            )
        else:
            x, y = floating_center(floating, max_row, max_col, config)
            floating += 1
        placed.append(
            extend(note, PositionedNote, x=x, y=y, width=width, height=height)
        )
    return placed
