"""Title anchor placement."""

from __future__ import annotations

from semantic_layout.layout.config import LayoutConfig
from semantic_layout.parser.model import PositionedTitle


def position_title(
    title: str | None,
    max_col: int,
    config: LayoutConfig,
    emoji: str | None = None,
) -> PositionedTitle | None:
    """Center the title over the occupied columns, or None without a title."""
    if not title:
        return None
    x = config.margin + (max_col + 1) * config.cell_width / 2
    return PositionedTitle(text=title, x=x, y=config.title_y, emoji=emoji)
