"""Immutable layout configuration passed into the layout entry point."""

from __future__ import annotations

from dataclasses import dataclass, field
from types import MappingProxyType
from typing import Mapping

from semantic_layout.layout.constants import (
    CELL_HEIGHT,
    CELL_WIDTH,
    DEFAULT_IMPORTANCE,
    GROUP_PADDING,
    MARGIN,
    NODE_SIZES,
    NOTE_HEIGHT,
    NOTE_OFFSET,
    NOTE_WIDTH,
    TITLE_Y,
)


@dataclass(frozen=True)
class NodeSize:
    """Base box size for an importance tier."""

    width: float
    height: float


def _default_node_sizes() -> dict[str, NodeSize]:
    return {tier: NodeSize(w, h) for tier, (w, h) in NODE_SIZES.items()}


@dataclass(frozen=True)
class LayoutConfig:
    """Geometry parameters for one layout run.

    Override individual values with ``dataclasses.replace``.
    """

    cell_width: float = CELL_WIDTH
    cell_height: float = CELL_HEIGHT
    margin: float = MARGIN
    node_sizes: Mapping[str, NodeSize] = field(default_factory=_default_node_sizes)
    title_y: float = TITLE_Y
    note_width: float = NOTE_WIDTH
    note_height: float = NOTE_HEIGHT
    note_offset: float = NOTE_OFFSET
    group_padding: float = GROUP_PADDING

    def __post_init__(self) -> None:
        # Read-only view over a private copy of the tier table
        object.__setattr__(self, "node_sizes", MappingProxyType(dict(self.node_sizes)))

    def node_size(self, importance: str | None) -> NodeSize:
        """Return the base size for a tier, falling back to the default tier."""
        size = self.node_sizes.get(importance or DEFAULT_IMPORTANCE)
        if size is None:
            size = self.node_sizes.get(DEFAULT_IMPORTANCE) or NodeSize(
                *NODE_SIZES[DEFAULT_IMPORTANCE]
            )
        return size


DEFAULT_CONFIG = LayoutConfig()
