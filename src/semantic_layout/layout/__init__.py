"""Layout engine: semantic diagram graph -> positioned diagram graph."""

from semantic_layout.layout.config import DEFAULT_CONFIG, LayoutConfig, NodeSize
from semantic_layout.layout.engine import compute_layout

__all__ = ["DEFAULT_CONFIG", "LayoutConfig", "NodeSize", "compute_layout"]
