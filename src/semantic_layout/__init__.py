"""semantic-layout: turn semantic diagram graphs into positioned diagrams."""

__version__ = "0.1.0"

from semantic_layout.layout import LayoutConfig, compute_layout
from semantic_layout.parser import load_diagram, parse_diagram, parse_diagram_json

__all__ = [
    "LayoutConfig",
    "__version__",
    "compute_layout",
    "load_diagram",
    "parse_diagram",
    "parse_diagram_json",
]
