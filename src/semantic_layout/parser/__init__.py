"""Diagram graph model and loader."""

from semantic_layout.parser.loader import load_diagram, parse_diagram, parse_diagram_json
from semantic_layout.parser.model import DiagramGraph, PositionedGraph

__all__ = [
    "DiagramGraph",
    "PositionedGraph",
    "load_diagram",
    "parse_diagram",
    "parse_diagram_json",
]
