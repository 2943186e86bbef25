"""Output for positioned graphs: JSON export and SVG preview."""

from semantic_layout.render.export import positioned_to_dict, render_json
from semantic_layout.render.svg import render_svg

__all__ = ["positioned_to_dict", "render_json", "render_svg"]
