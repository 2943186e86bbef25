"""Theme for wireframe previews."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass
class Theme:
    """Visual theme for a layout preview."""

    name: str
    background_color: str
    node_fill: str
    node_stroke: str
    node_stroke_width: float
    node_corner_radius: float
    label_color: str
    label_font_family: str
    label_font_size: float
    description_font_size: float
    connection_color: str
    connection_width: float
    title_color: str
    title_font_size: float
    group_fill: str
    group_stroke: str
    group_label_color: str
    group_label_font_size: float
    note_fill: str
    note_stroke: str
    note_text_color: str
    note_font_size: float
    dash_pattern: str = "8,6"
    arrow_size: float = 8.0
