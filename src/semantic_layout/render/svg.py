"""Wireframe SVG preview of a positioned graph using drawsvg."""

from __future__ import annotations

import textwrap

import drawsvg as draw

from semantic_layout.layout.constants import NOTE_CHARS_PER_LINE, NOTE_LINE_HEIGHT
from semantic_layout.parser.model import (
    PositionedConnection,
    PositionedGraph,
    PositionedGroup,
    PositionedNode,
    PositionedNote,
)
from semantic_layout.render.style import Theme


def _canvas_extent(
    graph: PositionedGraph, theme: Theme, padding: float
) -> tuple[float, float, int, int]:
    """Return (origin_x, origin_y, width, height) enclosing all content.

    The origin stays at (0, 0) unless something extends past the left or
    top edge, e.g. a note attached to the left of a first-column node.
    """
    min_x, min_y = 0.0, 0.0
    max_x, max_y = 0.0, 0.0

    def include(left: float, top: float, right: float, bottom: float) -> None:
        nonlocal min_x, min_y, max_x, max_y
        min_x, min_y = min(min_x, left), min(min_y, top)
        max_x, max_y = max(max_x, right), max(max_y, bottom)

    for node in graph.nodes:
        include(node.left, node.top, node.right, node.bottom)
    for group in graph.groups:
        include(group.x, group.y, group.x + group.width, group.y + group.height)
    for note in graph.notes:
        include(
            note.x - note.width / 2, note.y - note.height / 2,
            note.x + note.width / 2, note.y + note.height / 2,
        )
    if graph.title:
        half = theme.title_font_size / 2
        include(graph.title.x, graph.title.y - half, graph.title.x, graph.title.y + half)

    origin_x = min_x - padding if min_x < 0 else 0.0
    origin_y = min_y - padding if min_y < 0 else 0.0
    return origin_x, origin_y, int(max_x + padding - origin_x), int(max_y + padding - origin_y)


def render_svg(
    graph: PositionedGraph,
    theme: Theme,
    width: int | None = None,
    height: int | None = None,
    padding: float = 60.0,
) -> str:
    """Render a positioned graph to an SVG string."""
    if not graph.nodes:
        return '<svg xmlns="http://www.w3.org/2000/svg"></svg>'

    origin_x, origin_y, auto_width, auto_height = _canvas_extent(graph, theme, padding)
    svg_width = width or auto_width
    svg_height = height or auto_height

    d = draw.Drawing(svg_width, svg_height, origin=(origin_x, origin_y))
    d.append(draw.Rectangle(
        origin_x, origin_y, svg_width, svg_height, fill=theme.background_color,
    ))

    if graph.title:
        text = graph.title.text
        if graph.title.emoji:
            text = f"{graph.title.emoji} {text}"
        d.append(draw.Text(
            text,
            theme.title_font_size,
            graph.title.x, graph.title.y,
            fill=theme.title_color,
            font_family=theme.label_font_family,
            font_weight="bold",
            text_anchor="middle",
            dominant_baseline="central",
        ))

    for group in graph.groups:
        _render_group(d, group, theme)

    arrow = draw.Marker(-0.1, -0.51, 0.9, 0.5, scale=theme.arrow_size / 2, orient="auto")
    arrow.append(draw.Lines(
        -0.1, 0.5, -0.1, -0.5, 0.9, 0,
        fill=theme.connection_color,
        close=True,
    ))
    for conn in graph.connections:
        _render_connection(d, conn, theme, arrow)

    for node in graph.nodes:
        _render_node(d, node, theme)

    for note in graph.notes:
        _render_note(d, note, theme)

    return d.as_svg()


def _render_group(d: draw.Drawing, group: PositionedGroup, theme: Theme) -> None:
    d.append(draw.Rectangle(
        group.x, group.y, group.width, group.height,
        rx=12, ry=12,
        fill=theme.group_fill,
        stroke=theme.group_stroke,
        stroke_width=1.0,
        stroke_dasharray=theme.dash_pattern,
    ))
    label = f"{group.emoji} {group.label}" if group.emoji else group.label
    d.append(draw.Text(
        label,
        theme.group_label_font_size,
        group.x + 12, group.y + 20,
        fill=theme.group_label_color,
        font_family=theme.label_font_family,
    ))


def _render_connection(
    d: draw.Drawing,
    conn: PositionedConnection,
    theme: Theme,
    arrow: draw.Marker,
) -> None:
    points = conn.points or [(conn.from_x, conn.from_y), (conn.to_x, conn.to_y)]
    coords = [c for point in points for c in point]
    extra = {}
    if conn.style == "dashed":
        extra["stroke_dasharray"] = theme.dash_pattern
    d.append(draw.Lines(
        *coords,
        close=False,
        fill="none",
        stroke=theme.connection_color,
        stroke_width=theme.connection_width,
        marker_end=arrow,
        **extra,
    ))
    if conn.label:
        mid = points[len(points) // 2]
        d.append(draw.Text(
            conn.label,
            theme.description_font_size,
            mid[0] + 6, mid[1] - 6,
            fill=theme.label_color,
            font_family=theme.label_font_family,
        ))


def _render_node(d: draw.Drawing, node: PositionedNode, theme: Theme) -> None:
    d.append(draw.Rectangle(
        node.left, node.top, node.width, node.height,
        rx=theme.node_corner_radius, ry=theme.node_corner_radius,
        fill=theme.node_fill,
        stroke=theme.node_stroke,
        stroke_width=theme.node_stroke_width,
    ))
    label = f"{node.emoji} {node.label}" if node.emoji else node.label
    label_y = node.y - 8 if node.description else node.y
    d.append(draw.Text(
        label,
        theme.label_font_size,
        node.x, label_y,
        fill=theme.label_color,
        font_family=theme.label_font_family,
        text_anchor="middle",
        dominant_baseline="central",
    ))
    if node.description:
        d.append(draw.Text(
            node.description,
            theme.description_font_size,
            node.x, node.y + theme.label_font_size,
            fill=theme.label_color,
            font_family=theme.label_font_family,
            text_anchor="middle",
            dominant_baseline="central",
        ))


def _render_note(d: draw.Drawing, note: PositionedNote, theme: Theme) -> None:
    left = note.x - note.width / 2
    top = note.y - note.height / 2
    d.append(draw.Rectangle(
        left, top, note.width, note.height,
        fill=theme.note_fill,
        stroke=theme.note_stroke,
        stroke_width=1.0,
    ))
    text = f"{note.emoji} {note.text}" if note.emoji else note.text
    for i, line in enumerate(textwrap.wrap(text, NOTE_CHARS_PER_LINE)):
        d.append(draw.Text(
            line,
            theme.note_font_size,
            left + 12, top + 24 + i * NOTE_LINE_HEIGHT,
            fill=theme.note_text_color,
            font_family=theme.label_font_family,
        ))
