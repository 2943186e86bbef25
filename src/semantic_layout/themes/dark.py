"""Dark grey wireframe theme."""

from semantic_layout.render.style import Theme

DARK_THEME = Theme(
    name="dark",
    background_color="#2b2b2b",
    node_fill="#3a3a3a",
    node_stroke="#d0d0d0",
    node_stroke_width=1.5,
    node_corner_radius=8.0,
    label_color="#e0e0e0",
    label_font_family="'Helvetica Neue', Helvetica, Arial, sans-serif",
    label_font_size=18.0,
    description_font_size=12.0,
    connection_color="#aaaaaa",
    connection_width=2.0,
    title_color="#ffffff",
    title_font_size=28.0,
    group_fill="rgba(255, 255, 255, 0.06)",
    group_stroke="rgba(255, 255, 255, 0.2)",
    group_label_color="#aaaaaa",
    group_label_font_size=14.0,
    note_fill="rgba(255, 255, 255, 0.08)",
    note_stroke="rgba(255, 255, 255, 0.3)",
    note_text_color="#dddddd",
    note_font_size=13.0,
)
