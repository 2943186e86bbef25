"""Light wireframe theme."""

from semantic_layout.render.style import Theme

LIGHT_THEME = Theme(
    name="light",
    background_color="#ffffff",
    node_fill="#f7f7f7",
    node_stroke="#555555",
    node_stroke_width=1.5,
    node_corner_radius=8.0,
    label_color="#222222",
    label_font_family="'Helvetica Neue', Helvetica, Arial, sans-serif",
    label_font_size=18.0,
    description_font_size=12.0,
    connection_color="#666666",
    connection_width=2.0,
    title_color="#111111",
    title_font_size=28.0,
    group_fill="rgba(0, 0, 0, 0.03)",
    group_stroke="#bbbbbb",
    group_label_color="#666666",
    group_label_font_size=14.0,
    note_fill="#fffbe6",
    note_stroke="#d8c98a",
    note_text_color="#444444",
    note_font_size=13.0,
)
