"""Layout constants used across layout modules.

Centralizes the secondary heuristics of grid.py, routing, notes.py,
groups.py and snake.py. Primary geometry lives in ``LayoutConfig``.
"""

# ---------------------------------------------------------------------------
# Grid defaults (LayoutConfig defaults)
# ---------------------------------------------------------------------------
CELL_WIDTH: float = 360.0
"""Horizontal grid pitch."""

CELL_HEIGHT: float = 220.0
"""Vertical grid pitch."""

MARGIN: float = 80.0
"""Outer padding from canvas edge to the first grid cell."""

TITLE_Y: float = 40.0
"""Vertical anchor of the diagram title."""

HEADER_OFFSET: float = 50.0
"""Vertical space reserved between the margin and row 0 for the title."""

# ---------------------------------------------------------------------------
# Node sizing
# ---------------------------------------------------------------------------
NODE_SIZES: dict[str, tuple[float, float]] = {
    "high": (260.0, 160.0),
    "medium": (240.0, 140.0),
    "low": (220.0, 120.0),
}
"""Base (width, height) per importance tier."""

DEFAULT_IMPORTANCE: str = "medium"
"""Tier used when a node's importance is unknown."""

LABEL_CHAR_WIDTH: float = 10.0
"""Approximate pixel width of one label character."""

LABEL_PADDING: float = 30.0
"""Horizontal padding added to the estimated label width."""

MAX_NODE_WIDTH: float = 340.0
"""Cap for label-driven box widening."""

# ---------------------------------------------------------------------------
# Groups
# ---------------------------------------------------------------------------
GROUP_PADDING: float = 35.0
"""Padding around the member boxes of a group."""

GROUP_LABEL_HEIGHT: float = 25.0
"""Extra top padding reserved for the group label."""

# ---------------------------------------------------------------------------
# Notes
# ---------------------------------------------------------------------------
NOTE_WIDTH: float = 340.0
"""Width of every note box."""

NOTE_HEIGHT: float = 120.0
"""Nominal note height, used as the floating-note stacking pitch."""

NOTE_OFFSET: float = 50.0
"""Gap between an attached note and its node's edge."""

NOTE_CHARS_PER_LINE: int = 35
"""Characters assumed to fit on one note line."""

NOTE_LINE_HEIGHT: float = 22.0
"""Estimated height of one line of note text."""

NOTE_PADDING: float = 30.0
"""Vertical padding added to the estimated note text height."""

NOTE_ICON_CHARS: int = 3
"""Characters reserved for the leading icon."""

NOTE_MIN_LINES: int = 2
"""Minimum estimated line count for a note."""

FLOATING_NOTE_GAP: float = 120.0
"""Gap between the bottom of the grid and the first floating note."""

NOTE_STACK_GAP: float = 20.0
"""Extra gap between consecutive floating notes."""

# ---------------------------------------------------------------------------
# Routing
# ---------------------------------------------------------------------------
FAN_SPREAD_HORIZONTAL: float = 0.5
"""Fraction of box height used to spread endpoints on LEFT/RIGHT sides."""

FAN_SPREAD_VERTICAL: float = 0.6
"""Fraction of box width used to spread endpoints on TOP/BOTTOM sides."""

STRAIGHT_TOLERANCE: float = 1.0
"""Deltas below this are treated as axis-aligned (straight segment)."""

ELBOW_LEAD_FRACTION: float = 0.15
"""Fraction of the vertical distance before the elbow turns (TB)."""

ELBOW_MAX_LEAD: float = 40.0
"""Cap for the TB elbow lead."""

# ---------------------------------------------------------------------------
# Snake wrapping
# ---------------------------------------------------------------------------
SNAKE_SHORT_CHAIN: int = 6
"""Chains up to this length wrap at SNAKE_SHORT_COLUMNS."""

SNAKE_SHORT_COLUMNS: int = 3
"""Columns per row for short chains."""

SNAKE_LONG_COLUMNS: int = 4
"""Columns per row for longer chains."""

SNAKE_MIN_COVERAGE: float = 0.8
"""Minimum share of nodes the chain must cover to be wrapped."""
