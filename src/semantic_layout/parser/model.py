"""Data model for semantic and positioned diagram graphs."""

from __future__ import annotations

from dataclasses import dataclass, field, fields
from enum import Enum

DIRECTIONS = ("TB", "LR", "radial")
IMPORTANCES = ("high", "medium", "low")
CONNECTION_STYLES = ("solid", "dashed")
NOTE_POSITIONS = ("left", "right", "above", "below")


class Side(Enum):
    """Side of a node box where a connection leaves or arrives."""

    LEFT = "left"
    RIGHT = "right"
    TOP = "top"
    BOTTOM = "bottom"

    @property
    def is_horizontal(self) -> bool:
        """True for LEFT/RIGHT, where connections travel along the X axis."""
        return self in (Side.LEFT, Side.RIGHT)


class DiagnosticKind(Enum):
    """Recoverable conditions reported by the layout pipeline."""

    INVALID_REFERENCE = "invalid_reference"
    DEGENERATE_GROUP = "degenerate_group"
    EMPTY_NOTE = "empty_note"
    SNAKE_FALLBACK = "snake_fallback"
    CYCLE_BROKEN = "cycle_broken"


@dataclass(frozen=True)
class Diagnostic:
    """A recovered problem found while laying out a graph."""

    kind: DiagnosticKind
    message: str
    subject: str = ""


@dataclass
class DiagramNode:
    """A node with no spatial information beyond optional grid hints."""

    id: str
    type: str
    label: str
    emoji: str | None = None
    description: str | None = None
    semantic_color: str | None = None
    importance: str = "medium"
    # Caller-supplied hints are authoritative
    row: int | None = None
    column: int | None = None


@dataclass
class DiagramConnection:
    """A directed connection between two nodes."""

    source: str
    target: str
    style: str = "solid"
    label: str | None = None
    semantic_color: str | None = None


@dataclass
class DiagramGroup:
    """A named set of nodes drawn inside one enclosing rectangle."""

    id: str
    label: str
    node_ids: list[str] = field(default_factory=list)
    emoji: str | None = None
    semantic_color: str | None = None


@dataclass
class DiagramNote:
    """An annotation, either attached to a node or floating."""

    text: str
    emoji: str | None = None
    attached_to: str | None = None
    position: str | None = None


@dataclass
class DiagramGraph:
    """Complete coordinate-free diagram description."""

    direction: str = "LR"
    nodes: list[DiagramNode] = field(default_factory=list)
    connections: list[DiagramConnection] = field(default_factory=list)
    groups: list[DiagramGroup] = field(default_factory=list)
    notes: list[DiagramNote] = field(default_factory=list)
    title: str | None = None
    title_emoji: str | None = None

    def node_ids(self) -> list[str]:
        """Return node IDs in declaration order."""
        return [node.id for node in self.nodes]


@dataclass
class PositionedNode(DiagramNode):
    """A node with its resolved grid cell and absolute box geometry.

    ``x``/``y`` is the box center.
    """

    rank: int = 0
    x: float = 0.0
    y: float = 0.0
    width: float = 0.0
    height: float = 0.0

    @property
    def left(self) -> float:
        return self.x - self.width / 2

    @property
    def right(self) -> float:
        return self.x + self.width / 2

    @property
    def top(self) -> float:
        return self.y - self.height / 2

    @property
    def bottom(self) -> float:
        return self.y + self.height / 2


@dataclass
class PositionedConnection(DiagramConnection):
    """A connection with resolved boundary points and elbow waypoints."""

    from_x: float = 0.0
    from_y: float = 0.0
    to_x: float = 0.0
    to_y: float = 0.0
    from_side: Side = Side.RIGHT
    to_side: Side = Side.LEFT
    points: list[tuple[float, float]] = field(default_factory=list)


@dataclass
class PositionedGroup(DiagramGroup):
    """A group with its bounding rectangle (``x``/``y`` is the top-left)."""

    x: float = 0.0
    y: float = 0.0
    width: float = 0.0
    height: float = 0.0


@dataclass
class PositionedNote(DiagramNote):
    """A note with its box geometry (``x``/``y`` is the box center)."""

    x: float = 0.0
    y: float = 0.0
    width: float = 0.0
    height: float = 0.0


@dataclass
class PositionedTitle:
    """Anchor point for the diagram title (horizontally centered)."""

    text: str
    x: float
    y: float
    emoji: str | None = None


@dataclass
class PositionedGraph:
    """A diagram graph with every coordinate and size resolved."""

    direction: str
    title: PositionedTitle | None = None
    nodes: list[PositionedNode] = field(default_factory=list)
    connections: list[PositionedConnection] = field(default_factory=list)
    groups: list[PositionedGroup] = field(default_factory=list)
    notes: list[PositionedNote] = field(default_factory=list)
    diagnostics: list[Diagnostic] = field(default_factory=list)

    def node(self, node_id: str) -> PositionedNode | None:
        """Return the positioned node with the given ID, or None."""
        for node in self.nodes:
            if node.id == node_id:
                return node
        return None


def extend(base, cls, **extra):
    """Build a ``cls`` instance from the fields of ``base`` plus ``extra``.

    Used to derive positioned values without mutating the input graph.
    List-valued fields are copied.
    """
    values = {}
    for f in fields(base):
        value = getattr(base, f.name)
        values[f.name] = list(value) if isinstance(value, list) else value
    values.update(extra)
    return cls(**values)
