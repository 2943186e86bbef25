"""Layout validator: programmatic checks for layout defects.

Runs a suite of checks against a PositionedGraph and returns a list of
Violation objects describing any problems found.
"""

from __future__ import annotations

import math
from dataclasses import dataclass, field
from enum import Enum

from semantic_layout.parser.model import DiagnosticKind, PositionedGraph, Side


class Severity(Enum):
    ERROR = "error"
    WARNING = "warning"


@dataclass
class Violation:
    check: str
    severity: Severity
    message: str
    context: dict = field(default_factory=dict)


def validate_layout(graph: PositionedGraph) -> list[Violation]:
    """Run all layout checks and return violations."""
    violations: list[Violation] = []
    violations.extend(check_coordinate_sanity(graph))
    violations.extend(check_endpoint_boundary(graph))
    violations.extend(check_orthogonal_waypoints(graph))
    violations.extend(check_group_containment(graph))
    violations.extend(check_rank_monotonicity(graph))
    violations.extend(check_cell_collisions(graph))
    return violations


def check_coordinate_sanity(graph: PositionedGraph) -> list[Violation]:
    """Check that every box has finite, positive geometry."""
    violations: list[Violation] = []
    for node in graph.nodes:
        values = (node.x, node.y, node.width, node.height)
        if not all(math.isfinite(v) for v in values):
            violations.append(Violation(
                check="coordinate_sanity",
                severity=Severity.ERROR,
                message=f"Node '{node.id}' has non-finite geometry {values}",
                context={"node": node.id},
            ))
        elif node.x <= 0 or node.y <= 0 or node.width <= 0 or node.height <= 0:
            violations.append(Violation(
                check="coordinate_sanity",
                severity=Severity.ERROR,
                message=(
                    f"Node '{node.id}' at ({node.x:.1f},{node.y:.1f}) "
                    f"size {node.width:.0f}x{node.height:.0f} is off-canvas"
                ),
                context={"node": node.id},
            ))
    return violations


def check_endpoint_boundary(
    graph: PositionedGraph, tolerance: float = 0.5
) -> list[Violation]:
    """Check that connection endpoints lie on the chosen side of each box."""
    violations: list[Violation] = []
    for conn in graph.connections:
        src = graph.node(conn.source)
        tgt = graph.node(conn.target)
        if src is None or tgt is None:
            violations.append(Violation(
                check="endpoint_boundary",
                severity=Severity.ERROR,
                message=f"Connection {conn.source} -> {conn.target} has a missing endpoint",
            ))
            continue
        for node, side, x, y, end in (
            (src, conn.from_side, conn.from_x, conn.from_y, "exit"),
            (tgt, conn.to_side, conn.to_x, conn.to_y, "entry"),
        ):
            if not _on_side(node, side, x, y, tolerance):
                violations.append(Violation(
                    check="endpoint_boundary",
                    severity=Severity.ERROR,
                    message=(
                        f"Connection {conn.source} -> {conn.target} {end} "
                        f"({x:.1f},{y:.1f}) is not on the {side.value} side "
                        f"of '{node.id}'"
                    ),
                    context={"node": node.id, "side": side.value},
                ))
    return violations


def _on_side(node, side: Side, x: float, y: float, tolerance: float) -> bool:
    if side == Side.LEFT:
        return abs(x - node.left) <= tolerance and node.top <= y <= node.bottom
    if side == Side.RIGHT:
        return abs(x - node.right) <= tolerance and node.top <= y <= node.bottom
    if side == Side.TOP:
        return abs(y - node.top) <= tolerance and node.left <= x <= node.right
    return abs(y - node.bottom) <= tolerance and node.left <= x <= node.right


def check_orthogonal_waypoints(
    graph: PositionedGraph, tolerance: float = 1.0
) -> list[Violation]:
    """Check that routed paths start/end at the endpoints and only turn at right angles."""
    violations: list[Violation] = []
    for conn in graph.connections:
        pts = conn.points
        label = f"{conn.source} -> {conn.target}"
        if len(pts) < 2:
            violations.append(Violation(
                check="orthogonal_waypoints",
                severity=Severity.ERROR,
                message=f"Connection {label} has {len(pts)} waypoints",
            ))
            continue
        if pts[0] != (conn.from_x, conn.from_y) or pts[-1] != (conn.to_x, conn.to_y):
            violations.append(Violation(
                check="orthogonal_waypoints",
                severity=Severity.ERROR,
                message=f"Connection {label} path does not join its endpoints",
            ))
        if len(pts) == 2:
            continue
        for (x1, y1), (x2, y2) in zip(pts, pts[1:]):
            if abs(x1 - x2) > tolerance and abs(y1 - y2) > tolerance:
                violations.append(Violation(
                    check="orthogonal_waypoints",
                    severity=Severity.ERROR,
                    message=(
                        f"Connection {label} has a diagonal segment "
                        f"({x1:.1f},{y1:.1f}) -> ({x2:.1f},{y2:.1f})"
                    ),
                ))
    return violations


def check_group_containment(graph: PositionedGraph) -> list[Violation]:
    """Check that every group rectangle encloses its member boxes."""
    violations: list[Violation] = []
    for group in graph.groups:
        for nid in group.node_ids:
            node = graph.node(nid)
            if node is None:
                continue
            inside = (
                group.x <= node.left
                and group.y <= node.top
                and node.right <= group.x + group.width
                and node.bottom <= group.y + group.height
            )
            if not inside:
                violations.append(Violation(
                    check="group_containment",
                    severity=Severity.ERROR,
                    message=f"Node '{nid}' sticks out of group '{group.id}'",
                    context={"group": group.id, "node": nid},
                ))
    return violations


def check_rank_monotonicity(graph: PositionedGraph) -> list[Violation]:
    """Check rank(source) < rank(target) for connections used in ranking."""
    broken = {
        d.subject for d in graph.diagnostics if d.kind == DiagnosticKind.CYCLE_BROKEN
    }
    violations: list[Violation] = []
    for conn in graph.connections:
        if f"{conn.source}->{conn.target}" in broken:
            continue
        src = graph.node(conn.source)
        tgt = graph.node(conn.target)
        if src and tgt and not src.rank < tgt.rank:
            violations.append(Violation(
                check="rank_monotonicity",
                severity=Severity.ERROR,
                message=(
                    f"Connection {conn.source} -> {conn.target} goes from rank "
                    f"{src.rank} to rank {tgt.rank}"
                ),
            ))
    return violations


def check_cell_collisions(graph: PositionedGraph) -> list[Violation]:
    """Warn when two nodes share a grid cell."""
    seen: dict[tuple[int | None, int | None], str] = {}
    violations: list[Violation] = []
    for node in graph.nodes:
        cell = (node.row, node.column)
        if cell in seen:
            violations.append(Violation(
                check="cell_collision",
                severity=Severity.WARNING,
                message=f"Nodes '{seen[cell]}' and '{node.id}' share cell {cell}",
            ))
        else:
            seen[cell] = node.id
    return violations
