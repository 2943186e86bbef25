"""Connection routing dispatcher.

For each connection: choose exit/entry sides from the layout direction,
spread coincident endpoints across the shared side, then build an
orthogonal waypoint path between the two boundary points.
"""

from __future__ import annotations

import math

from semantic_layout.layout.constants import (
    ELBOW_LEAD_FRACTION,
    ELBOW_MAX_LEAD,
    STRAIGHT_TOLERANCE,
)
from semantic_layout.layout.routing.common import (
    boundary_point,
    choose_sides,
    perpendicular_coord,
)
from semantic_layout.layout.routing.fan import assign_slots
from semantic_layout.parser.model import (
    DiagramConnection,
    PositionedConnection,
    PositionedNode,
    extend,
)


def route_connections(
    nodes: list[PositionedNode],
    connections: list[DiagramConnection],
    direction: str,
) -> list[PositionedConnection]:
    """Route connections between positioned nodes.

    Connections must reference existing nodes; the engine filters dangling
    references before calling this.
    """
    node_map = {node.id: node for node in nodes}
    pairs = [(node_map[c.source], node_map[c.target]) for c in connections]
    sides = [choose_sides(src, tgt, direction) for src, tgt in pairs]

    out_slots = assign_slots(
        [(src.id, s[0]) for (src, _), s in zip(pairs, sides)],
        [perpendicular_coord(tgt, s[0]) for (_, tgt), s in zip(pairs, sides)],
    )
    in_slots = assign_slots(
        [(tgt.id, s[1]) for (_, tgt), s in zip(pairs, sides)],
        [perpendicular_coord(src, s[1]) for (src, _), s in zip(pairs, sides)],
    )

    routed = []
    for conn, (src, tgt), (from_side, to_side), out_slot, in_slot in zip(
        connections, pairs, sides, out_slots, in_slots
    ):
        fx, fy = boundary_point(src, from_side, *out_slot)
        tx, ty = boundary_point(tgt, to_side, *in_slot)
        routed.append(
            extend(
                conn,
                PositionedConnection,
                from_x=fx,
                from_y=fy,
                to_x=tx,
                to_y=ty,
                from_side=from_side,
                to_side=to_side,
                points=elbow_points(fx, fy, tx, ty, direction),
            )
        )
    return routed


def elbow_points(
    fx: float,
    fy: float,
    tx: float,
    ty: float,
    direction: str,
) -> list[tuple[float, float]]:
    """Orthogonal waypoints from (fx, fy) to (tx, ty).

    Axis-aligned pairs get a straight segment. Horizontal-dominant pairs
    turn halfway along X. Vertical-dominant pairs turn halfway along Y,
    except in TB where the horizontal leg runs just below the source so it
    does not cut through nodes in intermediate rows.
    """
    dx = tx - fx
    dy = ty - fy

    if abs(dx) < STRAIGHT_TOLERANCE or abs(dy) < STRAIGHT_TOLERANCE:
        return [(fx, fy), (tx, ty)]

    if abs(dx) >= abs(dy):
        mid_x = fx + dx / 2
        return [(fx, fy), (mid_x, fy), (mid_x, ty), (tx, ty)]

    if direction == "TB":
        lead = math.copysign(min(ELBOW_MAX_LEAD, abs(dy) * ELBOW_LEAD_FRACTION), dy)
        turn_y = fy + lead
    else:
        turn_y = fy + dy / 2
    return [(fx, fy), (fx, turn_y), (tx, turn_y), (tx, ty)]
