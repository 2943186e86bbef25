"""Connection routing subpackage.

Public API:
- route_connections: Boundary points, fan spreading and elbow waypoints
- elbow_points: Orthogonal waypoint path between two points
- choose_sides: Exit/entry side selection
- spread_offset: Even endpoint spreading along a side
"""

from semantic_layout.layout.routing.common import choose_sides, spread_offset
from semantic_layout.layout.routing.core import elbow_points, route_connections

__all__ = [
    "choose_sides",
    "elbow_points",
    "route_connections",
    "spread_offset",
]
