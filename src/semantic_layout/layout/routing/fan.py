"""Fan-out/fan-in slot assignment.

Connections that leave (or enter) the same side of the same node share
that side evenly instead of stacking on its midpoint. Slots are ordered by
the position of the node at the other end so arrows do not cross.
"""

from __future__ import annotations

from collections import defaultdict

from semantic_layout.parser.model import Side


def assign_slots(
    keys: list[tuple[str, Side]],
    sort_values: list[float],
) -> list[tuple[int, int]]:
    """Assign each connection a (slot, count) within its (node, side) group.

    Args:
        keys: Per-connection (node_id, side) sharing key.
        sort_values: Per-connection coordinate of the opposite endpoint,
            measured along the shared side.

    Ties keep connection order.
    """
    groups: dict[tuple[str, Side], list[int]] = defaultdict(list)
    for i, key in enumerate(keys):
        groups[key].append(i)

    slots = [(0, 1)] * len(keys)
    for members in groups.values():
        members.sort(key=lambda i: (sort_values[i], i))
        for slot, i in enumerate(members):
            slots[i] = (slot, len(members))
    return slots
