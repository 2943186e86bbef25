"""Rank assignment (topological layering) for diagram nodes.

Ranks come from a breadth-first walk from every root. A node reached again
along a longer path moves to the larger rank and its descendants follow,
so every connection points from a lower rank to a higher one. Nodes with
caller-supplied row/column hints keep them.
"""

from __future__ import annotations

__all__ = ["RankAssignment", "assign_ranks", "break_cycles"]

import logging
import math
from collections import deque
from dataclasses import dataclass, field

import networkx as nx

from semantic_layout.parser.model import DiagramConnection, DiagramNode

logger = logging.getLogger(__name__)


@dataclass
class RankAssignment:
    """Result of rank assignment.

    ``cells`` maps node_id -> (row, column) with hints already applied.
    ``broken_edges`` lists (source, target) connections ignored for ranking
    because they closed a cycle.
    """

    ranks: dict[str, int] = field(default_factory=dict)
    positions: dict[str, int] = field(default_factory=dict)
    cells: dict[str, tuple[int, int]] = field(default_factory=dict)
    broken_edges: list[tuple[str, str]] = field(default_factory=list)

    @property
    def max_rank(self) -> int:
        return max(self.ranks.values(), default=0)


def break_cycles(
    num_nodes: int,
    edges: list[tuple[int, int]],
) -> tuple[list[tuple[int, int]], list[tuple[int, int]]]:
    """Split index edges into an acyclic subset and the removed back edges.

    Cycles are searched depth-first from the nodes in index order; the edge
    closing each cycle found is removed until none remain.

    Returns (acyclic_edges, removed_edges).
    """
    if not edges:
        return [], []

    G = nx.DiGraph()
    G.add_nodes_from(range(num_nodes))
    G.add_edges_from(edges)

    removed: list[tuple[int, int]] = []
    sources = list(range(num_nodes))
    while True:
        try:
            cycle = nx.find_cycle(G, source=sources)
        except nx.NetworkXNoCycle:
            break
        u, v = cycle[-1][:2]
        G.remove_edge(u, v)
        removed.append((u, v))

    acyclic = [e for e in edges if G.has_edge(*e)]
    return acyclic, removed


def _walk_ranks(
    children: list[list[int]],
    seeds: list[tuple[int, int]],
    rank: list[int],
    order: list[int],
) -> None:
    """Breadth-first rank walk keeping the maximum rank on revisit.

    Starts from (index, rank) seeds and updates ``rank`` and the first-visit
    ``order`` in place. Unreached nodes keep -1.
    """
    queue: deque[tuple[int, int]] = deque(seeds)

    while queue:
        i, candidate = queue.popleft()
        if rank[i] >= candidate:
            continue
        if rank[i] < 0:
            order.append(i)
        rank[i] = candidate
        for child in children[i]:
            queue.append((child, candidate + 1))


def assign_ranks(
    nodes: list[DiagramNode],
    connections: list[DiagramConnection],
    direction: str = "TB",
) -> RankAssignment:
    """Assign every node a rank and a (row, column) cell.

    Roots are nodes with no incoming connection; when every node has one,
    the first node is used. Nodes the walk never reaches start a new rank
    one past the current maximum, in declaration order, and the walk
    continues from them.

    Mapping to cells: TB uses row=rank, column=position in rank; LR uses
    column=rank, row=position in rank; radial spreads each rank on a circle
    of radius ``rank`` and shifts by the maximum rank so cells are
    non-negative. The radial mapping may assign the same cell twice.
    """
    ids = [node.id for node in nodes]
    index = {nid: i for i, nid in enumerate(ids)}
    n = len(ids)

    edges = [
        (index[c.source], index[c.target])
        for c in connections
        if c.source in index and c.target in index
    ]

    has_incoming = [False] * n
    for _, t in edges:
        has_incoming[t] = True

    acyclic, removed = break_cycles(n, edges)
    children: list[list[int]] = [[] for _ in range(n)]
    for s, t in acyclic:
        children[s].append(t)

    roots = [i for i in range(n) if not has_incoming[i]]
    if not roots and n:
        roots = [0]

    rank = [-1] * n
    order: list[int] = []
    _walk_ranks(children, [(r, 0) for r in roots], rank, order)

    # Unreached from every root: start a new rank past the current maximum
    # and keep walking so its descendants move above it
    for i in range(n):
        if rank[i] < 0:
            start = max((r for r in rank if r >= 0), default=-1) + 1
            _walk_ranks(children, [(i, start)], rank, order)
    max_rank = max(rank, default=0)

    rank_groups: dict[int, list[int]] = {}
    position = [0] * n
    for i in order:
        group = rank_groups.setdefault(rank[i], [])
        position[i] = len(group)
        group.append(i)

    result = RankAssignment(
        broken_edges=[(ids[u], ids[v]) for u, v in removed],
    )
    for i, node in enumerate(nodes):
        result.ranks[node.id] = rank[i]
        result.positions[node.id] = position[i]
        auto_row, auto_col = _auto_cell(
            rank[i], position[i], len(rank_groups[rank[i]]), direction, max_rank
        )
        row = node.row if node.row is not None else auto_row
        col = node.column if node.column is not None else auto_col
        result.cells[node.id] = (row, col)

    for source, target in result.broken_edges:
        logger.warning(
            "Connection %s -> %s closes a cycle; ignored for ranking", source, target
        )

    return result


def _auto_cell(
    rank: int,
    pos: int,
    group_size: int,
    direction: str,
    max_rank: int,
) -> tuple[int, int]:
    """Map (rank, position in rank) to a (row, column) cell."""
    if direction == "TB":
        return rank, pos
    if direction == "LR":
        return pos, rank

    angle = (pos / max(group_size, 1)) * 2 * math.pi
    row = round(math.sin(angle) * rank)
    col = round(math.cos(angle) * rank)
    return row + max_rank, col + max_rank
