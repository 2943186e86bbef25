"""Snake (boustrophedon) wrapping for simple linear chains.

A left-to-right chain longer than a few nodes becomes one very wide row.
Wrapping it into rows of 3-4 cells, reversing every other row, keeps
consecutive nodes adjacent across row breaks.
"""

from __future__ import annotations

__all__ = ["chain_links", "snake_columns", "walk_chain", "wrap_chain"]

import logging

from semantic_layout.layout.constants import (
    SNAKE_LONG_COLUMNS,
    SNAKE_MIN_COVERAGE,
    SNAKE_SHORT_CHAIN,
    SNAKE_SHORT_COLUMNS,
)
from semantic_layout.parser.model import DiagramConnection, DiagramNode

logger = logging.getLogger(__name__)


def chain_links(
    connections: list[DiagramConnection],
) -> tuple[dict[str, str], dict[str, str]] | None:
    """First pass: build successor/predecessor maps of a simple chain.

    Returns None as soon as any node has a second outgoing or incoming
    connection.
    """
    outgoing: dict[str, str] = {}
    incoming: dict[str, str] = {}
    for conn in connections:
        if conn.source in outgoing or conn.target in incoming:
            return None
        outgoing[conn.source] = conn.target
        incoming[conn.target] = conn.source
    return outgoing, incoming


def walk_chain(
    node_ids: list[str],
    outgoing: dict[str, str],
    incoming: dict[str, str],
) -> list[str]:
    """Second pass: follow successors from the chain head.

    The head is the first node (in declaration order) with an outgoing
    connection and no incoming one. Returns an empty list when there is
    no head, e.g. when the connections form a closed loop.
    """
    head = next(
        (nid for nid in node_ids if nid in outgoing and nid not in incoming),
        None,
    )
    if head is None:
        return []

    chain: list[str] = []
    seen: set[str] = set()
    current: str | None = head
    while current is not None and current not in seen:
        chain.append(current)
        seen.add(current)
        current = outgoing.get(current)
    return chain


def snake_columns(chain_length: int) -> int:
    """Columns per wrapped row for a chain of the given length."""
    if chain_length <= SNAKE_SHORT_CHAIN:
        return SNAKE_SHORT_COLUMNS
    return SNAKE_LONG_COLUMNS


def wrap_chain(
    nodes: list[DiagramNode],
    connections: list[DiagramConnection],
    cells: dict[str, tuple[int, int]],
    max_cols: int | None = None,
) -> tuple[dict[str, tuple[int, int]], str | None]:
    """Re-lay a simple chain into snake rows.

    Args:
        nodes: Nodes in declaration order.
        connections: Connections with valid endpoints.
        cells: Rank-based (row, column) per node.
        max_cols: Columns per row; chosen from the chain length when None.

    Returns (cells, fallback_reason). When the graph does not qualify,
    the input cells are returned unchanged with the reason. Nodes outside
    the chain and hinted axes keep their rank-based cell.
    """
    links = chain_links(connections)
    if links is None:
        return cells, "a node has more than one outgoing or incoming connection"

    node_ids = [node.id for node in nodes]
    chain = walk_chain(node_ids, *links)
    if not chain:
        return cells, "no chain head"
    if len(chain) < len(node_ids) * SNAKE_MIN_COVERAGE:
        return cells, (
            f"chain covers {len(chain)} of {len(node_ids)} nodes"
        )

    cols = max_cols or snake_columns(len(chain))
    by_id = {node.id: node for node in nodes}
    wrapped = dict(cells)
    for i, nid in enumerate(chain):
        row_idx, col_idx = divmod(i, cols)
        if row_idx % 2 == 1:
            col_idx = cols - 1 - col_idx
        node = by_id[nid]
        row = node.row if node.row is not None else row_idx
        col = node.column if node.column is not None else col_idx
        wrapped[nid] = (row, col)

    logger.debug("Snake-wrapped %d nodes into %d columns", len(chain), cols)
    return wrapped, None
